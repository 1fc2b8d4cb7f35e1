"""Configuration system for extractfiles.

This module defines how callers describe an extraction: which values count
as files, what the host environment provides, and the object path prefix
every recorded path starts with.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

from .core.handles import Blob, File
from .errors import InvalidArgumentError

FileMatcher = Callable[[Any], bool]


@dataclass(frozen=True)
class HostCapabilities:
    """Native file types available in the host environment.

    The default classifier matches instances of these types. A field set
    to None models a host without that concept; such values are then simply
    not files, which is never an error.
    """

    blob_type: Optional[type] = Blob    # Raw binary handle type
    file_type: Optional[type] = File    # Named binary handle type

    @classmethod
    def none(cls) -> 'HostCapabilities':
        """Capabilities of a host with no native binary handles.

        Only file substitutes are recognised under these capabilities.
        """
        return cls(blob_type=None, file_type=None)

    def native_types(self) -> Tuple[type, ...]:
        """Return the native handle types that are present."""
        return tuple(t for t in (self.blob_type, self.file_type) if t is not None)


@dataclass
class ExtractionConfig:
    """Complete configuration for one extraction.

    Precedence: an explicit ``is_file`` matcher is authoritative and
    ``capabilities`` / ``extra_types`` are ignored. Otherwise the default
    classifier is built from ``capabilities`` and extended with
    ``extra_types``.
    """

    # Matching
    is_file: Optional[FileMatcher] = None
    capabilities: HostCapabilities = field(default_factory=HostCapabilities)
    extra_types: Tuple[type, ...] = ()

    # Object path prefix for recorded paths
    path: str = ""

    def validate(self) -> None:
        """Check argument types before any traversal happens.

        Raises:
            InvalidArgumentError: If the matcher is not callable, the path
                is not a string, or an extra type is not a class.
        """
        if self.is_file is not None and not callable(self.is_file):
            raise InvalidArgumentError(
                f"is_file must be callable, got {self.is_file.__class__.__name__}"
            )
        if not isinstance(self.path, str):
            raise InvalidArgumentError(
                f"path must be a string, got {self.path.__class__.__name__}"
            )
        if not isinstance(self.capabilities, HostCapabilities):
            raise InvalidArgumentError(
                "capabilities must be a HostCapabilities instance, got "
                f"{self.capabilities.__class__.__name__}"
            )
        for extra in self.extra_types:
            if not isinstance(extra, type):
                raise InvalidArgumentError(
                    f"extra_types must contain classes, got {extra!r}"
                )

    # Convenience constructors for common configurations

    @classmethod
    def with_prefix(cls, path: str) -> 'ExtractionConfig':
        """Create config that prefixes every recorded path.

        Args:
            path: Object path of the value within a larger payload

        Returns:
            ExtractionConfig using the default classifier
        """
        return cls(path=path)

    @classmethod
    def for_types(cls, *types: type, path: str = "") -> 'ExtractionConfig':
        """Create config that also extracts instances of ``types``.

        Args:
            *types: Additional classes to treat as files
            path: Optional object path prefix

        Returns:
            ExtractionConfig extending the default classifier
        """
        return cls(extra_types=tuple(types), path=path)

    @classmethod
    def without_native_files(cls, path: str = "") -> 'ExtractionConfig':
        """Create config for a host lacking native blob and file types."""
        return cls(capabilities=HostCapabilities.none(), path=path)
