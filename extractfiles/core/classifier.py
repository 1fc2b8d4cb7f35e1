"""File classification for extractfiles.

A classifier decides whether a value is an opaque file leaf or structural
data. It is a plain predicate ``(value) -> bool``; the extractor treats the
answer as authoritative and does no file recognition of its own.
"""

from typing import Any, Optional, Tuple

from ..config import HostCapabilities
from .handles import FileSubstitute


class FileClassifier:
    """Default file matcher.

    Matches instances of the host's native blob and file types plus
    ``FileSubstitute``. Matching is nominal: an arbitrary object that merely
    has ``uri``, ``name`` and ``type`` attributes is not a file.

    Args:
        capabilities: Native types present in the host. Missing types
            simply never match.
        extra_types: Further classes to match, for callers with their own
            file types.
    """

    def __init__(self,
                 capabilities: Optional[HostCapabilities] = None,
                 extra_types: Tuple[type, ...] = ()):
        self.capabilities = capabilities or HostCapabilities()
        self.extra_types = tuple(extra_types)
        self._types = (
            self.capabilities.native_types() + (FileSubstitute,) + self.extra_types
        )

    def __call__(self, value: Any) -> bool:
        return isinstance(value, self._types)

    def classify(self, value: Any) -> bool:
        """Check if a value is an extractable file."""
        return self(value)

    def including(self, *types: type) -> 'FileClassifier':
        """Return a classifier that also matches ``types``."""
        return FileClassifier(self.capabilities, self.extra_types + tuple(types))

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self._types)
        return f"{self.__class__.__name__}({names})"


#: Classifier used when the caller supplies none.
default_classifier = FileClassifier()


def is_extractable_file(value: Any) -> bool:
    """Check if a value is a ``Blob``, ``File`` or ``FileSubstitute``.

    Args:
        value: Value to check

    Returns:
        True if the default classifier matches the value
    """
    return default_classifier(value)
