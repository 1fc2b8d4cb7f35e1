"""High-level API for extractfiles.

This module provides simple, functional interfaces for the common cases.
These functions wrap TreeExtractor and ExtractionConfig so that a one-off
extraction needs neither.
"""

from typing import Any, List, Optional, Tuple

from .config import ExtractionConfig, FileMatcher
from .core.classifier import is_extractable_file
from .core.extractor import ExtractionResult, TreeExtractor
from .core.handles import make_file_substitute
from .errors import InvalidArgumentError

__all__ = [
    "extract_files",
    "find_file_paths",
    "count_files",
    "is_extractable_file",
    "make_file_substitute",
]


def extract_files(
    value: Any,
    is_file: Optional[FileMatcher] = None,
    path: str = "",
    config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """Clone a value, extracting files and their object paths.

    Files are replaced with None in the clone; the input is not modified.
    ``FileList`` instances are walked like lists of files.

    Argument order is value, matcher, path. A caller wanting only a prefix
    passes ``path`` by keyword.

    Args:
        value: Value (typically a dict/list tree) to extract files from
        is_file: Matcher for extractable files; defaults to
            ``is_extractable_file``
        path: Object path prefix for every recorded path
        config: Full configuration; when given, ``is_file`` and ``path``
            must be left at their defaults

    Returns:
        ExtractionResult with ``clone`` and ``files``

    Raises:
        InvalidArgumentError: If a matcher is not callable, a path is not a
            string, or ``config`` is combined with ``is_file``/``path``

    Example:
        >>> file = make_file_substitute("file:///a.jpg", "a.jpg", "image/jpeg")
        >>> result = extract_files({"a": [file]}, path="variables")
        >>> result.clone
        {'a': [None]}
        >>> result.files[file]
        ['variables.a.0']
    """
    if config is None:
        config = ExtractionConfig(is_file=is_file, path=path)
    elif is_file is not None or path != "":
        raise InvalidArgumentError("Pass either config or is_file/path, not both")
    extractor = TreeExtractor.from_config(config)
    return extractor.extract(value, config.path)


def find_file_paths(
    value: Any,
    is_file: Optional[FileMatcher] = None,
    path: str = "",
) -> List[Tuple[str, Any]]:
    """List every file occurrence as a ``(path, file)`` pair.

    Pairs are in traversal order, so a file referenced twice appears twice.

    Example:
        >>> find_file_paths({"a": file, "b": [file]})
        [('a', file), ('b.0', file)]
    """
    return extract_files(value, is_file, path).files.occurrences()


def count_files(value: Any, is_file: Optional[FileMatcher] = None) -> int:
    """Count distinct files within a value."""
    return extract_files(value, is_file).file_count
