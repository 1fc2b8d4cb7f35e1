"""Core components of extractfiles.

Handle types and object path helpers are importable from here directly.
The classifier and extractor modules depend on ``extractfiles.config`` and
are imported from their own modules.
"""

from .handles import (
    FileKind,
    FileHandle,
    Blob,
    File,
    FileList,
    FileSubstitute,
    make_file_substitute,
)
from .paths import join_path, split_path, get_path

__all__ = [
    'FileKind',
    'FileHandle',
    'Blob',
    'File',
    'FileList',
    'FileSubstitute',
    'make_file_substitute',
    'join_path',
    'split_path',
    'get_path',
]
