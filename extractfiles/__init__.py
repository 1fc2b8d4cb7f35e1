"""extractfiles - Extract files from nested values.

Clones a tree of dicts, lists and scalars, replacing every file handle with
None and recording the object path of each occurrence. Typical use is
preparing a structured payload whose files are sent separately, such as a
multipart request:

    from extractfiles import extract_files, File

    avatar = File([b"..."], "avatar.png", type="image/png")
    result = extract_files({"user": {"avatar": avatar}}, path="variables")

    result.clone          # {'user': {'avatar': None}}
    result.files[avatar]  # ['variables.user.avatar']
"""

import logging

__version__ = "1.0.0"

# Import order matters: config must load before the classifier and
# extractor, which both depend on it.
from .errors import ExtractFilesError, InvalidArgumentError
from .config import ExtractionConfig, HostCapabilities
from .core.handles import (
    FileKind,
    FileHandle,
    Blob,
    File,
    FileList,
    FileSubstitute,
    make_file_substitute,
)
from .core.paths import join_path, split_path, get_path
from .core.classifier import FileClassifier, default_classifier, is_extractable_file
from .core.extractor import (
    TreeExtractor,
    ExtractionResult,
    ExtractedFile,
    FileMap,
    extract,
)
from .api import extract_files, find_file_paths, count_files

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "ExtractFilesError",
    "InvalidArgumentError",
    # Config
    "ExtractionConfig",
    "HostCapabilities",
    # Handles
    "FileKind",
    "FileHandle",
    "Blob",
    "File",
    "FileList",
    "FileSubstitute",
    "make_file_substitute",
    # Paths
    "join_path",
    "split_path",
    "get_path",
    # Classification
    "FileClassifier",
    "default_classifier",
    "is_extractable_file",
    # Extraction
    "TreeExtractor",
    "ExtractionResult",
    "ExtractedFile",
    "FileMap",
    "extract",
    # API
    "extract_files",
    "find_file_paths",
    "count_files",
]
