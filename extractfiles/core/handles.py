"""File handle types recognised by extractfiles.

A file handle is an opaque reference to binary content. The library never
reads the content; it only needs to tell handles apart from structural data
and from each other. Handles therefore compare and hash by identity: two
substitutes carrying the same uri, name and type are still two files.

The handle types form a closed set, tagged by ``FileKind``:

- ``Blob``: raw binary payload with a content type.
- ``File``: a ``Blob`` that also carries a name and modification time.
- ``FileSubstitute``: a uri/name/type descriptor for hosts that have no
  native binary handle (e.g. a path on a device that a transport layer
  will stream later).
"""

import time
from enum import Enum
from collections.abc import Sequence
from typing import Iterable, Iterator, Optional, Union

from ..errors import InvalidArgumentError


class FileKind(Enum):
    """Tag identifying which handle variant a value is."""
    BLOB = "blob"
    FILE = "file"
    SUBSTITUTE = "substitute"


class FileHandle:
    """Base class for every extractable file handle.

    Subclasses set ``kind``. Equality and hashing are left as object
    identity so handles can key the extraction result.
    """

    kind: FileKind

    __slots__ = ()


BlobPart = Union[bytes, bytearray, memoryview, str, "Blob"]


class Blob(FileHandle):
    """In-memory binary payload.

    Args:
        parts: Chunks making up the payload. ``str`` parts are UTF-8
            encoded, nested blobs are concatenated.
        type: Content type, e.g. ``"text/plain"``. Defaults to ``""``.
    """

    kind = FileKind.BLOB

    __slots__ = ("_data", "type")

    def __init__(self, parts: Iterable[BlobPart] = (), type: str = ""):
        chunks = []
        for part in parts:
            if isinstance(part, Blob):
                chunks.append(part._data)
            elif isinstance(part, str):
                chunks.append(part.encode("utf-8"))
            else:
                chunks.append(bytes(part))
        self._data = b"".join(chunks)
        self.type = type

    @property
    def size(self) -> int:
        """Payload size in bytes."""
        return len(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size}, type={self.type!r})"


class File(Blob):
    """Named blob.

    Args:
        parts: Payload chunks, as for ``Blob``.
        name: File name.
        type: Content type.
        last_modified: Modification time in milliseconds since the epoch.
            Defaults to now.
    """

    kind = FileKind.FILE

    __slots__ = ("name", "last_modified")

    def __init__(self,
                 parts: Iterable[BlobPart],
                 name: str,
                 type: str = "",
                 last_modified: Optional[int] = None):
        super().__init__(parts, type=type)
        self.name = name
        self.last_modified = (
            last_modified if last_modified is not None else int(time.time() * 1000)
        )

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(name={self.name!r}, "
                f"size={self.size}, type={self.type!r})")


class FileSubstitute(FileHandle):
    """Descriptor standing in for a file where no native handle exists.

    It cannot be assumed that every object with ``uri``, ``name`` and
    ``type`` attributes is a file, so only instances of this class are
    treated as substitutes.
    """

    kind = FileKind.SUBSTITUTE

    __slots__ = ("uri", "name", "type")

    def __init__(self, uri: str, name: Optional[str] = None, type: Optional[str] = None):
        self.uri = uri
        self.name = name
        self.type = type

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(uri={self.uri!r}, "
                f"name={self.name!r}, type={self.type!r})")


class FileList(Sequence):
    """Read-only, fixed-length sequence of ``File`` instances.

    A file list is structural: extraction walks it like a list and
    extracts the files inside, it is never a file itself.
    """

    __slots__ = ("_files",)

    def __init__(self, files: Iterable[File] = ()):
        self._files = tuple(files)

    def __getitem__(self, index):
        return self._files[index]

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[File]:
        return iter(self._files)

    def item(self, index: int) -> Optional[File]:
        """Return the file at ``index``, or None when out of range."""
        if 0 <= index < len(self._files):
            return self._files[index]
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._files)!r})"


def make_file_substitute(uri: str,
                         name: Optional[str] = None,
                         type: Optional[str] = None) -> FileSubstitute:
    """Create a file substitute after checking field types.

    Args:
        uri: Location of the content, e.g. a filesystem path or URI.
        name: Optional file name.
        type: Optional content type.

    Returns:
        A new FileSubstitute.

    Raises:
        InvalidArgumentError: If ``uri`` is not a string, or ``name`` /
            ``type`` are neither strings nor None.
    """
    if not isinstance(uri, str):
        raise InvalidArgumentError(
            f"File substitute uri must be a string, got {type_name(uri)}"
        )
    for field_name, value in (("name", name), ("type", type)):
        if value is not None and not isinstance(value, str):
            raise InvalidArgumentError(
                f"File substitute {field_name} must be a string or None, "
                f"got {type_name(value)}"
            )
    return FileSubstitute(uri, name=name, type=type)


def type_name(value: object) -> str:
    """Readable type name for error messages."""
    return value.__class__.__name__
