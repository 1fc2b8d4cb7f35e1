"""Clone a value tree while extracting its files.

The extractor walks a nested value depth-first, building a clone in which
every file is replaced with None and recording the object path of each
file occurrence.

Two auxiliary tables live for exactly one ``extract`` call:

- ``clones`` maps each structural node (by identity) to its clone. A node
  referenced from several places is cloned once and the clone is shared,
  so the output keeps the input's aliasing.
- ``recursed`` is the set of nodes on the current descent branch. A node
  met again on its own branch is a cycle: its in-progress clone is reused
  and its children are not visited again.

Descent is driven by an explicit stack of child generators rather than
Python recursion, so nesting depth is not limited by the interpreter's
recursion limit.
"""

import logging
from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

from ..config import ExtractionConfig, FileMatcher
from ..errors import InvalidArgumentError
from .classifier import FileClassifier, default_classifier
from .handles import FileList
from .paths import join_path

logger = logging.getLogger(__name__)

# Mapping types cloned as structural objects. Other mappings (and any
# class instance) are opaque leaves.
OBJECT_TYPES = (dict, OrderedDict)


class FileMap(Mapping):
    """Extracted files and the object paths where each occurred.

    Keys are compared by identity, so any value a matcher accepts can be a
    key, hashable or not, and equal-looking files stay distinct. Keys
    iterate in first-occurrence order.
    """

    def __init__(self):
        self._entries: Dict[int, Tuple[Any, List[str]]] = {}
        self._occurrences: List[Tuple[str, Any]] = []

    def add(self, file: Any, path: str) -> None:
        """Record one occurrence of ``file`` at ``path``."""
        entry = self._entries.get(id(file))
        if entry is None:
            self._entries[id(file)] = (file, [path])
        else:
            entry[1].append(path)
        self._occurrences.append((path, file))

    def occurrences(self) -> List[Tuple[str, Any]]:
        """All (path, file) pairs in traversal order."""
        return list(self._occurrences)

    def __getitem__(self, file: Any) -> List[str]:
        entry = self._entries.get(id(file))
        if entry is None or entry[0] is not file:
            raise KeyError(file)
        return entry[1]

    def __contains__(self, file: object) -> bool:
        entry = self._entries.get(id(file))
        return entry is not None and entry[0] is file

    def __iter__(self) -> Iterator[Any]:
        return (file for file, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def items(self):
        return [(file, paths) for file, paths in self._entries.values()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(key in self and self[key] == value for key, value in other.items())

    __hash__ = None

    def __repr__(self) -> str:
        inner = ", ".join(f"{file!r}: {paths!r}" for file, paths in self.items())
        return f"{self.__class__.__name__}({{{inner}}})"


@dataclass(frozen=True)
class ExtractedFile:
    """One file occurrence: where it was and which file it was."""
    path: str
    file: Any


@dataclass
class ExtractionResult:
    """What ``extract`` returns.

    Attributes:
        clone: Clone of the input with every file replaced by None
        files: Each extracted file mapped to its object paths
    """
    clone: Any
    files: FileMap = field(default_factory=FileMap)

    def records(self) -> List[ExtractedFile]:
        """Flat list of file occurrences in traversal order."""
        return [ExtractedFile(path, file) for path, file in self.files.occurrences()]

    @property
    def file_count(self) -> int:
        """Number of distinct files extracted."""
        return len(self.files)


class TreeExtractor:
    """Recursively extracts files from a value.

    Args:
        is_file: Matcher deciding which values are files. Defaults to
            the standard classifier (``Blob``, ``File``, ``FileSubstitute``).

    Raises:
        InvalidArgumentError: If ``is_file`` is not callable.
    """

    def __init__(self, is_file: Optional[FileMatcher] = None):
        if is_file is None:
            is_file = default_classifier
        elif not callable(is_file):
            raise InvalidArgumentError(
                f"is_file must be callable, got {is_file.__class__.__name__}"
            )
        self.is_file = is_file

    @classmethod
    def from_config(cls, config: ExtractionConfig) -> 'TreeExtractor':
        """Build an extractor from a validated configuration."""
        config.validate()
        if config.is_file is not None:
            return cls(config.is_file)
        return cls(FileClassifier(config.capabilities, config.extra_types))

    def extract(self, value: Any, path: str = "") -> ExtractionResult:
        """Clone ``value``, replacing files with None.

        Args:
            value: Value (typically a dict/list tree) to extract files from
            path: Object path prefix for recorded paths

        Returns:
            ExtractionResult with the clone and the extracted files

        Raises:
            InvalidArgumentError: If ``path`` is not a string.

        Example:
            >>> f1, f2 = File([b"1"], "1.txt"), File([b"2"], "2.txt")
            >>> result = TreeExtractor().extract({"a": f1, "b": [f1, f2]})
            >>> result.clone
            {'a': None, 'b': [None, None]}
            >>> result.files[f1], result.files[f2]
            (['a', 'b.0'], ['b.1'])
        """
        if not isinstance(path, str):
            raise InvalidArgumentError(
                f"path must be a string, got {path.__class__.__name__}"
            )
        return _Extraction(self.is_file).run(value, path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(is_file={self.is_file!r})"


class _Extraction:
    """Working state of a single ``extract`` call."""

    def __init__(self, is_file: FileMatcher):
        self.is_file = is_file
        self.files = FileMap()
        # id(original) -> (original, clone). The original is held so its id
        # cannot be reused while the table is alive.
        self.clones: Dict[int, Tuple[Any, Any]] = {}
        # Pending descents: [child generator, clone to send it next]
        self.stack: List[list] = []

    def run(self, value: Any, path: str) -> ExtractionResult:
        logger.debug("Extracting files from %s (prefix=%r)", type(value).__name__, path)
        clone = self.visit(value, path, frozenset())
        stack = self.stack
        while stack:
            entry = stack[-1]
            try:
                child, child_path, recursed = entry[0].send(entry[1])
            except StopIteration:
                stack.pop()
                continue
            # visit may push the child's own descent, which then runs first
            entry[1] = self.visit(child, child_path, recursed)
        logger.debug(
            "Extracted %d file(s) at %d path(s)",
            len(self.files), len(self.files.occurrences()),
        )
        return ExtractionResult(clone, self.files)

    def visit(self, value: Any, path: str, recursed: FrozenSet[int]) -> Any:
        """Return the clone contribution of one node.

        Files are recorded and become None. Lists and plain dicts get a
        (possibly shared) clone whose children are filled in by a descent
        pushed onto the stack. Anything else is returned as is.
        """
        if self.is_file(value):
            self.files.add(value, path)
            return None

        if isinstance(value, (list, FileList)) or type(value) is tuple:
            new_clone = list
        elif type(value) in OBJECT_TYPES:
            new_clone = type(value)
        else:
            return value

        key = id(value)
        cached = self.clones.get(key)
        uncloned = cached is None
        if uncloned:
            clone = new_clone()
            self.clones[key] = (value, clone)
        else:
            clone = cached[1]

        if key in recursed:
            logger.debug("Circular reference at %r, reusing its clone", path)
            return clone

        self.stack.append([self.descend(value, clone, uncloned, path, recursed | {key}), None])
        return clone

    def descend(self, value: Any, clone: Any, uncloned: bool, path: str,
                recursed: FrozenSet[int]):
        """Yield each child to visit and receive back its clone.

        Clone slots are only filled the first time a node is cloned; later
        visits of a shared node only record file paths.
        """
        if isinstance(clone, list):
            for index, item in enumerate(value):
                item_clone = yield item, join_path(path, index), recursed
                if uncloned:
                    clone.append(item_clone)
        else:
            for key, item in value.items():
                # Non-string keys are not addressable by an object path
                if not isinstance(key, str):
                    continue
                item_clone = yield item, join_path(path, key), recursed
                if uncloned:
                    clone[key] = item_clone


def extract(value: Any, is_file: Optional[FileMatcher] = None, path: str = "") -> ExtractionResult:
    """Extract files from ``value`` with an optional matcher and path prefix.

    Argument order is value, matcher, path. Pass ``path`` by keyword when
    using the default matcher.
    """
    return TreeExtractor(is_file).extract(value, path)
