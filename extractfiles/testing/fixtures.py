"""Test fixtures for extractfiles consumers.

These helpers build the awkward input shapes (shared sub-trees, cycles)
that extraction has to handle, and check a result without relying on
``==`` over cyclic clones.
"""

from typing import Any, Dict, List

from ..core.extractor import ExtractionResult
from ..core.handles import File, FileSubstitute
from ..core.paths import get_path


class TreeBuilder:
    """Factory for sample payloads and files.

    Example:
        builder = TreeBuilder()
        f = builder.substitute()
        tree = builder.cyclic({"a": f}, key="self")
        result = extract_files(tree)
        assert result.clone["self"] is result.clone
    """

    def __init__(self):
        self._count = 0

    def file(self, content: bytes = b"", type: str = "text/plain") -> File:
        """Create a distinct named file."""
        self._count += 1
        return File([content], f"{self._count}.txt", type=type)

    def substitute(self) -> FileSubstitute:
        """Create a distinct file substitute with empty fields."""
        return FileSubstitute("", name="", type="")

    def shared(self, sub_tree: Any, *keys: str) -> Dict[str, Any]:
        """Return a dict whose ``keys`` all reference the same ``sub_tree``."""
        return {key: sub_tree for key in keys}

    def cyclic(self, tree: Dict[str, Any], key: str = "self") -> Dict[str, Any]:
        """Make ``tree`` reference itself under ``key`` and return it."""
        tree[key] = tree
        return tree

    def cyclic_list(self, items: List[Any]) -> List[Any]:
        """Append the list to itself and return it."""
        items.append(items)
        return items


def assert_files_nulled(result: ExtractionResult, prefix: str = "") -> None:
    """Assert that every recorded path holds None in the clone.

    Args:
        result: Extraction result to check
        prefix: Path prefix the extraction was run with
    """
    for file, paths in result.files.items():
        for path in paths:
            value = get_path(result.clone, _relative(path, prefix))
            assert value is None, f"Expected None at {path!r} for {file!r}, got {value!r}"


def _relative(path: str, prefix: str) -> str:
    if not prefix:
        return path
    if path == prefix:
        return ""
    assert path.startswith(prefix + "."), f"{path!r} does not start with {prefix!r}"
    return path[len(prefix) + 1:]
