"""Object path notation.

An object path locates a node inside a nested value: mapping keys and
sequence indices joined with ``.``, e.g. ``a.0.b`` for property ``a``,
index ``0``, property ``b``. The empty path denotes the root.
"""

from typing import Any, List, Union

Segment = Union[str, int]


def join_path(prefix: str, segment: Segment) -> str:
    """Append one segment to an object path.

    Args:
        prefix: Path of the parent node ("" for the root)
        segment: Mapping key or sequence index of the child

    Returns:
        The child's path; no leading dot when ``prefix`` is empty
    """
    return f"{prefix}.{segment}" if prefix else str(segment)


def split_path(path: str) -> List[str]:
    """Split an object path into its segments.

    ``""`` is the root and has no segments.
    """
    if not path:
        return []
    return path.split(".")


def is_index_segment(segment: str) -> bool:
    """Check if a segment is a canonical sequence index (no sign, no leading zeros)."""
    if not (segment.isascii() and segment.isdigit()):
        return False
    return segment == "0" or not segment.startswith("0")


def get_path(tree: Any, path: str) -> Any:
    """Resolve an object path within a nested value.

    Sequence segments are parsed as integers, mapping segments are used as
    keys. Keys containing ``.`` cannot be addressed, as in the notation
    itself.

    Args:
        tree: Root value, typically an extraction clone
        path: Object path relative to ``tree``

    Returns:
        The value found at ``path``

    Raises:
        KeyError: If any segment does not resolve
    """
    node = tree
    for segment in split_path(path):
        if isinstance(node, dict):
            if segment not in node:
                raise KeyError(path)
            node = node[segment]
        elif isinstance(node, (list, tuple)):
            if not is_index_segment(segment):
                raise KeyError(path)
            index = int(segment)
            if index >= len(node):
                raise KeyError(path)
            node = node[index]
        else:
            raise KeyError(path)
    return node
