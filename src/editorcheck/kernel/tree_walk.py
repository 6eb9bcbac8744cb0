"""Path-tracking walk over decoded JSON trees.

Used for invariants that the record/struct schemas cannot express on their
own, such as "this mapping may be empty anywhere except under key X".
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

Path = Tuple[str, ...]
Predicate = Callable[[Path, Any], bool]


def find_violation(tree: Any, predicate: Predicate, path: Path = ()) -> Optional[Path]:
    """Return the path of the first mapping node for which ``predicate`` holds.

    Only mappings are descended into (sequence elements are opaque), keys in
    their original order. ``predicate`` receives the path from the tree root
    and the node; the root itself is tested with the empty path.
    """
    if not isinstance(tree, dict):
        return None
    if predicate(path, tree):
        return path
    for key, value in tree.items():
        found = find_violation(value, predicate, path + (key,))
        if found is not None:
            return found
    return None


def empty_mapping_at(segment: str) -> Predicate:
    """Predicate: node is an empty mapping whose path ends in ``segment``."""
    def _predicate(path: Path, node: Any) -> bool:
        return not node and bool(path) and path[-1] == segment
    return _predicate
