"""Subtree closure over the category parent/child relation."""

from collections import defaultdict, deque
from collections.abc import Iterable, Mapping


def children_index(categories: Iterable) -> dict[str, list[str]]:
    """Build a parent id -> child ids adjacency view from category records."""
    index = defaultdict(list)
    for category in categories:
        if category.parent_id:
            index[str(category.parent_id)].append(str(category.id))
    return index


def category_closure(category_id: str, children: Mapping[str, Iterable[str]]) -> set[str]:
    """Return ``category_id`` plus every category reachable below it.

    Breadth-first, so depth is bounded only by memory. The visited set makes
    the walk terminate even if the stored relation contained a cycle.
    """
    root = str(category_id)
    visited = {root}
    queue = deque([root])
    while queue:
        current = queue.popleft()
        for child_id in children.get(current, ()):
            if child_id not in visited:
                visited.add(child_id)
                queue.append(child_id)
    return visited
