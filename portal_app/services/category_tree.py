"""
Category hierarchy helpers for selection lists and the category admin tree.

Rows come from the backend as a flat table with ``parent_id`` pointers. They
are turned into an arena (nodes keyed by id plus child id lists) once, and
every view walks that arena instead of nested objects.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Mapping

from constants.catalog_constants import CATEGORY_INDENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryNode:
    id: Hashable
    name: str
    parent_id: Hashable | None = None
    sort_order: int = 0
    description: str | None = None


@dataclass(frozen=True)
class FlatCategory:
    id: Hashable
    name: str
    depth: int


@dataclass
class CategoryForest:
    nodes: dict[Hashable, CategoryNode] = field(default_factory=dict)
    roots: list[Hashable] = field(default_factory=list)
    children: dict[Hashable, list[Hashable]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.nodes)

    def child_ids(self, category_id: Hashable) -> list[Hashable]:
        return self.children.get(category_id, [])


def _field(row: Any, name: str, default=None):
    if isinstance(row, Mapping):
        return row.get(name, default)
    return getattr(row, name, default)


def _sort_key(node: CategoryNode):
    return (node.sort_order or 0, (node.name or "").lower())


def _loop_members(category_id: Hashable, nodes: dict[Hashable, CategoryNode]) -> set[Hashable]:
    """Ids of the parent loop that category_id's ancestor chain runs into, if any."""
    path: list[Hashable] = []
    index: dict[Hashable, int] = {}
    current = category_id
    while current is not None and current in nodes and current not in index:
        index[current] = len(path)
        path.append(current)
        current = nodes[current].parent_id
    if current is not None and current in index:
        return set(path[index[current]:])
    return set()


def build_category_forest(rows: Iterable[Any]) -> CategoryForest:
    """
    Build the arena from backend rows (ORM objects or mappings).

    Siblings are ordered by sort_order, then name. A row whose parent is
    missing becomes a root. A row sitting on a parent loop is promoted to a
    root so the result is always a forest.
    """
    nodes: dict[Hashable, CategoryNode] = {}
    for row in rows:
        node = CategoryNode(
            id=_field(row, "id"),
            name=_field(row, "name", "") or "",
            parent_id=_field(row, "parent_id"),
            sort_order=_field(row, "sort_order", 0) or 0,
            description=_field(row, "description"),
        )
        nodes[node.id] = node

    forest = CategoryForest(nodes=nodes)
    promoted: set[Hashable] = set()

    for category_id in nodes:
        members = _loop_members(category_id, nodes)
        if members and not (members & promoted):
            # Break each loop at its first member in row order
            first = next(cid for cid in nodes if cid in members)
            promoted.add(first)
            logger.warning("Category %s is part of a parent loop; treating it as top level", first)

    for node in nodes.values():
        parent_id = node.parent_id
        is_root = parent_id is None or parent_id not in nodes or node.id in promoted
        if is_root:
            forest.roots.append(node.id)
        else:
            forest.children.setdefault(parent_id, []).append(node.id)

    forest.roots.sort(key=lambda cid: _sort_key(nodes[cid]))
    for child_list in forest.children.values():
        child_list.sort(key=lambda cid: _sort_key(nodes[cid]))

    return forest


def flatten_categories(forest: CategoryForest, exclude_id: Hashable | None = None) -> list[FlatCategory]:
    """
    Depth-first, parent-before-children listing with nesting depth (roots are 0).

    exclude_id drops that category and its whole subtree, which is what an
    edit form needs for its parent picker.
    """
    result: list[FlatCategory] = []
    visited: set[Hashable] = set()
    stack: list[tuple[Hashable, int]] = [(cid, 0) for cid in reversed(forest.roots)]

    while stack:
        category_id, depth = stack.pop()
        if category_id in visited:
            logger.warning("Category %s reached twice while flattening; skipped", category_id)
            continue
        visited.add(category_id)

        if exclude_id is not None and category_id == exclude_id:
            continue

        node = forest.nodes[category_id]
        result.append(FlatCategory(id=node.id, name=node.name, depth=depth))

        for child_id in reversed(forest.child_ids(category_id)):
            stack.append((child_id, depth + 1))

    return result


def descendant_ids(forest: CategoryForest, category_id: Hashable) -> set[Hashable]:
    found: set[Hashable] = set()
    stack = list(forest.child_ids(category_id))
    while stack:
        current = stack.pop()
        if current in found or current == category_id:
            continue
        found.add(current)
        stack.extend(forest.child_ids(current))
    return found


def would_create_cycle(forest: CategoryForest, category_id: Hashable | None, parent_id: Hashable | None) -> bool:
    """True when parent_id is the category itself or one of its descendants."""
    if category_id is None or parent_id is None:
        return False
    if parent_id == category_id:
        return True
    return parent_id in descendant_ids(forest, category_id)


def can_delete_category(forest: CategoryForest, category_id: Hashable) -> bool:
    return len(forest.child_ids(category_id)) == 0


def indented_label(entry: FlatCategory) -> str:
    return f"{CATEGORY_INDENT * entry.depth}{entry.name}"


def category_options(forest: CategoryForest, exclude_id: Hashable | None = None) -> dict[str, Hashable]:
    """Selectbox options {label: id} in tree order."""
    options: dict[str, Hashable] = {}
    for entry in flatten_categories(forest, exclude_id=exclude_id):
        label = indented_label(entry)
        # Same-named siblings would collide as dict keys
        while label in options:
            label += " "
        options[label] = entry.id
    return options
