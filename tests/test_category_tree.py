from types import SimpleNamespace

from services.category_tree import (
    FlatCategory,
    build_category_forest,
    can_delete_category,
    category_options,
    descendant_ids,
    flatten_categories,
    indented_label,
    would_create_cycle,
)


ROWS = [
    {"id": 1, "name": "Chemicals", "parent_id": None, "sort_order": 2},
    {"id": 2, "name": "Maintenance", "parent_id": None, "sort_order": 1},
    {"id": 3, "name": "Chlorine", "parent_id": 1, "sort_order": 0},
    {"id": 4, "name": "Balancers", "parent_id": 1, "sort_order": 0},
    {"id": 5, "name": "Tablets", "parent_id": 3, "sort_order": 0},
]


def _ids_and_depths(entries):
    return [(e.id, e.depth) for e in entries]


def test_empty_forest_flattens_to_nothing():
    forest = build_category_forest([])

    assert len(forest) == 0
    assert flatten_categories(forest) == []
    assert category_options(forest) == {}


def test_flatten_orders_parents_before_children():
    forest = build_category_forest(ROWS)

    flat = flatten_categories(forest)

    assert _ids_and_depths(flat) == [(2, 0), (1, 0), (4, 1), (3, 1), (5, 2)]


def test_flatten_excludes_subtree():
    forest = build_category_forest(ROWS)

    flat = flatten_categories(forest, exclude_id=3)

    assert [e.id for e in flat] == [2, 1, 4]


def test_missing_parent_becomes_root():
    forest = build_category_forest(ROWS + [{"id": 6, "name": "Orphan", "parent_id": 99, "sort_order": 0}])

    assert 6 in forest.roots
    assert (6, 0) in _ids_and_depths(flatten_categories(forest))


def test_parent_loop_is_broken_and_each_category_listed_once():
    rows = [
        {"id": "a", "name": "Alpha", "parent_id": "b"},
        {"id": "b", "name": "Beta", "parent_id": "a"},
    ]
    forest = build_category_forest(rows)

    flat = flatten_categories(forest)

    assert forest.roots == ["a"]
    assert _ids_and_depths(flat) == [("a", 0), ("b", 1)]


def test_accepts_objects_as_rows():
    rows = [SimpleNamespace(id=r["id"], name=r["name"], parent_id=r["parent_id"], sort_order=r["sort_order"], description=None) for r in ROWS]

    forest = build_category_forest(rows)

    assert len(forest) == 5
    assert forest.child_ids(1) == [4, 3]


def test_cycle_detection():
    forest = build_category_forest(ROWS)

    assert would_create_cycle(forest, 1, 1)
    assert would_create_cycle(forest, 1, 5)
    assert not would_create_cycle(forest, 3, 2)
    assert not would_create_cycle(forest, None, 1)
    assert not would_create_cycle(forest, 1, None)
    assert descendant_ids(forest, 1) == {3, 4, 5}


def test_only_leaf_categories_are_deletable():
    forest = build_category_forest(ROWS)

    assert not can_delete_category(forest, 1)
    assert can_delete_category(forest, 5)


def test_labels_and_options():
    assert indented_label(FlatCategory(id=5, name="Tablets", depth=2)) == "-- -- Tablets"

    forest = build_category_forest([
        {"id": 1, "name": "Misc", "parent_id": None},
        {"id": 2, "name": "Misc", "parent_id": None},
    ])
    options = category_options(forest)

    assert sorted(options.values()) == [1, 2]
    assert len(options) == 2
