import pytest

from cyclo.errors import ConsistencyViolationError
from cyclo.services.hierarchy import NodeSet, build_treemap


def _as_set(node_set: NodeSet) -> set:
    return {(n.label, n.parent, n.complexity, n.loc) for n in node_set.nodes()}


def test_file_and_ancestor_nodes() -> None:
    nodes = NodeSet()
    nodes.add_file(("/", "tmp", "proj", "a.c"), 1, 10.0, 20)
    nodes.add_file(("/", "tmp", "proj", "sub", "b.py"), 2, 4.0, 8)

    assert _as_set(nodes) == {
        ("proj/a.c", "proj", 10.0, 20),
        ("proj", "", 0.0, 0),
        ("proj/sub/b.py", "proj/sub", 4.0, 8),
        ("proj/sub", "proj", 0.0, 0),
    }


def test_directories_are_added_once() -> None:
    nodes = NodeSet()
    nodes.add_file(("proj", "sub", "deep", "a.c"), 3, 1.0, 1)
    nodes.add_file(("proj", "sub", "deep", "b.c"), 3, 1.0, 1)
    nodes.add_file(("proj", "sub", "c.c"), 2, 1.0, 1)

    assert sorted(nodes.labels) == sorted([
        "proj/sub/deep/a.c",
        "proj/sub/deep/b.c",
        "proj/sub/c.c",
        "proj/sub/deep",
        "proj/sub",
        "proj",
    ])


def test_insertion_order_does_not_change_the_set() -> None:
    paths = [
        (("r", "x", "y", "1.py"), 3),
        (("r", "2.py"), 1),
        (("r", "x", "3.py"), 2),
    ]

    forward = NodeSet()
    for parts, depth in paths:
        forward.add_file(parts, depth, 1.0, 1)

    backward = NodeSet()
    for parts, depth in reversed(paths):
        backward.add_file(parts, depth, 1.0, 1)

    assert _as_set(forward) == _as_set(backward)


def test_every_parent_exists_exactly_once() -> None:
    nodes = NodeSet()
    nodes.add_file(("r", "a", "b", "c", "f.js"), 4, 2.0, 3)
    nodes.add_file(("r", "a", "g.js"), 2, 2.0, 3)

    labels = list(nodes.labels)
    assert len(labels) == len(set(labels))
    for parent in nodes.parents:
        if parent:
            assert labels.count(parent) == 1


def test_depth_zero_file_is_its_own_root() -> None:
    nodes = NodeSet()
    label = nodes.add_file(("tmp", "solo.py"), 0, 3.0, 5)

    assert label == "solo.py"
    assert list(nodes.parents) == [""]
    assert len(nodes) == 1


def test_duplicate_file_is_rejected() -> None:
    nodes = NodeSet()
    nodes.add_file(("r", "a.c"), 1, 1.0, 1)

    with pytest.raises(ConsistencyViolationError):
        nodes.add_file(("r", "a.c"), 1, 1.0, 1)


def test_depth_beyond_path_is_rejected() -> None:
    with pytest.raises(ConsistencyViolationError):
        NodeSet().add_file(("a.c",), 1, 1.0, 1)


def test_build_treemap_mean_includes_directories() -> None:
    nodes = NodeSet()
    nodes.add_file(("proj", "a.c"), 1, 10.0, 20)
    nodes.add_file(("proj", "sub", "b.py"), 2, 4.0, 8)

    data = build_treemap(nodes)

    assert data.labels == ["proj/a.c", "proj", "proj/sub/b.py", "proj/sub"]
    assert data.parents == ["proj", "", "proj/sub", "proj"]
    assert data.values == [20, 0, 8, 0]
    assert data.colors == [10.0, 0.0, 4.0, 0.0]
    assert data.cmid == pytest.approx(14.0 / 4)


def test_build_treemap_rejects_empty_set() -> None:
    with pytest.raises(ConsistencyViolationError, match="nothing to visualize"):
        build_treemap(NodeSet())


def test_build_treemap_rejects_mismatched_arrays() -> None:
    nodes = NodeSet()
    nodes.add_file(("proj", "a.c"), 1, 1.0, 1)
    nodes._parents.append("orphan")

    with pytest.raises(ConsistencyViolationError, match="array lengths differ"):
        build_treemap(nodes)


def test_treemap_nodes_line_up_with_arrays() -> None:
    nodes = NodeSet()
    nodes.add_file(("proj", "sub", "b.py"), 2, 4.0, 8)

    data = build_treemap(nodes)

    assert [(n.label, n.parent, n.complexity, n.loc) for n in data.nodes()] == [
        ("proj/sub/b.py", "proj/sub", 4.0, 8),
        ("proj/sub", "proj", 0.0, 0),
        ("proj", "", 0.0, 0),
    ]
