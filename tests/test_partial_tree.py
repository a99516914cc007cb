import pytest

from mst_engine.errors import EmptyListError, NoMatchError
from mst_engine.partial_tree import PartialTree, PartialTreeList
from mst_engine.structures import Arc, Vertex


def _trees(*names):
    return [PartialTree(Vertex(name)) for name in names]


def _roots(ptlist):
    return [tree.root.name for tree in ptlist]


def test_new_list_is_empty():
    ptlist = PartialTreeList()
    assert ptlist.size() == 0
    assert len(ptlist) == 0
    assert list(ptlist) == []


def test_remove_returns_trees_in_append_order():
    trees = _trees("A", "B", "C", "D")
    ptlist = PartialTreeList()
    for tree in trees:
        ptlist.append(tree)

    assert ptlist.size() == 4
    assert [ptlist.remove() for _ in range(4)] == trees
    assert ptlist.size() == 0


def test_remove_on_empty_list_raises():
    ptlist = PartialTreeList()
    with pytest.raises(EmptyListError):
        ptlist.remove()

    ptlist.append(PartialTree(Vertex("A")))
    ptlist.remove()
    with pytest.raises(EmptyListError):
        ptlist.remove()


def test_single_node_remove_tree_containing_match():
    (tree,) = _trees("A")
    ptlist = PartialTreeList()
    ptlist.append(tree)

    assert ptlist.remove_tree_containing(tree.root) is tree
    assert ptlist.size() == 0


def test_single_node_remove_tree_containing_no_match():
    (tree,) = _trees("A")
    ptlist = PartialTreeList()
    ptlist.append(tree)

    with pytest.raises(NoMatchError):
        ptlist.remove_tree_containing(Vertex("Z"))
    assert ptlist.size() == 1


def test_remove_tree_containing_on_empty_list_raises():
    with pytest.raises(NoMatchError):
        PartialTreeList().remove_tree_containing(Vertex("A"))


def test_removing_rear_reassigns_rear_to_predecessor():
    a, b, c = _trees("A", "B", "C")
    ptlist = PartialTreeList()
    for tree in (a, b, c):
        ptlist.append(tree)

    assert ptlist.remove_tree_containing(c.root) is c
    assert _roots(ptlist) == ["A", "B"]

    (d,) = _trees("D")
    ptlist.append(d)
    assert _roots(ptlist) == ["A", "B", "D"]
    assert ptlist.remove() is a


def test_removing_front_and_middle():
    a, b, c = _trees("A", "B", "C")
    ptlist = PartialTreeList()
    for tree in (a, b, c):
        ptlist.append(tree)

    assert ptlist.remove_tree_containing(b.root) is b
    assert _roots(ptlist) == ["A", "C"]
    assert ptlist.remove_tree_containing(a.root) is a
    assert _roots(ptlist) == ["C"]
    assert ptlist.size() == 1


def test_remove_tree_containing_resolves_member_vertices():
    a, b = _trees("A", "B")
    member = Vertex("M")
    member.parent = b.root
    ptlist = PartialTreeList()
    ptlist.append(a)
    ptlist.append(b)

    assert ptlist.remove_tree_containing(member) is b


def test_iteration_is_front_to_back_and_restartable():
    ptlist = PartialTreeList()
    for tree in _trees("A", "B", "C"):
        ptlist.append(tree)

    iterator = iter(ptlist)
    assert next(iterator).root.name == "A"
    assert _roots(ptlist) == ["A", "B", "C"]
    assert [tree.root.name for tree in iterator] == ["B", "C"]
    assert list(iterator) == []


def test_merge_repoints_root_and_unions_arcs():
    a, b = Vertex("A"), Vertex("B")
    left, right = PartialTree(a), PartialTree(b)
    left.arcs.insert(Arc(a, b, 5))
    right.arcs.insert(Arc(b, a, 5))
    right.arcs.insert(Arc(b, b, 1))

    left.merge(right)

    assert b.get_root() is a
    assert left.vertex_count == 2
    assert len(left.arcs) == 3
    assert len(right.arcs) == 0
    assert left.arcs.delete_min().weight == 1
