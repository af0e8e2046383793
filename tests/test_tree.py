import pytest

from structkit.tree import Tree, TreeNode


def sample_tree():
    tree = Tree(10)
    for node_id, data in enumerate("abcdef"):
        tree.assign_data(node_id, data)
    tree.set_root(0)
    tree.add_child(0, 1)
    tree.add_child(0, 2)
    tree.add_child(1, 3)
    tree.add_child(2, 4)
    tree.add_child(2, 5)
    return tree


def test_children_are_prepended():
    tree = sample_tree()
    root = tree.node(0)
    assert [child.data for child in root.children] == ["c", "b"]


def test_depth_first_from_root():
    tree = sample_tree()
    assert list(tree.depth_first()) == ["a", "c", "f", "e", "b", "d"]


def test_depth_first_from_subtree():
    tree = sample_tree()
    assert list(tree.depth_first(1)) == ["b", "d"]


def test_visits_every_linked_node_once():
    tree = sample_tree()
    visited = list(tree.depth_first())
    assert sorted(visited) == list("abcdef")


def test_no_root_raises():
    with pytest.raises(ValueError):
        list(Tree(3).depth_first())


@pytest.mark.parametrize("node_id", [-1, 5])
def test_out_of_range_node(node_id):
    tree = Tree(5)
    with pytest.raises(IndexError):
        tree.node(node_id)


def test_assign_data_overwrites():
    tree = Tree(2)
    tree.assign_data(1, "first")
    tree.assign_data(1, "second")
    assert tree.node(1).data == "second"


def test_node_add_child_directly():
    parent = TreeNode("p")
    parent.add_child(TreeNode("x"))
    parent.add_child(TreeNode("y"))
    assert [c.data for c in parent.children] == ["y", "x"]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Tree(-1)