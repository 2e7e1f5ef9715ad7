import pytest

from algoviz.errors import InputFormatError, PreconditionViolation
from algoviz.steps import VISIT
from algoviz.tree import (BinarySearchTree, TreeNode, as_tree_root, make_node,
                          rotate_left, rotate_right, track_traversal)
from algoviz.tree.node import iter_inorder, tree_from_dict
from conftest import collect

SAMPLE = [50, 30, 70, 20, 40, 60, 80]


def test_insert_keeps_bst_ordering():
    tree = BinarySearchTree([41, 20, 65, 11, 29, 50, 91, 32, 72, 99])
    assert tree.is_valid_bst()
    assert tree.values() == sorted([41, 20, 65, 11, 29, 50, 91, 32, 72, 99])


def test_duplicates_are_ignored():
    tree = BinarySearchTree([5, 3, 8])
    before = tree.root
    assert tree.insert(3) is False
    assert tree.root is before
    assert len(tree) == 3


def test_delete_leaf_one_child_and_two_children():
    tree = BinarySearchTree(SAMPLE)

    assert tree.delete(20)  # leaf
    assert tree.values() == [30, 40, 50, 60, 70, 80]

    assert tree.delete(30)  # one child: 40 takes its place
    assert tree.root.left.value == 40

    assert tree.delete(50)  # two children: in-order successor 60 moves up
    assert tree.root.value == 60
    assert tree.values() == [40, 60, 70, 80]
    assert tree.is_valid_bst()

    assert tree.delete(12345) is False


def test_updates_never_touch_earlier_roots():
    tree = BinarySearchTree(SAMPLE)
    old_root = tree.root
    tree.insert(10)
    tree.delete(70)
    assert old_root.right.value == 70
    assert old_root.left.left.left is None
    assert tree.root.left.left.left.value == 10


def test_contains():
    tree = BinarySearchTree.default()
    assert 60 in tree
    assert 65 not in tree


@pytest.mark.parametrize("order, expected", [
    ("inorder", (20, 30, 40, 50, 60, 70, 80)),
    ("preorder", (50, 30, 20, 40, 70, 60, 80)),
    ("postorder", (20, 40, 30, 60, 80, 70, 50)),
])
def test_traversal_orders(order, expected):
    root = as_tree_root(SAMPLE)
    steps, result = collect(track_traversal(root, order))
    assert result == expected
    assert tuple(s.indices[0] for s in steps) == expected
    assert all(s.kind == VISIT and s.snapshot is root for s in steps)


def test_traversal_of_empty_tree():
    steps, result = collect(track_traversal(None, "preorder"))
    assert steps == []
    assert result == ()


def test_unknown_traversal_order():
    with pytest.raises(InputFormatError):
        collect(track_traversal(as_tree_root([1]), "levelorder"))


def test_heights_and_balance_factors():
    root = as_tree_root([3, 2, 1])
    assert root.height == 3
    assert root.balance_factor == 2
    assert root.left.balance_factor == 1


def test_rotate_right_and_left():
    root = as_tree_root([3, 2, 1])
    rotated = rotate_right(root)
    assert (rotated.value, rotated.left.value, rotated.right.value) == (2, 1, 3)
    assert rotated.height == 2

    back = rotate_left(rotated)
    assert back.value == 3
    assert back.left.value == 2


def test_rotation_preconditions():
    leaf = make_node(1)
    with pytest.raises(PreconditionViolation):
        rotate_right(leaf)
    with pytest.raises(PreconditionViolation):
        rotate_left(leaf)
    with pytest.raises(PreconditionViolation):
        rotate_left(None)


def test_tree_dict_round_trip_keeps_shape():
    root = as_tree_root(SAMPLE)
    data = root.to_dict()
    assert data["value"] == 50
    assert data["left"]["right"]["value"] == 40
    assert tree_from_dict(data) == root


def test_as_tree_root_accepts_several_forms():
    tree = BinarySearchTree([2, 1])
    assert as_tree_root(tree) is tree.root
    assert as_tree_root(tree.root) is tree.root
    assert as_tree_root(None) is None
    assert isinstance(as_tree_root(iter([2, 1])), TreeNode)


def test_contains_rejects_non_integer():
    with pytest.raises(InputFormatError):
        BinarySearchTree([1, 2]).contains("x")


def test_traversal_accepts_tree_handle():
    steps, order = collect(track_traversal(BinarySearchTree([2, 1, 3]), "preorder"))
    assert order == (2, 1, 3)
    assert steps[0].snapshot.value == 2


@pytest.fixture(scope="module")
def ascending_tree():
    return BinarySearchTree(range(1500))


def test_deep_chain_operations(ascending_tree):
    tree = BinarySearchTree(root=ascending_tree.root)
    assert tree.height == 1500
    assert tree.is_valid_bst()
    assert 1499 in tree and 1500 not in tree

    for value in (750, 0, 1499):
        assert tree.delete(value)
    assert len(tree) == 1497
    assert tree.values() == [v for v in range(1500) if v not in (750, 0, 1499)]
    assert tree.is_valid_bst()


def test_deep_chain_traversals(ascending_tree):
    root = ascending_tree.root
    steps, order = collect(track_traversal(root, "inorder"))
    assert order == tuple(range(1500))
    assert len(steps) == len(order)
    _, post = collect(track_traversal(root, "postorder"))
    assert post == tuple(reversed(order))


def test_deep_chain_dict_round_trip(ascending_tree):
    root = ascending_tree.root
    rebuilt = tree_from_dict(root.to_dict())
    assert rebuilt.height == root.height
    assert [n.value for n in iter_inorder(rebuilt)] == list(range(1500))
