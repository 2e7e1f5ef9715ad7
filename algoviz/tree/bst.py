"""Unbalanced binary search tree over immutable nodes.

Duplicate values are ignored on insert: the tree is left unchanged and no
error is raised.
"""

import logging

from ..config import SAMPLE_TREE
from ..errors import require_int, require_ints
from .node import (TreeNode, count_nodes, is_balanced, iter_inorder, make_node,
                   rebuild_path)

logger = logging.getLogger(__name__)


def _descend(node, value):
    """Walk from `node` toward `value`; returns (ancestors, node_holding_value_or_None)."""
    ancestors = []
    current = node
    while current is not None and current.value != value:
        move = "L" if value < current.value else "R"
        ancestors.append((current, move))
        current = current.left if move == "L" else current.right
    return ancestors, current


def bst_insert(node, value):
    """Return (new_root, inserted) after inserting `value` below `node`."""
    require_int(value)
    ancestors, existing = _descend(node, value)
    if existing is not None:
        return node, False
    return rebuild_path(ancestors, make_node(value)), True


def bst_delete(node, value):
    """Return (new_root, deleted) after removing `value` from the subtree.

    Leaf: removed. One child: replaced by that child. Two children: takes the
    value of its in-order successor, which is then deleted from the right
    subtree.
    """
    require_int(value)
    ancestors, target = _descend(node, value)
    if target is None:
        return node, False

    if target.left is None:
        replacement = target.right
    elif target.right is None:
        replacement = target.left
    else:
        successor = target.right
        while successor.left is not None:
            successor = successor.left
        right, _ = bst_delete(target.right, successor.value)
        replacement = make_node(successor.value, target.left, right)
    return rebuild_path(ancestors, replacement), True


def is_valid_bst(node):
    """True when the inorder sequence is strictly increasing."""
    previous = None
    for current in iter_inorder(node):
        if previous is not None and current.value <= previous:
            return False
        previous = current.value
    return True


class BinarySearchTree:
    """Mutable handle over a persistent BST: each change swaps in a new root."""

    def __init__(self, values=(), root=None):
        self.root = root
        for value in require_ints(values):
            self.insert(value)

    @classmethod
    def default(cls):
        return cls(SAMPLE_TREE)

    def __len__(self):
        return count_nodes(self.root)

    def __contains__(self, value):
        return self.contains(value)

    def __repr__(self):
        return f"BinarySearchTree({self.values()!r})"

    def insert(self, value):
        self.root, inserted = bst_insert(self.root, value)
        if not inserted:
            logger.debug("Ignored duplicate value %s", value)
        return inserted

    def delete(self, value):
        self.root, deleted = bst_delete(self.root, value)
        return deleted

    def contains(self, value):
        require_int(value)
        return _descend(self.root, value)[1] is not None

    def values(self):
        """Values in sorted (inorder) order."""
        return [node.value for node in iter_inorder(self.root)]

    def is_valid_bst(self):
        return is_valid_bst(self.root)

    def is_balanced(self):
        return is_balanced(self.root)

    @property
    def height(self):
        return self.root.height if self.root else 0


def as_tree_root(structure):
    """Accept a BinarySearchTree, a TreeNode, None, or an iterable of values."""
    if structure is None or isinstance(structure, TreeNode):
        return structure
    if isinstance(structure, BinarySearchTree):
        return structure.root
    return BinarySearchTree(structure).root
