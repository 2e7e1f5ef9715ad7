from .avl_balance_tracker import BalanceOutcome, track_avl_balance
from .bst import BinarySearchTree, as_tree_root
from .node import (TreeNode, balance_factor, height, is_balanced, make_node,
                   rotate_left, rotate_right)
from .traversal_tracker import TRAVERSAL_ORDERS, track_traversal

__all__ = [
    "BalanceOutcome",
    "BinarySearchTree",
    "TRAVERSAL_ORDERS",
    "TreeNode",
    "as_tree_root",
    "balance_factor",
    "height",
    "is_balanced",
    "make_node",
    "rotate_left",
    "rotate_right",
    "track_avl_balance",
    "track_traversal",
]
