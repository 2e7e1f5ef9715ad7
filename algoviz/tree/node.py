"""Immutable binary tree nodes with cached heights.

Nodes are never modified after construction. Every structural change builds
new nodes along the changed path and shares the untouched subtrees, so a
node captured in a Step snapshot always shows the tree as it was then.
"""

from dataclasses import dataclass
from typing import Optional

from ..errors import PreconditionViolation, require_int


@dataclass(frozen=True)
class TreeNode:
    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    height: int = 1

    def __repr__(self):
        return f"TreeNode({self.value}, h={self.height})"

    @property
    def balance_factor(self):
        return balance_factor(self)

    def to_dict(self):
        """Nested dict export of the subtree (iterative, any depth)."""
        result = {}
        stack = [(self, result)]
        while stack:
            node, out = stack.pop()
            out.update(value=node.value, height=node.height,
                       balance_factor=balance_factor(node), left=None, right=None)
            for side in ("left", "right"):
                child = getattr(node, side)
                if child is not None:
                    out[side] = {}
                    stack.append((child, out[side]))
        return result


def height(node):
    return node.height if node else 0


def balance_factor(node):
    """height(left) - height(right); 0 for an empty subtree."""
    return height(node.left) - height(node.right) if node else 0


def make_node(value, left=None, right=None):
    """Build a node and compute its height from its children."""
    require_int(value)
    return TreeNode(value, left, right, 1 + max(height(left), height(right)))


def with_children(node, left, right):
    return make_node(node.value, left, right)


def rebuild_path(ancestors, subtree):
    """
    Path-copy upward: `ancestors` lists (node, 'L'|'R') from the root down to
    the parent of the replaced position. Returns the new root.
    """
    for parent, move in reversed(ancestors):
        if move == "L":
            subtree = with_children(parent, subtree, parent.right)
        else:
            subtree = with_children(parent, parent.left, subtree)
    return subtree


def rotate_right(y):
    """
    Right rotation at `y`; its left child `x` becomes the subtree root.

          y            x
         / \\          / \\
        x   C   ->   A   y
       / \\              / \\
      A   B            B   C
    """
    if y is None or y.left is None:
        raise PreconditionViolation(
            "rotate_right needs a node with a left child",
            value=y.value if y else None,
        )
    x = y.left
    new_y = make_node(y.value, x.right, y.right)
    return make_node(x.value, x.left, new_y)


def rotate_left(x):
    """Left rotation at `x`; its right child becomes the subtree root."""
    if x is None or x.right is None:
        raise PreconditionViolation(
            "rotate_left needs a node with a right child",
            value=x.value if x else None,
        )
    y = x.right
    new_x = make_node(x.value, x.left, y.left)
    return make_node(y.value, new_x, y.right)


def iter_inorder(node):
    stack = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def count_nodes(node):
    return sum(1 for _ in iter_inorder(node))


def is_balanced(node):
    """True when every node's balance factor is within [-1, 1]."""
    return all(abs(balance_factor(n)) <= 1 for n in iter_inorder(node))


def tree_from_dict(data):
    """Rebuild a tree from the nested dicts produced by TreeNode.to_dict()."""
    if data is None:
        return None
    # Parents come before children in `order`, so building in reverse sees children first
    order = []
    stack = [data]
    while stack:
        item = stack.pop()
        order.append(item)
        stack.extend(child for child in (item.get("left"), item.get("right")) if child is not None)

    built = {}

    def child_of(item, side):
        child = item.get(side)
        return built[id(child)] if child is not None else None

    for item in reversed(order):
        built[id(item)] = make_node(item["value"], child_of(item, "left"), child_of(item, "right"))
    return built[id(data)]
