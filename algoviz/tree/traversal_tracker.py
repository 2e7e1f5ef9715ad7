from ..errors import InputFormatError
from ..steps import VISIT, Step
from .bst import as_tree_root

ALGORITHM_INFO = {
    "inorder": {"name": "Inorder Traversal", "family": "Tree"},
    "preorder": {"name": "Preorder Traversal", "family": "Tree"},
    "postorder": {"name": "Postorder Traversal", "family": "Tree"},
}

PSEUDOCODE = {
    "inorder": [
        "function inorder(node):",      # 1
        "  if node is null: return",    # 2
        "  inorder(node.left)",         # 3
        "  visit(node)",                # 4
        "  inorder(node.right)",        # 5
    ],
    "preorder": [
        "function preorder(node):",
        "  if node is null: return",
        "  visit(node)",
        "  preorder(node.left)",
        "  preorder(node.right)",
    ],
    "postorder": [
        "function postorder(node):",
        "  if node is null: return",
        "  postorder(node.left)",
        "  postorder(node.right)",
        "  visit(node)",
    ],
}

# Pseudocode line of the visit() call per order
_VISIT_LINE = {"inorder": 4, "preorder": 3, "postorder": 5}

TRAVERSAL_ORDERS = tuple(_VISIT_LINE)


def track_traversal(root, order="inorder"):
    """
    Depth-first traversal as a stream of visit steps, one per node.

    `root` may be a TreeNode, a BinarySearchTree or an iterable of values.
    Pure function of the (immutable) tree, so it can be run again on the
    same root. Returns the visit order as a tuple of values.
    """
    if order not in _VISIT_LINE:
        raise InputFormatError(f"Unknown traversal order {order!r}", order=order,
                               expected=list(TRAVERSAL_ORDERS))
    root = as_tree_root(root)
    line = _VISIT_LINE[order]
    visited = []

    # Explicit stack of (node, ready_to_visit); pushed in reverse of the visit order
    stack = [(root, False)]
    while stack:
        node, ready = stack.pop()
        if node is None:
            continue
        if ready:
            visited.append(node.value)
            yield Step(VISIT, (node.value,), f"Visit node {node.value}", root, line=line,
                       meta={"order": order, "position": len(visited) - 1})
            continue
        if order == "preorder":
            stack.extend([(node.right, False), (node.left, False), (node, True)])
        elif order == "inorder":
            stack.extend([(node.right, False), (node, True), (node.left, False)])
        else:
            stack.extend([(node, True), (node.right, False), (node.left, False)])

    return tuple(visited)
