"""Step-by-step AVL rebalancing of an arbitrary (possibly unbalanced) BST.

Each round scans the tree bottom-up for the first node whose balance factor
is outside [-1, 1], classifies it into LL / LR / RR / RL, rotates, and
splices the new subtree back in place. Rounds repeat until no imbalanced
node is left or the iteration cap is hit.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import AVL_MAX_ITERATIONS
from ..errors import IterationCapExceeded, require_int
from ..steps import COMPLETE, DETECT, ROTATE, ROTATED, Step
from .bst import as_tree_root
from .node import (TreeNode, balance_factor, make_node, rebuild_path, rotate_left,
                   rotate_right)

logger = logging.getLogger(__name__)

ALGORITHM_INFO = {
    "name": "AVL Balancing",
    "family": "Tree"
}

PSEUDOCODE = [
    "function balanceTree(root):",                                  # 1
    "  repeat:",                                                    # 2
    "    node = first node bottom-up with |bf(node)| > 1",          # 3
    "    if node is null: return root",                             # 4
    "    if bf(node) > 1 and bf(node.left) >= 0: rotateRight(node)",        # 5
    "    if bf(node) > 1 and bf(node.left) < 0:",                   # 6
    "      node.left = rotateLeft(node.left); rotateRight(node)",   # 7
    "    if bf(node) < -1 and bf(node.right) <= 0: rotateLeft(node)",       # 8
    "    if bf(node) < -1 and bf(node.right) > 0:",                 # 9
    "      node.right = rotateRight(node.right); rotateLeft(node)", # 10
    "    splice rotated subtree back into root",                    # 11
]

_CASE_LINES = {"LL": 5, "LR": 7, "RR": 8, "RL": 10}


@dataclass(frozen=True)
class BalanceOutcome:
    root: Optional[TreeNode]
    rotations: int
    single_rotations: int

    def to_dict(self):
        return {
            "rotations": self.rotations,
            "single_rotations": self.single_rotations,
            "tree": self.root.to_dict() if self.root else None,
        }


def find_imbalanced(node, path=()):
    """
    Return (node, path) for the first node with |bf| > 1, children checked
    before the node itself. `path` is a tuple of 'L'/'R' moves from the root.
    """
    # Explicit post-order stack; entries are (node, parent_entry, move, expanded)
    stack = [(node, None, None, False)]
    while stack:
        entry = stack.pop()
        current, _, _, expanded = entry
        if current is None:
            continue
        if not expanded:
            visited = (current, entry[1], entry[2], True)
            stack.append(visited)
            stack.append((current.right, visited, "R", False))
            stack.append((current.left, visited, "L", False))
            continue
        if abs(balance_factor(current)) > 1:
            moves = []
            while entry[1] is not None:
                moves.append(entry[2])
                entry = entry[1]
            return current, tuple(path) + tuple(reversed(moves))
    return None


def balance_node(node):
    """
    Rebalance a single imbalanced node.

    Returns (case, new_subtree_root, primitive_rotation_count, narration).
    """
    bf = balance_factor(node)
    if bf > 1 and balance_factor(node.left) >= 0:
        return ("LL", rotate_right(node), 1,
                f"Left-Left case: Performing right rotation at node {node.value}")
    if bf > 1:
        rotated_left = rotate_left(node.left)
        return ("LR", rotate_right(make_node(node.value, rotated_left, node.right)), 2,
                f"Left-Right case: Left rotation at {node.left.value}, then right rotation at {node.value}")
    if bf < -1 and balance_factor(node.right) <= 0:
        return ("RR", rotate_left(node), 1,
                f"Right-Right case: Performing left rotation at node {node.value}")
    rotated_right = rotate_right(node.right)
    return ("RL", rotate_left(make_node(node.value, node.left, rotated_right)), 2,
            f"Right-Left case: Right rotation at {node.right.value}, then left rotation at {node.value}")


def splice(root, path, subtree):
    """Replace the node at `path` with `subtree`, recomputing heights on the way up."""
    ancestors = []
    node = root
    for move in path:
        ancestors.append((node, move))
        node = node.left if move == "L" else node.right
    return rebuild_path(ancestors, subtree)


def track_avl_balance(initial_tree, max_iterations=AVL_MAX_ITERATIONS):
    """
    Balance a tree step by step.

    Per rotation: a detect step (imbalanced node found), a rotate step (case
    and narration, tree still as before) and a rotated step (tree after the
    splice). Ends with one complete step. Raises IterationCapExceeded if the
    tree is still imbalanced after `max_iterations` rotations.
    """
    require_int(max_iterations, "max_iterations")
    root = as_tree_root(initial_tree)
    rotations = 0
    single_rotations = 0

    while True:
        found = find_imbalanced(root)
        if found is None:
            break
        if rotations >= max_iterations:
            raise IterationCapExceeded(
                f"AVL balancing did not converge within {max_iterations} iterations",
                max_iterations=max_iterations, rotations=rotations,
            )

        node, path = found
        bf = balance_factor(node)
        meta = {"balance_factor": bf, "depth": len(path), "round": rotations + 1}

        # >> Step: imbalanced node detected <<
        yield Step(DETECT, (node.value,), f"Node {node.value} is imbalanced (balance factor {bf})",
                   root, line=3, meta=meta)

        case, subtree, primitive, narration = balance_node(node)
        # >> Step: rotation chosen <<
        yield Step(ROTATE, (node.value,), narration, root, line=_CASE_LINES[case],
                   meta={**meta, "case": case, "pivot": node.value})

        root = splice(root, path, subtree)
        rotations += 1
        single_rotations += primitive
        logger.debug("Applied %s rotation at %s, new subtree root %s", case, node.value, subtree.value)

        # >> Step: rotation applied <<
        yield Step(ROTATED, (subtree.value,),
                   f"{case} rotation complete: {subtree.value} is the new subtree root", root,
                   line=11, meta={**meta, "case": case, "pivot": node.value, "new_root": subtree.value})

    yield Step(COMPLETE, (), "AVL tree is now balanced", root, line=4,
               meta={"rotations": rotations})
    return BalanceOutcome(root, rotations, single_rotations)
