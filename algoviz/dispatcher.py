# dispatcher.py
#
# Single entry point for every engine: maps algorithm ids to trackers,
# turns caller input into tracker arguments and wraps the result in a
# StepSequence.

import logging

from .config import MAX_EXPORT_TREE_HEIGHT
from .errors import InputFormatError, UnknownAlgorithm, require_int
from .search import binary_search_tracker, linear_search_tracker
from .sort import (bubble_sort_tracker, heap_sort_tracker, insertion_sort_tracker,
                   merge_sort_tracker, quicksort_tracker, radix_sort_tracker,
                   selection_sort_tracker)
from .steps import StepSequence
from .trace import array_data_state, build_trace, tree_data_state
from .tree import avl_balance_tracker, traversal_tracker
from .tree.bst import as_tree_root

logger = logging.getLogger(__name__)

# --- 1. Algorithm id -> tracker function ---
ALGORITHM_DISPATCH_TABLE = {
    # Sorting algorithms
    "bubble_sort": bubble_sort_tracker.track_bubble_sort,
    "selection_sort": selection_sort_tracker.track_selection_sort,
    "insertion_sort": insertion_sort_tracker.track_insertion_sort,
    "quick_sort": quicksort_tracker.track_quicksort,
    "merge_sort": merge_sort_tracker.track_merge_sort,
    "heap_sort": heap_sort_tracker.track_heap_sort,
    "radix_sort": radix_sort_tracker.track_radix_sort,

    # Searching algorithms
    "linear_search": linear_search_tracker.track_linear_search,
    "binary_search": binary_search_tracker.track_binary_search,

    # Tree algorithms
    "inorder": traversal_tracker.track_traversal,
    "preorder": traversal_tracker.track_traversal,
    "postorder": traversal_tracker.track_traversal,
    "avl_balance": avl_balance_tracker.track_avl_balance,
}

# --- 2. Algorithm id -> (info, pseudocode) ---
_ARRAY_MODULES = {
    "bubble_sort": bubble_sort_tracker,
    "selection_sort": selection_sort_tracker,
    "insertion_sort": insertion_sort_tracker,
    "quick_sort": quicksort_tracker,
    "merge_sort": merge_sort_tracker,
    "heap_sort": heap_sort_tracker,
    "radix_sort": radix_sort_tracker,
    "linear_search": linear_search_tracker,
    "binary_search": binary_search_tracker,
}

TREE_ALGORITHMS = ("inorder", "preorder", "postorder", "avl_balance")


def _target(parameters):
    if parameters.get("target") is None:
        raise InputFormatError("Search needs a 'target' parameter", parameters=dict(parameters))
    return require_int(parameters["target"], "target")


def _array(structure):
    if structure is None:
        return []
    return list(structure)


# --- 3. Algorithm id -> argument extractor (structure, parameters) -> args ---
PARAM_EXTRACTORS = {
    "bubble_sort": lambda d, p: (_array(d),),
    "selection_sort": lambda d, p: (_array(d),),
    "insertion_sort": lambda d, p: (_array(d),),
    "quick_sort": lambda d, p: (_array(d),),
    "merge_sort": lambda d, p: (_array(d),),
    "heap_sort": lambda d, p: (_array(d),),
    "radix_sort": lambda d, p: (_array(d),),
    "linear_search": lambda d, p: (_array(d), _target(p)),
    "binary_search": lambda d, p: (_array(d), _target(p)),
    "inorder": lambda d, p: (d, "inorder"),
    "preorder": lambda d, p: (d, "preorder"),
    "postorder": lambda d, p: (d, "postorder"),
    "avl_balance": lambda d, p: _avl_args(d, p),
}


def _avl_args(structure, parameters):
    if parameters.get("max_iterations") is None:
        return (structure,)
    return structure, parameters["max_iterations"]


def list_algorithms():
    return list(ALGORITHM_DISPATCH_TABLE)


def algorithm_info(algorithm_id):
    if algorithm_id in _ARRAY_MODULES:
        return dict(_ARRAY_MODULES[algorithm_id].ALGORITHM_INFO)
    if algorithm_id == "avl_balance":
        return dict(avl_balance_tracker.ALGORITHM_INFO)
    if algorithm_id in traversal_tracker.ALGORITHM_INFO:
        return dict(traversal_tracker.ALGORITHM_INFO[algorithm_id])
    raise UnknownAlgorithm(f"Algorithm with ID '{algorithm_id}' not found in dispatch table.",
                           algorithm_id=algorithm_id, known=list_algorithms())


def pseudocode_for(algorithm_id):
    if algorithm_id in _ARRAY_MODULES:
        return list(_ARRAY_MODULES[algorithm_id].PSEUDOCODE)
    if algorithm_id == "avl_balance":
        return list(avl_balance_tracker.PSEUDOCODE)
    return list(traversal_tracker.PSEUDOCODE[algorithm_id])


def run(initial_structure, algorithm_id, parameters=None):
    """
    Start an engine run and return its lazy StepSequence.

    Array algorithms take any iterable of integers. Tree algorithms take a
    BinarySearchTree, a TreeNode, or an iterable of values inserted in order
    as a plain (unbalanced) BST. Search algorithms need parameters["target"];
    avl_balance accepts parameters["max_iterations"].

    An unknown id or a missing target raises here. Input values are checked
    when the sequence produces its first step, so a bad value reaches a
    StepPlayer's on_error like any other engine error.
    """
    tracker_function = ALGORITHM_DISPATCH_TABLE.get(algorithm_id)
    if tracker_function is None:
        raise UnknownAlgorithm(f"Algorithm with ID '{algorithm_id}' not found in dispatch table.",
                               algorithm_id=algorithm_id, known=list_algorithms())

    args = PARAM_EXTRACTORS[algorithm_id](initial_structure, parameters or {})
    logger.info("Dispatcher: starting %s", algorithm_id)
    return StepSequence(tracker_function(*args), algorithm_id)


def generate_trace(initial_structure, algorithm_id, parameters=None):
    """Run an algorithm to completion and return its full trace object."""
    info = algorithm_info(algorithm_id)
    # Materialize the input once so one-shot iterables feed both the frame and the run
    if algorithm_id in TREE_ALGORITHMS:
        initial_structure = as_tree_root(initial_structure)
        tree_height = initial_structure.height if initial_structure else 0
        if tree_height > MAX_EXPORT_TREE_HEIGHT:
            raise InputFormatError(
                f"Tree of height {tree_height} is too deep to export (limit {MAX_EXPORT_TREE_HEIGHT})",
                height=tree_height, limit=MAX_EXPORT_TREE_HEIGHT,
            )
        data_state = tree_data_state(initial_structure)
    else:
        initial_structure = _array(initial_structure)
        data_state = array_data_state(initial_structure)

    sequence = run(initial_structure, algorithm_id, parameters)
    steps = list(sequence)
    logger.info("Tracker generated %d steps for %s", len(steps), algorithm_id)
    return build_trace(algorithm_id, info, pseudocode_for(algorithm_id),
                       data_state, steps, sequence.result)


def dispatch_and_generate(intent_json: dict):
    """
    Build a trace from an intent dict:
    {"algorithm_id": ..., "data_input": ..., "parameters": {...}}

    For searches, `data_input` may also be {"array": [...], "target": t}.
    """
    algorithm_id = intent_json.get("algorithm_id")
    data_input = intent_json.get("data_input")
    parameters = dict(intent_json.get("parameters") or {})

    if algorithm_id not in ALGORITHM_DISPATCH_TABLE:
        raise UnknownAlgorithm(f"Algorithm with ID '{algorithm_id}' not found in dispatch table.",
                               algorithm_id=algorithm_id, known=list_algorithms())
    if data_input is None:
        raise InputFormatError("Missing 'data_input' in intent JSON.", algorithm_id=algorithm_id)

    if isinstance(data_input, dict):
        if "target" in data_input:
            parameters.setdefault("target", data_input["target"])
        data_input = data_input.get("array", data_input.get("values"))

    logger.info("Dispatcher: received request with algorithm ID '%s'", algorithm_id)
    return generate_trace(data_input, algorithm_id, parameters)
