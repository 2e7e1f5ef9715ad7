from ..errors import require_int, require_ints
from ..steps import FOUND, NOT_FOUND, VISIT, Step
from .outcome import SearchOutcome

ALGORITHM_INFO = {
    "name": "Binary Search",
    "family": "Searching"
}

PSEUDOCODE = [
    "function binarySearch(array, target):",   # 1
    "  low = 0; high = n - 1",                 # 2
    "  while low <= high:",                    # 3
    "    mid = floor((low + high) / 2)",       # 4
    "    if array[mid] == target: return mid", # 5
    "    if array[mid] < target: low = mid + 1",   # 6
    "    else: high = mid - 1",                # 7
    "  return -1"                              # 8
]


def track_binary_search(initial_array, target):
    """
    Binary search as a stream of probe steps.

    The input is expected to be sorted ascending; this is not checked, and
    an unsorted input gives an unspecified (but terminating) answer.
    """
    arr = tuple(require_ints(initial_array))
    require_int(target, "target")

    low, high = 0, len(arr) - 1
    probes = 0
    while low <= high:
        mid = (low + high) // 2
        probes += 1
        value = arr[mid]
        meta = {"low": low, "high": high, "mid": mid, "target": target}

        if value == target:
            yield Step(VISIT, (mid,), f"Check middle index {mid}: {value} equals {target}",
                       arr, line=5, meta=meta)
            yield Step(FOUND, (mid,), f"Found {target} at index {mid}!", arr, line=5, meta=meta)
            return SearchOutcome(mid, probes)

        if value < target:
            yield Step(VISIT, (mid,), f"Check middle index {mid}: {value} < {target}, search the right half",
                       arr, line=6, meta=meta)
            low = mid + 1
        else:
            yield Step(VISIT, (mid,), f"Check middle index {mid}: {value} > {target}, search the left half",
                       arr, line=7, meta=meta)
            high = mid - 1

    yield Step(NOT_FOUND, (), f"{target} not found in array", arr, line=8,
               meta={"low": low, "high": high, "target": target})
    return SearchOutcome(None, probes)
