from ..errors import require_int, require_ints
from ..steps import FOUND, NOT_FOUND, VISIT, Step
from .outcome import SearchOutcome

ALGORITHM_INFO = {
    "name": "Linear Search",
    "family": "Searching"
}

PSEUDOCODE = [
    "function linearSearch(array, target):",   # 1
    "  for i from 0 to n-1:",                  # 2
    "    if array[i] == target:",              # 3
    "      return i",                          # 4
    "  return -1"                              # 5
]


def track_linear_search(initial_array, target):
    """Probe indices left to right, one visit step per probe."""
    arr = tuple(require_ints(initial_array))
    require_int(target, "target")

    for i, value in enumerate(arr):
        yield Step(VISIT, (i,), f"Check index {i}: {value} == {target}?", arr,
                   line=3, meta={"i": i, "target": target})
        if value == target:
            yield Step(FOUND, (i,), f"Found {target} at index {i}!", arr,
                       line=4, meta={"i": i, "target": target})
            return SearchOutcome(i, i + 1)

    yield Step(NOT_FOUND, (), f"{target} not found in array", arr,
               line=5, meta={"target": target})
    return SearchOutcome(None, len(arr))
