from ..errors import require_ints
from ..steps import COMPARE, SWAP, Step

ALGORITHM_INFO = {
    "name": "Selection Sort",
    "family": "Sorting"
}

PSEUDOCODE = [
    "function SelectionSort(array):",          # 1
    "  n = length(array)",                     # 2
    "  for i from 0 to n-2:",                  # 3
    "    min_idx = i",                         # 4
    "    for j from i+1 to n-1:",              # 5
    "      if array[j] < array[min_idx]:",     # 6
    "        min_idx = j",                     # 7
    "    if min_idx != i:",                    # 8
    "      swap(array[i], array[min_idx])",    # 9
    "  return array"                           # 10
]


def track_selection_sort(initial_array):
    """
    Selection sort as a stream of steps: one compare step per candidate
    against the running minimum, and at most one swap per outer pass.
    """
    arr = require_ints(initial_array)
    n = len(arr)
    if n < 2:
        return tuple(arr)

    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            yield Step(COMPARE, (min_idx, j), f"Compare {arr[j]} with current minimum {arr[min_idx]}",
                       tuple(arr), line=6, meta={"i": i, "j": j, "min_idx": min_idx})
            if arr[j] < arr[min_idx]:
                min_idx = j

        # Skip the swap when the minimum is already in place
        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield Step(SWAP, (i, min_idx), f"Move minimum {arr[i]} to index {i}",
                       tuple(arr), line=9, meta={"i": i, "min_idx": min_idx})

    return tuple(arr)
