from ..errors import require_ints
from ..steps import COMPARE, SWAP, Step

ALGORITHM_INFO = {
    "name": "Bubble Sort",
    "family": "Sorting"
}

# Line numbers start from 1
PSEUDOCODE = [
    "function BubbleSort(array):",              # 1
    "  n = length(array)",                      # 2
    "  for i from 0 to n-2:",                   # 3
    "    for j from 0 to n-i-2:",               # 4
    "      if array[j] > array[j+1]:",          # 5
    "        swap(array[j], array[j+1])",       # 6
    "  return array"                            # 7
]


def track_bubble_sort(initial_array):
    """
    Bubble sort as a stream of steps.

    Emits a compare step before every adjacent comparison and a swap step
    only when the left element is larger. Returns the sorted values as a tuple.
    """
    arr = require_ints(initial_array)
    n = len(arr)
    if n < 2:
        return tuple(arr)

    for i in range(n - 1):
        for j in range(0, n - i - 1):
            meta = {"i": i, "j": j}

            # >> Step: compare j and j+1 <<
            yield Step(COMPARE, (j, j + 1), f"Compare {arr[j]} and {arr[j + 1]}",
                       tuple(arr), line=5, meta=meta)

            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                # >> Step: swap <<
                yield Step(SWAP, (j, j + 1), f"Swap {arr[j + 1]} and {arr[j]}",
                           tuple(arr), line=6, meta=meta)

    return tuple(arr)
