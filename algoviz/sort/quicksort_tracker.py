from ..errors import require_ints
from ..steps import COMPARE, SWAP, Step

ALGORITHM_INFO = {
    "name": "Quick Sort (Lomuto Partition)",
    "family": "Sorting"
}

PSEUDOCODE = [
    "function quickSort(array, low, high):",       # 1
    "  if low < high:",                            # 2
    "    pi = partition(array, low, high)",        # 3
    "    quickSort(array, low, pi - 1)",           # 4
    "    quickSort(array, pi + 1, high)",          # 5
    "",                                            # 6
    "function partition(array, low, high):",       # 7
    "  pivot = array[high]",                       # 8
    "  i = low - 1",                               # 9
    "  for j from low to high - 1:",               # 10
    "    if array[j] < pivot:",                    # 11
    "      i = i + 1",                             # 12
    "      swap(array[i], array[j])",              # 13
    "  swap(array[i+1], array[high])",             # 14
    "  return i + 1"                               # 15
]


def _partition(arr, low, high):
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        meta = {"low": low, "high": high, "pivot": pivot, "i": i, "j": j}
        yield Step(COMPARE, (j, high), f"Compare {arr[j]} with pivot {pivot}",
                   tuple(arr), line=11, meta=meta)
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
            yield Step(SWAP, (i, j), f"{arr[i]} < pivot {pivot}: swap indices {i} and {j}",
                       tuple(arr), line=13, meta={**meta, "i": i})

    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    yield Step(SWAP, (i + 1, high), f"Place pivot {pivot} at index {i + 1}",
               tuple(arr), line=14,
               meta={"low": low, "high": high, "pivot": pivot, "i": i, "pivot_swap": True})
    return i + 1


def track_quicksort(initial_array):
    """
    Quick sort with Lomuto partitioning (pivot = last element of the range).

    Recursion is simulated with an explicit stack of (low, high) ranges; the
    left partition is always processed before the right one.
    """
    arr = require_ints(initial_array)
    n = len(arr)
    if n < 2:
        return tuple(arr)

    call_stack = [(0, n - 1)]
    while call_stack:
        low, high = call_stack.pop()
        if low >= high:
            continue
        pi = yield from _partition(arr, low, high)
        # Pushed in reverse so the left partition runs first
        call_stack.append((pi + 1, high))
        call_stack.append((low, pi - 1))

    return tuple(arr)
