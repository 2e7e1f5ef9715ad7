from ..errors import require_ints
from ..steps import COMPARE, SWAP, Step

ALGORITHM_INFO = {
    "name": "Heap Sort",
    "family": "Sorting"
}

PSEUDOCODE = [
    "function heapSort(array):",                   # 1
    "  n = length(array)",                         # 2
    "  // Build max heap",                         # 3
    "  for i from n // 2 - 1 down to 0:",          # 4
    "    heapify(array, n, i)",                    # 5
    "  // Heap extraction",                        # 6
    "  for i from n - 1 down to 1:",               # 7
    "    swap(array[0], array[i])",                # 8
    "    heapify(array, i, 0)",                    # 9
    "",                                            # 10
    "function heapify(array, n, i):",              # 11
    "  largest = i",                               # 12
    "  l = 2*i + 1; r = 2*i + 2",                  # 13
    "  if l < n and array[l] > array[largest]:",   # 14
    "    largest = l",                             # 15
    "  if r < n and array[r] > array[largest]:",   # 16
    "    largest = r",                             # 17
    "  if largest != i:",                          # 18
    "    swap(array[i], array[largest])",          # 19
    "    heapify(array, n, largest)",              # 20
]


def _heapify(arr, heap_size, i):
    # Iterative sift-down
    while True:
        largest = i
        l = 2 * i + 1
        r = 2 * i + 2
        for child, line in ((l, 14), (r, 16)):
            if child < heap_size:
                yield Step(COMPARE, (largest, child), f"Compare {arr[child]} with {arr[largest]}",
                           tuple(arr), line=line,
                           meta={"heap_size": heap_size, "i": i, "largest": largest, "child": child})
                if arr[child] > arr[largest]:
                    largest = child
        if largest == i:
            return
        arr[i], arr[largest] = arr[largest], arr[i]
        yield Step(SWAP, (i, largest), f"Sift {arr[largest]} down: swap indices {i} and {largest}",
                   tuple(arr), line=19, meta={"heap_size": heap_size, "i": i, "largest": largest})
        i = largest


def track_heap_sort(initial_array):
    """
    Heap sort: build a max-heap bottom-up, then repeatedly swap the root to
    the end of the heap and sift the new root down over the reduced heap.
    """
    arr = require_ints(initial_array)
    n = len(arr)
    if n < 2:
        return tuple(arr)

    # --- Phase 1: build max heap ---
    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(arr, n, i)

    # --- Phase 2: heap extraction ---
    for i in range(n - 1, 0, -1):
        arr[0], arr[i] = arr[i], arr[0]
        yield Step(SWAP, (0, i), f"Move max {arr[i]} to its final index {i}",
                   tuple(arr), line=8, meta={"heap_size": i + 1, "i": i})
        yield from _heapify(arr, i, 0)

    return tuple(arr)
