from ..errors import require_ints
from ..steps import PLACE, SHIFT, Step

ALGORITHM_INFO = {
    "name": "Insertion Sort",
    "family": "Sorting"
}

PSEUDOCODE = [
    "function InsertionSort(array):",                 # 1
    "  for i from 1 to n-1:",                         # 2
    "    key = array[i]",                             # 3
    "    j = i - 1",                                  # 4
    "    while j >= 0 and array[j] > key:",           # 5
    "      array[j+1] = array[j]",                    # 6
    "      j = j - 1",                                # 7
    "    array[j+1] = key",                           # 8
    "  return array"                                  # 9
]


def track_insertion_sort(initial_array):
    """
    Insertion sort as a stream of steps.

    Each leftward shift of the key is one shift step over (j, j+1); the key
    is then written with one place step. Only strictly larger elements are
    shifted, so equal keys keep their input order.
    """
    arr = require_ints(initial_array)
    n = len(arr)
    if n < 2:
        return tuple(arr)

    for i in range(1, n):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            yield Step(SHIFT, (j, j + 1), f"Shift {arr[j]} right, it is larger than key {key}",
                       tuple(arr), line=6, meta={"i": i, "j": j, "key": key})
            j -= 1
        arr[j + 1] = key
        yield Step(PLACE, (j + 1,), f"Insert key {key} at index {j + 1}",
                   tuple(arr), line=8, meta={"i": i, "j": j, "key": key})

    return tuple(arr)
