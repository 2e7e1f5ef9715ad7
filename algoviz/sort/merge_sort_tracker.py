from ..errors import require_ints
from ..steps import PLACE, Step

ALGORITHM_INFO = {
    "name": "Merge Sort",
    "family": "Sorting"
}

PSEUDOCODE = [
    "function mergeSort(array, l, r):",              # 1
    "  if l < r:",                                   # 2
    "    m = floor((l + r) / 2)",                    # 3
    "    mergeSort(array, l, m)",                    # 4
    "    mergeSort(array, m + 1, r)",                # 5
    "    merge(array, l, m, r)",                     # 6
    "",                                              # 7
    "function merge(array, l, m, r):",               # 8
    "  L = array[l..m]; R = array[m+1..r]",          # 9
    "  i = 0; j = 0; k = l",                         # 10
    "  while i < len(L) and j < len(R):",            # 11
    "    if L[i] <= R[j]: array[k++] = L[i++]",      # 12
    "    else: array[k++] = R[j++]",                 # 13
    "  copy remaining L[i..] to array[k..]",         # 14
    "  copy remaining R[j..] to array[k..]",         # 15
]


def track_merge_sort(initial_array):
    """
    Top-down merge sort as a stream of steps.

    One place step per element written during a merge. Ties take the left
    element, so the sort is stable.
    """
    arr = require_ints(initial_array)
    n = len(arr)
    if n < 2:
        return tuple(arr)

    # Explicit stack simulating recursion: (l, r, stage), stage is 'split' or 'merge'
    call_stack = [(0, n - 1, 'split')]

    while call_stack:
        l, r, stage = call_stack.pop()
        if l >= r:
            continue
        m = (l + r) // 2

        if stage == 'split':
            # Pushed in reverse: merge runs after both halves
            call_stack.append((l, r, 'merge'))
            call_stack.append((m + 1, r, 'split'))
            call_stack.append((l, m, 'split'))
            continue

        L = arr[l:m + 1]
        R = arr[m + 1:r + 1]
        i, j, k = 0, 0, l
        while i < len(L) or j < len(R):
            meta = {"l": l, "m": m, "r": r, "i": i, "j": j, "k": k}
            if j >= len(R) or (i < len(L) and L[i] <= R[j]):
                arr[k] = L[i]
                line = 12 if j < len(R) else 14
                narration = (f"Place {L[i]} from the left half at index {k}" if j >= len(R)
                             else f"{L[i]} <= {R[j]}: place {L[i]} from the left half at index {k}")
                meta["from"] = "left"
                i += 1
            else:
                arr[k] = R[j]
                line = 13 if i < len(L) else 15
                narration = (f"Place {R[j]} from the right half at index {k}" if i >= len(L)
                             else f"{R[j]} < {L[i]}: place {R[j]} from the right half at index {k}")
                meta["from"] = "right"
                j += 1
            yield Step(PLACE, (k,), narration, tuple(arr), line=line, meta=meta)
            k += 1

    return tuple(arr)
