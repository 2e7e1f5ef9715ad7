from ..errors import require_ints
from ..steps import PLACE, Step

ALGORITHM_INFO = {
    "name": "Radix Sort (LSD)",
    "family": "Sorting"
}

PSEUDOCODE = [
    "function radixSort(array):",                          # 1
    "  max = maximum(array)",                              # 2
    "  exp = 1",                                           # 3
    "  while max / exp >= 1:",                             # 4
    "    countingSortByDigit(array, exp)",                 # 5
    "    exp = exp * 10",                                  # 6
    "",                                                    # 7
    "function countingSortByDigit(array, exp):",           # 8
    "  count digits (array[i] / exp) % 10",                # 9
    "  prefix-sum the counts",                             # 10
    "  for i from n-1 down to 0: output[--count[d]] = array[i]",  # 11
    "  copy output back into array",                       # 12
]


def track_radix_sort(initial_array):
    """
    LSD radix sort: one stable counting sort per decimal digit, least
    significant first. Emits one place step per element written back.

    Keys are offset by the minimum when negatives are present, so digits are
    always taken from non-negative numbers.
    """
    arr = require_ints(initial_array)
    n = len(arr)
    if n < 2:
        return tuple(arr)

    offset = min(min(arr), 0)
    max_key = max(arr) - offset
    exp = 1
    digit_pass = 0

    while max_key // exp > 0:
        digit_pass += 1
        count = [0] * 10
        for value in arr:
            count[((value - offset) // exp) % 10] += 1
        for d in range(1, 10):
            count[d] += count[d - 1]

        output = [0] * n
        for value in reversed(arr):
            d = ((value - offset) // exp) % 10
            count[d] -= 1
            output[count[d]] = value

        for k, value in enumerate(output):
            arr[k] = value
            digit = ((value - offset) // exp) % 10
            yield Step(PLACE, (k,), f"Pass {digit_pass}: place {value} (digit {digit}) at index {k}",
                       tuple(arr), line=12, meta={"exp": exp, "digit": digit, "k": k})
        exp *= 10

    return tuple(arr)
