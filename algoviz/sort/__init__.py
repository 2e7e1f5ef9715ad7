from .bubble_sort_tracker import track_bubble_sort
from .heap_sort_tracker import track_heap_sort
from .insertion_sort_tracker import track_insertion_sort
from .merge_sort_tracker import track_merge_sort
from .quicksort_tracker import track_quicksort
from .radix_sort_tracker import track_radix_sort
from .selection_sort_tracker import track_selection_sort

__all__ = [
    "track_bubble_sort",
    "track_selection_sort",
    "track_insertion_sort",
    "track_quicksort",
    "track_merge_sort",
    "track_heap_sort",
    "track_radix_sort",
]
