from .binary_search_tracker import track_binary_search
from .linear_search_tracker import track_linear_search
from .outcome import SearchOutcome

__all__ = ["track_linear_search", "track_binary_search", "SearchOutcome"]
