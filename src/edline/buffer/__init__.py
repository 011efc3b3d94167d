"""Line storage for the editor."""

from .document import LineStore
from .validation import ensure_index_in_bounds, ensure_range_in_bounds

__all__ = [
    "LineStore",
    "ensure_index_in_bounds",
    "ensure_range_in_bounds",
]
