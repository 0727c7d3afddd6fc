"""Schema definitions for Native XML Tools."""

from .filter_result import FilterResult
from .options import FilterOptions
from .side_data import SideData

__all__ = [
    "FilterOptions",
    "FilterResult",
    "SideData",
]
