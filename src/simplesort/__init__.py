"""simplesort re-sorts delimited text lists for template expansion."""

from .config import SimplesortConfig
from .options import OrderMode, SortOptions, UnrecognizedOptionError, parse_options
from .sorter import ListSorter, SortResult, render_sort

__all__ = [
    "ListSorter",
    "OrderMode",
    "SimplesortConfig",
    "SortOptions",
    "SortResult",
    "UnrecognizedOptionError",
    "parse_options",
    "render_sort",
]
