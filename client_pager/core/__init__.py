"""
Core domain layer: records, view state, the sort/filter/page-range
algorithms, and the paginated view interface
"""

from .base_view import PaginatedView
from .page_info import PageInfo
from .page_range import compute_page_range
from .sorter import sort_records
from .state import SortDirection, ViewState
from .text_filter import filter_records

__all__ = [
    "PaginatedView",
    "PageInfo",
    "ViewState",
    "SortDirection",
    "compute_page_range",
    "sort_records",
    "filter_records",
]
