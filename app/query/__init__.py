from .filters import category_options, filter_records
from .pagination import paginate, total_pages
from .pipeline import DEFAULT_PAGE_SIZE, run_query
from .sorting import sort_records
from .state import QueryState
from .types import ALL, FilterCriteria, Page, SortColumn, SortDirection, StockStatus

__all__ = [
    "category_options",
    "filter_records",
    "paginate",
    "total_pages",
    "DEFAULT_PAGE_SIZE",
    "run_query",
    "sort_records",
    "QueryState",
    "ALL",
    "FilterCriteria",
    "Page",
    "SortColumn",
    "SortDirection",
    "StockStatus",
]
