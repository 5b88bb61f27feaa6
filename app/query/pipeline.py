from typing import Iterable, Optional

from app.normalizers.types import CanonicalRecord
from .filters import filter_records
from .pagination import paginate
from .sorting import sort_records
from .state import QueryState
from .types import Page

DEFAULT_PAGE_SIZE = 5


def run_query(
    records: Iterable[CanonicalRecord],
    state: Optional[QueryState] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """Filter -> sort -> paginate, always in that order."""
    state = state or QueryState()
    matched = filter_records(records, state.criteria)
    ordered = sort_records(matched, state.sort_column, state.sort_direction)
    return paginate(ordered, state.page, page_size)
