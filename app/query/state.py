from dataclasses import dataclass, replace
from typing import Optional

from .types import ALL, FilterCriteria, SortColumn, SortDirection, StockStatus

# Changing any of these invalidates the current page number.
_RESETTING_FIELDS = ("search", "category", "stock_status", "glitch_only", "sort_column", "sort_direction")


@dataclass(frozen=True)
class QueryState:
    """
    Everything one listing view needs: filters, sort and the current page.
    Immutable; every transition returns a new state.
    """
    search: Optional[str] = None
    category: str = ALL
    stock_status: StockStatus = ALL
    glitch_only: bool = False
    sort_column: SortColumn = "name"
    sort_direction: SortDirection = "asc"
    page: int = 1

    @property
    def criteria(self) -> FilterCriteria:
        return FilterCriteria(
            search=self.search,
            category=self.category,
            stock_status=self.stock_status,
            glitch_only=self.glitch_only,
        )

    def with_changes(self, **changes) -> "QueryState":
        """
        Apply filter/sort/page changes. If any filter or sort value actually
        changes, the page goes back to 1 (an explicit `page` is ignored then,
        a stale page number would point into a different result set).
        """
        resets = any(k in _RESETTING_FIELDS and getattr(self, k) != v for k, v in changes.items())
        new = replace(self, **changes)
        return replace(new, page=1) if resets else new

    def toggle_sort(self, column: SortColumn) -> "QueryState":
        """Same column flips direction; a new column starts ascending."""
        if column == self.sort_column:
            return self.with_changes(sort_direction="desc" if self.sort_direction == "asc" else "asc")
        return self.with_changes(sort_column=column, sort_direction="asc")

    def next_page(self, total_pages: int) -> "QueryState":
        return replace(self, page=min(self.page + 1, max(total_pages, 1)))

    def prev_page(self) -> "QueryState":
        return replace(self, page=max(self.page - 1, 1))
