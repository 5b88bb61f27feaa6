# app/query/types.py
from dataclasses import dataclass, field
from typing import List, Literal, Optional

from app.normalizers.types import CanonicalRecord

StockStatus   = Literal["All", "in-stock", "out-of-stock"]
SortColumn    = Literal["name", "price", "glitchScore"]
SortDirection = Literal["asc", "desc"]

ALL = "All"  # sentinel that disables the category / stock filters


@dataclass(frozen=True)
class FilterCriteria:
    search: Optional[str] = None        # name contains, case-insensitive
    category: Optional[str] = None      # exact match; "All" disables
    stock_status: StockStatus = ALL
    glitch_only: bool = False


@dataclass(frozen=True)
class Page:
    items: List[CanonicalRecord] = field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    total: int = 0

    def to_dict(self) -> dict:
        return {
            "items": [r.to_dict() for r in self.items],
            "page": self.page,
            "total_pages": self.total_pages,
            "total": self.total,
        }
