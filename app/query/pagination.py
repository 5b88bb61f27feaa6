import math
from typing import Sequence

from app.normalizers.types import CanonicalRecord
from .types import Page


def total_pages(count: int, page_size: int) -> int:
    """ceil(count / page_size), but never less than 1 (an empty list still has one page)."""
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(page, pages))


def paginate(records: Sequence[CanonicalRecord], page: int = 1, page_size: int = 5) -> Page:
    """Slice out one page. Out-of-range page numbers are clamped, not rejected."""
    pages = total_pages(len(records), page_size)
    current = clamp_page(page, pages)
    start = (current - 1) * page_size
    return Page(
        items=list(records[start:start + page_size]),
        page=current,
        total_pages=pages,
        total=len(records),
    )
