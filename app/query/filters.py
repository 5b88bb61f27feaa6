from typing import Iterable, List, Optional

from app.normalizers.types import CanonicalRecord
from .types import ALL, FilterCriteria


def filter_records(
    records: Iterable[CanonicalRecord], criteria: Optional[FilterCriteria] = None
) -> List[CanonicalRecord]:
    """
    AND of every criterion that is set. Unset criteria are no-ops,
    and an empty result is a normal outcome.
    """
    c = criteria or FilterCriteria()
    needle = c.search.lower() if c.search else None
    out: List[CanonicalRecord] = []
    for r in records:
        if needle and needle not in r.name.lower():
            continue
        if c.category and c.category != ALL and r.category != c.category:
            continue
        if c.glitch_only and r.glitch_score == 0:
            continue
        if c.stock_status == "in-stock" and r.stock <= 0:
            continue
        if c.stock_status == "out-of-stock" and r.stock > 0:
            continue
        out.append(r)
    return out


def category_options(records: Iterable[CanonicalRecord]) -> List[str]:
    """Values for a category picker: "All" first, then categories in first-seen order."""
    seen = dict.fromkeys(r.category for r in records)
    seen.pop(ALL, None)
    return [ALL, *seen]
