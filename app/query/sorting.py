import locale
import unicodedata
from typing import Any, Callable, Dict, Iterable, List, Tuple

from app.normalizers.types import CanonicalRecord
from .types import SortColumn, SortDirection


def _collate(s: str) -> Tuple[str, str]:
    """
    Collation key close to what a locale-aware compare gives: letters first,
    ignoring case and accents, run through the active LC_COLLATE; ties then
    break lowercase-before-uppercase and plain-before-accented.
    """
    s = s.replace("\x00", "")  # strxfrm rejects embedded NULs
    base = "".join(c for c in unicodedata.normalize("NFKD", s) if not unicodedata.combining(c))
    return locale.strxfrm(base.casefold()), s.swapcase()


# Map the wire column names onto record attributes.
_KEYS: Dict[SortColumn, Callable[[CanonicalRecord], Any]] = {
    "name": lambda r: _collate(r.name),
    "price": lambda r: r.price,
    "glitchScore": lambda r: r.glitch_score,
}


def sort_records(
    records: Iterable[CanonicalRecord],
    column: SortColumn = "name",
    direction: SortDirection = "asc",
) -> List[CanonicalRecord]:
    """
    Single-column sort; always returns a new list.

    Names are compared on _collate() (case and accents ignored first, then
    LC_COLLATE), numbers numerically. Order among equal keys is whatever
    sorted() yields and callers should not rely on it: flipping direction on
    a column with ties is not guaranteed to mirror the previous order.
    """
    if column not in _KEYS:
        raise ValueError(f"Unknown sort column: {column}")
    if direction not in ("asc", "desc"):
        raise ValueError(f"Unknown sort direction: {direction}")
    return sorted(records, key=_KEYS[column], reverse=direction == "desc")
