import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .base import FieldRule
from .types import (
    Field,
    FieldResult,
    Issue,
    ListCategory,
    TextCategory,
    classify_category,
)

UNKNOWN_NAME = "Unknown Product"
UNCATEGORIZED = "Uncategorized"

# Penalties added to the glitch score when a field has to be repaired.
NAME_PENALTY = 20
PRICE_STRING_PENALTY = 10
PRICE_INVALID_PENALTY = 30
STOCK_PENALTY = 20
CATEGORY_ARRAY_PENALTY = 10
CATEGORY_MISSING_PENALTY = 15
UPDATED_AT_PENALTY = 20

# Leading float literal, the way JS parseFloat reads it ("19.99 EUR" -> 19.99).
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _degraded(field: Field, value: Any, penalty: int, message: str) -> FieldResult:
    return FieldResult(value=value, issue=Issue(field, message), penalty=penalty)


# --- Individual field rules (name -> price -> stock -> category -> updatedAt) ---

def norm_name(n: Any) -> FieldResult:
    """Keep any non-blank string as-is; everything else becomes the sentinel name."""
    if isinstance(n, str) and n.strip():
        return FieldResult(n)
    return _degraded("name", UNKNOWN_NAME, NAME_PENALTY, "Name is empty or invalid.")


def norm_price(p: Any) -> FieldResult:
    """
    Numbers pass through untouched, negatives included (only stock is clamped).
    Strings get their first comma turned into a dot and are parsed leniently.
    """
    if is_number(p):
        try:
            value = float(p)
        except OverflowError:  # int too big for a float
            value = math.inf
        if math.isfinite(value):
            return FieldResult(value)
        return _degraded("price", 0.0, PRICE_INVALID_PENALTY, "Price is missing or totally invalid.")

    if isinstance(p, str):
        parsed = parse_float_prefix(p.replace(",", ".", 1))
        if parsed is None:
            return _degraded("price", 0.0, PRICE_INVALID_PENALTY, f"Could not parse price string: {p}")
        return _degraded(
            "price", parsed, PRICE_STRING_PENALTY, "Price was a string format instead of a number."
        )

    return _degraded("price", 0.0, PRICE_INVALID_PENALTY, "Price is missing or totally invalid.")


def norm_stock(s: Any) -> FieldResult:
    if not is_number(s) or (isinstance(s, float) and not math.isfinite(s)):
        return _degraded("stock", 0, STOCK_PENALTY, "Stock is invalid.")
    if s < 0:
        # negative stock means out of stock / bad config
        return _degraded("stock", 0, STOCK_PENALTY, "Stock was negative.")
    if s != int(s):
        return _degraded("stock", int(s), STOCK_PENALTY, "Stock was not a whole number.")
    return FieldResult(int(s))


def norm_category(c: Any) -> FieldResult:
    """
    string        -> kept (clean)
    [first, ...]  -> first element, penalty 10
    [] / null / ? -> "Uncategorized", penalty 15
    """
    cat = classify_category(c)
    if isinstance(cat, TextCategory) and cat.value.strip():
        return FieldResult(cat.value)
    if isinstance(cat, ListCategory):
        if cat.items and isinstance(cat.items[0], str) and cat.items[0].strip():
            return _degraded(
                "category", cat.items[0], CATEGORY_ARRAY_PENALTY,
                "Category was an array instead of a string.",
            )
        return _degraded(
            "category", UNCATEGORIZED, CATEGORY_MISSING_PENALTY, "Category was an empty array."
        )
    return _degraded(
        "category", UNCATEGORIZED, CATEGORY_MISSING_PENALTY, "Category was null or invalid."
    )


def norm_updated_at(z: Any) -> FieldResult:
    """
    Keep the original string when it parses as a date; otherwise null it out.
    An explicit null is a cleared timestamp and passes; a missing key does not.
    """
    if z is None:
        return FieldResult(None)
    if parse_dt(z) is None:
        return _degraded("updatedAt", None, UPDATED_AT_PENALTY, "Date format is invalid.")
    return FieldResult(z)


# Evaluation order is part of the contract: it decides the glitch report order.
FIELD_RULES: Dict[Field, FieldRule] = {
    "name": norm_name,
    "price": norm_price,
    "stock": norm_stock,
    "category": norm_category,
    "updatedAt": norm_updated_at,
}


# --- Parsing helpers ---

def is_number(x: Any) -> bool:
    """int/float, but not bool."""
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def parse_float_prefix(s: str) -> Optional[float]:
    """Parse the leading float literal of `s`, ignoring leading whitespace."""
    m = _FLOAT_PREFIX.match(s.lstrip())
    if not m:
        return None
    value = float(m.group(0))
    return value if math.isfinite(value) else None


def parse_dt(z: Any) -> Optional[datetime]:
    """Parse ISO-ish datetime strings into aware UTC datetimes."""
    if not isinstance(z, str) or not z.strip():
        return None
    try:
        dt = datetime.fromisoformat(z.strip().replace("Z", "+00:00"))
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):  # junk, or an offset pushing past year 1/9999
        return None
