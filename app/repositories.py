import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, StatementError
from sqlalchemy.orm import Session

from app.models import RawProduct
from app.normalizers import RawRecord

log = logging.getLogger(__name__)

# Raw wire field -> RawProduct column
_COLUMNS = {
    "name": "name",
    "price": "price",
    "stock": "stock",
    "category": "category",
    "updatedAt": "updated_at",
}


class ProductNotFoundError(LookupError):
    """Raised when a product id is not in the store."""
    def __init__(self, product_id: str):
        super().__init__(f"Product with {product_id} not found.")
        self.product_id = product_id


@dataclass(frozen=True)
class ProductUpdated:
    """Audit event emitted after every successful update."""
    product_id: str
    changes: Dict[str, Any]
    new_raw: Dict[str, Any]
    action: str = "UPDATE"
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


UpdateListener = Callable[[ProductUpdated], None]


def log_audit_event(event: ProductUpdated) -> None:
    log.info("audit log: %s", json.dumps(asdict(event), default=str))


DEFAULT_LISTENERS: tuple[UpdateListener, ...] = (log_audit_event,)


def _apply(row: RawProduct, rec: Dict[str, Any]) -> None:
    for key, col in _COLUMNS.items():
        if key in rec:
            setattr(row, col, rec[key])


def list_raw_products(db: Session) -> List[RawRecord]:
    rows = db.execute(select(RawProduct).order_by(RawProduct.id)).scalars().all()
    return [r.to_raw() for r in rows]


def get_raw_product(db: Session, product_id: str) -> Optional[RawRecord]:
    row = db.get(RawProduct, product_id)
    return row.to_raw() if row is not None else None


def count_products(db: Session) -> int:
    return db.execute(select(func.count()).select_from(RawProduct)).scalar_one()


def update_raw_product(
    db: Session,
    product_id: str,
    updates: Dict[str, Any],
    listeners: Iterable[UpdateListener] = DEFAULT_LISTENERS,
) -> RawRecord:
    """
    Shallow-merge `updates` over the stored raw record and commit.

    Read-then-write with no lock: two concurrent updates to the same id race
    and the last one the store sees wins.
    """
    row = db.get(RawProduct, product_id)
    if row is None:
        log.warning("update rejected, unknown product: id=%s", product_id)
        raise ProductNotFoundError(product_id)

    changes = {k: v for k, v in updates.items() if k in _COLUMNS}
    _apply(row, changes)
    db.commit()
    db.refresh(row)

    new_raw = row.to_raw()
    event = ProductUpdated(product_id=product_id, changes=changes, new_raw=new_raw)
    for listener in listeners:
        listener(event)
    return new_raw


def update_or_insert_products(db: Session, records: List[Dict[str, Any]]) -> tuple[int, List[Dict[str, Any]]]:
    """
    Idempotent upsert by product id. Field values are stored exactly as given,
    dirty or not; only a missing/blank id gets a record rejected.
    """
    ok = 0
    errors: List[Dict[str, Any]] = []

    for r in records:
        pid = r.get("id") if isinstance(r, dict) else None
        if not isinstance(pid, str) or not pid.strip():
            msg = "id is required and must be a non-empty string"
            log.warning("product record rejected: %s (id=%r)", msg, pid)
            errors.append({"kind": "product", "id": pid, "error": msg})
            continue

        try:
            # per-record savepoint so one bad record doesn't poison the batch
            with db.begin_nested():
                row = db.get(RawProduct, pid)
                if row is None:
                    row = RawProduct(id=pid)
                    db.add(row)
                _apply(row, r)
            ok += 1

        except (IntegrityError, StatementError, TypeError, ValueError) as e:
            log.exception("product upsert failed: id=%s", pid)
            errors.append({"kind": "product", "id": pid, "error": str(e)})

    return ok, errors
