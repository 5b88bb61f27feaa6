from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db import get_db
from app.repositories import update_or_insert_products

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["ingest"])


@router.post("/ingest")
def ingest(payload: List[Any], db: Session = Depends(get_db)):
    """
    Bulk-ingest raw product records.

    Accepts:
        A JSON array of objects, each with at least a string "id".
        Every other field is stored as-is, however dirty; cleaning
        happens on read, not on write.

    Returns:
        {
          "ok": True,
          "ingested": <count of stored records>,
          "failed": <count of rejected records>,
          "errors": [ ... up to 10 sample errors ... ]
        }
    """
    # Validate top-level structure
    if not isinstance(payload, list) or not payload:
        raise HTTPException(400, "Payload must be a non-empty JSON array")
    if not all(isinstance(p, dict) for p in payload):
        raise HTTPException(400, "Every item in the payload must be a JSON object")

    try:
        ok, errors = update_or_insert_products(db, payload)
        db.commit()
    except Exception as e:
        db.rollback()
        raise HTTPException(500, f"Ingest failed: {e}")

    return {
        "ok": True,
        "ingested": ok,
        "failed": len(errors),
        "errors": errors[:10],  # limit size of error list
    }

