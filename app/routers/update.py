from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.db import get_db
from app.normalizers import get_default_normalizer
from app.repositories import ProductNotFoundError, update_raw_product

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["update"])


# Edit form schema: only the fields a user may change, already clean.
class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=2)


@router.patch("/products/{product_id}")
def update_product(product_id: str, req: ProductUpdate, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Apply a partial edit to the stored raw record, then return the
    re-normalized product so the caller sees the new glitch score.

    404 if the product does not exist; 422 if the edit fails validation.
    """
    updates = req.model_dump(exclude_unset=True, exclude_none=True)
    try:
        raw = update_raw_product(db, product_id, updates)
    except ProductNotFoundError as e:
        raise HTTPException(404, str(e))
    return get_default_normalizer().normalize(raw).to_dict()
