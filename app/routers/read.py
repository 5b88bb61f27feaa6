from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db import get_db
from app.normalizers import CanonicalRecord, get_default_normalizer
from app.query import ALL, QueryState, SortColumn, SortDirection, StockStatus, category_options, run_query
from app.repositories import get_raw_product, list_raw_products
from app.settings import MAX_PAGE_SIZE, PAGE_SIZE

router = APIRouter(prefix="", tags=["read"])


def _normalized_products(db: Session) -> List[CanonicalRecord]:
    """Normalize the whole store once per request; the query stages work on this."""
    normalizer = get_default_normalizer()
    return [normalizer.normalize(r) for r in list_raw_products(db)]

# -------------------------------------------------------------------
# List endpoint (filter -> sort -> paginate)
# -------------------------------------------------------------------
@router.get("/products")
def list_products(
    search: Optional[str] = Query(None, description="Name contains, case-insensitive"),
    category: str = Query(ALL, description="Exact category match; 'All' disables"),
    stock_status: StockStatus = Query(ALL, description="All | in-stock | out-of-stock"),
    glitch_only: bool = Query(False, description="Only records with a non-zero glitch score"),
    sort: SortColumn = Query("name"),
    direction: SortDirection = Query("asc"),
    page: int = Query(1, description="1-based; out-of-range values are clamped"),
    page_size: int = Query(PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """
    List canonical products. Response:
      {"items": [...], "page": n, "total_pages": m, "total": k}
    An empty match is a normal response with one (empty) page.
    """
    state = QueryState(
        search=search,
        category=category,
        stock_status=stock_status,
        glitch_only=glitch_only,
        sort_column=sort,
        sort_direction=direction,
        page=page,
    )
    return run_query(_normalized_products(db), state, page_size).to_dict()

@router.get("/products/categories")
def list_categories(db: Session = Depends(get_db)) -> List[str]:
    """Options for the category filter: "All" followed by every category in use."""
    return category_options(_normalized_products(db))

# -------------------------------------------------------------------
# Single product lookup
# -------------------------------------------------------------------
@router.get("/products/{product_id}")
def get_product(product_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Canonical record plus its glitch report."""
    raw = get_raw_product(db, product_id)
    if raw is None:
        raise HTTPException(404, "Product not found")
    return get_default_normalizer().normalize(raw).to_dict()

@router.get("/products/{product_id}/raw")
def get_product_raw(product_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """The record exactly as stored, before normalization."""
    raw = get_raw_product(db, product_id)
    if raw is None:
        raise HTTPException(404, "Product not found")
    return dict(raw)
