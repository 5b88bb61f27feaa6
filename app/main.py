from contextlib import asynccontextmanager
import json, locale, logging
from fastapi import Depends, FastAPI
from sqlalchemy.orm import Session

from .db import engine, Base, SessionLocal, get_db
from .routers.ingest import router as ingest_router
from .routers.read import router as read_router
from .routers.update import router as update_router
from app.repositories import count_products, update_or_insert_products
from app.settings import COLLATE_LOCALE, SEED_FILE, SEED_ON_STARTUP
from app.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging
log = logging.getLogger(__name__)

# Name sorting goes through strxfrm, so pick the collation locale up front.
try:
    locale.setlocale(locale.LC_COLLATE, COLLATE_LOCALE)
except locale.Error:
    log.warning("collation locale %r not available, falling back to C", COLLATE_LOCALE)

# Create database tables if they don’t exist.
Base.metadata.create_all(bind=engine)


def seed_store() -> int:
    """Fill an empty store from SEED_FILE. Returns how many records were loaded."""
    if not SEED_FILE.exists():
        log.warning("seed file not found: %s", SEED_FILE)
        return 0
    with SessionLocal() as db:
        if count_products(db):
            return 0
        records = json.loads(SEED_FILE.read_text(encoding="utf-8"))
        ok, errors = update_or_insert_products(db, records)
        db.commit()
    log.info("seeded %d products from %s (%d rejected)", ok, SEED_FILE, len(errors))
    return ok

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs once at startup and once at shutdown.
    With SEED_ON_STARTUP=true an empty store is filled from the seed file
    so the listing endpoints have something to show.
    """
    if SEED_ON_STARTUP:
        seed_store()
    yield

# Create the FastAPI app instance
app = FastAPI(title="Glitch Catalog", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health(db: Session = Depends(get_db)):
    """Simple health probe for monitoring."""
    return {"ok": True, "service": "glitch-catalog", "version": 1, "products": count_products(db)}

# Register API routers:
app.include_router(ingest_router)
app.include_router(read_router)
app.include_router(update_router)
