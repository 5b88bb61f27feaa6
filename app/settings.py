# app/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./products.sqlite3")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Listing page size (rows per page) and the largest a caller may ask for
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "5"))
MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "100"))

# Load SEED_FILE into an empty store at startup
SEED_ON_STARTUP = _flag("SEED_ON_STARTUP", "true")
SEED_FILE = Path(os.getenv("SEED_FILE", str(PROJECT_ROOT / "data" / "products.json")))

# LC_COLLATE used for name sorting; "" takes it from the environment (LANG / LC_ALL)
COLLATE_LOCALE = os.getenv("COLLATE_LOCALE", "")
