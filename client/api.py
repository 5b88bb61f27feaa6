import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Content-Type":"application/json"})

def healthz():      r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def ingest(b):      r=S.post(f"{API}/ingest",json=b,timeout=60); r.raise_for_status(); return r.json()
def categories():   r=S.get(f"{API}/products/categories",timeout=20); r.raise_for_status(); return r.json()
def product(pid):   r=S.get(f"{API}/products/{pid}",timeout=20); r.raise_for_status(); return r.json()
def raw_product(pid):
    r=S.get(f"{API}/products/{pid}/raw",timeout=20); r.raise_for_status(); return r.json()

def products(**p):
    """Query params: search, category, stock_status, glitch_only, sort, direction, page, page_size."""
    params = {k: v for k, v in p.items() if v is not None}
    if isinstance(params.get("glitch_only"), bool):
        params["glitch_only"] = str(params["glitch_only"]).lower()
    r=S.get(f"{API}/products",params=params,timeout=30); r.raise_for_status(); return r.json()

def update_product(pid: str, **fields):
    r=S.patch(f"{API}/products/{pid}",json=fields,timeout=30); r.raise_for_status(); return r.json()
