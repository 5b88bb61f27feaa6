import pytest
import requests

from client import api


class _Resp:
    def __init__(self, payload, status=200):
        self.payload, self.status_code = payload, status

    def json(self):
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class _Session:
    """Records calls instead of hitting the network."""
    def __init__(self, resp):
        self.resp, self.calls = resp, []

    def _call(self, method, url, **kw):
        self.calls.append((method, url, kw))
        return self.resp

    def get(self, url, **kw):   return self._call("GET", url, **kw)
    def post(self, url, **kw):  return self._call("POST", url, **kw)
    def patch(self, url, **kw): return self._call("PATCH", url, **kw)


@pytest.fixture
def session(monkeypatch):
    s = _Session(_Resp({"ok": True}))
    monkeypatch.setattr(api, "S", s)
    monkeypatch.setattr(api, "API", "http://svc")
    return s


def test_products_drops_none_and_lowercases_bool(session):
    api.products(search="lamp", category=None, glitch_only=True, page=2)
    method, url, kw = session.calls[0]
    assert (method, url) == ("GET", "http://svc/products")
    assert kw["params"] == {"search": "lamp", "glitch_only": "true", "page": 2}

def test_update_product_sends_patch(session):
    api.update_product("p1", name="New", stock=3)
    method, url, kw = session.calls[0]
    assert (method, url) == ("PATCH", "http://svc/products/p1")
    assert kw["json"] == {"name": "New", "stock": 3}

def test_lookup_urls(session):
    api.product("p1"); api.raw_product("p1"); api.categories(); api.healthz()
    assert [c[1] for c in session.calls] == [
        "http://svc/products/p1",
        "http://svc/products/p1/raw",
        "http://svc/products/categories",
        "http://svc/healthz",
    ]

def test_http_errors_raise(monkeypatch):
    monkeypatch.setattr(api, "S", _Session(_Resp({"detail": "Product not found"}, status=404)))
    with pytest.raises(requests.HTTPError):
        api.product("missing")
