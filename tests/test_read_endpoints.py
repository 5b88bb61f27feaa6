def test_healthz(client, seed_sample):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["products"] == len(seed_sample)

def test_list_products_default_page(client, seed_sample):
    r = client.get("/products")
    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 6
    assert data["total_pages"] == 2
    assert data["page"] == 1
    assert len(data["items"]) == 5
    # default sort is name ascending
    names = [p["name"] for p in data["items"]]
    assert names == sorted(names)

def test_list_products_items_are_canonical(client, seed_sample):
    data = client.get("/products", params={"search": "unknown"}).json()
    assert data["total"] == 1
    p = data["items"][0]
    assert p["id"] == "p2"
    assert p["price"] == 19.99
    assert p["stock"] == 0
    assert p["category"] == "Toys"
    assert p["updatedAt"] is None
    assert p["glitchScore"] == 80
    assert len(p["glitchReport"]) == 5

def test_list_products_filters_combine(client, seed_sample):
    r = client.get("/products", params={"stock_status": "out-of-stock", "glitch_only": "true"})
    assert r.status_code == 200
    data = r.json()
    assert sorted(p["id"] for p in data["items"]) == ["p2", "p4"]

def test_list_products_category_filter(client, seed_sample):
    data = client.get("/products", params={"category": "Gadgets", "sort": "price", "direction": "desc"}).json()
    assert [p["id"] for p in data["items"]] == ["p6", "p1"]

def test_list_products_page_is_clamped(client, seed_sample):
    data = client.get("/products", params={"page": 50}).json()
    assert data["page"] == 2
    assert len(data["items"]) == 1

def test_list_products_empty_result_is_ok(client, seed_sample):
    data = client.get("/products", params={"search": "zzz"}).json()
    assert data == {"items": [], "page": 1, "total_pages": 1, "total": 0}

def test_list_products_rejects_bad_enum(client, seed_sample):
    assert client.get("/products", params={"sort": "stock"}).status_code == 422
    assert client.get("/products", params={"stock_status": "some"}).status_code == 422

def test_list_categories(client, seed_sample):
    r = client.get("/products/categories")
    assert r.status_code == 200
    assert r.json() == ["All", "Gadgets", "Toys", "Home", "Uncategorized"]

def test_get_product(client, seed_sample):
    r = client.get("/products/p5")
    assert r.status_code == 200
    p = r.json()
    assert p["price"] == -5
    assert p["category"] == "Uncategorized"
    assert p["glitchReport"] == [{"field": "category", "message": "Category was null or invalid."}]

def test_get_product_raw(client, seed_sample):
    r = client.get("/products/p2/raw")
    assert r.status_code == 200
    assert r.json()["price"] == "19,99"

def test_get_product_not_found(client, seed_sample):
    assert client.get("/products/missing").status_code == 404
    assert client.get("/products/missing/raw").status_code == 404
