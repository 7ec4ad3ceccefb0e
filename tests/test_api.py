def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_home_page_describes_store(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["default_category"] == "mobiles"
    assert body["categories"] == ["mobiles"]
    assert body["links"]["products"].endswith("/products?category=mobiles")
    assert body["links"]["product_details"].endswith("/products/{product_id}")


def test_products_defaults_to_mobiles(client):
    response = client.get("/products")
    assert response.status_code == 200
    body = response.json()
    assert body["category"] == "mobiles"
    assert body["count"] == 6
    assert body["products"][0]["name"] == "Samsung Galaxy S24 Ultra"
    assert body["products"][-1]["name"] == "Vivo X100 Pro"


def test_products_exposes_renderer_fields(client):
    product = client.get("/products", params={"category": "mobiles"}).json()["products"][0]
    assert set(product) == {"id", "name", "price", "rating", "image", "category"}
    assert product["image"] == "/images/samsung-s24.jpg"


def test_products_unknown_category_is_empty(client):
    response = client.get("/products", params={"category": "laptops"})
    assert response.status_code == 200
    assert response.json() == {"category": "laptops", "products": [], "count": 0}


def test_product_details(client):
    response = client.get("/products/2")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 2
    assert body["name"] == "iPhone 15 Pro Max"
    assert body["price"] == 159900


def test_product_details_not_found(client):
    response = client.get("/products/999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Product not found"}


def test_product_details_rejects_non_integer_id(client):
    response = client.get("/products/abc")
    assert response.status_code == 422


def test_legacy_products_ignore_category(legacy_client):
    body = legacy_client.get("/products", params={"category": "laptops"}).json()
    assert body["category"] == "laptops"
    assert body["count"] == 6
    assert [p["id"] for p in body["products"]] == [1, 2, 3, 4, 5, 6]


def test_legacy_product_details_fall_back_to_first(legacy_client):
    response = legacy_client.get("/products/999")
    assert response.status_code == 200
    assert response.json()["id"] == 1


def test_product_details_keeps_integer_price(client):
    body = client.get("/products/1").json()
    assert body["price"] == 124999
    assert isinstance(body["price"], int)
    assert isinstance(body["rating"], float)


def test_home_page_encodes_category_link(client, monkeypatch):
    from storefront import main

    monkeypatch.setattr(main, "DEFAULT_CATEGORY", "smart phones & more")
    body = client.get("/").json()
    assert body["links"]["products"].endswith("/products?category=smart+phones+%26+more")
