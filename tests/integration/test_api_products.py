from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.main import create_app


def _product_payload(**overrides) -> dict:
    payload = {
        "name": "Test",
        "category": "Sách",
        "price": 50000,
        "quantity": 5,
        "description": "",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# List page
# ---------------------------------------------------------------------------


def test_list_first_page(client: TestClient):
    response = client.get("/api/v1/products/")

    assert response.status_code == 200
    data = response.json()
    assert data["total_count"] == 10
    assert data["total_pages"] == 2
    assert data["page_number"] == 1
    assert data["page_size"] == 6
    assert [p["id"] for p in data["items"]] == [1, 2, 3, 4, 5, 6]
    assert data["items"][0]["price_display"] == "25.000.000 ₫"


def test_list_search(client: TestClient):
    response = client.get("/api/v1/products/", params={"q": "áo"})

    data = response.json()
    assert [p["name"] for p in data["items"]] == ["Áo Thun Nam"]
    assert data["total_pages"] == 1


def test_list_price_range(client: TestClient):
    response = client.get(
        "/api/v1/products/", params={"min_price": "100000", "max_price": "400000"}
    )

    data = response.json()
    assert data["total_count"] == 5
    assert all(100000 <= float(p["price"]) <= 400000 for p in data["items"])


def test_list_ignores_non_numeric_price_bounds(client: TestClient):
    response = client.get("/api/v1/products/", params={"min_price": "abc", "max_price": ""})

    assert response.json()["total_count"] == 10


def test_list_category_filter(client: TestClient):
    response = client.get("/api/v1/products/", params={"category": "Quần áo"})

    assert [p["id"] for p in response.json()["items"]] == [2, 6, 10]


def test_list_empty_category_means_all(client: TestClient):
    response = client.get("/api/v1/products/", params={"category": ""})

    assert response.json()["total_count"] == 10


def test_list_invalid_category(client: TestClient):
    response = client.get("/api/v1/products/", params={"category": "Toys"})

    assert response.status_code == 400
    assert "Invalid category 'Toys'" in response.json()["detail"]


def test_list_clamps_stale_page(client: TestClient):
    response = client.get("/api/v1/products/", params={"page": 9999})

    data = response.json()
    assert data["page_number"] == data["total_pages"] == 2
    assert len(data["items"]) == 4


def test_list_custom_page_size(client: TestClient):
    response = client.get("/api/v1/products/", params={"page_size": 4, "page": 3})

    data = response.json()
    assert data["total_pages"] == 3
    assert [p["id"] for p in data["items"]] == [9, 10]


def test_list_rejects_zero_page_size(client: TestClient):
    response = client.get("/api/v1/products/", params={"page_size": 0})

    assert response.status_code == 422


# ---------------------------------------------------------------------------
# Detail / add / edit / delete
# ---------------------------------------------------------------------------


def test_get_product(client: TestClient):
    response = client.get("/api/v1/products/4")

    assert response.status_code == 200
    assert response.json()["name"] == "Gatsby - Văn học"
    assert response.json()["category"] == "Sách"


def test_get_unknown_product(client: TestClient):
    response = client.get("/api/v1/products/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found."


def test_create_product(client: TestClient):
    response = client.post("/api/v1/products/", json=_product_payload())

    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 11
    assert created["name"] == "Test"
    assert created["price_display"] == "50.000 ₫"

    listing = client.get("/api/v1/products/").json()
    assert listing["total_count"] == 11
    assert listing["items"][0]["id"] == 11


def test_create_product_reports_all_errors(client: TestClient):
    response = client.post(
        "/api/v1/products/",
        json={"name": "ab", "category": "", "price": "-5", "quantity": "lots"},
    )

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert errors == {
        "name": "Product name must be at least 3 characters.",
        "price": "Price must be a positive number.",
        "quantity": "Quantity must be a non-negative integer.",
        "category": "Category is required.",
    }
    assert client.get("/api/v1/products/").json()["total_count"] == 10


def test_update_product(client: TestClient):
    response = client.put(
        "/api/v1/products/2",
        json=_product_payload(name="Áo Thun Nam (2024)", category="Quần áo", price="175000"),
    )

    assert response.status_code == 200
    assert response.json()["id"] == 2
    detail = client.get("/api/v1/products/2").json()
    assert detail["name"] == "Áo Thun Nam (2024)"
    assert detail["price"] == "175000"


def test_update_unknown_product(client: TestClient):
    response = client.put("/api/v1/products/999", json=_product_payload())

    assert response.status_code == 404


def test_update_invalid_product(client: TestClient):
    response = client.put("/api/v1/products/2", json=_product_payload(name=""))

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == {"name": "Product name is required."}


def test_delete_product_is_idempotent(client: TestClient):
    assert client.delete("/api/v1/products/3").status_code == 204
    assert client.delete("/api/v1/products/3").status_code == 204

    assert client.get("/api/v1/products/3").status_code == 404
    assert client.get("/api/v1/products/").json()["total_count"] == 9


def test_ids_not_reused_after_delete(client: TestClient):
    client.delete("/api/v1/products/10")

    created = client.post("/api/v1/products/", json=_product_payload()).json()

    assert created["id"] == 11


# ---------------------------------------------------------------------------
# Import / reset / categories
# ---------------------------------------------------------------------------


def test_replace_and_reset(client: TestClient):
    imported = [
        {"id": 1, "name": "Bút bi", "category": "Khác", "price": 5000, "quantity": 200},
        {"id": 7, "name": "Vở ô li", "category": "Khác", "price": 12000, "quantity": 80},
    ]
    response = client.put("/api/v1/products/", json=imported)

    assert response.status_code == 200
    assert response.json() == {"total_count": 2, "next_id": 3}
    assert [p["id"] for p in client.get("/api/v1/products/").json()["items"]] == [1, 7]

    response = client.post("/api/v1/products/reset")

    assert response.json() == {"total_count": 10, "next_id": 11}


def test_categories(client: TestClient):
    response = client.get("/api/v1/categories/")

    assert response.status_code == 200
    assert response.json() == ["Điện tử", "Quần áo", "Đồ ăn", "Sách", "Khác"]


def test_unseeded_catalog_starts_empty():
    with TestClient(create_app(Settings(seed_sample_data=False))) as c:
        data = c.get("/api/v1/products/").json()
        created = c.post("/api/v1/products/", json=_product_payload()).json()

    assert data["total_count"] == 0
    assert data["total_pages"] == 1
    assert created["id"] == 1


def test_each_app_has_its_own_store(client: TestClient):
    client.delete("/api/v1/products/1")

    with TestClient(create_app(Settings())) as other:
        assert other.get("/api/v1/products/1").status_code == 200


# ---------------------------------------------------------------------------
# Oversized numeric input
# ---------------------------------------------------------------------------


def test_create_product_with_overlong_quantity(client: TestClient):
    response = client.post("/api/v1/products/", json=_product_payload(quantity="1" * 5000))

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == {
        "quantity": "Quantity must be a non-negative integer."
    }


def test_create_product_with_absurd_price(client: TestClient):
    response = client.post("/api/v1/products/", json=_product_payload(price="1e20000000"))

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == {"price": "Price must be a positive number."}
    assert client.get("/api/v1/products/").json()["total_count"] == 10


def test_imported_huge_price_is_displayed_compactly(client: TestClient):
    imported = [
        {"id": 1, "name": "Kim cương", "category": "Khác", "price": "1e20000000", "quantity": 1}
    ]
    client.put("/api/v1/products/", json=imported)

    response = client.get("/api/v1/products/1")

    assert response.status_code == 200
    assert response.json()["price_display"] == "1E+20000000 ₫"


def test_openapi_descriptions_are_english(client: TestClient):
    schema = client.get("/openapi.json").json()

    # "Product", or "Product-Input"/"Product-Output" when input and output schemas differ
    descriptions = {
        model["properties"]["id"].get("description")
        for name, model in schema["components"]["schemas"].items()
        if name.split("-")[0] == "Product"
    }
    assert descriptions == {"Assigned by the store, never reused after deletion"}
