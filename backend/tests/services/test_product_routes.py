"""Product Routes — listing filters, create, PUT, PATCH and delete.

Invariants:
    - Empty listing is 204; name filter is a case-insensitive substring
    - Create echoes name and suggested_price; every bad field is reported at once
    - PUT requires both fields, PATCH at least one; both answer 204
    - A product that appears in a sale cannot be deleted (400)
"""

from decimal import Decimal

from sqlalchemy import select

from app.models import Product


async def test_list_products_all(client, seed_products):
    res = await client.get("/api/v1/products")
    assert res.status_code == 200
    assert len(res.json()["products"]) == 3


async def test_list_products_by_name_substring(client, seed_products):
    res = await client.get("/api/v1/products", params={"name": "agua"})
    names = [p["name"] for p in res.json()["products"]]
    assert names == ["Agua Mineral 500ml", "Agua Mineral 20L"]


async def test_list_products_price_range(client, seed_products):
    res = await client.get(
        "/api/v1/products", params={"price_min": "2.50", "price_max": "20"},
    )
    prices = sorted(p["suggested_price"] for p in res.json()["products"])
    assert prices == [2.5, 15.0]


async def test_list_products_no_match_204(client, seed_products):
    res = await client.get("/api/v1/products", params={"name": "cerveja"})
    assert res.status_code == 204


async def test_list_products_invalid_price_400(client, seed_products):
    res = await client.get("/api/v1/products", params={"price_min": "cheap"})
    assert res.status_code == 400
    assert res.json()["message"] == "The 'price_min' query must be a number"


async def test_create_product(client, test_db):
    res = await client.post(
        "/api/v1/products", json={"name": "Carvao 5kg", "suggested_price": "29.90"},
    )
    assert res.status_code == 200
    assert res.json() == {
        "message": "Product created successfully!",
        "new_product": {"name": "Carvao 5kg", "suggested_price": 29.9},
    }
    stored = (await test_db.execute(select(Product))).scalars().one()
    assert stored.suggested_price == Decimal("29.90")


async def test_create_product_reports_all_fields(client):
    res = await client.post("/api/v1/products", json={"suggested_price": 0})
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == (
        "The 'name' field was not sent.; "
        "The 'suggested_price' field must be greater than 0."
    )
    assert [d["field"] for d in body["details"]] == ["name", "suggested_price"]


async def test_put_product_replaces_both_fields(client, test_db, seed_products):
    product = seed_products[0]
    res = await client.put(
        f"/api/v1/products/{product.id}",
        json={"name": "Agua com Gas 500ml", "suggested_price": 3.25},
    )
    assert res.status_code == 204
    product_id = product.id
    test_db.expire_all()
    stored = await test_db.get(Product, product_id)
    assert stored.name == "Agua com Gas 500ml"
    assert stored.suggested_price == Decimal("3.25")


async def test_put_product_requires_every_field(client, test_db, seed_products):
    product = seed_products[0]
    res = await client.put(
        f"/api/v1/products/{product.id}", json={"name": "Only name"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "The 'suggested_price' field was not sent."
    product_id = product.id
    test_db.expire_all()
    stored = await test_db.get(Product, product_id)
    assert stored.name == "Agua Mineral 500ml"


async def test_put_unknown_product_404(client):
    res = await client.put(
        "/api/v1/products/999", json={"name": "X", "suggested_price": 1},
    )
    assert res.status_code == 404
    assert res.json()["message"] == "Product not found."


async def test_patch_product_keeps_other_field(client, test_db, seed_products):
    product = seed_products[1]
    res = await client.patch(
        f"/api/v1/products/{product.id}", json={"suggested_price": 120},
    )
    assert res.status_code == 204
    product_id = product.id
    test_db.expire_all()
    stored = await test_db.get(Product, product_id)
    assert stored.suggested_price == Decimal("120.00")
    assert stored.name == "Gas de Cozinha P13"


async def test_patch_product_without_fields_400(client, seed_products):
    res = await client.patch(f"/api/v1/products/{seed_products[0].id}", json={})
    assert res.status_code == 400


async def test_patch_product_non_positive_price_400(client, seed_products):
    res = await client.patch(
        f"/api/v1/products/{seed_products[0].id}", json={"suggested_price": -5},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "The 'suggested_price' field must be greater than 0."


async def test_patch_unknown_product_404(client):
    res = await client.patch("/api/v1/products/999", json={"name": "X"})
    assert res.status_code == 404
    assert res.json()["message"] == "There is no product with id 999"


async def test_delete_product_204(client, test_db, seed_products):
    product = seed_products[0]
    res = await client.delete(f"/api/v1/products/{product.id}")
    assert res.status_code == 204
    remaining = (await test_db.execute(select(Product.id))).scalars().all()
    assert product.id not in remaining


async def test_delete_sold_product_400(client, seed_sold_product):
    res = await client.delete(f"/api/v1/products/{seed_sold_product.id}")
    assert res.status_code == 400
    assert res.json()["message"] == (
        "Product cannot be deleted, it has already been sold."
    )


async def test_delete_unknown_product_404(client):
    res = await client.delete("/api/v1/products/999")
    assert res.status_code == 404


async def test_delete_non_numeric_product_id_400(client):
    res = await client.delete("/api/v1/products/abc")
    assert res.status_code == 400
    assert res.json()["message"] == "A numeric id is required for product."


async def test_delete_twenty_digit_product_id_404(client, seed_products):
    res = await client.delete("/api/v1/products/99999999999999999999")
    assert res.status_code == 404
    assert res.json()["message"] == "Product not found."


async def test_patch_twenty_digit_product_id_404(client, seed_products):
    res = await client.patch(
        "/api/v1/products/99999999999999999999", json={"name": "X"},
    )
    assert res.status_code == 404
