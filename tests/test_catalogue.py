# tests/test_catalogue.py
FIN = "/api/financial"


def test_category_with_price_options(client):
    cat = client.post(f"{FIN}/categories", json={"name": " Beverages "}).json()["data"]
    assert cat["name"] == "Beverages"
    assert cat["priceOptions"] == []

    opt = client.post(f"{FIN}/categories/{cat['id']}/price-options", json={"label": "Wholesale", "value": 45})
    assert opt.status_code == 201
    client.put(f"{FIN}/price-options/{opt.json()['data']['id']}", json={"value": 40})

    options = client.get(f"{FIN}/categories/{cat['id']}/price-options").json()["data"]
    assert [(o["label"], o["value"]) for o in options] == [("Wholesale", 40)]

    dup = client.post(f"{FIN}/categories", json={"name": "Beverages"})
    assert dup.status_code == 400
    assert dup.json()["error"] == "Category already exists"


def test_category_with_products_cannot_be_deleted(client):
    cat = client.post(f"{FIN}/categories", json={"name": "Snacks"}).json()["data"]
    client.post(f"{FIN}/products", json={"productCode": "SN-1", "productName": "Crisps", "categoryId": cat["id"]})
    res = client.delete(f"{FIN}/categories/{cat['id']}")
    assert res.status_code == 409
    assert res.json()["error"] == "Category has products"


def test_product_code_is_unique(client):
    assert client.post(f"{FIN}/products", json={"productCode": "A1", "productName": "Tea"}).status_code == 201
    res = client.post(f"{FIN}/products", json={"productCode": "A1", "productName": "Coffee"})
    assert res.status_code == 400
    assert res.json()["error"] == "Product code already exists"


def test_product_with_unknown_category_is_rejected(client):
    res = client.post(f"{FIN}/products", json={"productCode": "B1", "productName": "Tea", "categoryId": 99})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid category"


def test_low_stock_lists_active_products_at_or_below_reorder_level(client):
    for code, stock, active in (("L1", 3, True), ("L2", 5, True), ("L3", 9, True), ("L4", 0, False)):
        client.post(f"{FIN}/products", json={
            "productCode": code, "productName": code, "reorderLevel": 5, "currentStock": stock, "isActive": active,
        })
    low = client.get(f"{FIN}/products/low-stock").json()["data"]
    assert [p["productCode"] for p in low] == ["L1", "L2"]


def test_product_search_and_update(client):
    p = client.post(f"{FIN}/products", json={"productCode": "MLK", "productName": "Fresh Milk"}).json()["data"]
    client.post(f"{FIN}/products", json={"productCode": "BRD", "productName": "Bread"})

    found = client.get(f"{FIN}/products", params={"search": "milk"}).json()["data"]
    assert [x["id"] for x in found] == [p["id"]]

    res = client.put(f"{FIN}/products/{p['id']}", json={"sellingPrice": 65.5})
    assert res.json()["data"]["sellingPrice"] == 65.5
    assert client.delete(f"{FIN}/products/{p['id']}").status_code == 204
    assert client.get(f"{FIN}/products/{p['id']}").status_code == 404
