# tests/test_requests.py
import pytest


@pytest.fixture
def service_type(client):
    return client.post("/api/service-types", json={"name": "Courier"}).json()["data"]


def request_payload(user, service_type, **extra):
    payload = {
        "userId": user.id,
        "userName": "Alice",
        "serviceTypeId": service_type["id"],
        "pickupLocation": "Warehouse 4",
        "deliveryLocation": "Westlands",
        "pickupDate": "2025-03-01T09:30:00",
    }
    payload.update(extra)
    return payload


def test_new_request_is_pending_and_listed(client, user, service_type):
    res = client.post("/api/requests", json=request_payload(user, service_type))
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["status"] == "pending"
    assert data["myStatus"] == 0
    assert data["priority"] == "medium"
    assert data["serviceTypeName"] == "Courier"
    assert data["pickupDate"] == "2025-03-01T09:30:00"

    pending = client.get("/api/requests", params={"status": "pending"}).json()["data"]
    assert [r["id"] for r in pending] == [data["id"]]
    assert client.get("/api/requests", params={"status": "completed"}).json()["data"] == []


def test_my_status_is_kept_and_filterable(client, user, service_type):
    created = client.post("/api/requests", json=request_payload(user, service_type, myStatus=2)).json()["data"]
    assert created["myStatus"] == 2
    assert [r["id"] for r in client.get("/api/requests", params={"myStatus": 2}).json()["data"]] == [created["id"]]
    assert client.get("/api/requests", params={"myStatus": 0}).json()["data"] == []


def test_date_only_pickup_is_accepted(client, user, service_type):
    res = client.post("/api/requests", json=request_payload(user, service_type, pickupDate="2025-03-01"))
    assert res.status_code == 201
    assert res.json()["data"]["pickupDate"].startswith("2025-03-01")


@pytest.mark.parametrize("field", [
    "userId", "userName", "serviceTypeId", "pickupLocation", "deliveryLocation", "pickupDate",
])
def test_each_required_field(client, user, service_type, field):
    payload = request_payload(user, service_type)
    del payload[field]
    res = client.post("/api/requests", json=payload)
    assert res.status_code == 400
    assert res.json()["error"] == f"Missing required fields: {field}"
    assert client.get("/api/requests").json()["data"] == []


def test_unknown_service_type_or_user(client, user, service_type):
    bad_type = client.post("/api/requests", json=request_payload(user, service_type, serviceTypeId=999))
    assert bad_type.status_code == 400
    assert bad_type.json()["error"] == "Invalid service type"

    bad_user = request_payload(user, service_type, userId=999)
    assert client.post("/api/requests", json=bad_user).json()["error"] == "Invalid user"


def test_patch_only_changes_sent_fields(client, user, service_type):
    created = client.post("/api/requests", json=request_payload(user, service_type, description="Fragile")).json()["data"]
    res = client.patch(f"/api/requests/{created['id']}", json={"status": "approved"})
    assert res.status_code == 200
    updated = res.json()["data"]
    assert updated["status"] == "approved"
    for key in ("description", "pickupLocation", "deliveryLocation", "priority", "myStatus", "pickupDate"):
        assert updated[key] == created[key]


def test_patch_unknown_request(client):
    assert client.patch("/api/requests/42", json={"status": "approved"}).status_code == 404


def test_patch_with_null_for_required_column_is_rejected(client, user, service_type):
    created = client.post("/api/requests", json=request_payload(user, service_type)).json()["data"]
    res = client.patch(f"/api/requests/{created['id']}", json={"pickupLocation": None})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid fields: pickupLocation"
    assert client.get(f"/api/requests/{created['id']}").json()["data"]["pickupLocation"] == "Warehouse 4"


def test_patch_with_null_description_clears_it(client, user, service_type):
    created = client.post("/api/requests", json=request_payload(user, service_type, description="Fragile")).json()["data"]
    res = client.patch(f"/api/requests/{created['id']}", json={"description": None})
    assert res.status_code == 200
    assert res.json()["data"]["description"] is None


def test_empty_status_filter_returns_everything(client, user, service_type):
    first = client.post("/api/requests", json=request_payload(user, service_type)).json()["data"]
    second = client.post("/api/requests", json=request_payload(user, service_type, pickupLocation="Dock 2")).json()["data"]
    client.patch(f"/api/requests/{second['id']}", json={"status": "approved"})

    rows = client.get("/api/requests", params={"status": ""}).json()["data"]
    assert sorted(r["id"] for r in rows) == sorted([first["id"], second["id"]])
