# tests/test_staff.py


def test_staff_crud(client):
    created = client.post("/api/staff", json={"name": "Wanjiru", "position": "Dispatcher",
                                              "department": "Logistics"}).json()["data"]
    assert created["position"] == "Dispatcher"

    updated = client.put(f"/api/staff/{created['id']}", json={"department": "Operations"}).json()["data"]
    assert (updated["name"], updated["position"], updated["department"]) == ("Wanjiru", "Dispatcher", "Operations")

    assert client.delete(f"/api/staff/{created['id']}").status_code == 204
    assert client.get(f"/api/staff/{created['id']}").status_code == 404
    assert client.delete(f"/api/staff/{created['id']}").status_code == 404


def test_staff_requires_a_name(client):
    res = client.post("/api/staff", json={"position": "Driver"})
    assert res.status_code == 400
    assert res.json()["error"] == "Missing required fields: name"
