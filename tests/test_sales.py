# tests/test_sales.py
import pytest

from backend.models.report_model import FeedbackReport


def new_client(client, geo, name, **extra):
    body = {"name": name, "contact": "0700", "countryId": geo["kenya"], "regionId": geo["nairobi"], **extra}
    return client.post("/api/clients", json=body)


def test_lookups_filter_by_country(client, geo):
    countries = client.get("/api/sales/countries").json()["data"]
    assert [c["name"] for c in countries] == ["Kenya", "Uganda"]
    regions = client.get("/api/sales/regions", params={"countryId": geo["uganda"]}).json()["data"]
    assert [r["name"] for r in regions] == ["Kampala"]
    routes = client.get("/api/sales/routes", params={"countryId": geo["kenya"]}).json()["data"]
    assert [r["name"] for r in routes] == ["CBD"]


def test_clients_are_paginated_and_searchable(client, geo):
    for i in range(25):
        new_client(client, geo, f"Shop {i:02d}")
    new_client(client, geo, "Corner Kiosk")

    first = client.get("/api/clients").json()
    assert len(first["data"]) == 20
    assert first["pagination"] == {"page": 1, "limit": 20, "total": 26, "totalPages": 2}

    second = client.get("/api/clients", params={"page": 2}).json()
    assert [c["name"] for c in second["data"]][-1] == "Shop 24"

    found = client.get("/api/clients", params={"search": "kiosk"}).json()
    assert [c["name"] for c in found["data"]] == ["Corner Kiosk"]
    assert found["data"][0]["countryName"] == "Kenya"


@pytest.mark.parametrize("extra, error", [
    ({"regionId": "kampala"}, "Region does not belong to the country"),
    ({"countryId": 999}, "Invalid country"),
    ({"regionId": 999}, "Invalid region"),
    ({"routeId": 999}, "Invalid route"),
    ({"clientTypeId": 999}, "Invalid client type"),
])
def test_client_references_are_checked(client, geo, extra, error):
    extra = {k: geo[v] if isinstance(v, str) else v for k, v in extra.items()}
    res = new_client(client, geo, "Bad Refs", **extra)
    assert res.status_code == 400
    assert res.json()["error"] == error


def test_client_update_checks_region_against_new_country(client, geo, outlet):
    res = client.put(f"/api/clients/{outlet.id}", json={"countryId": geo["uganda"]})
    assert res.json()["error"] == "Region does not belong to the country"
    res = client.put(f"/api/clients/{outlet.id}", json={"countryId": geo["uganda"], "regionId": geo["kampala"]})
    assert res.status_code == 200
    assert res.json()["data"]["regionName"] == "Kampala"


def test_client_with_history_cannot_be_deleted(client, ledger, outlet):
    client.post("/api/financial/invoices", json={
        "clientId": outlet.id, "invoiceDate": "2025-01-01", "totalAmount": 10,
    })
    res = client.delete(f"/api/clients/{outlet.id}")
    assert res.status_code == 409
    assert res.json()["error"] == "Client has invoices or reports"


def test_client_types_are_seeded(client, geo):
    names = [t["name"] for t in client.get("/api/clients/types").json()["data"]]
    assert "Retail" in names and "Wholesale" in names


def test_sales_rep_status_toggle(client, rep):
    res = client.patch(f"/api/sales/sales-reps/{rep.id}/status", json={"status": 0})
    assert res.json()["data"]["status"] == 0
    active = client.get("/api/sales/sales-reps", params={"status": 1}).json()["data"]
    assert active == []
    assert client.patch(f"/api/sales/sales-reps/{rep.id}/status", json={"status": 5}).status_code == 400


def test_manager_assignments_are_replaced_wholesale(client, rep, managers):
    grace, peter = managers
    url = f"/api/sales/sales-reps/{rep.id}/managers"
    client.post(url, json={"assignments": [
        {"managerId": grace, "managerType": "Retail"}, {"managerId": peter, "managerType": "Key Account"},
    ]})
    res = client.post(url, json={"assignments": [{"managerId": peter, "managerType": "Distribution"}]})
    assert res.status_code == 200
    assert res.json()["data"] == [{"managerId": peter, "managerName": "Peter", "managerType": "Distribution"}]
    assert client.get(url).json()["data"] == res.json()["data"]

    assert client.post(url, json={"assignments": []}).json()["data"] == []


def test_unknown_manager_leaves_assignments_untouched(client, rep, managers):
    url = f"/api/sales/sales-reps/{rep.id}/managers"
    client.post(url, json={"assignments": [{"managerId": managers[0], "managerType": "Retail"}]})
    res = client.post(url, json={"assignments": [{"managerId": 404, "managerType": "Retail"}]})
    assert res.status_code == 400
    assert res.json()["error"] == "Manager not found: 404"
    assert [a["managerId"] for a in client.get(url).json()["data"]] == [managers[0]]


def test_deleting_a_manager_drops_its_assignments(client, rep, managers):
    url = f"/api/sales/sales-reps/{rep.id}/managers"
    client.post(url, json={"assignments": [
        {"managerId": managers[0], "managerType": "Retail"}, {"managerId": managers[1], "managerType": "Retail"},
    ]})
    assert client.delete(f"/api/managers/{managers[0]}").status_code == 204
    assert [a["managerId"] for a in client.get(url).json()["data"]] == [managers[1]]


def test_sales_rep_with_reports_cannot_be_deleted(client, db, rep, outlet):
    db.add(FeedbackReport(client_id=outlet.id, sales_rep_id=rep.id, comment="ok"))
    db.commit()
    res = client.delete(f"/api/sales/sales-reps/{rep.id}")
    assert res.status_code == 409
    assert res.json()["error"] == "Sales rep has reports"


def test_notices_filter_by_country_and_status(client, geo):
    client.post("/api/notices", json={"title": "Price change", "content": "New prices", "countryId": geo["kenya"]})
    client.post("/api/notices", json={"title": "Old", "content": "Archived", "status": 1})

    kenya = client.get("/api/notices", params={"countryId": geo["kenya"]}).json()["data"]
    assert [(n["title"], n["countryName"]) for n in kenya] == [("Price change", "Kenya")]
    archived = client.get("/api/notices", params={"status": 1}).json()["data"]
    assert [n["title"] for n in archived] == ["Old"]

    bad = client.post("/api/notices", json={"title": "X", "content": "Y", "countryId": 999})
    assert bad.json()["error"] == "Invalid country"


def test_tasks_by_month(client):
    for day, title in (("2025-03-31", "Stock take"), ("2025-04-01", "Route review"), ("2025-12-15", "Audit")):
        client.post("/api/calendar-tasks", json={"date": day, "title": title})

    march = client.get("/api/calendar-tasks", params={"month": "2025-03"}).json()["data"]
    assert [(t["title"], t["status"]) for t in march] == [("Stock take", "Pending")]
    december = client.get("/api/calendar-tasks", params={"month": "2025-12"}).json()["data"]
    assert [t["title"] for t in december] == ["Audit"]


@pytest.mark.parametrize("month", ["2025-13", "March", "2025-3"])
def test_invalid_month_is_rejected(client, month):
    res = client.get("/api/calendar-tasks", params={"month": month})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid month format, expected YYYY-MM"


def test_task_status_must_be_known(client):
    res = client.post("/api/calendar-tasks", json={"date": "2025-01-01", "title": "X", "status": "Done"})
    assert res.status_code == 400
