# frontend/services/api_client.py
"""
Thin HTTP layer over the backend's /api routes.

Every JSON answer is the envelope {"success", "data", "error"}; helpers here
unwrap it and raise ApiError with the server's message on failure.
"""
import os
from typing import Any, Dict, List, Optional, Tuple

import requests
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = (os.getenv("API_BASE_URL") or os.getenv("VITE_API_URL") or "http://127.0.0.1:5000").rstrip("/")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


# token and user of the logged-in session
_session: Dict[str, Any] = {"token": None, "user": None}


def set_session(token: Optional[str], user: Optional[dict]) -> None:
    _session["token"] = token
    _session["user"] = user


def clear_session() -> None:
    set_session(None, None)


def current_user() -> Optional[dict]:
    return _session["user"]


def _url(p: str) -> str:
    return f"{API_BASE_URL}{p}"


def _headers() -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if _session["token"]:
        headers["Authorization"] = f"Bearer {_session['token']}"
    return headers


def _err(resp: requests.Response) -> str:
    try:
        j = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(j, dict):
        return str(j.get("error") or j.get("detail") or f"HTTP {resp.status_code}")
    return f"HTTP {resp.status_code}"


def _send(method: str, path: str, **kwargs) -> requests.Response:
    try:
        resp = requests.request(method, _url(path), headers=_headers(), timeout=API_TIMEOUT, **kwargs)
    except requests.RequestException as e:
        raise ApiError(f"Cannot reach the server: {e}") from e
    if resp.status_code >= 400:
        raise ApiError(_err(resp), resp.status_code)
    return resp


def _data(resp: requests.Response) -> Any:
    if resp.status_code == 204 or not resp.content:
        return None
    body = resp.json()
    if isinstance(body, dict) and "success" in body:
        return body.get("data")
    return body


def get(path: str, params: Optional[dict] = None) -> Any:
    return _data(_send("GET", path, params=params))


def get_page(path: str, params: Optional[dict] = None) -> Tuple[List[dict], dict]:
    """Rows and the pagination block of a paginated endpoint."""
    body = _send("GET", path, params=params).json()
    return body.get("data") or [], body.get("pagination") or {}


def post(path: str, payload: Optional[dict] = None) -> Any:
    return _data(_send("POST", path, json=payload or {}))


def put(path: str, payload: dict) -> Any:
    return _data(_send("PUT", path, json=payload))


def patch(path: str, payload: Optional[dict] = None) -> Any:
    return _data(_send("PATCH", path, json=payload or {}))


def delete(path: str) -> None:
    _send("DELETE", path)


def download(path: str, params: Optional[dict] = None) -> bytes:
    return _send("GET", path, params=params).content


# ---- Auth ----
def login(username: str, password: str) -> Dict[str, Any]:
    return post("/api/auth/login", {"username": username, "password": password})


def me() -> Dict[str, Any]:
    return get("/api/auth/me")


# ---- Requests ----
def get_requests(status: Optional[str] = None, my_status: Optional[int] = None) -> List[dict]:
    params = {}
    if status:
        params["status"] = status
    if my_status is not None:
        params["myStatus"] = my_status
    return get("/api/requests", params)


def update_request(request_id: int, payload: dict) -> dict:
    return patch(f"/api/requests/{request_id}", payload)


# ---- Financial ----
def get_accounts(account_type: Optional[int] = None) -> List[dict]:
    params = {"accountType": account_type} if account_type is not None else None
    return get("/api/financial/accounts", params)


def get_account_ledger(account_id: int, start_date: Optional[str] = None,
                       end_date: Optional[str] = None, cash: bool = False) -> dict:
    params = {k: v for k, v in (("start_date", start_date), ("end_date", end_date)) if v}
    base = "/api/financial/cash-equivalents/accounts" if cash else "/api/financial/accounts"
    return get(f"{base}/{account_id}/ledger", params)


def create_journal_entry(payload: dict) -> dict:
    return post("/api/financial/journal-entries", payload)


def post_journal_entry(entry_id: int) -> dict:
    return patch(f"/api/financial/journal-entries/{entry_id}/post")


def confirm_supplier_payment(payment_id: int) -> dict:
    return post("/api/financial/payables/confirm-payment", {"paymentId": payment_id})


def get_pending_invoices(client_id: int) -> List[dict]:
    return get("/api/financial/invoices", {"clientId": client_id, "pendingOnly": "true"})


def bulk_payment(payload: dict) -> dict:
    return post("/api/financial/receivables/bulk-payment", payload)


def confirm_receipt(receipt_id: int) -> dict:
    return post("/api/financial/receivables/confirm-payment", {"receiptId": receipt_id})


def get_cash_accounts() -> List[dict]:
    return get("/api/financial/cash-equivalents/accounts")


def record_depreciation(payload: dict) -> dict:
    return post("/api/financial/depreciation", payload)


def bulk_equity_entries(entries: List[dict]) -> List[dict]:
    return post("/api/financial/equity-entries/bulk", {"entries": entries})


def get_dashboard_stats() -> dict:
    return get("/api/financial/dashboard/stats")


# ---- Sales ----
def get_countries() -> List[dict]:
    return get("/api/sales/countries")


def get_regions(country_id: Optional[int] = None) -> List[dict]:
    return get("/api/sales/regions", {"countryId": country_id} if country_id else None)


def get_clients(page: int = 1, limit: int = 20, search: str = "", **filters) -> Tuple[List[dict], dict]:
    params = {"page": page, "limit": limit}
    if search:
        params["search"] = search
    params.update({k: v for k, v in filters.items() if v not in (None, "")})
    return get_page("/api/clients", params)


def get_sales_reps(status: Optional[int] = None) -> List[dict]:
    return get("/api/sales/sales-reps", {"status": status} if status is not None else None)


def set_sales_rep_status(rep_id: int, status: int) -> dict:
    return patch(f"/api/sales/sales-reps/{rep_id}/status", {"status": status})


def get_rep_managers(rep_id: int) -> List[dict]:
    return get(f"/api/sales/sales-reps/{rep_id}/managers")


def set_rep_managers(rep_id: int, assignments: List[dict]) -> List[dict]:
    return post(f"/api/sales/sales-reps/{rep_id}/managers", {"assignments": assignments})


def get_managers() -> List[dict]:
    return get("/api/managers")


def get_notices(country_id: Optional[int] = None, status: Optional[int] = None) -> List[dict]:
    params = {k: v for k, v in (("countryId", country_id), ("status", status)) if v is not None}
    return get("/api/notices", params)


def get_tasks(month: Optional[str] = None, status: Optional[str] = None,
              assigned_to: Optional[str] = None) -> List[dict]:
    params = {k: v for k, v in (("month", month), ("status", status), ("assignedTo", assigned_to)) if v}
    return get("/api/calendar-tasks", params)
