# tests/test_frontend_services.py
import json
from datetime import date

import pytest
import requests

from frontend.services import api_client, journal_service, ledger_service, receivables_service
from frontend.services.api_client import ApiError
from frontend.services.auth_service import AuthService
from frontend.services.feedback_report_service import build_params
from frontend.services.visibility_report_service import visibility_report_service


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.content = b"" if body is None else json.dumps(body).encode()
        self.text = self.content.decode()

    def json(self):
        return json.loads(self.content)


@pytest.fixture(autouse=True)
def no_session():
    api_client.clear_session()
    yield
    api_client.clear_session()


@pytest.fixture
def calls(monkeypatch):
    """Records outgoing requests; set `calls.response` to control the answer."""
    class Recorder(list):
        response = FakeResponse(200, {"success": True, "data": None, "error": None})

    recorder = Recorder()

    def fake_request(method, url, **kwargs):
        recorder.append((method, url, kwargs))
        return recorder.response

    monkeypatch.setattr(api_client.requests, "request", fake_request)
    return recorder


# ---------- journal entry checks ----------

def entry(*amounts, **overrides):
    lines = [{"accountId": i + 1, "debitAmount": d, "creditAmount": c} for i, (d, c) in enumerate(amounts)]
    return {"entryDate": "2025-01-01", "reference": "R1", "description": "Test", "lines": lines, **overrides}


def test_balanced_entry_passes():
    assert journal_service.validate_entry(entry((100, 0), (0, 100))) is None
    assert journal_service.is_balanced(entry((100, 0), (0, 100))["lines"])


def test_unbalanced_entry_reports_both_totals():
    assert journal_service.validate_entry(entry((100, 0), (0, 90))) == "Debits (100.00) must equal credits (90.00)"


def test_balance_is_checked_before_line_rules():
    unbalanced = {
        "entryDate": "2025-01-01",
        "reference": "R1",
        "description": "Test",
        "lines": [{"debit": 100, "credit": 0}, {"debit": 0, "credit": 90}],
    }
    assert journal_service.validate_entry(unbalanced) == "Debits (100.00) must equal credits (90.00)"
    assert journal_service.validate_entry(entry((100, 0))) == "Debits (100.00) must equal credits (0.00)"


def test_totals_accept_plain_debit_credit_keys():
    assert journal_service.calculate_totals([{"debit": "12.5"}, {"credit": 12.5}, {"debit": "x"}]) == (12.5, 12.5)


@pytest.mark.parametrize("overrides, error", [
    ({"entryDate": ""}, "Entry date is required"),
    ({"reference": "  "}, "Reference is required"),
    ({"description": None}, "Description is required"),
])
def test_header_fields_are_required(overrides, error):
    assert journal_service.validate_entry(entry((1, 0), (0, 1), **overrides)) == error


def test_line_rules():
    assert journal_service.validate_entry(entry((0, 0))) == "A journal entry needs at least two lines"
    assert journal_service.validate_entry(entry((2, 1), (0, 1))) == "Line 1: enter either a debit or a credit, not both"
    assert journal_service.validate_entry(entry((1, 0), (0, 1), (0, 0))) == "Line 3: enter a debit or a credit amount"
    no_account = entry((1, 0), (0, 1))
    no_account["lines"][1]["accountId"] = None
    assert journal_service.validate_entry(no_account) == "Line 2: account is required"


def test_invalid_entry_is_never_sent(calls):
    with pytest.raises(ApiError, match="must equal credits"):
        journal_service.submit_entry(entry((5, 0), (0, 4)))
    assert calls == []


# ---------- report query strings ----------

def test_no_filters_means_today():
    assert build_params({}, today=date(2025, 3, 1)) == {"currentDate": "2025-03-01"}
    assert build_params({"country": "", "search": None}, today=date(2025, 3, 1)) == {"currentDate": "2025-03-01"}


def test_only_filled_filters_are_sent_with_paging():
    params = build_params({"country": "Kenya", "salesRep": "", "bogus": "x"}, page=2, limit=10)
    assert params == {"country": "Kenya", "page": "2", "limit": "10"}


def test_visibility_rows_to_csv_quotes_everything(tmp_path):
    path = tmp_path / "out.csv"
    visibility_report_service.rows_to_csv([{"id": 1, "outlet": "Shop", "imageUrl": "a.jpg"}], str(path))
    lines = path.read_text().splitlines()
    assert lines[0].endswith('"Created At","Image URL"')
    assert lines[1].startswith('"1","","Shop"')


# ---------- receivables ----------

def test_clamp_amount_stays_within_balance():
    invoice = {"totalAmount": 300, "amountPaid": 100}
    assert receivables_service.clamp_amount(invoice, 500) == 200
    assert receivables_service.clamp_amount(invoice, -5) == 0
    assert receivables_service.clamp_amount(invoice, "abc") == 0
    assert receivables_service.clamp_amount({"balance": 50}, "20.5") == 20.5


def test_bulk_payload_skips_zero_lines():
    payload = receivables_service.build_bulk_payload(4, {1: 100, 2: 0, 3: 25.5}, "2025-02-01", 9, reference="")
    assert payload["payments"] == [{"invoiceId": 1, "amount": 100}, {"invoiceId": 3, "amount": 25.5}]
    assert (payload["clientId"], payload["accountId"], payload["paymentMethod"]) == (4, 9, "cash")
    assert payload["reference"] is None
    assert receivables_service.bulk_total({1: 100, 2: None, 3: 25.5}) == 125.5


def test_empty_bulk_payment_is_not_sent(calls):
    payload = receivables_service.build_bulk_payload(4, {1: 0}, "2025-02-01", 9)
    with pytest.raises(ApiError, match="at least one invoice"):
        receivables_service.submit_bulk_payment(payload)
    assert calls == []


# ---------- ledger summary ----------

def test_ledger_summary():
    summary = ledger_service.summarize({
        "openingBalance": 50,
        "closingBalance": 120,
        "transactions": [
            {"debitAmount": 100, "creditAmount": 0, "runningBalance": 150},
            {"debitAmount": 0, "creditAmount": 30, "runningBalance": 120},
        ],
    })
    assert summary == {
        "startingBalance": 50, "endingBalance": 120, "netChange": 70,
        "totalDebit": 100, "totalCredit": 30, "count": 2,
    }
    assert ledger_service.summarize({"transactions": []})["endingBalance"] == 0


# ---------- http layer ----------

def test_envelope_is_unwrapped(calls):
    calls.response = FakeResponse(200, {"success": True, "data": [{"id": 1}], "error": None})
    assert api_client.get_accounts(account_type=9) == [{"id": 1}]
    method, url, kwargs = calls[0]
    assert (method, url) == ("GET", f"{api_client.API_BASE_URL}/api/financial/accounts")
    assert kwargs["params"] == {"accountType": 9}
    assert "Authorization" not in kwargs["headers"]


def test_server_error_message_is_raised(calls):
    calls.response = FakeResponse(400, {"success": False, "data": None, "error": "Invalid client"})
    with pytest.raises(ApiError) as info:
        api_client.post("/api/clients", {"name": "x"})
    assert str(info.value) == "Invalid client"
    assert info.value.status_code == 400


def test_no_content_returns_none(calls):
    calls.response = FakeResponse(204)
    assert api_client.patch("/api/requests/1", {"status": "done"}) is None


def test_list_helpers_send_only_set_filters(calls):
    calls.response = FakeResponse(200, {"success": True, "data": [], "error": None})
    api_client.get_requests(status="", my_status=0)
    api_client.get_notices(status=0)
    api_client.get_tasks(month="2025-03", assigned_to="")
    sent = [(url.replace(api_client.API_BASE_URL, ""), kwargs["params"]) for _, url, kwargs in calls]
    assert sent == [
        ("/api/requests", {"myStatus": 0}),
        ("/api/notices", {"status": 0}),
        ("/api/calendar-tasks", {"month": "2025-03"}),
    ]


def test_request_update_is_a_patch(calls):
    api_client.update_request(7, {"status": "approved"})
    method, url, kwargs = calls[0]
    assert (method, url) == ("PATCH", f"{api_client.API_BASE_URL}/api/requests/7")
    assert kwargs["json"] == {"status": "approved"}


def test_dashboard_stats_path(calls):
    calls.response = FakeResponse(200, {"success": True, "data": {"cashBalance": 10.0}, "error": None})
    assert api_client.get_dashboard_stats() == {"cashBalance": 10.0}
    assert calls[0][1] == f"{api_client.API_BASE_URL}/api/financial/dashboard/stats"


def test_connection_failure_becomes_api_error(monkeypatch):
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(api_client.requests, "request", refuse)
    with pytest.raises(ApiError, match="Cannot reach the server"):
        api_client.get("/api/auth/me")


def test_login_keeps_the_token_for_later_calls(calls):
    user = {"id": 1, "username": "alice", "role": "user"}
    calls.response = FakeResponse(200, {"success": True, "data": {"token": "abc", "user": user}, "error": None})
    ok, logged_in, error = AuthService().login(" alice ", "secret1")
    assert (ok, logged_in, error) == (True, user, None)
    assert calls[0][2]["json"] == {"username": "alice", "password": "secret1"}

    api_client.me()
    assert calls[1][2]["headers"]["Authorization"] == "Bearer abc"

    AuthService().logout()
    assert api_client.current_user() is None


def test_login_failure_is_reported_not_raised(calls):
    calls.response = FakeResponse(401, {"success": False, "data": None, "error": "Invalid username or password"})
    assert AuthService().login("alice", "nope") == (False, None, "Invalid username or password")
    assert AuthService().login("", "x")[2] == "Please enter username and password"
