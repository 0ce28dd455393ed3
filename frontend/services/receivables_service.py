# frontend/services/receivables_service.py
from typing import Dict, Optional

from frontend.services import api_client


def invoice_balance(invoice: dict) -> float:
    if invoice.get("balance") is not None:
        return float(invoice["balance"])
    return round(float(invoice.get("totalAmount") or 0) - float(invoice.get("amountPaid") or 0), 2)


def clamp_amount(invoice: dict, value) -> float:
    """Keep a typed amount within 0..outstanding balance."""
    try:
        amount = float(value or 0)
    except (TypeError, ValueError):
        amount = 0.0
    return round(min(max(amount, 0.0), max(invoice_balance(invoice), 0.0)), 2)


def bulk_total(amounts: Dict[int, float]) -> float:
    return round(sum(float(a or 0) for a in amounts.values()), 2)


def build_bulk_payload(client_id: int, amounts: Dict[int, float], payment_date: str,
                       account_id: int, payment_method: str = "cash",
                       reference: Optional[str] = None, notes: Optional[str] = None) -> dict:
    # invoices left at zero are not part of the batch
    payments = [
        {"invoiceId": invoice_id, "amount": round(float(amount), 2)}
        for invoice_id, amount in amounts.items()
        if amount and float(amount) > 0
    ]
    return {
        "clientId": client_id,
        "paymentDate": payment_date,
        "paymentMethod": payment_method,
        "accountId": account_id,
        "reference": reference or None,
        "notes": notes or None,
        "payments": payments,
    }


def submit_bulk_payment(payload: dict) -> dict:
    if not payload.get("payments"):
        raise api_client.ApiError("Enter an amount for at least one invoice")
    return api_client.bulk_payment(payload)
