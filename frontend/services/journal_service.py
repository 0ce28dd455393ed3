# frontend/services/journal_service.py
"""Client-side checks for the add-journal-entry dialog, run before anything is sent."""
from typing import Iterable, Optional, Tuple

from frontend.services import api_client

BALANCE_TOLERANCE = 0.01


def _amount(line: dict, side: str) -> float:
    value = line.get(f"{side}Amount", line.get(side))
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def calculate_totals(lines: Iterable[dict]) -> Tuple[float, float]:
    debit = credit = 0.0
    for line in lines:
        debit += _amount(line, "debit")
        credit += _amount(line, "credit")
    return round(debit, 2), round(credit, 2)


def is_balanced(lines: Iterable[dict]) -> bool:
    debit, credit = calculate_totals(lines)
    return abs(debit - credit) <= BALANCE_TOLERANCE


def validate_entry(entry: dict) -> Optional[str]:
    """Error message for the first broken rule, or None when the entry can be submitted."""
    if not entry.get("entryDate"):
        return "Entry date is required"
    if not (entry.get("reference") or "").strip():
        return "Reference is required"
    if not (entry.get("description") or "").strip():
        return "Description is required"

    lines = entry.get("lines") or []
    debit, credit = calculate_totals(lines)
    if abs(debit - credit) > BALANCE_TOLERANCE:
        return f"Debits ({debit:.2f}) must equal credits ({credit:.2f})"
    if len(lines) < 2:
        return "A journal entry needs at least two lines"
    for i, line in enumerate(lines, start=1):
        if not line.get("accountId"):
            return f"Line {i}: account is required"
        debit, credit = _amount(line, "debit"), _amount(line, "credit")
        if debit > 0 and credit > 0:
            return f"Line {i}: enter either a debit or a credit, not both"
        if debit <= 0 and credit <= 0:
            return f"Line {i}: enter a debit or a credit amount"
    return None


def submit_entry(entry: dict) -> dict:
    error = validate_entry(entry)
    if error:
        raise api_client.ApiError(error)
    return api_client.create_journal_entry(entry)
