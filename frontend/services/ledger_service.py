# frontend/services/ledger_service.py
def summarize(ledger: dict) -> dict:
    """Starting/ending balance and movement totals of a running-balance ledger, for display."""
    rows = ledger.get("transactions") or []
    opening = float(ledger.get("openingBalance") or 0)
    total_debit = round(sum(float(r.get("debitAmount") or 0) for r in rows), 2)
    total_credit = round(sum(float(r.get("creditAmount") or 0) for r in rows), 2)
    closing = ledger.get("closingBalance")
    if closing is None:
        closing = rows[-1]["runningBalance"] if rows else opening
    closing = float(closing)
    return {
        "startingBalance": round(opening, 2),
        "endingBalance": round(closing, 2),
        "netChange": round(closing - opening, 2),
        "totalDebit": total_debit,
        "totalCredit": total_credit,
        "count": len(rows),
    }
