# backend/database/setup_db.py
"""
One-shot database setup:
- creates every table known to the ORM models (existing tables are kept),
- seeds the ledger accounts used by automatic postings,
- seeds client types,
- creates (or resets the password of) the admin user.

Run:
    python -m backend.database.setup_db
"""
import logging
import sys

from sqlalchemy import text
from sqlalchemy.orm import Session

import backend.models  # noqa: F401  registers every table on Base.metadata
from backend.config.logging_config import setup_logging
from backend.config.settings import Settings, get_settings
from backend.core.security import hash_password
from backend.database.session import Base, SessionLocal, engine
from backend.models.account_model import AccountType, ChartOfAccount
from backend.models.client_model import ClientType
from backend.models.user_model import User

logger = logging.getLogger(__name__)

CLIENT_TYPES = ("Retail", "Key Account", "Distribution", "Wholesale")


def system_accounts(settings: Settings):
    """(code, name, type) of the accounts automatic postings need."""
    return (
        (settings.cash_account_code, "Cash on Hand", AccountType.CASH_EQUIVALENT),
        (settings.receivables_account_code, "Accounts Receivable", AccountType.ASSET),
        (settings.payables_account_code, "Accounts Payable", AccountType.LIABILITY),
        (settings.opening_equity_account_code, "Opening Balance Equity", AccountType.EQUITY),
        (settings.depreciation_expense_account_code, "Depreciation Expense", AccountType.EXPENSE),
    )


def check_connection() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection OK")
        return True
    except Exception:
        logger.exception("Database connection failed")
        return False


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


def seed_accounts(db: Session, settings: Settings) -> int:
    added = 0
    for code, name, account_type in system_accounts(settings):
        if db.query(ChartOfAccount.id).filter(ChartOfAccount.account_code == code).first():
            continue
        db.add(ChartOfAccount(account_code=code, account_name=name, account_type=account_type))
        added += 1
    return added


def seed_client_types(db: Session) -> int:
    existing = {name for (name,) in db.query(ClientType.name)}
    missing = [ClientType(name=n) for n in CLIENT_TYPES if n not in existing]
    db.add_all(missing)
    return len(missing)


def seed_admin(db: Session, settings: Settings) -> User:
    admin = db.query(User).filter(User.username == settings.admin_username).first()
    if admin is None:
        admin = User(username=settings.admin_username, email="admin@example.com", role="admin")
        db.add(admin)
    # re-running resets the password to the configured one
    admin.password = hash_password(settings.admin_password)
    admin.role = "admin"
    return admin


def setup_database() -> None:
    settings = get_settings()
    create_tables()
    with SessionLocal() as db:
        accounts = seed_accounts(db, settings)
        types = seed_client_types(db)
        admin = seed_admin(db, settings)
        db.commit()
        logger.info("Seeded %d ledger accounts, %d client types", accounts, types)
        logger.info("Admin user ready: %s", admin.username)


def main() -> int:
    setup_logging()
    if not check_connection():
        return 1
    setup_database()
    logger.info("Database setup complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
