# backend/config/settings.py
"""
Runtime configuration.

All values come from the environment (a `.env` file next to the project is
loaded first). Nothing else in the backend reads os.environ directly.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


@dataclass(frozen=True)
class Settings:
    db_host: str
    db_port: str
    db_user: str
    db_password: str
    db_name: str
    database_url_override: str
    jwt_secret: str
    jwt_expires_hours: int
    frontend_url: str
    port: int
    app_env: str
    log_level: str

    # ledger accounts used by automatic postings
    cash_account_code: str
    receivables_account_code: str
    payables_account_code: str
    opening_equity_account_code: str
    depreciation_expense_account_code: str

    admin_username: str
    admin_password: str

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"mysql+mysqlconnector://{quote_plus(self.db_user)}:{quote_plus(self.db_password)}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def cors_origins(self) -> list:
        return [o.strip() for o in self.frontend_url.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings(
        db_host=_env("DB_HOST", "localhost"),
        db_port=_env("DB_PORT", "3306"),
        db_user=_env("DB_USER", "root"),
        db_password=_env("DB_PASSWORD"),
        db_name=_env("DB_NAME", "bm_admin_db"),
        database_url_override=_env("DATABASE_URL"),
        jwt_secret=_env("JWT_SECRET", "your-secret-key"),
        jwt_expires_hours=int(_env("JWT_EXPIRES_HOURS", "24")),
        frontend_url=_env("FRONTEND_URL", "http://localhost:5173"),
        port=int(_env("PORT", "5000")),
        app_env=_env("APP_ENV") or _env("NODE_ENV", "production"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        cash_account_code=_env("CASH_ACCOUNT_CODE", "1100"),
        receivables_account_code=_env("RECEIVABLES_ACCOUNT_CODE", "1200"),
        payables_account_code=_env("PAYABLES_ACCOUNT_CODE", "2000"),
        opening_equity_account_code=_env("OPENING_EQUITY_ACCOUNT_CODE", "3000"),
        depreciation_expense_account_code=_env("DEPRECIATION_EXPENSE_ACCOUNT_CODE", "6100"),
        admin_username=_env("ADMIN_USERNAME", "admin"),
        admin_password=_env("ADMIN_PASSWORD", "admin123"),
    )
