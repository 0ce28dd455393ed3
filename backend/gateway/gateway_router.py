# backend/gateway/gateway_router.py
from fastapi import APIRouter

from backend.routers.accounts_router import router as accounts_router
from backend.routers.assets_router import router as assets_router
from backend.routers.auth_router import router as auth_router
from backend.routers.cash_router import router as cash_router
from backend.routers.catalogue_router import router as catalogue_router
from backend.routers.clients_router import router as clients_router
from backend.routers.equity_router import router as equity_router
from backend.routers.journal_router import router as journal_router
from backend.routers.lookups_router import router as lookups_router
from backend.routers.managers_router import router as managers_router
from backend.routers.notices_router import router as notices_router
from backend.routers.payables_router import router as payables_router
from backend.routers.receivables_router import router as receivables_router
from backend.routers.reports_router import router as reports_router
from backend.routers.requests_router import router as requests_router
from backend.routers.sales_reps_router import router as sales_reps_router
from backend.routers.service_types_router import router as service_types_router
from backend.routers.staff_router import router as staff_router
from backend.routers.tasks_router import router as tasks_router
from backend.routers.users_router import router as users_router

# financial sub-routers share one /financial prefix
financial_router = APIRouter(prefix="/financial")
financial_router.include_router(accounts_router)      # /financial/accounts/...
financial_router.include_router(journal_router)       # /financial/journal-entries/...
financial_router.include_router(payables_router)      # /financial/suppliers, payments, payables/...
financial_router.include_router(receivables_router)   # /financial/invoices, receipts, receivables/...
financial_router.include_router(assets_router)        # /financial/assets, depreciation...
financial_router.include_router(equity_router)        # /financial/equity-entries/...
financial_router.include_router(cash_router)          # /financial/cash-equivalents, dashboard
financial_router.include_router(catalogue_router)     # /financial/categories, products...

api_router = APIRouter(prefix="/api")

api_router.include_router(auth_router)            # /api/auth/...
api_router.include_router(users_router)           # /api/users/...
api_router.include_router(service_types_router)   # /api/service-types/...
api_router.include_router(requests_router)        # /api/requests/...
api_router.include_router(staff_router)           # /api/staff/...
api_router.include_router(financial_router)       # /api/financial/...

# sales & operations
api_router.include_router(lookups_router)         # /api/sales/countries, regions, routes
api_router.include_router(sales_reps_router)      # /api/sales/sales-reps/...
api_router.include_router(clients_router)         # /api/clients/...
api_router.include_router(managers_router)        # /api/managers/...
api_router.include_router(notices_router)         # /api/notices/...
api_router.include_router(tasks_router)           # /api/calendar-tasks/...
api_router.include_router(reports_router)         # /api/feedback-reports, visibility-reports
