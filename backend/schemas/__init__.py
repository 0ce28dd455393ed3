# backend/schemas/__init__.py

# auth & users
from .auth import LoginPayload, LoginResponse, UserOut
from .users import UserCreate

# requests module
from .service_types import ServiceTypeCreate, ServiceTypeUpdate, ServiceTypeOut
from .requests import RequestCreate, RequestUpdate, RequestOut
from .staff import StaffCreate, StaffUpdate, StaffOut

# financial
from .accounts import AccountCreate, AccountUpdate, AccountOut, CashAccountOut, LedgerOut, LedgerRow
from .journal import JournalEntryCreate, JournalEntryUpdate, JournalEntryOut, JournalLineIn, JournalLineOut
from .suppliers import (
    SupplierCreate, SupplierUpdate, SupplierOut, SupplierInvoiceCreate, SupplierInvoiceOut,
    PaymentCreate, PaymentUpdate, PaymentOut, ConfirmPaymentPayload,
)
from .receivables import (
    SalesInvoiceCreate, SalesInvoiceOut, ReceiptOut, ReceivablePaymentCreate,
    BulkPaymentLine, BulkPaymentCreate, BulkPaymentResult, ConfirmReceiptPayload, AgingRow,
)
from .assets import (
    AssetCreate, AssetOut, AssetWithDepreciationOut, DepreciationCreate, DepreciationOut,
    EquityEntryCreate, EquityBulkCreate, EquityEntryOut, OpeningBalanceCreate, DashboardStats,
)
from .catalogue import (
    CategoryCreate, CategoryUpdate, CategoryOut, PriceOptionCreate, PriceOptionUpdate,
    PriceOptionOut, ProductCreate, ProductUpdate, ProductOut,
)

# sales
from .clients import CountryOut, RegionOut, RouteOut, ClientTypeOut, ClientCreate, ClientUpdate, ClientOut
from .sales_reps import (
    SalesRepCreate, SalesRepUpdate, SalesRepOut, StatusPayload, ManagerCreate, ManagerUpdate,
    ManagerOut, AssignmentIn, AssignmentsPayload, AssignmentOut,
)
from .notices import NoticeCreate, NoticeUpdate, NoticeOut
from .tasks import TaskCreate, TaskUpdate, TaskOut
from .reports import FeedbackReportCreate, VisibilityReportCreate, FeedbackReportOut, VisibilityReportOut
