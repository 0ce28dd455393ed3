# backend/models/__init__.py
from .user_model import User
from .service_type_model import ServiceType
from .request_model import ServiceRequest
from .staff_model import Staff
from .account_model import AccountType, ChartOfAccount
from .journal_model import JournalEntry, JournalEntryLine
from .supplier_model import Supplier, SupplierInvoice, SupplierPayment
from .region_model import Country, Region, Route
from .client_model import Client, ClientType
from .receivable_model import Receipt, SalesInvoice
from .asset_model import Asset, DepreciationRecord, EquityEntry
from .product_model import Category, PriceOption, Product
from .sales_rep_model import Manager, SalesRep, SalesRepManagerAssignment
from .notice_model import Notice
from .task_model import CalendarTask
from .report_model import FeedbackReport, VisibilityReport
