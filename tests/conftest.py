# tests/conftest.py
import os

# must be set before anything under backend/ reads the settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import backend.models  # noqa: F401
from backend.config.settings import get_settings
from backend.core.security import hash_password
from backend.database.session import Base, get_db
from backend.database.setup_db import seed_accounts, seed_client_types
from backend.main import app
from backend.models.account_model import AccountType, ChartOfAccount
from backend.models.client_model import Client
from backend.models.region_model import Country, Region, Route
from backend.models.sales_rep_model import Manager, SalesRep
from backend.models.user_model import User


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSession()
    try:
        yield session, TestingSession
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db(db_session):
    return db_session[0]


@pytest.fixture
def client(db_session):
    _, TestingSession = db_session

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def user(db):
    u = User(username="alice", email="alice@example.com", password=hash_password("secret1"), role="user")
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def admin(db):
    u = User(username="root", email="root@example.com", password=hash_password("adminpass"), role="admin")
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def admin_headers(client, admin):
    res = client.post("/api/auth/login", json={"username": "root", "password": "adminpass"})
    return {"Authorization": f"Bearer {res.json()['data']['token']}"}


@pytest.fixture
def ledger(db):
    """The system accounts plus one accumulated-depreciation and one extra equity account, by code."""
    seed_accounts(db, get_settings())
    db.add_all([
        ChartOfAccount(account_code="1510", account_name="Accumulated Depreciation - Vehicles",
                       account_type=AccountType.ACCUMULATED_DEPRECIATION),
        ChartOfAccount(account_code="3100", account_name="Owner Capital", account_type=AccountType.EQUITY),
        ChartOfAccount(account_code="1110", account_name="Bank", account_type=AccountType.CASH_EQUIVALENT),
    ])
    db.commit()
    return {a.account_code: a.id for a in db.query(ChartOfAccount).all()}


@pytest.fixture
def geo(db):
    """One country with a region and a route, seeded client types."""
    kenya = Country(name="Kenya")
    uganda = Country(name="Uganda")
    db.add_all([kenya, uganda])
    db.flush()
    nairobi = Region(name="Nairobi", country_id=kenya.id)
    kampala = Region(name="Kampala", country_id=uganda.id)
    db.add_all([nairobi, kampala])
    db.flush()
    route = Route(name="CBD", region_id=nairobi.id, country_id=kenya.id)
    db.add(route)
    seed_client_types(db)
    db.commit()
    return {"kenya": kenya.id, "uganda": uganda.id, "nairobi": nairobi.id, "kampala": kampala.id,
            "route": route.id}


@pytest.fixture
def outlet(db, geo):
    c = Client(name="Mama Mboga Stores", contact="0700000001", country_id=geo["kenya"],
               region_id=geo["nairobi"], balance=0)
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


@pytest.fixture
def rep(db):
    r = SalesRep(name="John Otieno", email="john@example.com", phone_number="0711000000",
                 country="Kenya", region="Nairobi")
    db.add(r)
    db.commit()
    db.refresh(r)
    return r


@pytest.fixture
def managers(db):
    rows = [
        Manager(name="Grace", email="grace@example.com", manager_type="Retail"),
        Manager(name="Peter", email="peter@example.com", manager_type="Key Account"),
    ]
    db.add_all(rows)
    db.commit()
    return [m.id for m in rows]
