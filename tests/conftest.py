"""
Shared fixtures.

Each test gets a fresh in-memory SQLite database. The API client overrides
the get_session dependency so routes use the same database as the test.
"""
from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from main import app
from models import Base
from models.invoice import DiscountType
from schemas.invoice import InvoiceCreate, InvoiceItemRequest
from services.invoice_service import InvoiceService

NOW = datetime(2026, 10, 19, 9, 0, 0)


@pytest.fixture
def engine():
     engine = create_engine(
          "sqlite://",
          connect_args={"check_same_thread": False},
          poolclass=StaticPool,
     )
     Base.metadata.create_all(bind=engine)
     yield engine
     engine.dispose()


@pytest.fixture
def db_session(engine):
     TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
     session = TestingSession()
     try:
          yield session
     finally:
          session.close()


@pytest.fixture
def client(engine):
     TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)

     def override_get_session():
          session = TestingSession()
          try:
               yield session
               session.commit()
          except Exception:
               session.rollback()
               raise
          finally:
               session.close()

     app.dependency_overrides[get_session] = override_get_session
     yield TestClient(app)
     app.dependency_overrides.clear()


@pytest.fixture
def now():
     return NOW


@pytest.fixture
def make_invoice(db_session, now):
     """Create and flush an invoice through the service."""

     def _make(
          items=((Decimal("500"), 1), (Decimal("120"), 1)),
          region="PS",
          discount_kind=DiscountType.PERCENTAGE,
          discount=Decimal("10"),
          due_in_days=30,
          client_name="Sample Client",
          client_id=1001,
          created=None,
     ):
          request = InvoiceCreate(
               client_id=client_id,
               client_name=client_name,
               client_email="client@example.com",
               region=region,
               discount_kind=discount_kind,
               discount=discount,
               due_in_days=due_in_days,
               items=[
                    InvoiceItemRequest(name=f"Item {n}", unit_price=price, quantity=qty)
                    for n, (price, qty) in enumerate(items, start=1)
               ],
          )
          return InvoiceService.create_invoice(db_session, request, now=created or now)

     return _make
