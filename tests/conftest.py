from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.auth.jwt import create_token_pair
from app.core.config import get_config
from app.core.dependencies import get_db_session
from app.database.db import enable_sqlite_foreign_keys
from app.main import create_app
from app.models import Base, Carrier, Customer, Quote, User
from app.services.order_service import OrderService


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(session):
    app = create_app()

    def _override_db():
        yield session

    app.dependency_overrides[get_db_session] = _override_db
    return TestClient(app)


def bearer(role: str, user_id: str, username: str) -> dict[str, str]:
    tokens = create_token_pair(user_id=user_id, role=role, username=username, secret=get_config().JWT_SECRET)
    return {"Authorization": f"Bearer {tokens.access_token}"}


@pytest.fixture
def customer(session):
    record = Customer(
        company_name="Acme Foods",
        contact_person="Dana Ruiz",
        email="dana@acmefoods.com",
        phone="555-0100",
    )
    session.add(record)
    session.commit()
    return record


@pytest.fixture
def carrier(session):
    record = Carrier(
        company_name="Blue Line Trucking",
        contact_person="Sam Ortiz",
        email="dispatch@blueline.com",
        phone="555-0200",
        mc_number="MC123456",
        dot_number="DOT7654321",
    )
    session.add(record)
    session.commit()
    return record


@pytest.fixture
def sent_quote(session, customer):
    record = Quote(
        quote_number="QT-1001",
        customer_id=customer.id,
        origin_city="Chicago",
        origin_state="IL",
        destination_city="Dallas",
        destination_state="TX",
        pickup_date=date(2030, 3, 1),
        equipment_type="dry_van",
        quoted_rate=Decimal("2450.00"),
        valid_until=date(2030, 2, 20),
        status="sent",
    )
    session.add(record)
    session.commit()
    return record


@pytest.fixture
def order(session, customer):
    return OrderService(session).create_order(
        {
            "customer_id": customer.id,
            "origin_address": "1 Dock Rd",
            "origin_city": "Chicago",
            "origin_state": "IL",
            "origin_zip_code": "60601",
            "destination_address": "9 Market St",
            "destination_city": "Dallas",
            "destination_state": "TX",
            "destination_zip_code": "75201",
            "pickup_date": date(2030, 3, 1),
            "equipment_type": "dry_van",
            "customer_rate": Decimal("2450.00"),
        }
    )


@pytest.fixture
def auth_headers(session):
    """Return a factory of bearer headers for stored, active users.

    Requests re-read the caller from the database, so each role gets its own
    `user-<role>` account unless a `user_id` is given.
    """

    def _headers(role: str, user_id: str | None = None) -> dict[str, str]:
        user_id = user_id or f"user-{role}"
        user = session.get(User, user_id)
        if user is None:
            user = User(
                id=user_id,
                username=f"{user_id}-login",
                email=f"{user_id}@everflown.test",
                hashed_password="not-a-real-hash",
                role=role,
            )
            session.add(user)
        else:
            user.role = role
        session.commit()
        return bearer(role, user_id=user.id, username=user.username)

    return _headers
