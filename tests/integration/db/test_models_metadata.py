from __future__ import annotations

from pathlib import Path

from sqlalchemy import inspect

from app.database.init_db import seed_default_admin
from app.models import Base

EXPECTED_TABLES = {
    "users",
    "leads",
    "customers",
    "carriers",
    "quotes",
    "orders",
    "dispatches",
    "invoices",
    "follow_ups",
}


def test_metadata_declares_every_table():
    assert EXPECTED_TABLES <= set(Base.metadata.tables)


def test_create_all_builds_schema(session):
    inspector = inspect(session.get_bind())
    assert EXPECTED_TABLES <= set(inspector.get_table_names())
    order_columns = {column["name"] for column in inspector.get_columns("orders")}
    assert {"order_number", "quote_id", "status", "customer_rate", "delivery_date"} <= order_columns


def test_order_quote_link_is_unique():
    column = Base.metadata.tables["orders"].c.quote_id
    assert column.unique is True


def test_baseline_migration_mentions_every_table():
    versions = Path(__file__).resolve().parents[3] / "migrations" / "versions"
    source = "\n".join(path.read_text(encoding="utf-8") for path in versions.glob("*.py"))
    for table in EXPECTED_TABLES:
        assert f'"{table}"' in source


def test_seed_default_admin_runs_once(session):
    admin = seed_default_admin(session)
    assert admin is not None
    assert admin.role == "admin"
    assert admin.email.endswith("@everflown.local")
    assert seed_default_admin(session) is None
