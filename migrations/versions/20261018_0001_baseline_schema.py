"""baseline freight back-office schema

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 00:00:01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _contact_columns() -> list[sa.Column]:
    return [
        sa.Column("company_name", sa.String(length=255), nullable=False),
        sa.Column("contact_person", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=64), nullable=False),
    ]


def _address_columns() -> list[sa.Column]:
    return [
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=120), nullable=True),
        sa.Column("state", sa.String(length=64), nullable=True),
        sa.Column("zip_code", sa.String(length=20), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("profile_image_url", sa.String(length=500), nullable=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("idx_users_role", "users", ["role"])

    op.create_table(
        "leads",
        sa.Column("id", sa.Integer(), nullable=False),
        *_contact_columns(),
        sa.Column("origin_city", sa.String(length=120), nullable=True),
        sa.Column("origin_state", sa.String(length=64), nullable=True),
        sa.Column("destination_city", sa.String(length=120), nullable=True),
        sa.Column("destination_state", sa.String(length=64), nullable=True),
        sa.Column("pickup_date", sa.Date(), nullable=True),
        sa.Column("equipment_type", sa.String(length=64), nullable=True),
        sa.Column("commodity", sa.String(length=255), nullable=True),
        sa.Column("weight", sa.Numeric(12, 2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_leads_status", "leads", ["status"])

    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), nullable=False),
        *_contact_columns(),
        *_address_columns(),
        sa.Column("billing_address", sa.String(length=255), nullable=True),
        sa.Column("billing_city", sa.String(length=120), nullable=True),
        sa.Column("billing_state", sa.String(length=64), nullable=True),
        sa.Column("billing_zip_code", sa.String(length=20), nullable=True),
        sa.Column("credit_limit", sa.Numeric(12, 2), nullable=True),
        sa.Column("payment_terms", sa.String(length=64), nullable=False),
        sa.Column("special_instructions", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "carriers",
        sa.Column("id", sa.Integer(), nullable=False),
        *_contact_columns(),
        *_address_columns(),
        sa.Column("mc_number", sa.String(length=32), nullable=True),
        sa.Column("dot_number", sa.String(length=32), nullable=True),
        sa.Column("insurance_expiry", sa.Date(), nullable=True),
        sa.Column("w9_on_file", sa.Boolean(), nullable=False),
        sa.Column("performance_rating", sa.Numeric(3, 2), nullable=False),
        sa.Column("preferred_lanes", sa.Text(), nullable=True),
        sa.Column("equipment_types", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "quotes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("quote_number", sa.String(length=64), nullable=False),
        sa.Column("lead_id", sa.Integer(), nullable=True),
        sa.Column("customer_id", sa.Integer(), nullable=True),
        sa.Column("origin_city", sa.String(length=120), nullable=False),
        sa.Column("origin_state", sa.String(length=64), nullable=False),
        sa.Column("destination_city", sa.String(length=120), nullable=False),
        sa.Column("destination_state", sa.String(length=64), nullable=False),
        sa.Column("pickup_date", sa.Date(), nullable=True),
        sa.Column("equipment_type", sa.String(length=64), nullable=False),
        sa.Column("weight", sa.Numeric(12, 2), nullable=True),
        sa.Column("commodity", sa.String(length=255), nullable=True),
        sa.Column("quoted_rate", sa.Numeric(12, 2), nullable=False),
        sa.Column("valid_until", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(["lead_id"], ["leads.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("quote_number"),
    )
    op.create_index("idx_quotes_status", "quotes", ["status"])

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_number", sa.String(length=64), nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=True),
        sa.Column("customer_name", sa.String(length=255), nullable=True),
        sa.Column("lead_id", sa.Integer(), nullable=True),
        sa.Column("quote_id", sa.Integer(), nullable=True),
        sa.Column("origin_company", sa.String(length=255), nullable=True),
        sa.Column("origin_address", sa.String(length=255), nullable=False),
        sa.Column("origin_city", sa.String(length=120), nullable=False),
        sa.Column("origin_state", sa.String(length=64), nullable=False),
        sa.Column("origin_zip_code", sa.String(length=20), nullable=False),
        sa.Column("destination_company", sa.String(length=255), nullable=True),
        sa.Column("destination_address", sa.String(length=255), nullable=False),
        sa.Column("destination_city", sa.String(length=120), nullable=False),
        sa.Column("destination_state", sa.String(length=64), nullable=False),
        sa.Column("destination_zip_code", sa.String(length=20), nullable=False),
        sa.Column("pickup_date", sa.Date(), nullable=False),
        sa.Column("delivery_date", sa.Date(), nullable=True),
        sa.Column("equipment_type", sa.String(length=64), nullable=False),
        sa.Column("weight", sa.Numeric(12, 2), nullable=True),
        sa.Column("commodity", sa.String(length=255), nullable=True),
        sa.Column("customer_rate", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("special_instructions", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["lead_id"], ["leads.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["quote_id"], ["quotes.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("order_number"),
        sa.UniqueConstraint("quote_id"),
    )
    op.create_index("idx_orders_status", "orders", ["status"])

    op.create_table(
        "dispatches",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("carrier_id", sa.Integer(), nullable=False),
        sa.Column("carrier_rate", sa.Numeric(12, 2), nullable=False),
        sa.Column("driver_name", sa.String(length=255), nullable=True),
        sa.Column("driver_phone", sa.String(length=64), nullable=True),
        sa.Column("truck_number", sa.String(length=64), nullable=True),
        sa.Column("trailer_number", sa.String(length=64), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("rate_confirmation_sent", sa.Boolean(), nullable=False),
        sa.Column("rate_confirmation_signed", sa.Boolean(), nullable=False),
        sa.Column("estimated_pickup_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("actual_pickup_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("estimated_delivery_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("actual_delivery_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["carrier_id"], ["carriers.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_dispatches_status", "dispatches", ["status"])
    op.create_index("idx_dispatches_order", "dispatches", ["order_id"])

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("invoice_number", sa.String(length=64), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=True),
        sa.Column("carrier_id", sa.Integer(), nullable=True),
        sa.Column("order_id", sa.Integer(), nullable=True),
        sa.Column("dispatch_id", sa.Integer(), nullable=True),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("paid_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["carrier_id"], ["carriers.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["dispatch_id"], ["dispatches.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("invoice_number"),
    )
    op.create_index("idx_invoices_status", "invoices", ["status"])
    op.create_index("idx_invoices_type_status", "invoices", ["type", "status"])

    op.create_table(
        "follow_ups",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("lead_id", sa.Integer(), nullable=True),
        sa.Column("customer_id", sa.Integer(), nullable=True),
        sa.Column("carrier_id", sa.Integer(), nullable=True),
        sa.Column("order_id", sa.Integer(), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", sa.String(length=16), nullable=False),
        sa.Column("assigned_to", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(["lead_id"], ["leads.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["carrier_id"], ["carriers.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_follow_ups_open_priority", "follow_ups", ["completed", "priority"])


def downgrade() -> None:
    op.drop_index("idx_follow_ups_open_priority", table_name="follow_ups")
    op.drop_table("follow_ups")
    op.drop_index("idx_invoices_type_status", table_name="invoices")
    op.drop_index("idx_invoices_status", table_name="invoices")
    op.drop_table("invoices")
    op.drop_index("idx_dispatches_order", table_name="dispatches")
    op.drop_index("idx_dispatches_status", table_name="dispatches")
    op.drop_table("dispatches")
    op.drop_index("idx_orders_status", table_name="orders")
    op.drop_table("orders")
    op.drop_index("idx_quotes_status", table_name="quotes")
    op.drop_table("quotes")
    op.drop_table("carriers")
    op.drop_table("customers")
    op.drop_index("idx_leads_status", table_name="leads")
    op.drop_table("leads")
    op.drop_index("idx_users_role", table_name="users")
    op.drop_table("users")
