"""Dashboard schema module."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class DashboardStatsResponse(BaseModel):
    total_leads: int
    total_customers: int
    total_carriers: int
    total_orders: int
    active_orders: int
    in_transit: int
    pending_quotes: int
    revenue: Decimal
    pending_invoices: int
    overdue_invoices: int
