"""Root API router for v1 endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from app.api.v1 import (
    auth,
    carriers,
    customers,
    dashboard,
    dispatches,
    followups,
    health,
    invoices,
    leads,
    orders,
    quotes,
    users,
)
from app.core.config import get_config

api_router = APIRouter(prefix=get_config().API_PREFIX)
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(dashboard.router)
api_router.include_router(leads.router)
api_router.include_router(customers.router)
api_router.include_router(carriers.router)
api_router.include_router(quotes.router)
api_router.include_router(orders.router)
api_router.include_router(dispatches.router)
api_router.include_router(invoices.router)
api_router.include_router(followups.router)


def get_api_router() -> APIRouter:
    return api_router
