"""Pydantic schema package for API contracts."""

from app.schemas.auth import LoginRequest, RefreshRequest, TokenResponse
from app.schemas.common import StatusUpdateRequest
from app.schemas.dashboard import DashboardStatsResponse
from app.schemas.dispatches import DispatchCreateRequest, DispatchResponse, DispatchUpdateRequest
from app.schemas.follow_ups import FollowUpCreateRequest, FollowUpResponse, FollowUpUpdateRequest
from app.schemas.invoices import (
    InvoiceCreateRequest,
    InvoiceResponse,
    InvoiceSummaryResponse,
    InvoiceUpdateRequest,
)
from app.schemas.leads import LeadCreateRequest, LeadResponse, LeadUpdateRequest
from app.schemas.orders import OrderCreateRequest, OrderResponse, OrderUpdateRequest
from app.schemas.parties import (
    CarrierCreateRequest,
    CarrierResponse,
    CarrierUpdateRequest,
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from app.schemas.quotes import QuoteAcceptRequest, QuoteAcceptResponse, QuoteCreateRequest, QuoteResponse, QuoteUpdateRequest
from app.schemas.users import (
    CurrentUserResponse,
    PermissionsResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "CarrierCreateRequest",
    "CarrierResponse",
    "CarrierUpdateRequest",
    "CurrentUserResponse",
    "CustomerCreateRequest",
    "CustomerResponse",
    "CustomerUpdateRequest",
    "DashboardStatsResponse",
    "DispatchCreateRequest",
    "DispatchResponse",
    "DispatchUpdateRequest",
    "FollowUpCreateRequest",
    "FollowUpResponse",
    "FollowUpUpdateRequest",
    "InvoiceCreateRequest",
    "InvoiceResponse",
    "InvoiceSummaryResponse",
    "InvoiceUpdateRequest",
    "LeadCreateRequest",
    "LeadResponse",
    "LeadUpdateRequest",
    "LoginRequest",
    "OrderCreateRequest",
    "OrderResponse",
    "OrderUpdateRequest",
    "PermissionsResponse",
    "QuoteAcceptRequest",
    "QuoteAcceptResponse",
    "QuoteCreateRequest",
    "QuoteResponse",
    "QuoteUpdateRequest",
    "RefreshRequest",
    "StatusUpdateRequest",
    "TokenResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
