"""SQLAlchemy model package for the freight back-office schema."""

from app.models.base import Base
from app.models.carrier import Carrier
from app.models.customer import Customer
from app.models.dispatch import Dispatch
from app.models.follow_up import FollowUp
from app.models.invoice import Invoice
from app.models.lead import Lead
from app.models.order import Order
from app.models.quote import Quote
from app.models.user import User

__all__ = [
    "Base",
    "Carrier",
    "Customer",
    "Dispatch",
    "FollowUp",
    "Invoice",
    "Lead",
    "Order",
    "Quote",
    "User",
]
