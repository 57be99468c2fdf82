"""Quote service: pricing records and the quote-to-order handoff."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from app.core.enums import EntityKind, OrderStatus, QuoteStatus, normalize_status
from app.core.exceptions import IllegalTransitionError, ValidationError
from app.lifecycle.derived import quote_display_status
from app.models import Order, Quote
from app.services.base_service import CrudService, utcnow
from app.utils.ids import ORDER_PREFIX, QUOTE_PREFIX, new_document_number
from app.utils.validators import normalize_lane_fields

logger = logging.getLogger(__name__)

REQUIRED_ORDER_FIELDS = (
    "origin_address",
    "origin_zip_code",
    "destination_address",
    "destination_zip_code",
)
ORDER_OVERRIDE_FIELDS = frozenset(
    REQUIRED_ORDER_FIELDS
    + (
        "order_number",
        "customer_name",
        "origin_company",
        "destination_company",
        "pickup_date",
        "delivery_date",
        "special_instructions",
    )
)


def build_order_fields(quote: Quote, overrides: dict[str, Any]) -> dict[str, Any]:
    """Column values for the order that fulfils `quote`."""
    unknown = set(overrides) - ORDER_OVERRIDE_FIELDS
    if unknown:
        raise ValidationError(f"Unsupported order fields: {', '.join(sorted(unknown))}")
    missing = [name for name in REQUIRED_ORDER_FIELDS if not overrides.get(name)]
    if missing:
        raise ValidationError(f"Missing order fields: {', '.join(missing)}")

    pickup_date = overrides.get("pickup_date") or quote.pickup_date
    if pickup_date is None:
        raise ValidationError("pickup_date is required when the quote has none")

    fields = {
        "order_number": new_document_number(ORDER_PREFIX),
        "customer_id": quote.customer_id,
        "lead_id": quote.lead_id,
        "quote_id": quote.id,
        "origin_city": quote.origin_city,
        "origin_state": quote.origin_state,
        "destination_city": quote.destination_city,
        "destination_state": quote.destination_state,
        "equipment_type": quote.equipment_type,
        "weight": quote.weight,
        "commodity": quote.commodity,
        "customer_rate": quote.quoted_rate,
        "status": OrderStatus.NEEDS_TRUCK.value,
    }
    fields.update({name: value for name, value in overrides.items() if value is not None})
    fields["pickup_date"] = pickup_date
    return fields


class QuoteService(CrudService):
    model = Quote
    kind = EntityKind.QUOTE

    def create_quote(self, data: dict[str, Any]) -> Quote:
        payload = normalize_lane_fields(data)
        if not payload.get("quote_number"):
            payload["quote_number"] = new_document_number(QUOTE_PREFIX)
        return self.create(payload)

    def list_quotes(self, status: str | None = None, customer_id: int | None = None) -> list[Quote]:
        return self.list(status=status, customer_id=customer_id)

    def update(self, record_id: Any, changes: dict[str, Any]) -> Quote:
        if "status" in changes:
            self._reject_direct_accept(changes["status"])
        return super().update(record_id, normalize_lane_fields(changes))

    def update_status(self, record_id: Any, status: str) -> Quote:
        self._reject_direct_accept(status)
        return super().update_status(record_id, status)

    def accept_quote(
        self,
        quote_id: int,
        order_overrides: dict[str, Any] | None = None,
        now: date | datetime | None = None,
    ) -> tuple[Quote, Order]:
        """Accept a quote and create its order in one transaction.

        Accepting an already accepted quote returns the order created the
        first time. Any failure rolls the session back, leaving the quote at
        its previous status.
        """
        now = now or utcnow()
        quote = self.require(quote_id)
        existing = self.db.query(Order).filter(Order.quote_id == quote.id).first()
        if existing is not None and quote.status == QuoteStatus.ACCEPTED.value:
            return quote, existing

        if quote_display_status(quote, now) == QuoteStatus.EXPIRED.value and quote.status != QuoteStatus.EXPIRED.value:
            raise IllegalTransitionError(f"Quote {quote.quote_number} expired on {quote.valid_until.isoformat()}")

        try:
            order = Order(**build_order_fields(quote, dict(order_overrides or {})))
            self._transition(quote, QuoteStatus.ACCEPTED.value)
            self.db.add(order)
            self.commit()
        except Exception:
            self.rollback()
            raise

        self.db.refresh(quote)
        self.db.refresh(order)
        logger.info(
            "quote.accepted",
            extra={
                "event": "quote.accepted",
                "quote_id": quote.id,
                "quote_number": quote.quote_number,
                "order_id": order.id,
                "order_number": order.order_number,
            },
        )
        return quote, order

    def _reject_direct_accept(self, status: str) -> None:
        if normalize_status(self.kind, str(status)) == QuoteStatus.ACCEPTED.value:
            raise ValidationError("Quotes are accepted through accept_quote so the order is created with them")
