"""Point-in-time projections over entity records.

Nothing here reads the clock: `now` is always supplied by the caller, so the
same inputs always produce the same classification. Records may be ORM rows,
plain objects or mappings carrying the documented field names.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from app.core.enums import (
    EntityKind,
    FollowUpPriority,
    InvoiceStatus,
    InvoiceType,
    OrderStatus,
    QuoteStatus,
)
from app.core.exceptions import ValidationError
from app.lifecycle.state_machine import FOLLOW_UP_COMPLETED, FOLLOW_UP_PENDING

URGENT_PRIORITIES = frozenset({FollowUpPriority.URGENT.value, FollowUpPriority.HIGH.value})
PENDING_QUOTE_STATUSES = frozenset({QuoteStatus.DRAFT.value, QuoteStatus.SENT.value})
PENDING_INVOICE_STATUSES = frozenset({InvoiceStatus.DRAFT.value, InvoiceStatus.SENT.value})
QUOTE_DECIDED_STATUSES = frozenset({QuoteStatus.ACCEPTED.value, QuoteStatus.REJECTED.value})
DERIVED_OVERDUE = "overdue"


def _field(record: Any, name: str, default: Any = None) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def _enum_value(record: Any, name: str) -> str:
    value = _field(record, name)
    if value is None:
        return ""
    return str(getattr(value, "value", value))


def _status(record: Any) -> str:
    return _enum_value(record, "status")


def _parse_temporal(value: Any) -> date | datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return value
    text = str(value).strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValidationError(f"Unparseable date value: {value!r}") from exc


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return _as_naive_utc(value)
    return datetime.combine(value, time.min)


def is_before(value: Any, now: date | datetime) -> bool:
    """True when `value` lies strictly before `now`.

    A bare date compares at day granularity, so an invoice due today is not
    yet overdue.
    """
    moment = _parse_temporal(value)
    if moment is None:
        return False
    if not isinstance(moment, datetime) or not isinstance(now, datetime):
        moment_day = moment.date() if isinstance(moment, datetime) else moment
        now_day = now.date() if isinstance(now, datetime) else now
        return moment_day < now_day
    return _as_naive_utc(moment) < _as_naive_utc(now)


def invoice_display_status(invoice: Any, now: date | datetime) -> str:
    status = _status(invoice)
    if status != InvoiceStatus.PAID.value and is_before(_field(invoice, "due_date"), now):
        return DERIVED_OVERDUE
    return status


def quote_display_status(quote: Any, now: date | datetime) -> str:
    status = _status(quote)
    if status not in QUOTE_DECIDED_STATUSES and is_before(_field(quote, "valid_until"), now):
        return QuoteStatus.EXPIRED.value
    return status


def is_follow_up_overdue(follow_up: Any, now: date | datetime) -> bool:
    return not bool(_field(follow_up, "completed", False)) and is_before(_field(follow_up, "due_date"), now)


def follow_up_display_status(follow_up: Any, now: date | datetime) -> str:
    if bool(_field(follow_up, "completed", False)):
        return FOLLOW_UP_COMPLETED
    if is_follow_up_overdue(follow_up, now):
        return DERIVED_OVERDUE
    return FOLLOW_UP_PENDING


_PROJECTIONS = {
    EntityKind.INVOICE: invoice_display_status,
    EntityKind.QUOTE: quote_display_status,
    EntityKind.FOLLOW_UP: follow_up_display_status,
}


def compute_derived_status(entity: Any, now: date | datetime, kind: EntityKind | str | None = None) -> str:
    """Return the display status of an entity at `now`.

    Kinds without a time-dependent projection return their stored status.
    """
    raw_kind = kind or _field(entity, "entity_kind")
    if raw_kind is None:
        raise ValidationError("Entity kind is required to derive a display status.")
    try:
        resolved = EntityKind(getattr(raw_kind, "value", raw_kind))
    except ValueError as exc:
        raise ValidationError(f"Unknown entity kind '{raw_kind}'.") from exc

    projection = _PROJECTIONS.get(resolved)
    if projection is None:
        return _status(entity)
    return projection(entity, now)


def _due_sort_key(follow_up: Any) -> tuple[int, datetime]:
    due = _parse_temporal(_field(follow_up, "due_date"))
    if due is None:
        return (1, datetime.max)
    return (0, _as_datetime(due))


def filter_urgent(follow_ups: Iterable[Any], now: date | datetime, limit: int | None = None) -> list[Any]:
    """Open high/urgent follow-ups, earliest due first, optionally capped.

    `now` is accepted so callers can pair the list with overdue flags computed
    at the same instant; membership itself does not depend on it.
    """
    if limit is not None and limit < 0:
        raise ValidationError("limit must be >= 0.")
    selected = [
        item
        for item in follow_ups
        if not bool(_field(item, "completed", False))
        and _enum_value(item, "priority") in URGENT_PRIORITIES
    ]
    ordered = sorted(selected, key=_due_sort_key)
    return ordered if limit is None else ordered[:limit]


def _to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid currency amount: {value!r}") from exc


def _in_period(order: Any, period: tuple[date | datetime, date | datetime] | None) -> bool:
    if period is None:
        return True
    moment = _parse_temporal(_field(order, "delivery_date")) or _parse_temporal(_field(order, "updated_at"))
    if moment is None:
        return False
    start, end = period
    point = _as_datetime(moment)
    return _as_datetime(start) <= point < _as_datetime(end)


@dataclass(frozen=True)
class DashboardStats:
    active_orders: int
    in_transit: int
    pending_quotes: int
    revenue: Decimal
    pending_invoices: int
    overdue_invoices: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def aggregate_dashboard_stats(
    orders: Iterable[Any],
    quotes: Iterable[Any],
    invoices: Iterable[Any],
    now: date | datetime,
    period: tuple[date | datetime, date | datetime] | None = None,
) -> DashboardStats:
    """Reduce entity collections to dashboard counts.

    Revenue sums customer rates of delivered orders whose delivery falls in
    the half-open `period`; with no period every delivered order counts.
    """
    active_orders = in_transit = 0
    revenue = Decimal("0")
    for order in orders:
        status = _status(order)
        if status != OrderStatus.DELIVERED.value:
            active_orders += 1
        if status == OrderStatus.IN_TRANSIT.value:
            in_transit += 1
        if status == OrderStatus.DELIVERED.value and _in_period(order, period):
            revenue += _to_decimal(_field(order, "customer_rate"))

    pending_quotes = sum(1 for quote in quotes if quote_display_status(quote, now) in PENDING_QUOTE_STATUSES)

    pending_invoices = overdue_invoices = 0
    for invoice in invoices:
        display = invoice_display_status(invoice, now)
        if display in PENDING_INVOICE_STATUSES:
            pending_invoices += 1
        elif display == DERIVED_OVERDUE:
            overdue_invoices += 1

    return DashboardStats(
        active_orders=active_orders,
        in_transit=in_transit,
        pending_quotes=pending_quotes,
        revenue=revenue,
        pending_invoices=pending_invoices,
        overdue_invoices=overdue_invoices,
    )


@dataclass(frozen=True)
class InvoiceSummary:
    total_customer: int
    total_carrier: int
    pending_amount: Decimal
    overdue_count: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize_invoices(invoices: Iterable[Any], now: date | datetime) -> InvoiceSummary:
    total_customer = total_carrier = overdue_count = 0
    pending_amount = Decimal("0")
    for invoice in invoices:
        invoice_type = _enum_value(invoice, "type")
        if invoice_type == InvoiceType.CUSTOMER.value:
            total_customer += 1
        elif invoice_type == InvoiceType.CARRIER.value:
            total_carrier += 1
        if _status(invoice) in PENDING_INVOICE_STATUSES:
            pending_amount += _to_decimal(_field(invoice, "amount"))
        if invoice_display_status(invoice, now) == DERIVED_OVERDUE:
            overdue_count += 1
    return InvoiceSummary(
        total_customer=total_customer,
        total_carrier=total_carrier,
        pending_amount=pending_amount,
        overdue_count=overdue_count,
    )
