"""Canonical status transition tables for freight back-office entities."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from app.core.enums import (
    DispatchStatus,
    EntityKind,
    InvoiceStatus,
    LeadStatus,
    OrderStatus,
    QuoteStatus,
)
from app.core.exceptions import IllegalTransitionError, UnknownStateError

logger = logging.getLogger(__name__)

FOLLOW_UP_PENDING = "pending"
FOLLOW_UP_COMPLETED = "completed"


class StateMachine:
    """Closed set of states plus the explicit moves allowed between them."""

    def __init__(self, kind: EntityKind, states: Iterable[str], transitions: dict[str, set[str]]) -> None:
        self.kind = kind
        self.states = frozenset(states)
        self._transitions = {state: frozenset(targets) for state, targets in transitions.items()}
        referenced = set(self._transitions)
        for targets in self._transitions.values():
            referenced |= targets
        undeclared = referenced - self.states
        if undeclared:
            raise ValueError(f"{kind.value}: transitions reference unknown states {sorted(undeclared)}")

    def targets(self, current: str) -> frozenset[str]:
        self._require_known(current)
        return self._transitions.get(current, frozenset())

    def is_terminal(self, state: str) -> bool:
        return not self.targets(state)

    def can_transition(self, current: str, target: str) -> bool:
        self._require_known(current)
        self._require_known(target)
        if current == target:
            return True
        return target in self._transitions.get(current, frozenset())

    def assert_transition(self, current: str, target: str) -> None:
        if not self.can_transition(current=current, target=target):
            raise IllegalTransitionError(
                f"{self.kind.value} transition not allowed: {current} -> {target}"
            )

    def _require_known(self, state: str) -> None:
        if state not in self.states:
            raise UnknownStateError(
                f"Unknown {self.kind.value} status '{state}'. "
                f"Must be one of: {', '.join(sorted(self.states))}"
            )


def _values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


LEAD_MACHINE = StateMachine(
    EntityKind.LEAD,
    _values(LeadStatus),
    {
        LeadStatus.NEW.value: {LeadStatus.CONTACTED.value, LeadStatus.LOST.value},
        LeadStatus.CONTACTED.value: {LeadStatus.QUOTED.value, LeadStatus.LOST.value},
        LeadStatus.QUOTED.value: {LeadStatus.CONVERTED.value, LeadStatus.LOST.value},
    },
)

QUOTE_MACHINE = StateMachine(
    EntityKind.QUOTE,
    _values(QuoteStatus),
    {
        QuoteStatus.DRAFT.value: {QuoteStatus.SENT.value},
        QuoteStatus.SENT.value: {
            QuoteStatus.ACCEPTED.value,
            QuoteStatus.REJECTED.value,
            QuoteStatus.EXPIRED.value,
        },
    },
)

ORDER_MACHINE = StateMachine(
    EntityKind.ORDER,
    _values(OrderStatus),
    {
        OrderStatus.NEEDS_TRUCK.value: {OrderStatus.DISPATCHED.value},
        OrderStatus.DISPATCHED.value: {OrderStatus.IN_TRANSIT.value},
        OrderStatus.IN_TRANSIT.value: {OrderStatus.DELIVERED.value},
    },
)

DISPATCH_MACHINE = StateMachine(
    EntityKind.DISPATCH,
    _values(DispatchStatus),
    {
        DispatchStatus.ASSIGNED.value: {
            DispatchStatus.PICKED_UP.value,
            DispatchStatus.IN_TRANSIT.value,
            DispatchStatus.CANCELLED.value,
        },
        DispatchStatus.PICKED_UP.value: {
            DispatchStatus.IN_TRANSIT.value,
            DispatchStatus.DELIVERED.value,
            DispatchStatus.CANCELLED.value,
        },
        DispatchStatus.IN_TRANSIT.value: {
            DispatchStatus.DELIVERED.value,
            DispatchStatus.CANCELLED.value,
        },
    },
)

# `overdue` stays in the stored set only for legacy rows; nothing moves into it.
INVOICE_MACHINE = StateMachine(
    EntityKind.INVOICE,
    _values(InvoiceStatus),
    {
        InvoiceStatus.DRAFT.value: {InvoiceStatus.SENT.value},
        InvoiceStatus.SENT.value: {InvoiceStatus.PAID.value},
        InvoiceStatus.OVERDUE.value: {InvoiceStatus.PAID.value},
    },
)

FOLLOW_UP_MACHINE = StateMachine(
    EntityKind.FOLLOW_UP,
    [FOLLOW_UP_PENDING, FOLLOW_UP_COMPLETED],
    {FOLLOW_UP_PENDING: {FOLLOW_UP_COMPLETED}},
)

MACHINES: dict[EntityKind, StateMachine] = {
    machine.kind: machine
    for machine in (
        LEAD_MACHINE,
        QUOTE_MACHINE,
        ORDER_MACHINE,
        DISPATCH_MACHINE,
        INVOICE_MACHINE,
        FOLLOW_UP_MACHINE,
    )
}


def get_machine(kind: EntityKind | str) -> StateMachine:
    try:
        return MACHINES[EntityKind(kind)]
    except ValueError as exc:
        raise UnknownStateError(f"Unknown entity kind '{kind}'.") from exc


def validate_transition(kind: EntityKind | str, from_status: str, to_status: str) -> bool:
    """Return whether `from_status -> to_status` is legal for the entity kind.

    Raises UnknownStateError when either status is outside the kind's set.
    """
    return get_machine(kind).can_transition(from_status, to_status)


def assert_transition(kind: EntityKind | str, from_status: str, to_status: str) -> None:
    """Validate a transition, raising IllegalTransitionError when it is not allowed."""
    machine = get_machine(kind)
    try:
        machine.assert_transition(from_status, to_status)
    except IllegalTransitionError:
        logger.info(
            "lifecycle.transition.rejected",
            extra={
                "event": "lifecycle.transition.rejected",
                "entity_kind": machine.kind.value,
                "from_status": from_status,
                "to_status": to_status,
            },
        )
        raise


def validate_completion(was_completed: bool, completed: bool) -> bool:
    """Follow-ups only ever move from open to completed."""
    return validate_transition(
        EntityKind.FOLLOW_UP,
        FOLLOW_UP_COMPLETED if was_completed else FOLLOW_UP_PENDING,
        FOLLOW_UP_COMPLETED if completed else FOLLOW_UP_PENDING,
    )
