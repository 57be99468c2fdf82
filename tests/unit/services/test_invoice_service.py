from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from app.core.exceptions import IllegalTransitionError, ValidationError
from app.services.invoice_service import InvoiceService


def _invoice(session, customer, **extra):
    payload = {
        "type": "customer",
        "customer_id": customer.id,
        "amount": Decimal("2450.00"),
        "due_date": "2030-04-01",
    }
    payload.update(extra)
    return InvoiceService(session).create_invoice(payload)


def test_create_invoice_assigns_number_and_parses_due_date(session, customer):
    invoice = _invoice(session, customer)
    assert invoice.invoice_number.startswith("INV-")
    assert invoice.status == "draft"
    assert invoice.due_date == date(2030, 4, 1)


def test_invoice_requires_valid_type_and_dates(session, customer):
    with pytest.raises(ValidationError):
        _invoice(session, customer, type=None)
    with pytest.raises(ValidationError, match="factoring"):
        _invoice(session, customer, type="factoring")
    with pytest.raises(ValidationError, match="YYYY-MM-DD"):
        _invoice(session, customer, due_date="04/01/2030")


def test_paying_invoice_records_paid_date(session, customer):
    service = InvoiceService(session)
    invoice = _invoice(session, customer)
    service.update_status(invoice.id, "sent")
    invoice = service.mark_paid(invoice.id, now=datetime(2030, 3, 28, 10, 0))
    assert invoice.status == "paid"
    assert invoice.paid_date == date(2030, 3, 28)


def test_draft_invoice_cannot_jump_to_paid(session, customer):
    invoice = _invoice(session, customer)
    with pytest.raises(IllegalTransitionError):
        InvoiceService(session).mark_paid(invoice.id)


def test_list_invoices_filters_by_type(session, customer, carrier):
    _invoice(session, customer)
    _invoice(session, customer, type="carrier", customer_id=None, carrier_id=carrier.id)
    service = InvoiceService(session)
    assert [item.type for item in service.list_invoices(invoice_type="carrier")] == ["carrier"]
    assert len(service.list_invoices(status="draft")) == 2


def test_summary_counts_overdue_by_due_date(session, customer):
    service = InvoiceService(session)
    overdue = _invoice(session, customer, due_date="2030-01-01", amount=Decimal("100.00"))
    service.update_status(overdue.id, "sent")
    _invoice(session, customer, due_date="2030-06-01", amount=Decimal("50.00"))
    summary = service.summary(now=date(2030, 2, 1))
    assert summary.total_customer == 2
    assert summary.overdue_count == 1
    assert summary.pending_amount == Decimal("150.00")
