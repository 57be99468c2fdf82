"""Invoice service for common invoice operations."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from app.core.enums import EntityKind, InvoiceStatus, InvoiceType
from app.core.exceptions import ValidationError
from app.lifecycle.derived import InvoiceSummary, summarize_invoices
from app.models import Invoice
from app.services.base_service import CrudService, utcnow
from app.utils.ids import INVOICE_PREFIX, new_document_number


class InvoiceService(CrudService):
    """Service for customer/carrier invoice CRUD and payment transitions."""

    model = Invoice
    kind = EntityKind.INVOICE

    def _to_date(self, value: str | date | datetime) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError as exc:
            raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD") from exc

    def _clean(self, data: dict[str, Any]) -> dict[str, Any]:
        payload = super()._clean(data)
        if "type" in payload:
            invoice_type = str(payload["type"]).strip().lower()
            try:
                payload["type"] = InvoiceType(invoice_type).value
            except ValueError as exc:
                raise ValidationError(f"Invalid invoice type '{invoice_type}'. Must be customer or carrier") from exc
        for name in ("due_date", "paid_date"):
            if payload.get(name) is not None:
                payload[name] = self._to_date(payload[name])
        return payload

    def create_invoice(self, data: dict[str, Any]) -> Invoice:
        payload = dict(data)
        if not payload.get("type"):
            raise ValidationError("Invoice type is required")
        if not payload.get("invoice_number"):
            payload["invoice_number"] = new_document_number(INVOICE_PREFIX)
        return self.create(payload)

    def list_invoices(self, status: str | None = None, invoice_type: str | None = None) -> list[Invoice]:
        return self.list(status=status, type=invoice_type)

    def update(self, record_id: Any, changes: dict[str, Any], now: date | datetime | None = None) -> Invoice:
        invoice = self.require(record_id)
        payload = self._clean(changes)
        target_status = payload.pop("status", None)
        for name, value in payload.items():
            setattr(invoice, name, value)
        if target_status is not None and self._transition(invoice, target_status):
            if invoice.status == InvoiceStatus.PAID.value and invoice.paid_date is None:
                invoice.paid_date = self._to_date(now or utcnow())
        self.commit()
        self.db.refresh(invoice)
        return invoice

    def update_status(self, record_id: Any, status: str, now: date | datetime | None = None) -> Invoice:
        return self.update(record_id, {"status": status}, now=now)

    def mark_paid(self, invoice_id: int, now: date | datetime | None = None) -> Invoice:
        return self.update_status(invoice_id, InvoiceStatus.PAID.value, now=now)

    def summary(self, now: date | datetime | None = None) -> InvoiceSummary:
        return summarize_invoices(self.db.query(Invoice).all(), now or utcnow())
