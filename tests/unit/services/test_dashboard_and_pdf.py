from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from app.models import Dispatch
from app.services.dashboard_service import DashboardService
from app.services.dispatch_service import DispatchService
from app.services.invoice_service import InvoiceService
from app.services.pdf_service import PdfService
from app.utils.currency import CurrencySettings


def test_dashboard_stats_reflect_live_rows(session, customer, carrier, sent_quote, order):
    invoice = InvoiceService(session).create_invoice(
        {"type": "customer", "customer_id": customer.id, "amount": Decimal("500"), "due_date": date(2030, 1, 1)}
    )
    InvoiceService(session).update_status(invoice.id, "sent")

    stats = DashboardService(session).stats(now=datetime(2030, 2, 1))
    assert stats["total_customers"] == 1
    assert stats["total_carriers"] == 1
    assert stats["total_orders"] == 1
    assert stats["total_leads"] == 0
    assert stats["active_orders"] == 1
    assert stats["in_transit"] == 0
    assert stats["pending_quotes"] == 1
    assert stats["overdue_invoices"] == 1
    assert stats["revenue"] == Decimal("0")


def test_dashboard_revenue_counts_delivered_orders(session, carrier, order):
    service = DispatchService(session)
    dispatch = service.create_dispatch({"order_id": order.id, "carrier_id": carrier.id, "carrier_rate": 1900})
    service.update_status(dispatch.id, "in_transit", now=datetime(2030, 3, 1, 12, 0))
    service.update_status(dispatch.id, "delivered", now=datetime(2030, 3, 3, 12, 0))

    dashboard = DashboardService(session)
    assert dashboard.stats(now=datetime(2030, 3, 4))["revenue"] == Decimal("2450.00")
    march = (date(2030, 3, 1), date(2030, 4, 1))
    april = (date(2030, 4, 1), date(2030, 5, 1))
    assert dashboard.stats(now=datetime(2030, 3, 4), period=march)["revenue"] == Decimal("2450.00")
    assert dashboard.stats(now=datetime(2030, 3, 4), period=april)["revenue"] == Decimal("0")


def test_quote_pdf_renders(sent_quote):
    content = PdfService(company_name="Test Freight").quote_pdf(sent_quote)
    assert content.startswith(b"%PDF")


def test_invoice_and_rate_confirmation_pdfs_render(session, customer, carrier, order):
    invoice = InvoiceService(session).create_invoice(
        {
            "type": "customer",
            "customer_id": customer.id,
            "order_id": order.id,
            "amount": Decimal("2450.00"),
            "due_date": date(2030, 4, 1),
            "notes": "Net 30 <terms> & conditions",
        }
    )
    dispatch = DispatchService(session).create_dispatch(
        {"order_id": order.id, "carrier_id": carrier.id, "carrier_rate": Decimal("1900.00"), "driver_name": "Pat"}
    )
    pdf = PdfService(settings=CurrencySettings(display_currency="EUR"), company_name="Test Freight")
    assert pdf.invoice_pdf(invoice).startswith(b"%PDF")
    assert pdf.rate_confirmation_pdf(dispatch).startswith(b"%PDF")
    assert pdf.money(Decimal("100")) == "€85.00"


def test_rate_confirmation_renders_without_order_or_carrier():
    orphan = Dispatch(carrier_rate=Decimal("1900.00"), driver_name="Pat", notes="Call before arrival")
    content = PdfService(company_name="Test Freight").rate_confirmation_pdf(orphan)
    assert content.startswith(b"%PDF")
