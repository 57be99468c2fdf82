"""PDF rendering for quotes, invoices and carrier rate confirmations.

Documents are built in memory and returned as bytes so the API can stream
them without touching the filesystem.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.core.config import get_config
from app.models import Dispatch, Invoice, Quote
from app.utils.currency import CurrencySettings, format_currency

logger = logging.getLogger(__name__)

HEADER_COLOR = colors.HexColor("#2C3E50")
ACCENT_COLOR = colors.HexColor("#3498DB")
STRIPE_COLOR = colors.HexColor("#F8F9FA")


def _text(value) -> str:
    if value is None or value == "":
        return "N/A"
    if isinstance(value, (date, datetime)):
        return value.strftime("%B %d, %Y")
    return str(value)


def _field(record, name: str) -> str:
    return _text(getattr(record, name) if record is not None else None)


class PdfService:
    def __init__(self, settings: CurrencySettings | None = None, company_name: str | None = None) -> None:
        config = get_config()
        self.settings = settings or CurrencySettings(display_currency=config.DISPLAY_CURRENCY)
        self.company_name = company_name or config.COMPANY_NAME
        self.styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle(
            "DocumentTitle",
            parent=self.styles["Heading1"],
            fontSize=22,
            textColor=HEADER_COLOR,
            spaceAfter=20,
            alignment=TA_CENTER,
        )
        self.footer_style = ParagraphStyle(
            "Footer",
            parent=self.styles["Normal"],
            fontSize=9,
            textColor=colors.grey,
            alignment=TA_CENTER,
        )

    def money(self, amount) -> str:
        return format_currency(amount, self.settings)

    def quote_pdf(self, quote: Quote) -> bytes:
        rows = [
            ["Quote Number:", _text(quote.quote_number), "Valid Until:", _text(quote.valid_until)],
            ["Status:", _text(quote.status), "Pickup Date:", _text(quote.pickup_date)],
        ]
        lane = self._lane_table(
            [
                ["Origin", "Destination", "Equipment", "Rate"],
                [
                    f"{_text(quote.origin_city)}, {_text(quote.origin_state)}",
                    f"{_text(quote.destination_city)}, {_text(quote.destination_state)}",
                    _text(quote.equipment_type),
                    self.money(quote.quoted_rate),
                ],
            ]
        )
        return self._render(f"FREIGHT QUOTE {quote.quote_number}", rows, lane, quote.notes)

    def invoice_pdf(self, invoice: Invoice) -> bytes:
        bill_to = invoice.customer if invoice.customer is not None else invoice.carrier
        rows = [
            ["Invoice Number:", _text(invoice.invoice_number), "Invoice Date:", _text(invoice.created_at)],
            ["Bill To:", _text(bill_to.company_name if bill_to else None), "Due Date:", _text(invoice.due_date)],
            ["Type:", _text(invoice.type), "Amount Due:", self.money(invoice.amount)],
        ]
        order = invoice.order
        items = [["Description", "Reference", "Amount"]]
        description = "Freight services"
        if order is not None:
            description = (
                f"Freight {_text(order.origin_city)}, {_text(order.origin_state)} to "
                f"{_text(order.destination_city)}, {_text(order.destination_state)}"
            )
        items.append([description, _text(order.order_number if order else None), self.money(invoice.amount)])
        items.append(["", "Total:", self.money(invoice.amount)])
        return self._render(f"INVOICE {invoice.invoice_number}", rows, self._lane_table(items, totals=True), invoice.notes)

    def rate_confirmation_pdf(self, dispatch: Dispatch) -> bytes:
        order = dispatch.order
        carrier = dispatch.carrier
        rows = [
            ["Order Number:", _field(order, "order_number"), "Carrier:", _field(carrier, "company_name")],
            ["MC Number:", _field(carrier, "mc_number"), "DOT Number:", _field(carrier, "dot_number")],
            ["Driver:", _text(dispatch.driver_name), "Driver Phone:", _text(dispatch.driver_phone)],
            ["Truck:", _text(dispatch.truck_number), "Trailer:", _text(dispatch.trailer_number)],
        ]
        stops = self._lane_table(
            [
                ["Stop", "Address", "Date", "Carrier Rate"],
                [
                    "Pickup",
                    f"{_field(order, 'origin_address')}, {_field(order, 'origin_city')}, "
                    f"{_field(order, 'origin_state')} {_field(order, 'origin_zip_code')}",
                    _field(order, "pickup_date"),
                    self.money(dispatch.carrier_rate),
                ],
                [
                    "Delivery",
                    f"{_field(order, 'destination_address')}, {_field(order, 'destination_city')}, "
                    f"{_field(order, 'destination_state')} {_field(order, 'destination_zip_code')}",
                    _field(order, "delivery_date"),
                    "",
                ],
            ]
        )
        instructions = order.special_instructions if order is not None else None
        return self._render(
            f"RATE CONFIRMATION {_field(order, 'order_number')}",
            rows,
            stops,
            instructions or dispatch.notes,
        )

    def _lane_table(self, data: list[list[str]], totals: bool = False) -> Table:
        table = Table(data, hAlign="LEFT")
        body_end = -2 if totals else -1
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), ACCENT_COLOR),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("ROWBACKGROUNDS", (0, 1), (-1, body_end), [colors.white, STRIPE_COLOR]),
            ("GRID", (0, 0), (-1, body_end), 0.5, colors.grey),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]
        if totals:
            style += [
                ("FONTNAME", (1, -1), (-1, -1), "Helvetica-Bold"),
                ("LINEABOVE", (1, -1), (-1, -1), 1.5, HEADER_COLOR),
            ]
        table.setStyle(TableStyle(style))
        return table

    def _render(self, title: str, header_rows: list[list[str]], body: Table, notes: str | None) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=letter,
            rightMargin=0.75 * inch,
            leftMargin=0.75 * inch,
            topMargin=0.75 * inch,
            bottomMargin=0.75 * inch,
            title=title,
        )
        header = Table(header_rows, hAlign="LEFT")
        header.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTNAME", (2, 0), (2, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ]
            )
        )
        elements = [
            Paragraph(escape(self.company_name), self.title_style),
            Paragraph(escape(title), self.styles["Heading2"]),
            Spacer(1, 0.2 * inch),
            header,
            Spacer(1, 0.3 * inch),
            body,
        ]
        if notes:
            elements += [
                Spacer(1, 0.3 * inch),
                Paragraph("<b>Notes:</b>", self.styles["Heading3"]),
                Paragraph(escape(notes), self.styles["Normal"]),
            ]
        elements += [
            Spacer(1, 0.5 * inch),
            Paragraph(f"Generated by {escape(self.company_name)}", self.footer_style),
        ]
        doc.build(elements)
        logger.info("pdf.rendered", extra={"event": "pdf.rendered", "title": title})
        return buffer.getvalue()
