"""Invoice endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize, service_errors
from app.api.v1._responses import serialize
from app.core.dependencies import get_db_session
from app.schemas.common import StatusUpdateRequest
from app.schemas.invoices import (
    InvoiceCreateRequest,
    InvoiceResponse,
    InvoiceSummaryResponse,
    InvoiceUpdateRequest,
)
from app.services.base_service import utcnow
from app.services.invoice_service import InvoiceService
from app.services.pdf_service import PdfService

router = APIRouter(prefix="/invoices", tags=["invoices"])
RESOURCE = "invoices"


@router.get("", response_model=list[InvoiceResponse])
def list_invoices(
    status_filter: str | None = Query(default=None, alias="status"),
    invoice_type: str | None = Query(default=None, alias="type"),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[InvoiceResponse]:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        invoices = InvoiceService(db).list_invoices(status=status_filter, invoice_type=invoice_type)
    now = utcnow()
    return [serialize(InvoiceResponse, invoice, now) for invoice in invoices]


@router.get("/summary", response_model=InvoiceSummaryResponse)
def invoice_summary(
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> InvoiceSummaryResponse:
    authorize(authorization, "reports", "view", db)
    summary = InvoiceService(db).summary(now=utcnow())
    return InvoiceSummaryResponse(**summary.as_dict())


@router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(
    invoice_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> InvoiceResponse:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        invoice = InvoiceService(db).require(invoice_id)
    return serialize(InvoiceResponse, invoice, utcnow())


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: InvoiceCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> InvoiceResponse:
    authorize(authorization, RESOURCE, "create", db)
    with service_errors():
        invoice = InvoiceService(db).create_invoice(payload.model_dump(exclude_none=True))
    return serialize(InvoiceResponse, invoice, utcnow())


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(
    invoice_id: int,
    payload: InvoiceUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> InvoiceResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        invoice = InvoiceService(db).update(invoice_id, payload.model_dump(exclude_unset=True))
    return serialize(InvoiceResponse, invoice, utcnow())


@router.patch("/{invoice_id}/status", response_model=InvoiceResponse)
def update_invoice_status(
    invoice_id: int,
    payload: StatusUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> InvoiceResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        invoice = InvoiceService(db).update_status(invoice_id, payload.status)
    return serialize(InvoiceResponse, invoice, utcnow())


@router.get("/{invoice_id}/pdf")
def invoice_pdf(
    invoice_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> Response:
    authorize(authorization, "pdf", "generate", db)
    with service_errors():
        invoice = InvoiceService(db).require(invoice_id)
    content = PdfService().invoice_pdf(invoice)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="invoice-{invoice.invoice_number}.pdf"'},
    )


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_invoice(
    invoice_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    authorize(authorization, RESOURCE, "delete", db)
    with service_errors():
        InvoiceService(db).delete(invoice_id)
