"""Quote endpoints for API v1, including acceptance into an order."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize, service_errors
from app.api.v1._responses import serialize
from app.core.dependencies import get_db_session
from app.schemas.common import StatusUpdateRequest
from app.schemas.orders import OrderResponse
from app.schemas.quotes import (
    QuoteAcceptRequest,
    QuoteAcceptResponse,
    QuoteCreateRequest,
    QuoteResponse,
    QuoteUpdateRequest,
)
from app.services.base_service import utcnow
from app.services.pdf_service import PdfService
from app.services.quote_service import QuoteService

router = APIRouter(prefix="/quotes", tags=["quotes"])
RESOURCE = "quotes"


@router.get("", response_model=list[QuoteResponse])
def list_quotes(
    status_filter: str | None = Query(default=None, alias="status"),
    customer_id: int | None = Query(default=None),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[QuoteResponse]:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        quotes = QuoteService(db).list_quotes(status=status_filter, customer_id=customer_id)
    now = utcnow()
    return [serialize(QuoteResponse, quote, now) for quote in quotes]


@router.get("/{quote_id}", response_model=QuoteResponse)
def get_quote(
    quote_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> QuoteResponse:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        quote = QuoteService(db).require(quote_id)
    return serialize(QuoteResponse, quote, utcnow())


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
def create_quote(
    payload: QuoteCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> QuoteResponse:
    authorize(authorization, RESOURCE, "create", db)
    with service_errors():
        quote = QuoteService(db).create_quote(payload.model_dump(exclude_none=True))
    return serialize(QuoteResponse, quote, utcnow())


@router.put("/{quote_id}", response_model=QuoteResponse)
def update_quote(
    quote_id: int,
    payload: QuoteUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> QuoteResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        quote = QuoteService(db).update(quote_id, payload.model_dump(exclude_unset=True))
    return serialize(QuoteResponse, quote, utcnow())


@router.patch("/{quote_id}/status", response_model=QuoteResponse)
def update_quote_status(
    quote_id: int,
    payload: StatusUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> QuoteResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        quote = QuoteService(db).update_status(quote_id, payload.status)
    return serialize(QuoteResponse, quote, utcnow())


@router.post("/{quote_id}/accept", response_model=QuoteAcceptResponse)
def accept_quote(
    quote_id: int,
    payload: QuoteAcceptRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> QuoteAcceptResponse:
    authorize(authorization, RESOURCE, "update", db)
    authorize(authorization, "orders", "create", db)
    now = utcnow()
    with service_errors():
        quote, order = QuoteService(db).accept_quote(quote_id, payload.model_dump(exclude_none=True), now=now)
    return QuoteAcceptResponse(
        quote=serialize(QuoteResponse, quote, now),
        order=serialize(OrderResponse, order, now),
    )


@router.get("/{quote_id}/pdf")
def quote_pdf(
    quote_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> Response:
    authorize(authorization, "pdf", "generate", db)
    with service_errors():
        quote = QuoteService(db).require(quote_id)
    content = PdfService().quote_pdf(quote)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="quote-{quote.quote_number}.pdf"'},
    )


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quote(
    quote_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    authorize(authorization, RESOURCE, "delete", db)
    with service_errors():
        QuoteService(db).delete(quote_id)
