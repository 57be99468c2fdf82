"""Dispatch endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize, service_errors
from app.api.v1._responses import serialize
from app.core.dependencies import get_db_session
from app.schemas.common import StatusUpdateRequest
from app.schemas.dispatches import DispatchCreateRequest, DispatchResponse, DispatchUpdateRequest
from app.services.base_service import utcnow
from app.services.dispatch_service import DispatchService
from app.services.pdf_service import PdfService

router = APIRouter(prefix="/dispatches", tags=["dispatches"])
RESOURCE = "dispatches"


@router.get("", response_model=list[DispatchResponse])
def list_dispatches(
    status_filter: str | None = Query(default=None, alias="status"),
    order_id: int | None = Query(default=None),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[DispatchResponse]:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        dispatches = DispatchService(db).list_dispatches(status=status_filter, order_id=order_id)
    now = utcnow()
    return [serialize(DispatchResponse, dispatch, now) for dispatch in dispatches]


@router.get("/{dispatch_id}", response_model=DispatchResponse)
def get_dispatch(
    dispatch_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> DispatchResponse:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        dispatch = DispatchService(db).require(dispatch_id)
    return serialize(DispatchResponse, dispatch, utcnow())


@router.post("", response_model=DispatchResponse, status_code=status.HTTP_201_CREATED)
def create_dispatch(
    payload: DispatchCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> DispatchResponse:
    authorize(authorization, RESOURCE, "create", db)
    with service_errors():
        dispatch = DispatchService(db).create_dispatch(payload.model_dump(exclude_none=True))
    return serialize(DispatchResponse, dispatch, utcnow())


@router.put("/{dispatch_id}", response_model=DispatchResponse)
def update_dispatch(
    dispatch_id: int,
    payload: DispatchUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> DispatchResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        dispatch = DispatchService(db).update(dispatch_id, payload.model_dump(exclude_unset=True))
    return serialize(DispatchResponse, dispatch, utcnow())


@router.patch("/{dispatch_id}/status", response_model=DispatchResponse)
def update_dispatch_status(
    dispatch_id: int,
    payload: StatusUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> DispatchResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        dispatch = DispatchService(db).update_status(dispatch_id, payload.status)
    return serialize(DispatchResponse, dispatch, utcnow())


@router.get("/{dispatch_id}/rate-confirmation")
def rate_confirmation_pdf(
    dispatch_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> Response:
    authorize(authorization, "pdf", "generate", db)
    with service_errors():
        dispatch = DispatchService(db).require(dispatch_id)
    content = PdfService().rate_confirmation_pdf(dispatch)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="rate-confirmation-{dispatch.id}.pdf"'},
    )


@router.delete("/{dispatch_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_dispatch(
    dispatch_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    authorize(authorization, RESOURCE, "delete", db)
    with service_errors():
        DispatchService(db).delete(dispatch_id)
