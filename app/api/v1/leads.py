"""Lead endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize, service_errors
from app.api.v1._responses import serialize
from app.core.dependencies import get_db_session
from app.schemas.common import StatusUpdateRequest
from app.schemas.leads import LeadCreateRequest, LeadResponse, LeadUpdateRequest
from app.services.base_service import utcnow
from app.services.lead_service import LeadService

router = APIRouter(prefix="/leads", tags=["leads"])
RESOURCE = "leads"


@router.get("", response_model=list[LeadResponse])
def list_leads(
    status_filter: str | None = Query(default=None, alias="status"),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[LeadResponse]:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        leads = LeadService(db).list_leads(status=status_filter)
    now = utcnow()
    return [serialize(LeadResponse, lead, now) for lead in leads]


@router.get("/{lead_id}", response_model=LeadResponse)
def get_lead(
    lead_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        lead = LeadService(db).require(lead_id)
    return serialize(LeadResponse, lead, utcnow())


@router.post("", response_model=LeadResponse, status_code=status.HTTP_201_CREATED)
def create_lead(
    payload: LeadCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    authorize(authorization, RESOURCE, "create", db)
    with service_errors():
        lead = LeadService(db).create_lead(payload.model_dump(exclude_none=True))
    return serialize(LeadResponse, lead, utcnow())


@router.put("/{lead_id}", response_model=LeadResponse)
def update_lead(
    lead_id: int,
    payload: LeadUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        lead = LeadService(db).update_lead(lead_id, payload.model_dump(exclude_unset=True))
    return serialize(LeadResponse, lead, utcnow())


@router.patch("/{lead_id}/status", response_model=LeadResponse)
def update_lead_status(
    lead_id: int,
    payload: StatusUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        lead = LeadService(db).update_status(lead_id, payload.status)
    return serialize(LeadResponse, lead, utcnow())


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lead(
    lead_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    authorize(authorization, RESOURCE, "delete", db)
    with service_errors():
        LeadService(db).delete(lead_id)
