"""Carrier directory endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize, service_errors
from app.core.dependencies import get_db_session
from app.schemas.parties import CarrierCreateRequest, CarrierResponse, CarrierUpdateRequest
from app.services.party_service import CarrierService

router = APIRouter(prefix="/carriers", tags=["carriers"])
RESOURCE = "carriers"


@router.get("", response_model=list[CarrierResponse])
def list_carriers(
    active_only: bool = Query(default=False),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[CarrierResponse]:
    authorize(authorization, RESOURCE, "read", db)
    records = CarrierService(db).list_carriers(active_only=active_only)
    return [CarrierResponse.model_validate(record) for record in records]


@router.get("/{carrier_id}", response_model=CarrierResponse)
def get_carrier(
    carrier_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> CarrierResponse:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        record = CarrierService(db).require(carrier_id)
    return CarrierResponse.model_validate(record)


@router.post("", response_model=CarrierResponse, status_code=status.HTTP_201_CREATED)
def create_carrier(
    payload: CarrierCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> CarrierResponse:
    authorize(authorization, RESOURCE, "create", db)
    with service_errors():
        record = CarrierService(db).create_carrier(payload.model_dump(exclude_none=True))
    return CarrierResponse.model_validate(record)


@router.put("/{carrier_id}", response_model=CarrierResponse)
def update_carrier(
    carrier_id: int,
    payload: CarrierUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> CarrierResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        record = CarrierService(db).update_carrier(carrier_id, payload.model_dump(exclude_unset=True))
    return CarrierResponse.model_validate(record)


@router.delete("/{carrier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_carrier(
    carrier_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    authorize(authorization, RESOURCE, "delete", db)
    with service_errors():
        CarrierService(db).delete(carrier_id)
