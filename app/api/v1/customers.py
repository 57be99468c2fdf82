"""Customer directory endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize, service_errors
from app.core.dependencies import get_db_session
from app.schemas.parties import CustomerCreateRequest, CustomerResponse, CustomerUpdateRequest
from app.services.party_service import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])
RESOURCE = "customers"


@router.get("", response_model=list[CustomerResponse])
def list_customers(
    active_only: bool = Query(default=False),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[CustomerResponse]:
    authorize(authorization, RESOURCE, "read", db)
    records = CustomerService(db).list_customers(active_only=active_only)
    return [CustomerResponse.model_validate(record) for record in records]


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> CustomerResponse:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        record = CustomerService(db).require(customer_id)
    return CustomerResponse.model_validate(record)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: CustomerCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> CustomerResponse:
    authorize(authorization, RESOURCE, "create", db)
    with service_errors():
        record = CustomerService(db).create_customer(payload.model_dump(exclude_none=True))
    return CustomerResponse.model_validate(record)


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    payload: CustomerUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> CustomerResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        record = CustomerService(db).update_customer(customer_id, payload.model_dump(exclude_unset=True))
    return CustomerResponse.model_validate(record)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    authorize(authorization, RESOURCE, "delete", db)
    with service_errors():
        CustomerService(db).delete(customer_id)
