"""Order endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize, service_errors
from app.api.v1._responses import serialize
from app.core.dependencies import get_db_session
from app.schemas.common import StatusUpdateRequest
from app.schemas.orders import OrderCreateRequest, OrderResponse, OrderUpdateRequest
from app.services.base_service import utcnow
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])
RESOURCE = "orders"


@router.get("", response_model=list[OrderResponse])
def list_orders(
    status_filter: str | None = Query(default=None, alias="status"),
    customer_id: int | None = Query(default=None),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[OrderResponse]:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        orders = OrderService(db).list_orders(status=status_filter, customer_id=customer_id)
    now = utcnow()
    return [serialize(OrderResponse, order, now) for order in orders]


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> OrderResponse:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        order = OrderService(db).require(order_id)
    return serialize(OrderResponse, order, utcnow())


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> OrderResponse:
    authorize(authorization, RESOURCE, "create", db)
    with service_errors():
        order = OrderService(db).create_order(payload.model_dump(exclude_none=True))
    return serialize(OrderResponse, order, utcnow())


@router.put("/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: int,
    payload: OrderUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> OrderResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        order = OrderService(db).update_order(order_id, payload.model_dump(exclude_unset=True))
    return serialize(OrderResponse, order, utcnow())


@router.patch("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: int,
    payload: StatusUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> OrderResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        order = OrderService(db).update_status(order_id, payload.status)
    return serialize(OrderResponse, order, utcnow())


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(
    order_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    authorize(authorization, RESOURCE, "delete", db)
    with service_errors():
        OrderService(db).delete(order_id)
