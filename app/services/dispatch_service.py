"""Dispatch service: carrier assignments and their effect on orders."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from app.core.enums import DispatchStatus, EntityKind, OrderStatus
from app.core.exceptions import ValidationError
from app.models import Carrier, Dispatch, Order
from app.services.base_service import CrudService, utcnow
from app.services.order_service import OrderService

logger = logging.getLogger(__name__)

# Order status each dispatch milestone implies.
ORDER_STATUS_FOR_DISPATCH = {
    DispatchStatus.PICKED_UP.value: OrderStatus.IN_TRANSIT.value,
    DispatchStatus.IN_TRANSIT.value: OrderStatus.IN_TRANSIT.value,
    DispatchStatus.DELIVERED.value: OrderStatus.DELIVERED.value,
}


class DispatchService(CrudService):
    model = Dispatch
    kind = EntityKind.DISPATCH

    def __init__(self, db=None) -> None:
        super().__init__(db)
        self.orders = OrderService(self.db)

    def create_dispatch(self, data: dict[str, Any]) -> Dispatch:
        payload = self._clean(data)
        order = self._require_reference(Order, payload.get("order_id"))
        self._require_reference(Carrier, payload.get("carrier_id"))

        payload["status"] = self._initial_status(payload.get("status"))
        dispatch = Dispatch(**payload)
        self.db.add(dispatch)
        if order.status == OrderStatus.NEEDS_TRUCK.value:
            self.orders.advance_to(order, OrderStatus.DISPATCHED.value)
        self._sync_order(dispatch, order, utcnow())
        self.commit()
        self.db.refresh(dispatch)
        return dispatch

    def list_dispatches(self, status: str | None = None, order_id: int | None = None) -> list[Dispatch]:
        return self.list(status=status, order_id=order_id)

    def update(self, record_id: Any, changes: dict[str, Any], now: datetime | None = None) -> Dispatch:
        dispatch = self.require(record_id)
        payload = self._clean(changes)
        target_status = payload.pop("status", None)
        for name, value in payload.items():
            setattr(dispatch, name, value)
        if target_status is not None:
            self._apply_status(dispatch, target_status, now or utcnow())
        self.commit()
        self.db.refresh(dispatch)
        return dispatch

    def update_status(self, record_id: Any, status: str, now: datetime | None = None) -> Dispatch:
        return self.update(record_id, {"status": status}, now=now)

    def _apply_status(self, dispatch: Dispatch, status: str, now: datetime) -> None:
        if not self._transition(dispatch, status):
            return
        if dispatch.status in (DispatchStatus.PICKED_UP.value, DispatchStatus.IN_TRANSIT.value):
            dispatch.actual_pickup_time = dispatch.actual_pickup_time or now
        elif dispatch.status == DispatchStatus.DELIVERED.value:
            dispatch.actual_pickup_time = dispatch.actual_pickup_time or now
            dispatch.actual_delivery_time = dispatch.actual_delivery_time or now
        self._sync_order(dispatch, dispatch.order, now)

    def _sync_order(self, dispatch: Dispatch, order: Order, now: datetime) -> None:
        target = ORDER_STATUS_FOR_DISPATCH.get(dispatch.status)
        if target is None:
            return
        if self.orders.advance_to(order, target):
            logger.info(
                "dispatch.order_synced",
                extra={
                    "event": "dispatch.order_synced",
                    "dispatch_id": dispatch.id,
                    "order_id": order.id,
                    "order_status": order.status,
                },
            )
        if order.status == OrderStatus.DELIVERED.value and order.delivery_date is None:
            order.delivery_date = now.date()

    def _require_reference(self, model: type, record_id: Any):
        record = self.db.get(model, record_id) if record_id is not None else None
        if record is None:
            raise ValidationError(f"{model.__name__} not found: {record_id}")
        return record
