"""Order service for load CRUD and linear status progression."""

from __future__ import annotations

from typing import Any

from app.core.enums import EntityKind, OrderStatus
from app.lifecycle.state_machine import get_machine
from app.models import Order
from app.services.base_service import CrudService
from app.utils.ids import ORDER_PREFIX, new_document_number
from app.utils.validators import normalize_lane_fields

ORDER_PROGRESSION = [status.value for status in OrderStatus]


class OrderService(CrudService):
    model = Order
    kind = EntityKind.ORDER

    def create_order(self, data: dict[str, Any]) -> Order:
        payload = normalize_lane_fields(data)
        if not payload.get("order_number"):
            payload["order_number"] = new_document_number(ORDER_PREFIX)
        return self.create(payload)

    def update_order(self, order_id: int, changes: dict[str, Any]) -> Order:
        return self.update(order_id, normalize_lane_fields(changes))

    def list_orders(self, status: str | None = None, customer_id: int | None = None) -> list[Order]:
        return self.list(status=status, customer_id=customer_id)

    def advance_to(self, order: Order, target: str) -> bool:
        """Step `order` forward through each legal state up to `target`.

        Does not commit; callers own the transaction. Orders already at or
        past `target` are left alone.
        """
        machine = get_machine(self.kind)
        machine.targets(order.status)
        machine.targets(target)
        current_index = ORDER_PROGRESSION.index(order.status)
        target_index = ORDER_PROGRESSION.index(target)
        moved = False
        for step in ORDER_PROGRESSION[current_index + 1 : target_index + 1]:
            moved = self._transition(order, step) or moved
        return moved
