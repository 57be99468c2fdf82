"""Customer and carrier directory services."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func

from app.core.exceptions import ConflictError, ValidationError
from app.models import Carrier, Customer, Dispatch
from app.services.base_service import CrudService
from app.utils.validators import is_valid_email, normalize_state_code


def _validate_contact(data: dict[str, Any]) -> dict[str, Any]:
    payload = dict(data)
    email = payload.get("email")
    if email is not None:
        if not is_valid_email(email):
            raise ValidationError(f"Invalid email address: {email}")
        payload["email"] = email.strip()
    for name in ("state", "billing_state"):
        if payload.get(name):
            payload[name] = normalize_state_code(payload[name])
    return payload


class CustomerService(CrudService):
    model = Customer

    def create_customer(self, data: dict[str, Any]) -> Customer:
        return self.create(_validate_contact(data))

    def update_customer(self, customer_id: int, changes: dict[str, Any]) -> Customer:
        return self.update(customer_id, _validate_contact(changes))

    def list_customers(self, active_only: bool = False) -> list[Customer]:
        return self.list(is_active=True if active_only else None)


class CarrierService(CrudService):
    model = Carrier

    def create_carrier(self, data: dict[str, Any]) -> Carrier:
        return self.create(_validate_contact(data))

    def update_carrier(self, carrier_id: int, changes: dict[str, Any]) -> Carrier:
        return self.update(carrier_id, _validate_contact(changes))

    def list_carriers(self, active_only: bool = False) -> list[Carrier]:
        return self.list(is_active=True if active_only else None)

    def delete(self, record_id: Any) -> None:
        """Delete a carrier that no dispatch still references."""
        carrier = self.require(record_id)
        assigned = self.db.query(func.count(Dispatch.id)).filter(Dispatch.carrier_id == carrier.id).scalar()
        if assigned:
            raise ConflictError(f"Carrier {carrier.id} is still assigned to {assigned} dispatch(es)")
        super().delete(record_id)
