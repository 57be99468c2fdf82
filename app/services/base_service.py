"""Shared service base with robust session lifecycle behavior."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import app.database.db as db_module
from app.core.enums import EntityKind, normalize_status
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.core.logging import LogContext, build_log_event
from app.lifecycle.state_machine import assert_transition, get_machine
from app.models.base import utcnow

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for services that operate on a SQLAlchemy session."""

    def __init__(self, db: Session | None = None) -> None:
        self.db = db or db_module.new_session()

    def commit(self) -> None:
        """Commit current transaction and rollback on failure."""
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError(f"Write conflicts with an existing record: {exc.orig}") from exc
        except Exception:
            self.db.rollback()
            raise

    def rollback(self) -> None:
        self.db.rollback()

    def close(self) -> None:
        self.db.close()

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type:
            self.rollback()
        self.close()


class CrudService(BaseService):
    """CRUD over a single model, with lifecycle-checked status writes."""

    model: ClassVar[type]
    kind: ClassVar[EntityKind | None] = None
    # Columns callers may never write directly.
    protected_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "updated_at"})

    def get(self, record_id: Any):
        if record_id is None:
            return None
        return self.db.get(self.model, record_id)

    def require(self, record_id: Any):
        record = self.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.model.__name__} not found: {record_id}")
        return record

    def list(self, **filters: Any) -> list:
        query = self.db.query(self.model)
        for name, value in filters.items():
            if value is None:
                continue
            if name == "status" and self.kind is not None:
                value = normalize_status(self.kind, str(value))
            query = query.filter(getattr(self.model, name) == value)
        return query.order_by(self.model.id).all()

    def create(self, data: dict[str, Any]):
        payload = self._clean(data)
        if self.kind is not None:
            payload["status"] = self._initial_status(payload.get("status"))
        record = self.model(**payload)
        self.db.add(record)
        self.commit()
        self.db.refresh(record)
        return record

    def update(self, record_id: Any, changes: dict[str, Any]):
        record = self.require(record_id)
        payload = self._clean(changes)
        target_status = payload.pop("status", None)
        for name, value in payload.items():
            setattr(record, name, value)
        if target_status is not None:
            self._transition(record, target_status)
        self.commit()
        self.db.refresh(record)
        return record

    def update_status(self, record_id: Any, status: str):
        record = self.require(record_id)
        self._transition(record, status)
        self.commit()
        self.db.refresh(record)
        return record

    def delete(self, record_id: Any) -> None:
        record = self.require(record_id)
        self.db.delete(record)
        self.commit()

    def _clean(self, data: dict[str, Any]) -> dict[str, Any]:
        payload = dict(data)
        blocked = self.protected_fields & payload.keys()
        if blocked:
            raise ValidationError(f"Fields cannot be written directly: {', '.join(sorted(blocked))}")
        unknown = [name for name in payload if not hasattr(self.model, name)]
        if unknown:
            raise ValidationError(f"Unknown {self.model.__name__} fields: {', '.join(sorted(unknown))}")
        return payload

    def _initial_status(self, status: str | None) -> str:
        machine = get_machine(self.kind)
        if status is None:
            return self.model.__table__.c.status.default.arg
        value = normalize_status(self.kind, str(status))
        machine.targets(value)
        return value

    def _transition(self, record: Any, status: str) -> bool:
        """Move `record` to `status` after validation; False for a no-op."""
        target = normalize_status(self.kind, str(status))
        current = record.status
        assert_transition(self.kind, current, target)
        if current == target:
            return False
        record.status = target
        logger.info(
            "lifecycle.transition.applied",
            extra=build_log_event(
                "lifecycle.transition.applied",
                LogContext(entity_kind=self.kind.value, entity_id=record.id),
                from_status=current,
                to_status=target,
            ),
        )
        return True
