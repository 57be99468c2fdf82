"""Follow-up task service: scheduling, completion and the urgent queue."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from app.core.enums import FollowUpPriority, FollowUpType
from app.core.exceptions import IllegalTransitionError, ValidationError
from app.lifecycle.derived import URGENT_PRIORITIES, filter_urgent
from app.lifecycle.state_machine import validate_completion
from app.models import FollowUp
from app.services.base_service import CrudService, utcnow

logger = logging.getLogger(__name__)


def _check_choice(enum_cls, name: str, value: Any) -> str:
    cleaned = str(value).strip().lower()
    try:
        return enum_cls(cleaned).value
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {name} '{value}'. Must be one of: {allowed}") from exc


class FollowUpService(CrudService):
    model = FollowUp
    protected_fields = CrudService.protected_fields | {"completed_at"}

    def _clean(self, data: dict[str, Any]) -> dict[str, Any]:
        payload = super()._clean(data)
        if payload.get("type") is not None:
            payload["type"] = _check_choice(FollowUpType, "type", payload["type"])
        if payload.get("priority") is not None:
            payload["priority"] = _check_choice(FollowUpPriority, "priority", payload["priority"])
        return payload

    def create_follow_up(self, data: dict[str, Any], now: datetime | None = None) -> FollowUp:
        payload = dict(data)
        completed = bool(payload.pop("completed", False))
        follow_up = FollowUp(**self._clean(payload))
        if completed:
            self._mark_completed(follow_up, now)
        self.db.add(follow_up)
        self.commit()
        self.db.refresh(follow_up)
        if completed:
            self._log_completed(follow_up)
        return follow_up

    def list_follow_ups(
        self,
        completed: bool | None = None,
        priority: str | None = None,
        follow_up_type: str | None = None,
    ) -> list[FollowUp]:
        return self.list(completed=completed, priority=priority, type=follow_up_type)

    def update(self, record_id: Any, changes: dict[str, Any], now: datetime | None = None) -> FollowUp:
        """Apply field changes and an optional completion in a single commit."""
        payload = self._clean(changes)
        completed = payload.pop("completed", None)
        follow_up = self.require(record_id)
        if completed is not None and not validate_completion(follow_up.completed, bool(completed)):
            raise IllegalTransitionError("A completed follow-up cannot be reopened")
        for name, value in payload.items():
            setattr(follow_up, name, value)
        newly_completed = bool(completed) and self._mark_completed(follow_up, now)
        self.commit()
        self.db.refresh(follow_up)
        if newly_completed:
            self._log_completed(follow_up)
        return follow_up

    def complete(self, follow_up_id: int, now: datetime | None = None) -> FollowUp:
        """Mark a follow-up done; completing an already completed one is a no-op."""
        follow_up = self.require(follow_up_id)
        if not self._mark_completed(follow_up, now):
            return follow_up
        self.commit()
        self.db.refresh(follow_up)
        self._log_completed(follow_up)
        return follow_up

    def _mark_completed(self, follow_up: FollowUp, now: datetime | None) -> bool:
        if follow_up.completed:
            return False
        follow_up.completed = True
        follow_up.completed_at = now or utcnow()
        return True

    def _log_completed(self, follow_up: FollowUp) -> None:
        logger.info(
            "followup.completed",
            extra={"event": "followup.completed", "follow_up_id": follow_up.id},
        )

    def urgent(self, now: date | datetime | None = None, limit: int | None = None) -> list[FollowUp]:
        candidates = (
            self.db.query(FollowUp)
            .filter(FollowUp.completed.is_(False), FollowUp.priority.in_(sorted(URGENT_PRIORITIES)))
            .order_by(FollowUp.id)
            .all()
        )
        return filter_urgent(candidates, now or utcnow(), limit=limit)
