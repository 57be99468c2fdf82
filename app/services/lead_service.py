"""Lead service for prospect CRUD and pipeline status transitions."""

from __future__ import annotations

from typing import Any

from app.core.enums import EntityKind
from app.models import Lead
from app.services.base_service import CrudService
from app.utils.validators import normalize_lane_fields


class LeadService(CrudService):
    model = Lead
    kind = EntityKind.LEAD

    def create_lead(self, data: dict[str, Any]) -> Lead:
        return self.create(normalize_lane_fields(data))

    def get_lead(self, lead_id: int) -> Lead | None:
        return self.get(lead_id)

    def list_leads(self, status: str | None = None) -> list[Lead]:
        return self.list(status=status)

    def update_lead(self, lead_id: int, changes: dict[str, Any]) -> Lead:
        return self.update(lead_id, normalize_lane_fields(changes))
