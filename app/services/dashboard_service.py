"""Dashboard read model assembled from the live tables."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from sqlalchemy import func

from app.lifecycle.derived import aggregate_dashboard_stats
from app.models import Carrier, Customer, Invoice, Lead, Order, Quote
from app.services.base_service import BaseService, utcnow


class DashboardService(BaseService):
    def _count(self, model: type) -> int:
        return self.db.query(func.count(model.id)).scalar() or 0

    def stats(
        self,
        now: date | datetime | None = None,
        period: tuple[date | datetime, date | datetime] | None = None,
    ) -> dict[str, Any]:
        stats = aggregate_dashboard_stats(
            orders=self.db.query(Order).all(),
            quotes=self.db.query(Quote).all(),
            invoices=self.db.query(Invoice).all(),
            now=now or utcnow(),
            period=period,
        )
        return {
            "total_leads": self._count(Lead),
            "total_customers": self._count(Customer),
            "total_carriers": self._count(Carrier),
            "total_orders": self._count(Order),
            **stats.as_dict(),
        }
