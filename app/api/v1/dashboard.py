"""Dashboard endpoints for API v1."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize
from app.core.dependencies import get_db_session
from app.schemas.dashboard import DashboardStatsResponse
from app.services.base_service import utcnow
from app.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
def dashboard_stats(
    period_start: date | None = Query(default=None),
    period_end: date | None = Query(default=None),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> DashboardStatsResponse:
    authorize(authorization, "reports", "view", db)
    if (period_start is None) != (period_end is None):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="period_start and period_end must be given together.",
        )
    period = (period_start, period_end) if period_start is not None else None
    stats = DashboardService(db).stats(now=utcnow(), period=period)
    return DashboardStatsResponse(**stats)
