"""Follow-up task endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authorize, service_errors
from app.api.v1._responses import serialize
from app.core.dependencies import get_db_session
from app.schemas.follow_ups import FollowUpCreateRequest, FollowUpResponse, FollowUpUpdateRequest
from app.services.base_service import utcnow
from app.services.follow_up_service import FollowUpService

router = APIRouter(prefix="/followups", tags=["followups"])
RESOURCE = "followups"


@router.get("", response_model=list[FollowUpResponse])
def list_follow_ups(
    completed: bool | None = Query(default=None),
    priority: str | None = Query(default=None),
    follow_up_type: str | None = Query(default=None, alias="type"),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[FollowUpResponse]:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        follow_ups = FollowUpService(db).list_follow_ups(
            completed=completed,
            priority=priority,
            follow_up_type=follow_up_type,
        )
    now = utcnow()
    return [serialize(FollowUpResponse, item, now) for item in follow_ups]


@router.get("/urgent", response_model=list[FollowUpResponse])
def urgent_follow_ups(
    limit: int | None = Query(default=None, ge=0, le=500),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[FollowUpResponse]:
    authorize(authorization, RESOURCE, "read", db)
    now = utcnow()
    with service_errors():
        follow_ups = FollowUpService(db).urgent(now=now, limit=limit)
    return [serialize(FollowUpResponse, item, now) for item in follow_ups]


@router.get("/{follow_up_id}", response_model=FollowUpResponse)
def get_follow_up(
    follow_up_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> FollowUpResponse:
    authorize(authorization, RESOURCE, "read", db)
    with service_errors():
        follow_up = FollowUpService(db).require(follow_up_id)
    return serialize(FollowUpResponse, follow_up, utcnow())


@router.post("", response_model=FollowUpResponse, status_code=status.HTTP_201_CREATED)
def create_follow_up(
    payload: FollowUpCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> FollowUpResponse:
    authorize(authorization, RESOURCE, "create", db)
    with service_errors():
        follow_up = FollowUpService(db).create_follow_up(payload.model_dump(exclude_none=True))
    return serialize(FollowUpResponse, follow_up, utcnow())


@router.put("/{follow_up_id}", response_model=FollowUpResponse)
def update_follow_up(
    follow_up_id: int,
    payload: FollowUpUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> FollowUpResponse:
    authorize(authorization, RESOURCE, "update", db)
    with service_errors():
        follow_up = FollowUpService(db).update(follow_up_id, payload.model_dump(exclude_unset=True))
    return serialize(FollowUpResponse, follow_up, utcnow())


@router.post("/{follow_up_id}/complete", response_model=FollowUpResponse)
def complete_follow_up(
    follow_up_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> FollowUpResponse:
    authorize(authorization, RESOURCE, "update", db)
    now = utcnow()
    with service_errors():
        follow_up = FollowUpService(db).complete(follow_up_id, now=now)
    return serialize(FollowUpResponse, follow_up, now)


@router.delete("/{follow_up_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_follow_up(
    follow_up_id: int,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    authorize(authorization, RESOURCE, "delete", db)
    with service_errors():
        FollowUpService(db).delete(follow_up_id)
