from __future__ import annotations

from datetime import datetime

import pytest

from app.core.exceptions import IllegalTransitionError, ValidationError
from app.services.follow_up_service import FollowUpService


def _follow_up(service, title, priority, due, **extra):
    payload = {"title": title, "type": "call", "priority": priority, "due_date": due}
    payload.update(extra)
    return service.create_follow_up(payload)


def test_complete_sets_timestamp_once(session):
    service = FollowUpService(session)
    follow_up = _follow_up(service, "Call shipper", "high", datetime(2030, 1, 5, 9, 0))
    first = service.complete(follow_up.id, now=datetime(2030, 1, 5, 10, 0))
    second = service.complete(follow_up.id, now=datetime(2030, 1, 6, 10, 0))
    assert first.completed is True
    assert second.completed_at.replace(tzinfo=None) == datetime(2030, 1, 5, 10, 0)


def test_completed_follow_up_cannot_be_reopened(session):
    service = FollowUpService(session)
    follow_up = _follow_up(service, "Send rate sheet", "low", datetime(2030, 1, 5, 9, 0), completed=True)
    assert follow_up.completed is True
    with pytest.raises(IllegalTransitionError):
        service.update(follow_up.id, {"completed": False})


def test_update_with_completed_flag_completes(session):
    service = FollowUpService(session)
    follow_up = _follow_up(service, "Check POD", "medium", datetime(2030, 1, 5, 9, 0))
    updated = service.update(follow_up.id, {"completed": True, "notes": "done"}, now=datetime(2030, 1, 5, 11, 0))
    assert updated.completed is True
    assert updated.notes == "done"
    assert updated.completed_at is not None


def test_completed_at_is_not_directly_writable(session):
    service = FollowUpService(session)
    with pytest.raises(ValidationError):
        _follow_up(service, "x", "low", datetime(2030, 1, 5), completed_at=datetime(2030, 1, 5))


def test_invalid_choices_are_rejected(session):
    service = FollowUpService(session)
    with pytest.raises(ValidationError, match="priority"):
        _follow_up(service, "x", "critical", datetime(2030, 1, 5))
    with pytest.raises(ValidationError, match="type"):
        _follow_up(service, "x", "low", datetime(2030, 1, 5), type="fax")


def test_urgent_queue_orders_open_items_by_due_date(session):
    service = FollowUpService(session)
    late = _follow_up(service, "late", "urgent", datetime(2030, 1, 9, 9, 0))
    early = _follow_up(service, "early", "high", datetime(2030, 1, 2, 9, 0))
    done = _follow_up(service, "done", "urgent", datetime(2030, 1, 1, 9, 0))
    _follow_up(service, "low", "low", datetime(2030, 1, 1, 9, 0))
    service.complete(done.id)

    urgent = service.urgent(now=datetime(2030, 1, 3))
    assert [item.id for item in urgent] == [early.id, late.id]
    assert [item.id for item in service.urgent(now=datetime(2030, 1, 3), limit=1)] == [early.id]


def test_update_with_completed_flag_commits_once(session, monkeypatch):
    service = FollowUpService(session)
    follow_up = _follow_up(service, "Confirm appointment", "high", datetime(2030, 1, 5, 9, 0))
    commits = []
    original_commit = service.commit
    monkeypatch.setattr(service, "commit", lambda: commits.append(1) or original_commit())

    updated = service.update(
        follow_up.id,
        {"completed": True, "notes": "Booked 8am slot", "priority": "low"},
        now=datetime(2030, 1, 5, 11, 0),
    )
    assert len(commits) == 1
    assert updated.notes == "Booked 8am slot"
    assert updated.priority == "low"
    assert updated.completed_at.replace(tzinfo=None) == datetime(2030, 1, 5, 11, 0)


def test_create_completed_follow_up_sets_timestamp(session):
    service = FollowUpService(session)
    follow_up = service.create_follow_up(
        {"title": "Log call", "type": "call", "priority": "low", "due_date": datetime(2030, 1, 5), "completed": True},
        now=datetime(2030, 1, 4, 16, 0),
    )
    assert follow_up.completed is True
    assert follow_up.completed_at.replace(tzinfo=None) == datetime(2030, 1, 4, 16, 0)
