from __future__ import annotations

import pytest

from app.core.exceptions import IllegalTransitionError, NotFoundError, UnknownStateError, ValidationError
from app.services.lead_service import LeadService


def _lead_payload(**overrides):
    payload = {
        "company_name": "Prairie Grain Co",
        "contact_person": "Lee Park",
        "email": "lee@prairiegrain.com",
        "phone": "555-0300",
        "origin_city": "Omaha",
        "origin_state": "ne",
        "destination_city": "Denver",
        "destination_state": "co",
    }
    payload.update(overrides)
    return payload


def test_create_lead_defaults_to_new_and_normalizes_states(session):
    lead = LeadService(session).create_lead(_lead_payload())
    assert lead.status == "new"
    assert lead.origin_state == "NE"
    assert lead.destination_state == "CO"


def test_lead_walks_the_pipeline(session):
    service = LeadService(session)
    lead = service.create_lead(_lead_payload())
    for status in ("contacted", "quoted", "converted"):
        lead = service.update_lead(lead.id, {"status": status})
    assert lead.status == "converted"


def test_won_alias_is_stored_as_converted(session):
    service = LeadService(session)
    lead = service.create_lead(_lead_payload(status="quoted"))
    assert service.update_lead(lead.id, {"status": "won"}).status == "converted"
    assert [item.id for item in service.list_leads(status="won")] == [lead.id]


def test_illegal_lead_transition_leaves_status_unchanged(session):
    service = LeadService(session)
    lead = service.create_lead(_lead_payload())
    with pytest.raises(IllegalTransitionError):
        service.update_lead(lead.id, {"status": "converted"})
    session.rollback()
    assert service.get_lead(lead.id).status == "new"


def test_unknown_status_is_rejected(session):
    service = LeadService(session)
    with pytest.raises(UnknownStateError):
        service.create_lead(_lead_payload(status="hot"))


def test_protected_and_unknown_fields_are_rejected(session):
    service = LeadService(session)
    with pytest.raises(ValidationError, match="created_at"):
        service.create_lead(_lead_payload(created_at="2024-01-01"))
    with pytest.raises(ValidationError, match="budget"):
        service.create_lead(_lead_payload(budget=10))


def test_missing_lead_raises_not_found(session):
    service = LeadService(session)
    assert service.get_lead(999) is None
    with pytest.raises(NotFoundError):
        service.update_lead(999, {"notes": "x"})
    with pytest.raises(NotFoundError):
        service.delete(999)
