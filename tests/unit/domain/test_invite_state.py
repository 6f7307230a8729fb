from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from src.domain.base import utcnow
from src.domain.entities import (
    EmployeeProvisioning,
    InviteeProfile,
    InviteState,
    Token,
    TokenKind,
    resolve_invite_state,
)


def _token(consumed=False, expires_in=timedelta(days=1), payload=None):
    return Token(
        token_hash="h",
        kind=TokenKind.invite,
        email="alice@example.com",
        consumed=consumed,
        expires_at=utcnow() + expires_in,
        payload=payload,
    )


def test_pending():
    assert resolve_invite_state(_token(), user_exists=False) == InviteState.pending


def test_expired():
    token = _token(expires_in=timedelta(seconds=-1))
    assert resolve_invite_state(token, user_exists=False) == InviteState.expired


def test_accepted_wins_over_expiry():
    token = _token(consumed=True, expires_in=timedelta(seconds=-1))
    assert resolve_invite_state(token, user_exists=True) == InviteState.accepted


def test_superseded_by_registration():
    assert resolve_invite_state(_token(), user_exists=True) == InviteState.superseded


def test_payload_variants_parse_by_kind():
    employee = EmployeeProvisioning(
        employee_id="E-1",
        first_name="A",
        last_name="S",
        department="Ops",
        position="Lead",
        hire_date=date(2024, 2, 1),
    )
    profile = InviteeProfile(first_name="A", last_name="S")

    assert isinstance(
        _token(payload=employee.model_dump(mode="json")).parsed_payload(), EmployeeProvisioning
    )
    assert isinstance(_token(payload=profile.model_dump(mode="json")).parsed_payload(), InviteeProfile)
    assert _token().parsed_payload() is None


def test_unknown_payload_kind_rejected():
    with pytest.raises(ValidationError):
        _token(payload={"kind": "mystery"}).parsed_payload()
