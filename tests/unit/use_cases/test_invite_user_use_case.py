import logging
from datetime import date
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.use_cases.invitations import InviteUserCommand, InviteUserUseCase
from src.app.services.notification_service import NotificationKind
from src.domain.entities import (
    EmployeeProvisioning,
    TokenKind,
    User,
    UserRole,
    hash_token_value,
)


def _command(**overrides):
    data = dict(
        email="Alice@Example.com",
        role="employee",
        first_name="Alice",
        last_name="Smith",
        department="Engineering",
    )
    data.update(overrides)
    return InviteUserCommand(**data)


@pytest.fixture
def uow(mock_uow, owner, company):
    mock_uow.users.get_by_id.return_value = owner
    mock_uow.companies.get_by_id.return_value = company
    return mock_uow


@pytest.mark.asyncio
async def test_successful_invite_by_owner(uow, notifier, owner, company):
    use_case = InviteUserUseCase(uow, notifier)

    result = await use_case.execute(owner.id, _command())

    assert result.is_ok()
    assert result.value.email == "alice@example.com"
    assert result.value.role == "employee"
    assert result.value.expires_at

    token = uow.tokens.create.call_args.args[0]
    assert token.kind == TokenKind.invite
    assert token.email == "alice@example.com"
    assert token.role == UserRole.employee
    assert token.company_id == company.id
    assert token.payload == {
        "kind": "invitee_profile",
        "first_name": "Alice",
        "last_name": "Smith",
        "department": "Engineering",
    }
    uow.commit.assert_called_once()

    kind, recipient, data = notifier.send.call_args.args
    assert kind == NotificationKind.invite
    assert recipient == "alice@example.com"
    assert data["company_name"] == "Acme Corp"
    assert data["inviter_name"] == "Olivia Owner"
    assert "auth/accept-invite?token=" in data["invite_link"]


@pytest.mark.asyncio
async def test_invite_link_token_matches_stored_hash(uow, notifier, owner):
    use_case = InviteUserUseCase(uow, notifier)

    await use_case.execute(owner.id, _command())

    token = uow.tokens.create.call_args.args[0]
    link = notifier.send.call_args.args[2]["invite_link"]
    value = link.split("token=", 1)[1]
    assert token.token_hash == hash_token_value(value)
    assert value not in token.token_hash


@pytest.mark.asyncio
async def test_employee_payload_is_stored(uow, notifier, owner):
    provisioning = EmployeeProvisioning(
        employee_id="E-001",
        first_name="Alice",
        last_name="Smith",
        department="Engineering",
        position="Engineer",
        hire_date=date(2024, 1, 15),
    )
    use_case = InviteUserUseCase(uow, notifier)

    result = await use_case.execute(owner.id, _command(employee=provisioning))

    assert result.is_ok()
    token = uow.tokens.create.call_args.args[0]
    assert token.payload["kind"] == "employee_provisioning"
    assert token.payload["hire_date"] == "2024-01-15"
    assert notifier.send.call_args.args[2]["position"] == "Engineer"


@pytest.mark.asyncio
async def test_owner_role_cannot_be_invited(uow, notifier, owner):
    use_case = InviteUserUseCase(uow, notifier)

    result = await use_case.execute(owner.id, _command(role="owner"))

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    uow.tokens.create.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_role_rejected(uow, notifier, owner):
    use_case = InviteUserUseCase(uow, notifier)

    result = await use_case.execute(owner.id, _command(role="superuser"))

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_non_admin_inviter_rejected(uow, notifier, company):
    member = User(
        id=uuid4(),
        email="sam@acme.com",
        first_name="Sam",
        last_name="Sales",
        role=UserRole.sales_rep,
        company_id=company.id,
    )
    uow.users.get_by_id.return_value = member
    use_case = InviteUserUseCase(uow, notifier)

    result = await use_case.execute(member.id, _command())

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    uow.tokens.create.assert_not_called()


@pytest.mark.asyncio
async def test_existing_user_conflict(uow, notifier, owner, company):
    uow.users.get_by_email.return_value = User(
        email="alice@example.com",
        first_name="Alice",
        last_name="Smith",
        company_id=company.id,
    )
    use_case = InviteUserUseCase(uow, notifier)

    result = await use_case.execute(owner.id, _command())

    assert result.is_err()
    assert result.error.code == "USER_ALREADY_EXISTS"
    uow.tokens.create.assert_not_called()
    notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_dispatch_failure_removes_token(uow, notifier, owner):
    notifier.send.return_value = False
    use_case = InviteUserUseCase(uow, notifier)

    result = await use_case.execute(owner.id, _command())

    assert result.is_err()
    assert result.error.code == "INVITE_DISPATCH_FAILED"
    created = uow.tokens.create.call_args.args[0]
    uow.tokens.delete.assert_called_once_with(created)
    assert uow.commit.call_count == 2


@pytest.mark.asyncio
async def test_dispatcher_exception_treated_as_failure(uow, notifier, owner):
    notifier.send.side_effect = RuntimeError("smtp down")
    use_case = InviteUserUseCase(uow, notifier)

    result = await use_case.execute(owner.id, _command())

    assert result.is_err()
    assert result.error.code == "INVITE_DISPATCH_FAILED"
    uow.tokens.delete.assert_called_once()


@pytest.mark.asyncio
async def test_failed_cleanup_logs_orphaned_token(uow, notifier, owner, caplog):
    notifier.send.return_value = False
    uow.tokens.delete = AsyncMock(side_effect=RuntimeError("db gone"))
    use_case = InviteUserUseCase(uow, notifier)

    with caplog.at_level(logging.ERROR):
        result = await use_case.execute(owner.id, _command())

    assert result.is_err()
    assert result.error.code == "INVITE_DISPATCH_FAILED"
    assert any("orphaned invite token" in r.getMessage() for r in caplog.records)
