import pytest

from src.app.services.notification_service import NotificationKind
from tests.fixtures.api import API, INVITEE_PASSWORD, accept_body, auth_header
from tests.fixtures.notifications import token_from_link


async def _member(client, owner, notifier, email="bob@example.com", role="manager"):
    response = await client.post(
        f"{API}/auth/invite",
        json={"email": email, "role": role, "first_name": "Bob", "last_name": "Jones"},
        headers=owner["headers"],
    )
    assert response.status_code == 201, response.text
    token = token_from_link(notifier.last(NotificationKind.invite)["invite_link"])
    accepted = await client.post(f"{API}/auth/accept-invite/{token}", json=accept_body())
    assert accepted.status_code == 201, accepted.text
    data = accepted.json()
    data["headers"] = auth_header(data["tokens"]["access_token"])
    return data


async def _login(client, email):
    return await client.post(
        f"{API}/auth/login", json={"email": email, "password": INVITEE_PASSWORD}
    )


@pytest.mark.asyncio
async def test_owner_changes_member_role(client, owner, notifier):
    member = await _member(client, owner, notifier)

    response = await client.patch(
        f"{API}/users/{member['user']['id']}/role",
        json={"role": "hr_manager"},
        headers=owner["headers"],
    )

    assert response.status_code == 200
    assert response.json()["user"]["role"] == "hr_manager"

    login = await _login(client, "bob@example.com")
    assert login.json()["user"]["role"] == "hr_manager"


@pytest.mark.asyncio
async def test_owner_role_cannot_be_assigned_or_changed(client, owner, notifier):
    member = await _member(client, owner, notifier)

    promote = await client.patch(
        f"{API}/users/{member['user']['id']}/role",
        json={"role": "owner"},
        headers=owner["headers"],
    )
    demote = await client.patch(
        f"{API}/users/{owner['user']['id']}/role",
        json={"role": "admin"},
        headers=owner["headers"],
    )

    assert promote.status_code == 400
    assert promote.json()["error"]["code"] == "INVALID_ROLE"
    assert demote.status_code == 400
    assert demote.json()["error"]["code"] == "CANNOT_CHANGE_OWNER"


@pytest.mark.asyncio
async def test_non_owner_cannot_change_roles(client, owner, notifier):
    admin = await _member(client, owner, notifier, email="admin@example.com", role="admin")

    response = await client.patch(
        f"{API}/users/{admin['user']['id']}/role",
        json={"role": "manager"},
        headers=admin["headers"],
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_deactivated_user_cannot_log_in_until_reactivated(client, owner, notifier):
    member = await _member(client, owner, notifier)
    user_id = member["user"]["id"]

    deactivated = await client.patch(
        f"{API}/users/{user_id}/deactivate", headers=owner["headers"]
    )
    assert deactivated.status_code == 200
    assert deactivated.json()["is_active"] is False

    login = await _login(client, "bob@example.com")
    assert login.status_code == 401
    assert login.json()["error"]["code"] == "ACCOUNT_DEACTIVATED"

    refresh = await client.post(
        f"{API}/auth/refresh", json={"refresh_token": member["tokens"]["refresh_token"]}
    )
    assert refresh.status_code == 401

    activated = await client.patch(f"{API}/users/{user_id}/activate", headers=owner["headers"])
    assert activated.status_code == 200
    assert activated.json()["is_active"] is True

    login = await _login(client, "bob@example.com")
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_owner_and_self_cannot_be_deactivated(client, owner, notifier):
    admin = await _member(client, owner, notifier, email="admin@example.com", role="admin")

    on_owner = await client.patch(
        f"{API}/users/{owner['user']['id']}/deactivate", headers=admin["headers"]
    )
    on_self = await client.patch(
        f"{API}/users/{admin['user']['id']}/deactivate", headers=admin["headers"]
    )

    assert on_owner.status_code == 400
    assert on_owner.json()["error"]["code"] == "CANNOT_DEACTIVATE_OWNER"
    assert on_self.status_code == 400
    assert on_self.json()["error"]["code"] == "CANNOT_DEACTIVATE_SELF"


@pytest.mark.asyncio
async def test_unknown_or_malformed_user_id(client, owner):
    unknown = await client.patch(
        f"{API}/users/00000000-0000-0000-0000-000000000000/deactivate",
        headers=owner["headers"],
    )
    malformed = await client.patch(f"{API}/users/not-a-uuid/deactivate", headers=owner["headers"])

    assert unknown.status_code == 404
    assert unknown.json()["error"]["code"] == "TARGET_USER_NOT_FOUND"
    assert malformed.status_code == 400
    assert malformed.json()["error"]["code"] == "INVALID_USER_ID"
