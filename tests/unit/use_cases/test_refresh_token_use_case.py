import pytest

from src.api.utils.jwt import generate_access_token, generate_refresh_token, verify_access_token
from src.app.use_cases.auth import RefreshTokenUseCase


@pytest.mark.asyncio
async def test_refresh_issues_new_pair(mock_uow, owner):
    mock_uow.users.get_by_id.return_value = owner
    use_case = RefreshTokenUseCase(mock_uow)

    result = await use_case.execute(generate_refresh_token(owner))

    assert result.is_ok()
    claims = verify_access_token(result.value.tokens.access_token)
    assert claims["sub"] == str(owner.id)


@pytest.mark.asyncio
async def test_access_token_cannot_refresh(mock_uow, owner):
    mock_uow.users.get_by_id.return_value = owner
    use_case = RefreshTokenUseCase(mock_uow)

    result = await use_case.execute(generate_access_token(owner))

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_deactivated_user_cannot_refresh(mock_uow, owner):
    owner.is_active = False
    mock_uow.users.get_by_id.return_value = owner
    use_case = RefreshTokenUseCase(mock_uow)

    result = await use_case.execute(generate_refresh_token(owner))

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
