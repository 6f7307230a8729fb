import pytest

from src.app.services.passwords import hash_password
from src.app.use_cases.auth import LoginUseCase


@pytest.mark.asyncio
async def test_successful_login(mock_uow, owner, company):
    """Test login with valid credentials updates last_login_at"""
    # Arrange
    owner.password_hash = await hash_password("Secur3P@ss")
    mock_uow.users.get_by_email.return_value = owner
    mock_uow.companies.get_by_id.return_value = company
    use_case = LoginUseCase(mock_uow)

    # Act
    result = await use_case.execute("owner@acme.com", "Secur3P@ss")

    # Assert
    assert result.is_ok()
    assert result.value.user.email == "owner@acme.com"
    assert result.value.company.name == "Acme Corp"
    assert result.value.tokens.access_token
    assert owner.last_login_at is not None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_wrong_password(mock_uow, owner):
    owner.password_hash = await hash_password("Secur3P@ss")
    mock_uow.users.get_by_email.return_value = owner
    use_case = LoginUseCase(mock_uow)

    result = await use_case.execute("owner@acme.com", "Wr0ngP@ss")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_email_same_error(mock_uow):
    use_case = LoginUseCase(mock_uow)

    result = await use_case.execute("nobody@acme.com", "Secur3P@ss")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_deactivated_account(mock_uow, owner):
    owner.password_hash = await hash_password("Secur3P@ss")
    owner.is_active = False
    mock_uow.users.get_by_email.return_value = owner
    use_case = LoginUseCase(mock_uow)

    result = await use_case.execute("owner@acme.com", "Secur3P@ss")

    assert result.is_err()
    assert result.error.code == "ACCOUNT_DEACTIVATED"
