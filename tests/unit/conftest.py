import pytest
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from config import ApplicationConfig
from src.domain.entities import Company, User, UserRole


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.companies = MagicMock()
    uow.companies.get_by_id = AsyncMock(return_value=None)
    uow.companies.create = AsyncMock(side_effect=lambda company: company)
    uow.companies.update = AsyncMock(side_effect=lambda company: company)

    uow.tokens = MagicMock()
    uow.tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.tokens.consume = AsyncMock(return_value=None)
    uow.tokens.delete = AsyncMock()
    uow.tokens.delete_by_user_and_kind = AsyncMock(return_value=0)
    uow.tokens.list_open_invites = AsyncMock(return_value=[])

    uow.departments = MagicMock()
    uow.departments.get_by_name = AsyncMock(return_value=None)
    uow.departments.increment_employee_count = AsyncMock(return_value=None)
    uow.departments.create = AsyncMock(side_effect=lambda department: department)

    uow.employees = MagicMock()
    uow.employees.get_by_employee_id = AsyncMock(return_value=None)
    uow.employees.get_by_email = AsyncMock(return_value=None)
    uow.employees.create = AsyncMock(side_effect=lambda employee: employee)
    return uow


@pytest.fixture
def notifier():
    notifier = MagicMock()
    notifier.send = AsyncMock(return_value=True)
    return notifier


@pytest.fixture
def company():
    return Company(id=uuid4(), name="Acme Corp")


@pytest.fixture
def owner(company):
    return User(
        id=uuid4(),
        email="owner@acme.com",
        password_hash="hash",
        first_name="Olivia",
        last_name="Owner",
        role=UserRole.owner,
        company_id=company.id,
        email_verified=True,
        is_active=True,
    )
