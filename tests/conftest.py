from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest

from src.hotel_hrm.hotel_hrm.auth.hasher import PasswordHasher
from src.hotel_hrm.hotel_hrm.auth.session import AuthStateProvider
from src.hotel_hrm.hotel_hrm.auth.storage import InMemorySessionStorage
from src.hotel_hrm.hotel_hrm.core.enums import EmploymentStatus, Role
from src.hotel_hrm.hotel_hrm.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.hotel_hrm.hotel_hrm.employees.model import Employee
from src.hotel_hrm.hotel_hrm.main import create_app
from src.hotel_hrm.hotel_hrm.payroll.memory_payroll_repository import InMemoryPayrollRepository
from src.hotel_hrm.hotel_hrm.users.memory_user_repository import InMemoryUserRepository
from src.hotel_hrm.hotel_hrm.users.model import User


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 2, 1, 9, 30, 0)


@pytest.fixture
def hasher() -> PasswordHasher:
    # Fast iteration count; same salted format as production.
    return PasswordHasher("pbkdf2:sha256:1000")


@pytest.fixture
def session_storage() -> InMemorySessionStorage:
    return InMemorySessionStorage()


@pytest.fixture
def auth_state(session_storage) -> AuthStateProvider:
    return AuthStateProvider(session_storage)


@pytest.fixture
def users_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def employees_repo() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def payroll_repo() -> InMemoryPayrollRepository:
    return InMemoryPayrollRepository()


@pytest.fixture
def make_user(users_repo, hasher):
    def _make(
        username: str,
        password: str = "secret1",
        *,
        role: Role = Role.EMPLOYEE,
        employee_id: Optional[int] = None,
        is_active: bool = True,
    ) -> User:
        return users_repo.add(
            User(
                user_id=0,
                username=username,
                password_hash=hasher.hash(password),
                email=f"{username}@hotelhrm.com",
                role=role,
                employee_id=employee_id,
                is_active=is_active,
            )
        )

    return _make


@pytest.fixture
def make_employee(employees_repo):
    def _make(first_name: str = "Ann", last_name: str = "Lee", base_salary: str = "36000") -> Employee:
        return employees_repo.add(
            Employee(
                employee_id=0,
                first_name=first_name,
                last_name=last_name,
                email=f"{first_name.lower()}@hotelhrm.com",
                phone_number="+1-555-0199",
                department="Front Desk",
                position="Receptionist",
                hire_date=date(2023, 1, 15),
                base_salary=Decimal(base_salary),
                status=EmploymentStatus.ACTIVE,
            )
        )

    return _make


@pytest.fixture
def login_as(auth_state):
    """Put a principal with the given role into the session storage."""

    def _login(role: Role, *, username: Optional[str] = None, employee_id: Optional[int] = None):
        user = User(
            user_id=99,
            username=username or f"{role.value.lower()}.user",
            password_hash="unused",
            email="someone@hotelhrm.com",
            role=role,
            employee_id=employee_id,
        )
        return auth_state.mark_authenticated(user)

    return _login


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
