from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.hasher import DEFAULT_METHOD, PasswordHasher
from .auth.service import AuthService
from .auth.session import AuthStateProvider
from .auth.storage import FlaskSessionStorage, SessionStorage
from .database.connection import DatabaseConnection, DBConfig
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.memory_payroll_repository import InMemoryPayrollRepository
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .users.memory_user_repository import InMemoryUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    employees_repo: EmployeeRepository
    payroll_repo: PayrollRepository

    hasher: PasswordHasher
    auth_state: AuthStateProvider

    auth_service: AuthService
    user_service: UserService
    employee_service: EmployeeService
    payroll_service: PayrollService


def build_container(
    *,
    storage_backend: str = "memory",
    db_config: Optional[dict] = None,
    password_hash_method: str = DEFAULT_METHOD,
    session_storage: Optional[SessionStorage] = None,
) -> Container:
    if storage_backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        users_repo = MySQLUserRepository(conn)
        employees_repo = MySQLEmployeeRepository(conn)
        payroll_repo = MySQLPayrollRepository(conn)
    elif storage_backend == "memory":
        users_repo = InMemoryUserRepository()
        employees_repo = InMemoryEmployeeRepository()
        payroll_repo = InMemoryPayrollRepository()
    else:
        raise ValueError(f"Unknown storage backend: {storage_backend!r}")

    hasher = PasswordHasher(password_hash_method)
    auth_state = AuthStateProvider(session_storage or FlaskSessionStorage())

    return Container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        payroll_repo=payroll_repo,
        hasher=hasher,
        auth_state=auth_state,
        auth_service=AuthService(users_repo, hasher, auth_state),
        user_service=UserService(users_repo, hasher, auth_state),
        employee_service=EmployeeService(employees_repo, auth_state),
        payroll_service=PayrollService(payroll_repo, employees_repo, auth_state),
    )
