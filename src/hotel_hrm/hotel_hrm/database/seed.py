from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from ..auth.hasher import PasswordHasher
from ..core.enums import EmploymentStatus, Role
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..users.model import User
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

_DEMO_EMPLOYEES = [
    ("John", "Doe", "+1-555-0100", "Front Desk", "Receptionist", date(2023, 1, 15), "35000"),
    ("Jane", "Smith", "+1-555-0101", "Housekeeping", "Housekeeping Manager", date(2022, 6, 1), "45000"),
    ("Michael", "Johnson", "+1-555-0102", "Food & Beverage", "Chef", date(2021, 3, 10), "55000"),
]


def seed_demo_data(users: UserRepository, employees: EmployeeRepository, hasher: PasswordHasher) -> bool:
    """Insert demo employees and accounts into empty stores.

    Returns False (and touches nothing) when either store already has rows.
    """
    if users.list_all() or employees.list_all():
        return False

    password_hash = hasher.hash(DEMO_PASSWORD)

    users.add(User(0, "admin", password_hash, "admin@hotelhrm.com", Role.ADMIN))
    users.add(User(0, "hr.admin", password_hash, "hr.admin@hotelhrm.com", Role.HR))

    for first, last, phone, department, position, hired, salary in _DEMO_EMPLOYEES:
        email = f"{first.lower()}.{last.lower()}@hotelhrm.com"
        employee = employees.add(
            Employee(
                employee_id=0,
                first_name=first,
                last_name=last,
                email=email,
                phone_number=phone,
                department=department,
                position=position,
                hire_date=hired,
                base_salary=Decimal(salary),
                status=EmploymentStatus.ACTIVE,
            )
        )
        users.add(
            User(
                0,
                f"{first.lower()}.{last.lower()}",
                password_hash,
                email,
                Role.EMPLOYEE,
                employee_id=employee.employee_id,
            )
        )

    logger.info("Demo data seeded (%d users, %d employees)", len(users.list_all()), len(employees.list_all()))
    return True
