"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services. An
in-memory session storage stands in for the browser session.
"""

from datetime import date

from src.hotel_hrm.hotel_hrm.auth.storage import InMemorySessionStorage
from src.hotel_hrm.hotel_hrm.container import build_container
from src.hotel_hrm.hotel_hrm.database.seed import DEMO_PASSWORD, seed_demo_data


def main():
    container = build_container(storage_backend="memory", session_storage=InMemorySessionStorage())
    seed_demo_data(container.users_repo, container.employees_repo, container.hasher)

    container.auth_service.login("hr.admin", DEMO_PASSWORD)
    record = container.payroll_service.process_payroll(
        1, date(2024, 1, 1), date(2024, 1, 30), bonus="500", deductions="200"
    )
    print(record.employee.full_name, record.gross_pay, record.net_pay)
    container.auth_service.logout()


if __name__ == "__main__":
    main()
