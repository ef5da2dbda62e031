from __future__ import annotations

from dataclasses import dataclass

from .auth.guards import Guards
from .auth.service import AuthService
from .auth.tokens import TokenService
from .database.connection import DBConfig, DatabaseConnection
from .payments.gateway import PaymentGateway, StripePaymentGateway
from .payments.service import PaymentService
from .salaries.mongo_salary_repository import MongoSalaryRepository
from .salaries.repository import SalaryRepository
from .salaries.service import SalaryService
from .staff.mongo_staff_repository import MongoStaffRepository
from .staff.repository import StaffRepository
from .staff.service import StaffService
from .tasks.mongo_task_repository import MongoTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    staff_repo: StaffRepository
    tasks_repo: TaskRepository
    salaries_repo: SalaryRepository

    token_service: TokenService
    guards: Guards
    auth_service: AuthService
    staff_service: StaffService
    task_service: TaskService
    salary_service: SalaryService
    payment_service: PaymentService


def wire(
    *,
    staff_repo: StaffRepository,
    tasks_repo: TaskRepository,
    salaries_repo: SalaryRepository,
    token_service: TokenService,
    gateway: PaymentGateway,
    currency: str,
    conn: DatabaseConnection | None = None,
) -> Container:
    """Build the service graph on top of any repository implementations."""

    return Container(
        conn=conn,
        staff_repo=staff_repo,
        tasks_repo=tasks_repo,
        salaries_repo=salaries_repo,
        token_service=token_service,
        guards=Guards(token_service, staff_repo),
        auth_service=AuthService(staff_repo, token_service),
        staff_service=StaffService(staff_repo),
        task_service=TaskService(tasks_repo),
        salary_service=SalaryService(salaries_repo),
        payment_service=PaymentService(gateway, currency=currency),
    )


def build_container(
    *,
    db_config: dict,
    token_secret: str,
    token_expire_seconds: int,
    stripe_secret_key: str,
    currency: str,
) -> Container:
    config = DBConfig(uri=str(db_config["uri"]), database=str(db_config["database"]))
    conn = DatabaseConnection.get_instance(config)

    return wire(
        staff_repo=MongoStaffRepository(conn),
        tasks_repo=MongoTaskRepository(conn),
        salaries_repo=MongoSalaryRepository(conn),
        token_service=TokenService(token_secret, expire_seconds=token_expire_seconds),
        gateway=StripePaymentGateway(stripe_secret_key),
        currency=currency,
        conn=conn,
    )
