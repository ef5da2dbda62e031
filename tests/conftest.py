from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional

import pytest

from worksync.auth.tokens import TokenService
from worksync.container import wire
from worksync.core.enums import Role
from worksync.core.exceptions import PaymentError
from worksync.main import create_app
from worksync.salaries.model import Salary
from worksync.staff.model import Staff
from worksync.tasks.model import Task

TEST_SECRET = "test-access-token-key"


class InMemoryStaffs:
    def __init__(self):
        self._docs: dict[str, dict[str, Any]] = {}
        self._id = 0

    def add(self, uid: str, role: Role = Role.EMPLOYEE, **fields) -> Staff:
        doc = {"uid": uid, "name": uid.upper(), "email": f"{uid}@example.com", "role": role.value}
        doc.update(fields)
        return self.create(fields=doc)

    def get_by_uid(self, uid: str) -> Optional[Staff]:
        doc = self._docs.get(uid)
        return Staff.from_doc(doc) if doc else None

    def create(self, *, fields: dict[str, Any]) -> Staff:
        self._id += 1
        doc = dict(fields)
        doc["id"] = self._id
        self._docs[doc["uid"]] = doc
        return Staff.from_doc(doc)

    def update_fields(self, uid: str, *, fields: dict[str, Any]) -> int:
        doc = self._docs.get(uid)
        if not doc:
            return 0
        changed = any(doc.get(k) != v for k, v in fields.items())
        doc.update(fields)
        return int(changed)

    def list_by_role(self, role: Role):
        docs = [d for d in self._docs.values() if d.get("role") == role.value]
        return [Staff.from_doc(d) for d in sorted(docs, key=lambda d: d["id"])]

    def list_verified(self):
        docs = [
            d for d in self._docs.values()
            if d.get("isVerified") and d.get("role") in (Role.EMPLOYEE.value, Role.HR.value)
        ]
        return [Staff.from_doc(d) for d in sorted(docs, key=lambda d: d["id"])]

    def __len__(self) -> int:
        return len(self._docs)


class InMemoryTasks:
    def __init__(self):
        self._items: list[Task] = []

    def create(self, *, uid: str, task: str, hours: float, work_date: date, created_at: datetime) -> Task:
        item = Task(id=len(self._items) + 1, uid=uid, task=task, hours=hours, date=work_date, created_at=created_at)
        self._items.append(item)
        return item

    def _filter(self, uid, month):
        items = [t for t in self._items if (not uid or t.uid == uid)]
        if month:
            items = [t for t in items if t.date.isoformat().startswith(month)]
        return items

    def list_for_uid(self, uid: str):
        return sorted(self._filter(uid, None), key=lambda t: t.id, reverse=True)

    def list_all(self, *, uid=None, month=None):
        return sorted(self._filter(uid, month), key=lambda t: t.id, reverse=True)

    def totals(self, *, uid=None, month=None):
        items = self._filter(uid, month)
        return len(items), float(sum(t.hours for t in items))


class InMemorySalaries:
    def __init__(self):
        self._items: list[Salary] = []

    def create(self, *, uid, amount, month, year, input_date, transaction_id=None) -> Salary:
        item = Salary(
            id=len(self._items) + 1,
            uid=uid,
            amount=amount,
            month=month,
            year=year,
            input_date=input_date,
            transaction_id=transaction_id,
        )
        self._items.append(item)
        return item

    def exists(self, *, uid, month, year) -> bool:
        return any(s.uid == uid and s.month == month and s.year == year for s in self._items)

    def list_for_uid(self, uid: str):
        return sorted((s for s in self._items if s.uid == uid), key=lambda s: (s.input_date, s.id))


class FakeGateway:
    def __init__(self, *, fail: bool = False):
        self.calls: list[dict[str, Any]] = []
        self.fail = fail

    def create_payment_intent(self, *, amount: int, currency: str) -> str:
        self.calls.append({"amount": amount, "currency": currency})
        if self.fail:
            raise PaymentError("payment processor error")
        return f"pi_{amount}_secret"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def staffs() -> InMemoryStaffs:
    return InMemoryStaffs()


@pytest.fixture
def tasks_repo() -> InMemoryTasks:
    return InMemoryTasks()


@pytest.fixture
def salaries_repo() -> InMemorySalaries:
    return InMemorySalaries()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture
def container(staffs, tasks_repo, salaries_repo, gateway, token_service):
    return wire(
        staff_repo=staffs,
        tasks_repo=tasks_repo,
        salaries_repo=salaries_repo,
        token_service=token_service,
        gateway=gateway,
        currency="usd",
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_header(token_service):
    def _header(uid: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_service.issue({'uid': uid})}"}

    return _header
