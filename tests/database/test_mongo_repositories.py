from __future__ import annotations

from datetime import date, datetime, timezone
from unittest.mock import MagicMock

import pytest
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from worksync.core.enums import Role
from worksync.core.exceptions import ConflictError
from worksync.database.bootstrap import ensure_indexes
from worksync.database.mongo_base import next_sequence
from worksync.salaries.mongo_salary_repository import MongoSalaryRepository
from worksync.staff.mongo_staff_repository import MongoStaffRepository
from worksync.tasks.mongo_task_repository import MongoTaskRepository


class FakeDB:
    def __init__(self):
        self.collections: dict[str, MagicMock] = {}

    def __getitem__(self, name: str) -> MagicMock:
        return self.collections.setdefault(name, MagicMock(name=name))


@pytest.fixture
def db():
    fake = FakeDB()
    fake["counters"].find_one_and_update.return_value = {"_id": "x", "seq": 7}
    return fake


@pytest.fixture
def conn(db):
    c = MagicMock()
    c.db.return_value = db
    return c


def test_next_sequence_increments_counter_atomically(db):
    assert next_sequence(db, "tasks") == 7

    db["counters"].find_one_and_update.assert_called_once_with(
        {"_id": "tasks"},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )


def test_staff_create_assigns_sequential_id(conn, db):
    staff = MongoStaffRepository(conn).create(fields={"uid": "u1", "name": "Ann", "role": "Employee"})

    assert staff.id == 7
    inserted = db["staffs"].insert_one.call_args.args[0]
    assert inserted["id"] == 7
    assert inserted["uid"] == "u1"


def test_staff_create_duplicate_uid_is_conflict(conn, db):
    db["staffs"].insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error collection: staffs index: uid_1")

    with pytest.raises(ConflictError):
        MongoStaffRepository(conn).create(fields={"uid": "u1", "name": "Ann", "role": "Employee"})


def test_staff_get_by_uid_maps_document(conn, db):
    db["staffs"].find_one.return_value = {"id": 2, "uid": "h1", "name": "Hal", "email": "h@x", "role": "HR"}

    staff = MongoStaffRepository(conn).get_by_uid("h1")

    assert staff.role == Role.HR
    db["staffs"].find_one.assert_called_once_with({"uid": "h1"}, {"_id": 0})


def test_staff_with_unrecognised_role_maps_to_no_role(conn, db):
    db["staffs"].find_one.return_value = {"id": 3, "uid": "a1", "name": "Al", "role": "admin"}

    staff = MongoStaffRepository(conn).get_by_uid("a1")

    assert staff.role is None
    assert staff.to_json()["role"] is None


def test_staff_update_with_no_fields_is_noop(conn, db):
    assert MongoStaffRepository(conn).update_fields("u1", fields={}) == 0
    db["staffs"].update_one.assert_not_called()


def test_tasks_for_uid_sorted_by_id_descending(conn, db):
    cursor = db["tasks"].find.return_value
    cursor.sort.return_value = [
        {"id": 2, "uid": "u1", "task": "Sales", "hours": 3, "date": "2026-03-02"},
        {"id": 1, "uid": "u1", "task": "Sales", "hours": 5, "date": "2026-03-01"},
    ]

    rows = MongoTaskRepository(conn).list_for_uid("u1")

    db["tasks"].find.assert_called_once_with({"uid": "u1"}, {"_id": 0})
    cursor.sort.assert_called_once_with("id", DESCENDING)
    assert [t.id for t in rows] == [2, 1]
    assert rows[1].date == date(2026, 3, 1)


def test_task_create_stores_iso_date(conn, db):
    created_at = datetime(2026, 3, 14, tzinfo=timezone.utc)

    task = MongoTaskRepository(conn).create(
        uid="u1", task="Sales", hours=5, work_date=date(2026, 3, 14), created_at=created_at
    )

    inserted = db["tasks"].insert_one.call_args.args[0]
    assert inserted["date"] == "2026-03-14"
    assert task.id == 7
    assert task.hours == 5


def test_task_totals_uses_month_prefix_and_handles_empty(conn, db):
    db["tasks"].aggregate.return_value = iter([])

    assert MongoTaskRepository(conn).totals(month="2026-03") == (0, 0.0)
    pipeline = db["tasks"].aggregate.call_args.args[0]
    assert pipeline[0] == {"$match": {"date": {"$regex": "^2026\\-03"}}}


def test_salary_history_sorted_by_input_date_ascending(conn, db):
    cursor = db["salaries"].find.return_value
    cursor.sort.return_value = [
        {"id": 1, "uid": "e1", "amount": 100, "month": 1, "year": 2026, "inputDate": datetime(2026, 2, 1)},
    ]

    rows = MongoSalaryRepository(conn).list_for_uid("e1")

    cursor.sort.assert_called_once_with([("inputDate", ASCENDING), ("id", ASCENDING)])
    assert rows[0].amount == 100


def test_salary_exists_queries_period(conn, db):
    db["salaries"].find_one.return_value = None

    assert MongoSalaryRepository(conn).exists(uid="e1", month=3, year=2026) is False
    db["salaries"].find_one.assert_called_once_with({"uid": "e1", "month": 3, "year": 2026}, {"_id": 1})


def test_ensure_indexes_makes_staff_uid_unique(db):
    ensure_indexes(db)

    calls = db["staffs"].create_index.call_args_list
    assert any(c.kwargs.get("unique") and c.args[0] == [("uid", ASCENDING)] for c in calls)
