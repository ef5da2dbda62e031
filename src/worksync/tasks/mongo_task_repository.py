from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional, Sequence

from pymongo import DESCENDING

from ..core.constants import TASKS_COLLECTION
from ..database.connection import DatabaseConnection
from ..database.mongo_base import next_sequence
from .model import Task
from .repository import TaskRepository


def _task_filter(*, uid: Optional[str], month: Optional[str]) -> dict[str, Any]:
    query: dict[str, Any] = {}
    if uid:
        query["uid"] = uid
    if month:
        query["date"] = {"$regex": f"^{re.escape(month)}"}
    return query


class MongoTaskRepository(TaskRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @property
    def _tasks(self):
        return self._conn.db()[TASKS_COLLECTION]

    def create(self, *, uid: str, task: str, hours: float, work_date: date, created_at: datetime) -> Task:
        doc = {
            "id": next_sequence(self._conn.db(), TASKS_COLLECTION),
            "uid": uid,
            "task": task,
            "hours": hours,
            # dates are stored as YYYY-MM-DD so month filters can use a prefix match
            "date": work_date.isoformat(),
            "createdAt": created_at,
        }
        self._tasks.insert_one(doc)
        return Task.from_doc(doc)

    def list_for_uid(self, uid: str) -> Sequence[Task]:
        cursor = self._tasks.find({"uid": uid}, {"_id": 0}).sort("id", DESCENDING)
        return [Task.from_doc(d) for d in cursor]

    def list_all(self, *, uid: Optional[str] = None, month: Optional[str] = None) -> Sequence[Task]:
        cursor = self._tasks.find(_task_filter(uid=uid, month=month), {"_id": 0}).sort("id", DESCENDING)
        return [Task.from_doc(d) for d in cursor]

    def totals(self, *, uid: Optional[str] = None, month: Optional[str] = None) -> tuple[int, float]:
        pipeline = [
            {"$match": _task_filter(uid=uid, month=month)},
            {"$group": {"_id": None, "count": {"$sum": 1}, "totalHours": {"$sum": "$hours"}}},
        ]
        rows = list(self._tasks.aggregate(pipeline))
        if not rows:
            return 0, 0.0
        return int(rows[0]["count"]), float(rows[0]["totalHours"] or 0)
