from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from ..auth.ownership import require_owner
from ..common.datetime_utils import now_utc, parse_iso_month
from ..common.validators import optional_date, require_non_empty, require_positive_number
from ..core.exceptions import ValidationError
from .model import Task
from .repository import TaskRepository


@dataclass(frozen=True)
class TaskOverview:
    tasks: list[Task]
    count: int
    total_hours: float

    def to_json(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_json() for t in self.tasks],
            "count": self.count,
            "totalHours": self.total_hours,
        }


class TaskService:
    def __init__(self, tasks: TaskRepository, *, clock: Callable[[], datetime] = now_utc):
        self._tasks = tasks
        self._clock = clock

    def submit(self, *, caller_uid: str, payload: dict[str, Any]) -> Task:
        uid = require_owner(caller_uid, payload.get("uid"))
        task = require_non_empty(payload.get("task"), "task")
        hours = require_positive_number(payload.get("hours"), "hours")

        now = self._clock()
        work_date = optional_date(payload.get("date"), "date", default=now.date())
        return self._tasks.create(uid=uid, task=task, hours=hours, work_date=work_date, created_at=now)

    def list_own(self, *, caller_uid: str, uid: Optional[str]) -> list[Task]:
        uid = require_owner(caller_uid, uid)
        return list(self._tasks.list_for_uid(uid))

    def overview(self, *, uid: Optional[str] = None, month: Optional[str] = None) -> TaskOverview:
        if month:
            try:
                year, mon = parse_iso_month(month)
            except ValueError:
                raise ValidationError("month must be YYYY-MM")
            month = f"{year:04d}-{mon:02d}"

        tasks = list(self._tasks.list_all(uid=uid or None, month=month or None))
        count, total_hours = self._tasks.totals(uid=uid or None, month=month or None)
        return TaskOverview(tasks=tasks, count=count, total_hours=total_hours)
