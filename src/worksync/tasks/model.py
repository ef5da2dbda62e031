from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date


@dataclass(frozen=True)
class Task:
    """Domain entity: one work-hour log entry owned by a staff uid."""

    id: int
    uid: str
    task: str
    hours: float
    date: date
    created_at: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "Task":
        work_date = doc.get("date")
        if isinstance(work_date, str):
            work_date = parse_iso_date(work_date[:10])
        elif isinstance(work_date, datetime):
            work_date = work_date.date()
        return cls(
            id=int(doc["id"]),
            uid=str(doc["uid"]),
            task=doc.get("task") or "",
            hours=float(doc.get("hours") or 0),
            date=work_date,
            created_at=doc.get("createdAt"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "uid": self.uid,
            "task": self.task,
            "hours": self.hours,
            "date": self.date.isoformat(),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
