from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Task


class TaskRepository(Protocol):
    def create(self, *, uid: str, task: str, hours: float, work_date: date, created_at: datetime) -> Task:
        raise NotImplementedError

    def list_for_uid(self, uid: str) -> Sequence[Task]:
        """Newest first (descending sequential id)."""

        raise NotImplementedError

    def list_all(self, *, uid: Optional[str] = None, month: Optional[str] = None) -> Sequence[Task]:
        """``month`` is a YYYY-MM prefix of the task date."""

        raise NotImplementedError

    def totals(self, *, uid: Optional[str] = None, month: Optional[str] = None) -> tuple[int, float]:
        """Return (count, summed hours) for the same filter as ``list_all``."""

        raise NotImplementedError
