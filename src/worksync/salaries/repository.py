from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Salary


class SalaryRepository(Protocol):
    def create(
        self,
        *,
        uid: str,
        amount: float,
        month: int,
        year: int,
        input_date: datetime,
        transaction_id: Optional[str] = None,
    ) -> Salary:
        raise NotImplementedError

    def exists(self, *, uid: str, month: int, year: int) -> bool:
        raise NotImplementedError

    def list_for_uid(self, uid: str) -> Sequence[Salary]:
        """Oldest payment first (ascending ``inputDate``)."""

        raise NotImplementedError
