from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from ..auth.ownership import require_owner
from ..common.datetime_utils import now_utc
from ..common.validators import require_month, require_non_empty, require_positive_number, require_year
from ..core.exceptions import ConflictError, ValidationError
from .model import Salary
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


class SalaryService:
    """Use cases: record a payment, check whether a month is paid, list payment history."""

    def __init__(self, salaries: SalaryRepository, *, clock: Callable[[], datetime] = now_utc):
        self._salaries = salaries
        self._clock = clock

    def create(self, payload: dict[str, Any]) -> Salary:
        uid = require_non_empty(payload.get("uid"), "uid")
        amount = require_positive_number(payload.get("amount"), "amount")
        month = require_month(payload.get("month"))
        year = require_year(payload.get("year"))

        if self._salaries.exists(uid=uid, month=month, year=year):
            raise ConflictError(f"salary for {month:02d}/{year} is already paid")

        salary = self._salaries.create(
            uid=uid,
            amount=amount,
            month=month,
            year=year,
            input_date=self._input_date(payload.get("inputDate")),
            transaction_id=payload.get("transactionId") or None,
        )
        logger.info("salary %s recorded for %s %02d/%d", salary.id, uid, month, year)
        return salary

    def is_paid(self, payload: dict[str, Any]) -> bool:
        uid = require_non_empty(payload.get("uid"), "uid")
        month = require_month(payload.get("month"))
        year = require_year(payload.get("year"))
        return self._salaries.exists(uid=uid, month=month, year=year)

    def history(self, *, caller_uid: str, uid: Optional[str]) -> list[Salary]:
        uid = require_owner(caller_uid, uid)
        return list(self._salaries.list_for_uid(uid))

    def history_for(self, uid: str) -> list[Salary]:
        """HR view of one employee's payments (no ownership check)."""
        return list(self._salaries.list_for_uid(uid))

    def _input_date(self, value: Any) -> datetime:
        if value in (None, ""):
            return self._clock()
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            raise ValidationError("inputDate must be an ISO-8601 datetime")
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
