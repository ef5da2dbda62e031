from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from pymongo import ASCENDING

from ..core.constants import SALARIES_COLLECTION
from ..database.connection import DatabaseConnection
from ..database.mongo_base import next_sequence
from .model import Salary
from .repository import SalaryRepository


class MongoSalaryRepository(SalaryRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @property
    def _salaries(self):
        return self._conn.db()[SALARIES_COLLECTION]

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
        doc = {
            "id": next_sequence(self._conn.db(), SALARIES_COLLECTION),
            "uid": uid,
            "amount": amount,
            "month": month,
            "year": year,
            "transactionId": transaction_id,
            "inputDate": input_date,
        }
        self._salaries.insert_one(doc)
        return Salary.from_doc(doc)

    def exists(self, *, uid: str, month: int, year: int) -> bool:
        return self._salaries.find_one({"uid": uid, "month": month, "year": year}, {"_id": 1}) is not None

    def list_for_uid(self, uid: str) -> Sequence[Salary]:
        cursor = self._salaries.find({"uid": uid}, {"_id": 0}).sort([("inputDate", ASCENDING), ("id", ASCENDING)])
        return [Salary.from_doc(d) for d in cursor]
