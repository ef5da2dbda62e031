from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Salary:
    """Domain entity: one salary payment made to a staff uid for a month."""

    id: int
    uid: str
    amount: float
    month: int
    year: int
    input_date: datetime
    transaction_id: Optional[str] = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "Salary":
        return cls(
            id=int(doc["id"]),
            uid=str(doc["uid"]),
            amount=float(doc.get("amount") or 0),
            month=int(doc["month"]),
            year=int(doc["year"]),
            input_date=doc["inputDate"],
            transaction_id=doc.get("transactionId"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "uid": self.uid,
            "amount": self.amount,
            "month": self.month,
            "year": self.year,
            "transactionId": self.transaction_id,
            "inputDate": self.input_date.isoformat(),
        }
