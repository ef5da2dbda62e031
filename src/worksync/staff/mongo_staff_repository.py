from __future__ import annotations

from typing import Any, Optional, Sequence

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from ..core.constants import STAFFS_COLLECTION
from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mongo_base import next_sequence
from .model import Staff
from .repository import StaffRepository


class MongoStaffRepository(StaffRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @property
    def _staffs(self):
        return self._conn.db()[STAFFS_COLLECTION]

    def get_by_uid(self, uid: str) -> Optional[Staff]:
        doc = self._staffs.find_one({"uid": uid}, {"_id": 0})
        if not doc:
            return None
        return Staff.from_doc(doc)

    def create(self, *, fields: dict[str, Any]) -> Staff:
        doc = dict(fields)
        doc["id"] = next_sequence(self._conn.db(), STAFFS_COLLECTION)
        try:
            self._staffs.insert_one(doc)
        except DuplicateKeyError:
            raise ConflictError(f"staff {doc.get('uid')} already exists")
        return Staff.from_doc(doc)

    def update_fields(self, uid: str, *, fields: dict[str, Any]) -> int:
        if not fields:
            return 0
        result = self._staffs.update_one({"uid": uid}, {"$set": fields})
        return int(result.modified_count)

    def list_by_role(self, role: Role) -> Sequence[Staff]:
        cursor = self._staffs.find({"role": role.value}, {"_id": 0}).sort("id", ASCENDING)
        return [Staff.from_doc(d) for d in cursor]

    def list_verified(self) -> Sequence[Staff]:
        cursor = self._staffs.find(
            {"isVerified": True, "role": {"$in": [Role.EMPLOYEE.value, Role.HR.value]}},
            {"_id": 0},
        ).sort("id", ASCENDING)
        return [Staff.from_doc(d) for d in cursor]
