from __future__ import annotations

import logging
from datetime import datetime, timezone

from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database

from ..core.constants import SALARIES_COLLECTION, STAFFS_COLLECTION, TASKS_COLLECTION
from ..core.enums import Role
from .mongo_base import next_sequence

logger = logging.getLogger(__name__)


def ensure_indexes(db: Database) -> list[str]:
    """Create the indexes the repositories rely on. Safe to run repeatedly."""

    created = [
        db[STAFFS_COLLECTION].create_index([("uid", ASCENDING)], unique=True, name="uniq_staff_uid"),
        db[STAFFS_COLLECTION].create_index([("role", ASCENDING), ("id", ASCENDING)], name="staff_role_id"),
        db[TASKS_COLLECTION].create_index([("uid", ASCENDING), ("id", DESCENDING)], name="task_uid_id"),
        db[SALARIES_COLLECTION].create_index(
            [("uid", ASCENDING), ("month", ASCENDING), ("year", ASCENDING)],
            name="salary_uid_period",
        ),
        db[SALARIES_COLLECTION].create_index([("uid", ASCENDING), ("inputDate", ASCENDING)], name="salary_uid_date"),
    ]
    logger.info("indexes ready (%d)", len(created))
    return created


def ensure_admin(db: Database, *, uid: str, email: str, name: str = "Admin") -> bool:
    """Upsert an Admin staff record. Returns True when a new record was inserted."""

    staffs = db[STAFFS_COLLECTION]
    existing = staffs.find_one({"uid": uid})
    if existing:
        if existing.get("role") != Role.ADMIN.value:
            staffs.update_one({"uid": uid}, {"$set": {"role": Role.ADMIN.value}})
        return False

    staffs.insert_one(
        {
            "id": next_sequence(db, STAFFS_COLLECTION),
            "uid": uid,
            "name": name,
            "email": email,
            "role": Role.ADMIN.value,
            "accountNumber": None,
            "salary": 0,
            "designation": "Administrator",
            "photo": None,
            "isVerified": True,
            "isFired": False,
            "createdAt": datetime.now(timezone.utc),
        }
    )
    return True
