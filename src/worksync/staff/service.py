from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from ..auth.ownership import require_owner
from ..common.datetime_utils import now_utc
from ..common.validators import as_bool, require_non_empty, require_positive_number
from ..core.constants import UNAUTHORIZED_MESSAGE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .model import PROFILE_FIELDS, UPDATABLE_FIELDS, Staff
from .repository import StaffRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpsertResult:
    message: str
    created: bool
    staff: Staff
    modified_count: int = 0

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"message": self.message}
        if self.created:
            out["insertedId"] = self.staff.id
        elif self.message == StaffService.UPDATED:
            out["modifiedCount"] = self.modified_count
        return out


class StaffService:
    """Use cases: registration/upsert, self lookup, and the Admin/HR staff operations."""

    SAVED = "saved new user data"
    EXISTS = "user already exist"
    UPDATED = "updated user data"

    def __init__(self, staffs: StaffRepository, *, clock: Callable[[], datetime] = now_utc):
        self._staffs = staffs
        self._clock = clock

    def upsert(self, payload: dict[str, Any], *, caller_uid: Optional[str] = None) -> UpsertResult:
        uid = require_non_empty(payload.get("uid"), "uid")
        existing = self._staffs.get_by_uid(uid)

        if existing:
            if not as_bool(payload.get("isUpdate")):
                return UpsertResult(message=self.EXISTS, created=False, staff=existing)

            if caller_uid is None:
                raise AuthenticationError(UNAUTHORIZED_MESSAGE)
            require_owner(caller_uid, uid)

            fields = self._profile_fields(payload, UPDATABLE_FIELDS)
            modified = self._staffs.update_fields(uid, fields=fields)
            logger.info("staff %s updated fields=%s", uid, sorted(fields))
            return UpsertResult(
                message=self.UPDATED,
                created=False,
                staff=self._staffs.get_by_uid(uid) or existing,
                modified_count=modified,
            )

        role = self._registration_role(payload.get("role"))
        fields = self._profile_fields(payload, PROFILE_FIELDS)
        fields.update(
            {
                "uid": uid,
                "name": str(payload.get("name") or ""),
                "email": str(payload.get("email") or ""),
                "role": role.value,
                "isVerified": False,
                "isFired": False,
                "createdAt": self._clock(),
            }
        )
        fields.setdefault("salary", 0)
        try:
            staff = self._staffs.create(fields=fields)
        except ConflictError:
            # a concurrent registration for this uid inserted first
            existing = self._staffs.get_by_uid(uid)
            if not existing:
                raise
            return UpsertResult(message=self.EXISTS, created=False, staff=existing)
        logger.info("staff %s registered as %s (id=%s)", uid, role.value, staff.id)
        return UpsertResult(message=self.SAVED, created=True, staff=staff)

    def get_own(self, *, caller_uid: str, uid: Optional[str]) -> Staff:
        uid = require_owner(caller_uid, uid)
        staff = self._staffs.get_by_uid(uid)
        if not staff:
            raise NotFoundError("staff not found")
        return staff

    # HR
    def list_employees(self) -> list[dict[str, Any]]:
        return [s.employee_view() for s in self._staffs.list_by_role(Role.EMPLOYEE)]

    def get_employee(self, uid: str) -> Staff:
        staff = self._staffs.get_by_uid(uid)
        if not staff or staff.role != Role.EMPLOYEE:
            raise NotFoundError("employee not found")
        return staff

    def toggle_verified(self, uid: str) -> bool:
        staff = self.get_employee(uid)
        verified = not staff.is_verified
        self._staffs.update_fields(uid, fields={"isVerified": verified})
        return verified

    # Admin
    def list_verified_staff(self) -> list[Staff]:
        return list(self._staffs.list_verified())

    def change_role(self, uid: str, role_value: Any) -> Staff:
        if role_value != Role.HR.value:
            raise ValidationError("role can only be changed to HR")

        staff = self._require(uid)
        if staff.role == Role.ADMIN:
            raise ValidationError("cannot change the role of an Admin")
        if staff.role != Role.HR:
            self._staffs.update_fields(uid, fields={"role": Role.HR.value})
            logger.info("staff %s promoted to HR", uid)
        return self._require(uid)

    def fire(self, uid: str) -> Staff:
        staff = self._require(uid)
        if staff.role == Role.ADMIN:
            raise ValidationError("cannot fire an Admin")
        if not staff.is_fired:
            self._staffs.update_fields(uid, fields={"isFired": True})
            logger.info("staff %s fired", uid)
        return self._require(uid)

    def adjust_salary(self, uid: str, salary: Any) -> Staff:
        new_salary = require_positive_number(salary, "salary")
        staff = self._require(uid)
        if new_salary <= float(staff.salary or 0):
            raise ValidationError("salary can only be increased")
        self._staffs.update_fields(uid, fields={"salary": new_salary})
        return self._require(uid)

    def _require(self, uid: str) -> Staff:
        staff = self._staffs.get_by_uid(uid)
        if not staff:
            raise NotFoundError("staff not found")
        return staff

    @staticmethod
    def _registration_role(value: Any) -> Role:
        if value in (None, ""):
            return Role.EMPLOYEE
        try:
            role = Role(value)
        except ValueError:
            raise ValidationError("role is not valid")
        if role == Role.ADMIN:
            raise ValidationError("cannot register as Admin")
        return role

    @staticmethod
    def _profile_fields(payload: dict[str, Any], allowed: tuple[str, ...]) -> dict[str, Any]:
        fields = {k: payload[k] for k in allowed if k in payload}
        if fields.get("salary") in (None, ""):
            fields.pop("salary", None)
        elif "salary" in fields:
            try:
                salary = float(fields["salary"])
            except (TypeError, ValueError):
                raise ValidationError("salary must be a number")
            if salary < 0:
                raise ValidationError("salary must not be negative")
            fields["salary"] = salary
        return fields
