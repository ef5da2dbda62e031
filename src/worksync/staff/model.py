from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..core.enums import Role

# Fields accepted when a staff member registers through the upsert route
PROFILE_FIELDS = ("name", "email", "accountNumber", "designation", "photo", "salary")

# Fields a staff member may change on their own profile; salary is raised by an Admin only
UPDATABLE_FIELDS = ("name", "email", "accountNumber", "designation", "photo")

# Projection served to HR on the employee list
EMPLOYEE_LIST_FIELDS = ("id", "uid", "name", "email", "designation", "accountNumber", "salary", "isVerified", "photo")


def _parse_role(value: Any) -> Optional[Role]:
    """Map a stored role to ``Role``; a value outside the enum matches no role gate."""
    if not value:
        return Role.EMPLOYEE
    try:
        return Role(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class Staff:
    """Domain entity: a staff member keyed by ``uid``.

    Note: Plain data object; persistence lives in the repository implementations.
    """

    id: int
    uid: str
    name: str
    email: str
    role: Optional[Role]
    account_number: Optional[str] = None
    salary: float = 0
    designation: Optional[str] = None
    photo: Optional[str] = None
    is_verified: bool = False
    is_fired: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "Staff":
        return cls(
            id=int(doc.get("id") or 0),
            uid=str(doc["uid"]),
            name=doc.get("name") or "",
            email=doc.get("email") or "",
            role=_parse_role(doc.get("role")),
            account_number=doc.get("accountNumber"),
            salary=doc.get("salary") or 0,
            designation=doc.get("designation"),
            photo=doc.get("photo"),
            is_verified=bool(doc.get("isVerified", False)),
            is_fired=bool(doc.get("isFired", False)),
            created_at=doc.get("createdAt"),
        )

    def to_doc(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "uid": self.uid,
            "name": self.name,
            "email": self.email,
            "role": self.role.value if self.role else None,
            "accountNumber": self.account_number,
            "salary": self.salary,
            "designation": self.designation,
            "photo": self.photo,
            "isVerified": self.is_verified,
            "isFired": self.is_fired,
            "createdAt": self.created_at,
        }

    def to_json(self) -> dict[str, Any]:
        out = self.to_doc()
        out["createdAt"] = self.created_at.isoformat() if self.created_at else None
        return out

    def employee_view(self) -> dict[str, Any]:
        doc = self.to_doc()
        return {k: doc[k] for k in EMPLOYEE_LIST_FIELDS}
