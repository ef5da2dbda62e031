from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Staff roles used by the role gates."""

    ADMIN = "Admin"
    HR = "HR"
    EMPLOYEE = "Employee"
