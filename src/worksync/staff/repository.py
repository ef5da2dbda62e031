from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Staff


class StaffRepository(Protocol):
    """Repository interface for Staff.

    Note (DIP): the service layer depends on this interface, never on a concrete database.
    """

    def get_by_uid(self, uid: str) -> Optional[Staff]:
        raise NotImplementedError

    def create(self, *, fields: dict[str, Any]) -> Staff:
        """Insert a new record and assign the next sequential id.

        Raises ``ConflictError`` when a record with the same uid already exists.
        """

        raise NotImplementedError

    def update_fields(self, uid: str, *, fields: dict[str, Any]) -> int:
        """Apply a ``$set`` of ``fields``; returns the modified count."""

        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[Staff]:
        raise NotImplementedError

    def list_verified(self) -> Sequence[Staff]:
        raise NotImplementedError
