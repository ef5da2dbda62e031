from __future__ import annotations

from typing import Any

from ..common.validators import require_non_empty
from ..core.exceptions import AuthorizationError
from ..staff.repository import StaffRepository
from .tokens import TokenService


class AuthService:
    """Use case: exchange an identity claim for a signed access token."""

    def __init__(self, staffs: StaffRepository, tokens: TokenService):
        self._staffs = staffs
        self._tokens = tokens

    def issue_token(self, payload: dict[str, Any]) -> str:
        uid = require_non_empty(payload.get("uid"), "uid")

        staff = self._staffs.get_by_uid(uid)
        if staff and staff.is_fired:
            raise AuthorizationError("this account has been deactivated")

        claims = {"uid": uid}
        if payload.get("email"):
            claims["email"] = str(payload["email"])
        return self._tokens.issue(claims)
