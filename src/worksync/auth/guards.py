from __future__ import annotations

from functools import wraps

from flask import g, request

from ..core.constants import FORBIDDEN_MESSAGE
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..staff.repository import StaffRepository
from .tokens import TokenService


class Guards:
    """Route decorators: bearer-token check and per-role gates."""

    def __init__(self, tokens: TokenService, staffs: StaffRepository):
        self._tokens = tokens
        self._staffs = staffs

    def token_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.decoded = self._tokens.decode_header(request.headers.get("Authorization"))
            return view(*args, **kwargs)

        return wrapper

    def role_required(self, role: Role):
        def decorator(view):
            @wraps(view)
            def gated(*args, **kwargs):
                staff = self._staffs.get_by_uid(g.decoded["uid"])
                if not staff or staff.role != role:
                    raise AuthorizationError(FORBIDDEN_MESSAGE)
                return view(*args, **kwargs)

            return self.token_required(gated)

        return decorator

    @property
    def admin_required(self):
        return self.role_required(Role.ADMIN)

    @property
    def hr_required(self):
        return self.role_required(Role.HR)


def current_uid() -> str:
    return str(g.decoded["uid"])
