from __future__ import annotations

from typing import Any, Optional

from ..core.constants import FORBIDDEN_MESSAGE
from ..core.exceptions import AuthorizationError


def require_owner(caller_uid: str, requested_uid: Optional[Any]) -> str:
    """Return the uid a caller may act on.

    An empty ``requested_uid`` means "myself"; any other uid must equal the caller's.
    """

    if requested_uid in (None, ""):
        return caller_uid
    if str(requested_uid) != caller_uid:
        raise AuthorizationError(FORBIDDEN_MESSAGE)
    return caller_uid
