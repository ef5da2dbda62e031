from __future__ import annotations

import time
from typing import Any, Callable, Optional

from jose import JWTError, jwt

from ..core.constants import DEFAULT_TOKEN_EXPIRE_SECONDS, UNAUTHORIZED_MESSAGE
from ..core.exceptions import AuthenticationError


class TokenService:
    """Signs and verifies the HS256 access tokens carried in ``Authorization: Bearer``."""

    def __init__(
        self,
        secret: str,
        *,
        expire_seconds: int = DEFAULT_TOKEN_EXPIRE_SECONDS,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ):
        self._secret = secret
        self._expire_seconds = int(expire_seconds)
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, claims: dict[str, Any]) -> str:
        now = int(self._clock())
        payload = dict(claims)
        payload["iat"] = now
        payload["exp"] = now + self._expire_seconds
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            decoded = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError:
            raise AuthenticationError(UNAUTHORIZED_MESSAGE)
        if not decoded.get("uid"):
            raise AuthenticationError(UNAUTHORIZED_MESSAGE)
        return decoded

    def decode_header(self, authorization: Optional[str]) -> dict[str, Any]:
        if not authorization:
            raise AuthenticationError(UNAUTHORIZED_MESSAGE)

        parts = authorization.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise AuthenticationError(UNAUTHORIZED_MESSAGE)
        return self.decode(parts[1])
