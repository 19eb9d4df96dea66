"""
JWT session token creation and verification.

Tokens are HS256-signed JWTs carrying the user id as ``sub`` (mirrored in
``id``), ``iat`` and ``exp``.  Verification is pure: signature and expiry
only, no I/O.
"""

from __future__ import annotations

import time
from http import HTTPStatus
from typing import Any, Dict, Optional

import jwt

from utils.errors import AuthError

INVALID_TOKEN_MESSAGE = "Token is not valid"


class TokenIssuer:
    def __init__(
        self,
        secret: str,
        *,
        expiry_seconds: int = 3600,
        algorithm: str = "HS256",
    ) -> None:
        self._secret = secret
        self.expiry_seconds = expiry_seconds
        self.algorithm = algorithm

    def create_token(self, user_id: str, *, now: Optional[int] = None) -> str:
        """Create a signed token containing ``user_id`` and expiry."""
        issued_at = int(time.time()) if now is None else now
        payload = {
            "sub": user_id,
            "id": user_id,
            "iat": issued_at,
            "exp": issued_at + self.expiry_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify token and return its claims.

        Raises ``AuthError(401)`` on a bad signature, a malformed token or an
        expired one.
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.PyJWTError as exc:
            raise AuthError(INVALID_TOKEN_MESSAGE, status=HTTPStatus.UNAUTHORIZED) from exc
