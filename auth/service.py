"""
Auth service — register, login and the bearer-token guard.

The service owns no state of its own: users live in the credential store,
sessions are stateless JWTs.  Every collaborator is passed in, so tests can
swap in a fake store and a fixed secret.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional, Protocol

from auth.models import PublicUser, User
from auth.password import PasswordHasher
from auth.tokens import TokenIssuer
from config.settings import Settings
from utils.errors import AuthError, ConflictError, ValidationError
from utils.validators import (
    INVALID_TEXT,
    is_utf8_text,
    is_valid_email,
    require_fields,
    require_text,
)

logger = logging.getLogger(__name__)

ALL_FIELDS_REQUIRED = "All fields are required"
INVALID_EMAIL = "Please fill a valid email address"
USER_EXISTS = "User already exists"
INVALID_CREDENTIALS = "Invalid email or password"
PASSWORD_TOO_LONG = "Password must be at most 72 bytes"
NO_TOKEN = "Authorization denied. No token provided."

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class CredentialStore(Protocol):
    async def find_by_email(self, email: str) -> Optional[User]: ...

    async def insert(self, user: User) -> User: ...


def public_view(user: User) -> PublicUser:
    return PublicUser(
        id=str(user.user_id),
        name=user.name,
        email=user.email,
        phone=user.phone,
        profile_picture=user.profile_picture or "",
    )


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the ``<token>`` part of ``Bearer <token>``, or raise ``AuthError(401)``."""
    if not authorization:
        raise AuthError(NO_TOKEN, status=HTTPStatus.UNAUTHORIZED)
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthError(NO_TOKEN, status=HTTPStatus.UNAUTHORIZED)
    return parts[1]


def authorize(authorization: Optional[str], tokens: TokenIssuer) -> Dict[str, Any]:
    """Guard for protected routes: header → token → verified claims.

    Trusts the signed claims; no store lookup happens here.
    """
    token = extract_bearer_token(authorization)
    return tokens.verify_token(token)


class AuthService:
    def __init__(
        self,
        store: CredentialStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self.store = store
        self.hasher = hasher
        self.tokens = tokens

    @classmethod
    def from_settings(cls, store: CredentialStore, settings: Settings) -> "AuthService":
        return cls(
            store,
            PasswordHasher(rounds=settings.bcrypt_rounds),
            TokenIssuer(
                settings.jwt_secret,
                expiry_seconds=settings.jwt_expiry_seconds,
                algorithm=settings.jwt_algorithm,
            ),
        )

    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        phone: Optional[str],
        password: Optional[str],
        profile_picture: Optional[str] = None,
    ) -> PublicUser:
        require_fields((name, email, phone, password), ALL_FIELDS_REQUIRED)
        require_text((name, email, phone, password, profile_picture), INVALID_TEXT)
        email = email.strip()
        if not is_valid_email(email):
            raise ValidationError(INVALID_EMAIL)
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            raise ValidationError(PASSWORD_TOO_LONG)

        # Checked before hashing; the unique index still settles races in insert.
        if await self.store.find_by_email(email) is not None:
            raise ConflictError(USER_EXISTS)

        user = User(
            name=name,
            email=email,
            phone=phone,
            password_hash=await self.hasher.hash_async(password),
            profile_picture=profile_picture or "",
        )
        user = await self.store.insert(user)
        logger.info("Registered user %s", user.user_id)
        return public_view(user)

    async def login(self, email: Optional[str], password: Optional[str]) -> Dict[str, Any]:
        """
        Check credentials and issue a session token.

        Unknown e-mail and wrong password fail with the same message.
        """
        if not email or not password:
            raise AuthError(INVALID_CREDENTIALS)
        if not is_utf8_text(email) or not is_utf8_text(password):
            raise AuthError(INVALID_CREDENTIALS)

        user = await self.store.find_by_email(email.strip())
        if user is None or not await self.hasher.verify_async(password, user.password_hash):
            raise AuthError(INVALID_CREDENTIALS)

        token = self.tokens.create_token(str(user.user_id))
        logger.info("Login: %s", user.user_id)
        return {"token": token, "user": public_view(user)}

    def authorize(self, authorization: Optional[str]) -> Dict[str, Any]:
        return authorize(authorization, self.tokens)
