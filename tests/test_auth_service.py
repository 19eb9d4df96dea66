"""
Tests for the auth service against an in-memory credential store.
"""

import time
import uuid
from http import HTTPStatus
from typing import Dict, Optional
from unittest.mock import AsyncMock, patch

import jwt
import pytest

from auth.password import PasswordHasher
from auth.service import (
    ALL_FIELDS_REQUIRED,
    INVALID_CREDENTIALS,
    INVALID_EMAIL,
    INVALID_TEXT,
    NO_TOKEN,
    AuthService,
    extract_bearer_token,
)
from auth.tokens import TokenIssuer
from database.models import User
from utils.errors import AuthError, ConflictError, ValidationError

SECRET = "service-test-secret"


class FakeUserStore:
    """Dict-backed stand-in for ``database.users.UserStore``."""

    def __init__(self) -> None:
        self.rows: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.rows.get(email)

    async def insert(self, user: User) -> User:
        if user.email in self.rows:
            raise ConflictError("User already exists")
        user.user_id = uuid.uuid4()
        self.rows[user.email] = user
        return user


@pytest.fixture
def store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture
def service(store) -> AuthService:
    return AuthService(store, PasswordHasher(rounds=4), TokenIssuer(SECRET))


async def _register(service, **overrides):
    fields = {"name": "A", "email": "a@x.com", "phone": "1", "password": "pw12345"}
    fields.update(overrides)
    return await service.register(
        fields["name"], fields["email"], fields["phone"], fields["password"],
        profile_picture=fields.get("profile_picture"),
    )


class TestRegister:
    @pytest.mark.asyncio
    async def test_returns_public_view(self, service, store):
        user = await _register(service)
        assert user.name == "A"
        assert user.email == "a@x.com"
        assert user.phone == "1"
        assert user.profile_picture == ""
        assert user.id == str(store.rows["a@x.com"].user_id)
        assert "password" not in user.model_dump()
        assert "password_hash" not in user.model_dump()

    @pytest.mark.asyncio
    async def test_stores_hash_not_plaintext(self, service, store):
        await _register(service)
        stored = store.rows["a@x.com"].password_hash
        assert stored != "pw12345"
        assert service.hasher.verify("pw12345", stored)

    @pytest.mark.asyncio
    async def test_keeps_profile_picture_reference(self, service):
        user = await _register(service, profile_picture="uploads/a.png")
        assert user.profile_picture == "uploads/a.png"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["name", "email", "phone", "password"])
    async def test_missing_field(self, service, store, missing):
        with pytest.raises(ValidationError) as exc_info:
            await _register(service, **{missing: ""})
        assert exc_info.value.message == ALL_FIELDS_REQUIRED
        assert store.rows == {}

    @pytest.mark.asyncio
    async def test_none_field(self, service):
        with pytest.raises(ValidationError):
            await _register(service, phone=None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["plainaddress", "a@x", "@", "a@.c"])
    async def test_malformed_email(self, service, email):
        with pytest.raises(ValidationError) as exc_info:
            await _register(service, email=email)
        assert exc_info.value.message == INVALID_EMAIL

    @pytest.mark.asyncio
    async def test_overlong_password(self, service):
        with pytest.raises(ValidationError):
            await _register(service, password="x" * 73)

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service, store):
        await _register(service)
        with pytest.raises(ConflictError):
            await _register(service, name="B")
        assert len(store.rows) == 1
        assert store.rows["a@x.com"].name == "A"

    @pytest.mark.asyncio
    async def test_duplicate_email_skips_hashing(self, service):
        await _register(service)
        with patch.object(PasswordHasher, "hash_async", new=AsyncMock()) as hash_async:
            with pytest.raises(ConflictError) as exc_info:
                await _register(service, name="B")
        assert exc_info.value.message == "User already exists"
        hash_async.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["name", "phone", "password", "profile_picture"])
    async def test_lone_surrogate_is_a_validation_error(self, service, store, field):
        with pytest.raises(ValidationError) as exc_info:
            await _register(service, **{field: "pw\ud800x"})
        assert exc_info.value.message == INVALID_TEXT
        assert store.rows == {}


class TestLogin:
    @pytest.mark.asyncio
    async def test_success_issues_token_for_user(self, service):
        user = await _register(service)
        result = await service.login("a@x.com", "pw12345")
        assert result["token"]
        assert result["user"].id == user.id
        claims = service.authorize(f"Bearer {result['token']}")
        assert claims["sub"] == user.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_are_indistinguishable(self, service):
        await _register(service)
        with pytest.raises(AuthError) as wrong_password:
            await service.login("a@x.com", "wrong")
        with pytest.raises(AuthError) as unknown_email:
            await service.login("nobody@x.com", "pw12345")
        assert wrong_password.value.message == INVALID_CREDENTIALS
        assert unknown_email.value.message == INVALID_CREDENTIALS
        assert wrong_password.value.status == unknown_email.value.status == HTTPStatus.BAD_REQUEST

    @pytest.mark.asyncio
    async def test_missing_credentials(self, service):
        with pytest.raises(AuthError) as exc_info:
            await service.login(None, None)
        assert exc_info.value.message == INVALID_CREDENTIALS

    @pytest.mark.asyncio
    async def test_lone_surrogate_is_a_credential_failure(self, service):
        await _register(service)
        with pytest.raises(AuthError) as exc_info:
            await service.login("a@x.com", "pw\ud800x")
        assert exc_info.value.message == INVALID_CREDENTIALS


class TestGuard:
    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer ", "Token abc", "abc"])
    def test_no_token(self, service, header):
        with pytest.raises(AuthError) as exc_info:
            service.authorize(header)
        assert exc_info.value.message == NO_TOKEN
        assert exc_info.value.status == HTTPStatus.UNAUTHORIZED

    def test_extract_bearer_token(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"
        assert extract_bearer_token("bearer abc") == "abc"

    def test_expired_token(self, service):
        now = int(time.time())
        token = jwt.encode({"sub": "u1", "iat": now - 4000, "exp": now - 400}, SECRET, algorithm="HS256")
        with pytest.raises(AuthError) as exc_info:
            service.authorize(f"Bearer {token}")
        assert exc_info.value.status == HTTPStatus.UNAUTHORIZED

    def test_foreign_secret(self, service):
        token = TokenIssuer("not-the-server-secret").create_token("u1")
        with pytest.raises(AuthError):
            service.authorize(f"Bearer {token}")

    def test_guard_does_not_touch_store(self, service, store):
        token = service.tokens.create_token("ghost-user")
        claims = service.authorize(f"Bearer {token}")
        assert claims["sub"] == "ghost-user"
        assert store.rows == {}


def test_from_settings_uses_configured_secret(settings, store):
    service = AuthService.from_settings(store, settings)
    assert service.hasher.rounds == settings.bcrypt_rounds
    token = service.tokens.create_token("u1")
    assert jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])["sub"] == "u1"
