"""
Tests for startup configuration.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings


class TestSettings:
    def test_missing_secret_is_fatal(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite://")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_missing_database_url_is_fatal(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "s")
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "s")
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite://")
        settings = Settings(_env_file=None)
        assert settings.jwt_expiry_seconds == 3600
        assert settings.bcrypt_rounds == 10
        assert settings.jwt_algorithm == "HS256"
