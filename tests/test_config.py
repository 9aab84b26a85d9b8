"""
NoteLite Backend — Settings Tests
"""

import pytest
from pydantic import ValidationError

from notelite.config import Settings
from notelite.security import hash_password


class TestSettings:

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        s = Settings(cors_origins="http://a.test, http://b.test,,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_is_sqlite(self):
        assert Settings(database_url="sqlite+aiosqlite:///./x.db").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@h/db").is_sqlite


class TestProductionValidation:

    def test_missing_hash_fails(self):
        with pytest.raises(ValueError, match="AUTH_PASSWORD_HASH is not set"):
            Settings(auth_password_hash="").validate_required_for_production()

    def test_plaintext_password_fails(self):
        with pytest.raises(ValueError, match="not an Argon2 hash"):
            Settings(auth_password_hash="hunter2").validate_required_for_production()

    def test_argon2_hash_passes(self):
        Settings(auth_password_hash=hash_password("pw")).validate_required_for_production()
