"""
NoteLite Backend — Credential Tests
=====================================

What:  Tests for password hashing, the principal store, and Basic header parsing.
Why:   A mistake here either locks everyone out or lets everyone in.

What we test:
    ✅ Hashes are salted Argon2id strings that verify only the right password
    ✅ Invalid or empty hashes fail closed
    ✅ PrincipalStore rejects unknown users and wrong passwords
    ✅ parse_basic_credentials handles every malformed header shape
"""

import base64
from types import SimpleNamespace

import pytest

from notelite.middleware.basic_auth import parse_basic_credentials
from notelite.security import PrincipalStore, hash_password, verify_password


def _basic(raw: bytes) -> str:
    return "Basic " + base64.b64encode(raw).decode("ascii")


class TestPasswordHashing:

    def test_hash_is_argon2id(self):
        assert hash_password("s3cret").startswith("$argon2id$")

    def test_hash_is_salted(self):
        assert hash_password("s3cret") != hash_password("s3cret")

    def test_verify_password(self):
        hashed = hash_password("s3cret")

        assert verify_password("s3cret", hashed) is True
        assert verify_password("S3cret", hashed) is False

    @pytest.mark.parametrize("bad_hash", ["", "plaintext", "$argon2id$garbage"])
    def test_invalid_hash_fails_closed(self, bad_hash):
        assert verify_password("anything", bad_hash) is False


class TestPrincipalStore:

    def setup_method(self):
        self.store = PrincipalStore({"alice": hash_password("wonderland")})

    def test_authenticate_success(self):
        assert self.store.authenticate("alice", "wonderland") is True

    def test_authenticate_wrong_password(self):
        assert self.store.authenticate("alice", "looking-glass") is False

    def test_authenticate_unknown_user(self):
        assert self.store.authenticate("bob", "wonderland") is False

    def test_contains(self):
        assert "alice" in self.store
        assert "bob" not in self.store

    def test_from_settings_with_empty_hash_rejects_everyone(self):
        store = PrincipalStore.from_settings(
            SimpleNamespace(auth_username="admin", auth_password_hash="")
        )

        assert "admin" in store
        assert store.authenticate("admin", "") is False


class TestParseBasicCredentials:

    def test_valid_header(self):
        assert parse_basic_credentials(_basic(b"alice:wonderland")) == ("alice", "wonderland")

    def test_scheme_is_case_insensitive(self):
        header = "basic " + base64.b64encode(b"alice:pw").decode()
        assert parse_basic_credentials(header) == ("alice", "pw")

    def test_password_may_contain_colons(self):
        assert parse_basic_credentials(_basic(b"alice:a:b:c")) == ("alice", "a:b:c")

    def test_empty_password_is_allowed(self):
        assert parse_basic_credentials(_basic(b"alice:")) == ("alice", "")

    @pytest.mark.parametrize("header", [
        None,
        "",
        "Basic",
        "Basic ",
        "Bearer token",
        "Basic %%%%",
        "Basic " + base64.b64encode(b"nocolon").decode(),
        "Basic " + base64.b64encode(b"\xff\xfe:pw").decode(),
    ])
    def test_malformed_headers_return_none(self, header):
        assert parse_basic_credentials(header) is None
