"""
NoteLite Backend — Credentials & Password Hashing
===================================================

What:  Argon2id password hashing and the principal store that checks
       HTTP Basic credentials.
Why:   Only password hashes are configured; a leaked config or environment
       does not reveal the password.
How:   argon2-cffi's PasswordHasher produces PHC strings
       ($argon2id$v=19$m=...,t=...,p=...$salt$hash) with a random salt per
       hash. Verification is deliberately slow, so callers in async code run
       it in a worker thread.
Who:   BasicAuthMiddleware (authenticate), the notelite-hash-password CLI
       (hash_password), and the test suite.
"""

import logging
import secrets
from typing import Dict, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from argon2.low_level import Type

logger = logging.getLogger(__name__)

# time_cost=2, memory_cost=51200 KiB keeps a verification well under 100ms
# on commodity hardware while staying expensive to brute force offline
password_hasher = PasswordHasher(
    time_cost=2,
    memory_cost=51200,
    parallelism=2,
    hash_len=32,
    salt_len=16,
    type=Type.ID,
)


def hash_password(password: str) -> str:
    """Return a salted Argon2id hash for `password`."""
    return password_hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check `password` against an Argon2 hash.

    Returns False for a mismatch and for anything that is not a valid Argon2
    hash (including an empty string), so a misconfigured hash fails closed.
    """
    if not password_hash:
        return False
    try:
        return password_hasher.verify(password_hash, password)
    except VerifyMismatchError:
        return False
    except (VerificationError, InvalidHashError):
        logger.warning("Stored password hash could not be verified; rejecting credentials")
        return False


class PrincipalStore:
    """
    Username → Argon2 hash lookup used by the Access Gate.

    authenticate() spends the same hashing work whether or not the username
    exists, so response timing does not reveal valid usernames.
    """

    def __init__(self, principals: Optional[Dict[str, str]] = None):
        self._principals: Dict[str, str] = dict(principals or {})
        # Verified against when the username is unknown
        self._dummy_hash = hash_password(secrets.token_urlsafe(16))

    @classmethod
    def from_settings(cls, settings) -> "PrincipalStore":
        """Single principal from AUTH_USERNAME / AUTH_PASSWORD_HASH."""
        return cls({settings.auth_username: settings.auth_password_hash})

    def authenticate(self, username: str, password: str) -> bool:
        stored = self._principals.get(username)
        if stored is None:
            verify_password(password, self._dummy_hash)
            return False
        return verify_password(password, stored)

    def __contains__(self, username: str) -> bool:
        return username in self._principals
