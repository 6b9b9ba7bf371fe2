"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

import secrets
from functools import cached_property

import bcrypt

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """One-way salted password hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode()[:BCRYPT_MAX_BYTES]

    def hash(self, password: str) -> str:
        """Hash a password with bcrypt (auto-salted)."""
        return bcrypt.hashpw(self._encode(password), bcrypt.gensalt(rounds=self._rounds)).decode()

    @cached_property
    def dummy_hash(self) -> str:
        """Hash of a random password at the configured cost, for accounts that don't exist."""
        return self.hash(secrets.token_hex(16))

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode())
        except (ValueError, TypeError):
            return False
