"""
Password hashing and verification.

bcrypt with a fresh random salt per call and a fixed work factor.
"""

from __future__ import annotations

import logging

import bcrypt

logger = logging.getLogger(__name__)

SALT_ROUNDS = 10


class PasswordHashingError(RuntimeError):
    """The hashing primitive failed.  Never carries the plaintext."""


def hash_password(password: str, rounds: int = SALT_ROUNDS) -> str:
    try:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()
    except (ValueError, TypeError, AttributeError) as exc:
        logger.error("Password hashing failed: %s", type(exc).__name__)
        raise PasswordHashingError("error hashing password") from None


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash; False on malformed input."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError, AttributeError):
        return False
