"""Hashing helpers for API tokens and account passwords."""
from __future__ import annotations

import hashlib
import secrets

import bcrypt

# bcrypt ignores input past this many bytes; newer releases reject it outright.
_BCRYPT_MAX_BYTES = 72


def hash_api_token(token: str) -> str:
    """Return a SHA-256 hash of the provided public API token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_api_token() -> str:
    """Return a new random public API token (plain; callers store the hash)."""
    return secrets.token_urlsafe(32)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt and a fresh salt."""
    hashed = bcrypt.hashpw(password.encode("utf-8")[:_BCRYPT_MAX_BYTES], bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a hash produced by :func:`hash_password`."""
    try:
        return bcrypt.checkpw(
            password.encode("utf-8")[:_BCRYPT_MAX_BYTES], password_hash.encode("utf-8")
        )
    except ValueError:
        # Not a bcrypt hash.
        return False
