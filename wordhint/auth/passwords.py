"""
Password hashing (PBKDF2-HMAC-SHA256, stdlib hashlib).

Stored format:
    pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 200_000
SALT_BYTES = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str, *, iterations: int = ITERATIONS) -> str:
    """Hash `password` with a fresh random salt. Empty passwords are refused."""
    if not isinstance(password, str) or not password:
        raise ValueError("password must be a non-empty string")
    salt = secrets.token_bytes(SALT_BYTES)
    digest = _derive(password, salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    """
    True iff `password` hashes to `stored`. A malformed `stored` value is a
    mismatch, not an error.
    """
    try:
        algo, iters, salt_hex, digest_hex = stored.split("$")
        if algo != ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        iterations = int(iters)
    except (AttributeError, ValueError):
        return False
    if not isinstance(password, str):
        return False
    return hmac.compare_digest(_derive(password, salt, iterations), expected)
