"""
Signed session tokens.

Token layout (both parts urlsafe base64, no padding):

    <payload>.<signature>

payload   = JSON {"sub": user_id, "iat": issued_at, "exp": expires_at}
signature = HMAC-SHA256(secret, payload)

Only the issuing process (or one sharing its secret) can mint or check them.
Revocation is not handled here; see UserStore.revoke.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Callable, Dict

from wordhint.errors import InvalidToken


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


class TokenSigner:
    def __init__(self, secret: str | bytes, ttl_seconds: int = 3600,
                 clock: Callable[[], float] = time.time):
        if not secret:
            raise ValueError("token secret must be non-empty")
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be > 0; got {ttl_seconds}")
        self._key = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
        self.ttl_seconds = int(ttl_seconds)
        self._clock = clock

    def _sign(self, payload: str) -> str:
        mac = hmac.new(self._key, payload.encode("utf-8"), hashlib.sha256).digest()
        return _b64encode(mac)

    def issue(self, user_id: int) -> str:
        now = int(self._clock())
        claims = {"sub": int(user_id), "iat": now, "exp": now + self.ttl_seconds}
        payload = _b64encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
        return f"{payload}.{self._sign(payload)}"

    def decode(self, token: str) -> Dict:
        """
        Verify `token` and return its claims.
        Raises InvalidToken on bad shape, bad signature or expiry.
        """
        if not isinstance(token, str) or token.count(".") != 1:
            raise InvalidToken("malformed token")
        payload, sig = token.split(".")
        if not hmac.compare_digest(self._sign(payload).encode("ascii"), sig.encode("utf-8")):
            raise InvalidToken("bad token signature")

        try:
            claims = json.loads(_b64decode(payload))
            sub, exp = int(claims["sub"]), int(claims["exp"])
        except (binascii.Error, UnicodeDecodeError, ValueError, KeyError, TypeError) as e:
            raise InvalidToken("malformed token payload") from e

        if exp <= self._clock():
            raise InvalidToken("token expired")
        claims["sub"] = sub
        return claims
