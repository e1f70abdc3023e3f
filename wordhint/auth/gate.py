"""
Authorization gate evaluated before the word filter runs.

The gate is an explicit precondition: callers hand it the credential they
got (usually from an `Authorization: Bearer ...` header) and get a yes/no.
It never raises from `authorize`; anything it cannot evaluate is a "no".
"""

from __future__ import annotations

import logging
from typing import Optional

from wordhint.errors import InvalidToken, Unauthorized
from .tokens import TokenSigner
from .users import UserStore

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def bearer_token(header: Optional[str]) -> Optional[str]:
    """
    Extract the token from an Authorization header value.
    "Bearer abc" -> "abc"; anything else -> None.
    """
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


class AuthGate:
    def __init__(self, signer: TokenSigner, users: UserStore):
        self.signer = signer
        self.users = users

    def authorize(self, credential: Optional[str]) -> bool:
        """
        True iff `credential` is a correctly signed, unexpired, unrevoked token
        for a user that still exists.
        """
        if not credential:
            return False
        try:
            claims = self.signer.decode(credential)
        except InvalidToken as e:
            logger.debug("Rejected token: %s", e)
            return False
        if self.users.is_revoked(credential):
            logger.debug("Rejected revoked token for user %s", claims["sub"])
            return False
        return self.users.exists(claims["sub"])

    def require(self, credential: Optional[str]) -> None:
        """Raise Unauthorized unless `authorize(credential)`."""
        if not self.authorize(credential):
            raise Unauthorized("Unauthorized")
