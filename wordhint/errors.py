"""
Error hierarchy for wordhint.

Everything raised on purpose by the engine, the corpus backends, the auth
layer and the service derives from ``WordhintError`` so callers can catch a
single base class while still handling specific cases.

Each error is scoped to one invocation; none of them is fatal to the process.
"""

from __future__ import annotations


class WordhintError(Exception):
    """Base exception for all wordhint errors."""


class Unauthorized(WordhintError):
    """Raised when a caller has no valid credential."""


class InvalidConstraint(WordhintError, ValueError):
    """Raised when a letter-constraint request is malformed or contradictory."""


class CorpusUnavailable(WordhintError):
    """Raised when the word corpus cannot be queried (I/O, connectivity)."""


class InvalidToken(WordhintError):
    """Raised when a session token is malformed, tampered with or expired."""


class UserExists(WordhintError):
    """Raised when registering a username that is already taken."""


class UserNotFound(WordhintError):
    """Raised when a user id does not exist."""
