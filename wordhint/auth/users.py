"""
In-memory user accounts and revoked-token bookkeeping.

Everything lives in process memory behind one lock; restarting the service
forgets users and revocations. Passwords are stored hashed (see passwords.py).
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
import time
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional

from wordhint.errors import UserExists, UserNotFound
from .passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


def _now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass(frozen=True)
class User:
    id: int
    username: str
    email: str
    password_hash: str
    created_at: dt.datetime
    updated_at: dt.datetime

    def public(self) -> Dict:
        """Everything except the password hash (JSON-friendly)."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class UserStore:
    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._lock = threading.Lock()
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._revoked: Dict[str, float] = {}  # token -> exp

    # ---- accounts ----

    def create(self, username: str, email: str, password: str) -> User:
        username = username.strip()
        if not username:
            raise ValueError("username must be non-empty")
        hashed = hash_password(password)
        with self._lock:
            if self._find_by_username(username) is not None:
                raise UserExists(f"username already taken: {username}")
            now = _now()
            user = User(self._next_id, username, email.strip(), hashed, now, now)
            self._users[user.id] = user
            self._next_id += 1
        logger.info("Created user %d (%s)", user.id, username)
        return user

    def get(self, user_id: int) -> User:
        with self._lock:
            try:
                return self._users[user_id]
            except KeyError:
                raise UserNotFound(f"no user with id {user_id}") from None

    def exists(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._users

    def list(self) -> List[User]:
        with self._lock:
            return [self._users[k] for k in sorted(self._users)]

    def update(self, user_id: int, *, username: Optional[str] = None,
               email: Optional[str] = None, password: Optional[str] = None) -> User:
        hashed = hash_password(password) if password is not None else None
        with self._lock:
            if user_id not in self._users:
                raise UserNotFound(f"no user with id {user_id}")
            user = self._users[user_id]
            changes = {}
            if username is not None and username.strip() != user.username:
                username = username.strip()
                if not username:
                    raise ValueError("username must be non-empty")
                if self._find_by_username(username) is not None:
                    raise UserExists(f"username already taken: {username}")
                changes["username"] = username
            if email is not None:
                changes["email"] = email.strip()
            if hashed is not None:
                changes["password_hash"] = hashed
            user = replace(user, updated_at=_now(), **changes)
            self._users[user_id] = user
        return user

    def delete(self, user_id: int) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFound(f"no user with id {user_id}")
        logger.info("Deleted user %d", user_id)

    def authenticate(self, username: str, password: str) -> Optional[int]:
        """Return the user id if the credentials match, else None."""
        with self._lock:
            user = self._find_by_username(username.strip())
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user.id

    def _find_by_username(self, username: str) -> Optional[User]:
        # caller holds the lock
        for u in self._users.values():
            if u.username == username:
                return u
        return None

    # ---- tokens ----

    def revoke(self, token: str, expires_at: float) -> None:
        """
        Remember `token` until `expires_at`. Callers pass only tokens the signer
        accepted; after expiry the signer rejects them anyway, so entries are dropped.
        """
        with self._lock:
            self._purge_expired()
            if expires_at > self._clock():
                self._revoked[token] = float(expires_at)

    def is_revoked(self, token: str) -> bool:
        with self._lock:
            self._purge_expired()
            return token in self._revoked

    def revoked_count(self) -> int:
        with self._lock:
            self._purge_expired()
            return len(self._revoked)

    def _purge_expired(self) -> None:
        # caller holds the lock
        now = self._clock()
        for token in [t for t, exp in self._revoked.items() if exp <= now]:
            del self._revoked[token]
