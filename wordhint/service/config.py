"""
Service settings.

Read from the environment (WORDHINT_* variables) with `Settings.from_env()`;
CLI flags override individual fields with `dataclasses.replace`.
"""

from __future__ import annotations

import logging
import os
import secrets
from dataclasses import dataclass
from typing import Mapping, Optional

from wordhint.datasets.io import default_wordlist

logger = logging.getLogger(__name__)

ENV_PREFIX = "WORDHINT_"


@dataclass(frozen=True)
class Settings:
    words: str = str(default_wordlist())     # word list file, one per line
    backend: str = "memory"                  # corpus id: memory | array | sqlite
    sqlite_path: Optional[str] = None        # db for the sqlite backend
    secret: str = ""                         # token signing key
    token_ttl: int = 3600                    # seconds
    max_results: Optional[int] = 1000        # cap per filter call; None = no cap
    log_level: str = "INFO"

    def __post_init__(self):
        if self.max_results is not None and self.max_results < 1:
            raise ValueError(f"max_results must be >= 1 or None, got {self.max_results}")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if env is None else env

        def get(name: str) -> Optional[str]:
            val = env.get(ENV_PREFIX + name)
            return val if val not in (None, "") else None

        base = cls()
        max_results = get("MAX_RESULTS")
        if max_results is not None and int(max_results) < 0:
            raise ValueError(f"{ENV_PREFIX}MAX_RESULTS must be >= 0 (0 = no cap), got {max_results}")
        return cls(
            words=get("WORDS") or base.words,
            backend=get("BACKEND") or base.backend,
            sqlite_path=get("SQLITE_PATH"),
            secret=get("SECRET") or "",
            token_ttl=int(get("TOKEN_TTL") or base.token_ttl),
            max_results=(base.max_results if max_results is None
                         else (int(max_results) or None)),
            log_level=(get("LOG_LEVEL") or base.log_level).upper(),
        )

    def signing_secret(self) -> str:
        """The configured secret, or a random one for this process."""
        if self.secret:
            return self.secret
        logger.warning("%sSECRET not set; using a random per-process secret "
                       "(tokens won't survive a restart)", ENV_PREFIX)
        return secrets.token_urlsafe(32)
