"""
SQLite-backed corpus (parameterized query).

Table:
    word_list(word TEXT PRIMARY KEY)   -- lowercase a-z, insertion order = rowid

Query shape for one request (only the number of placeholders varies; caller
letters are always bound as parameters, never spliced into the SQL text):

    SELECT word FROM word_list
    WHERE length(word) = ?
      AND word LIKE ?              -- 'a___e': pinned letters + '_' wildcards
      AND instr(word, ?) > 0 ...   -- one per required letter
      AND instr(word, ?) = 0 ...   -- one per excluded letter
    ORDER BY rowid

Letters are validated to a-z before they get here, so LIKE needs no escaping
and its ASCII case-folding is harmless (everything stored is lowercase).

A fresh read-only connection is opened per query and closed right after.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterable, List, Tuple

from wordhint.engine.constraints import LetterConstraintRequest
from wordhint.errors import CorpusUnavailable
from .base import WordCorpus, clean_words, register

logger = logging.getLogger(__name__)

SCHEMA = "CREATE TABLE IF NOT EXISTS word_list (word TEXT PRIMARY KEY)"


def build_query(request: LetterConstraintRequest) -> Tuple[str, List[object]]:
    """Return (sql, params) for `request`."""
    like = "".join(ch if ch is not None else "_" for ch in request.exact)
    clauses = ["length(word) = ?", "word LIKE ?"]
    params: List[object] = [request.length, like]

    for ch in sorted(request.required):
        clauses.append("instr(word, ?) > 0")
        params.append(ch)
    for ch in sorted(request.excluded):
        clauses.append("instr(word, ?) = 0")
        params.append(ch)

    sql = "SELECT word FROM word_list WHERE " + " AND ".join(clauses) + " ORDER BY rowid"
    return sql, params


def write_words(path: Path | str, words: Iterable[str]) -> int:
    """
    Create (if needed) the word_list table at `path` and insert cleaned words.
    Existing rows are kept; duplicates are ignored. Returns rows inserted.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    con = sqlite3.connect(str(p))
    try:
        with con:
            con.execute(SCHEMA)
            cur = con.executemany(
                "INSERT OR IGNORE INTO word_list (word) VALUES (?)",
                ((w,) for w in clean_words(words)),
            )
            return cur.rowcount
    finally:
        con.close()


@register
class SqliteCorpus(WordCorpus):
    id = "sqlite"
    name = "SQLite parameterized query"

    def __init__(self, path: Path | str, *, timeout: float = 5.0):
        self.path = Path(path)
        self.timeout = float(timeout)

    @classmethod
    def from_words(cls, path: Path | str, words: Iterable[str], **kw) -> "SqliteCorpus":
        write_words(path, words)
        return cls(path, **kw)

    def _connect(self) -> sqlite3.Connection:
        # mode=ro: a missing file is an error instead of a new empty database
        # as_uri percent-encodes "#" and "?" so they can't cut the query string short
        uri = self.path.resolve().as_uri() + "?mode=ro"
        return sqlite3.connect(uri, uri=True,
                               timeout=self.timeout)

    def _fetch(self, sql: str, params: List[object]) -> List[tuple]:
        try:
            con = self._connect()
            try:
                return con.execute(sql, params).fetchall()
            finally:
                con.close()
        except sqlite3.Error as e:
            logger.error("SQLite corpus at %s failed: %s", self.path, e)
            raise CorpusUnavailable(f"sqlite corpus unavailable: {e}") from e

    def query(self, request: LetterConstraintRequest) -> List[str]:
        sql, params = build_query(request)
        return [row[0] for row in self._fetch(sql, params)]

    def __len__(self) -> int:
        return int(self._fetch("SELECT COUNT(*) FROM word_list", [])[0][0])
