from __future__ import annotations

from pathlib import Path
from typing import List

from wordhint.datasets.io import read_lines
from .base import REGISTRY, WordCorpus, clean_words, register

from . import memory  # noqa: F401
from . import array  # noqa: F401
from . import sqlite  # noqa: F401

from .memory import MemoryCorpus
from .array import ArrayCorpus
from .sqlite import SqliteCorpus


def get_corpus_ids() -> List[str]:
    """
    Return all registered backend ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


def open_corpus(kind: str, words_path: Path | str,
                sqlite_path: Path | str | None = None) -> WordCorpus:
    """
    Factory: build a registered backend from a word list file.

    - memory/array load `words_path` into process memory.
    - sqlite queries `sqlite_path` (default: `words_path` with a .db suffix);
      the database is built from `words_path` first if it doesn't exist yet.
    """
    try:
        cls = REGISTRY[kind]
    except KeyError as e:
        raise ValueError(
            f"Unknown corpus id: {kind}. Available: {get_corpus_ids()}") from e

    if cls is SqliteCorpus:
        db = Path(sqlite_path) if sqlite_path else Path(words_path).with_suffix(".db")
        if not db.exists():
            return SqliteCorpus.from_words(db, read_lines(words_path))
        return SqliteCorpus(db)
    return cls(read_lines(words_path))


__all__ = [
    "REGISTRY",
    "WordCorpus",
    "MemoryCorpus",
    "ArrayCorpus",
    "SqliteCorpus",
    "clean_words",
    "register",
    "get_corpus_ids",
    "open_corpus",
]
