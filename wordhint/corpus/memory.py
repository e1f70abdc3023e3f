"""
In-memory corpus: a plain list scan.

Strategy:
  - Keep the cleaned word list, plus an index of words by length.
  - A query only scans the bucket of the requested length, then applies the
    engine predicates (so this backend is the reference the others are
    checked against).
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from wordhint.engine.constraints import LetterConstraintRequest, matches
from .base import WordCorpus, clean_words, register


@register
class MemoryCorpus(WordCorpus):
    id = "memory"
    name = "In-memory scan"

    def __init__(self, words: Iterable[str]):
        self.words: List[str] = clean_words(words)
        self._by_length: Dict[int, List[str]] = defaultdict(list)
        for w in self.words:
            self._by_length[len(w)].append(w)

    def query(self, request: LetterConstraintRequest) -> List[str]:
        bucket = self._by_length.get(request.length, [])
        return [w for w in bucket if matches(w, request)]

    def __len__(self) -> int:
        return len(self.words)
