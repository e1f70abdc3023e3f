"""
Numpy-backed corpus (vectorized scan).

Layout, per word length L:
  - codes : uint8 matrix (n_words, L), letter index 0..25 per slot
  - bits  : uint32 vector (n_words,), bit k set iff letter k occurs in the word

Query for one request:
  positional : AND over pinned slots of (codes[:, i] == letter)
  required   : (bits & req_mask) == req_mask
  excluded   : (bits & exc_mask) == 0

One boolean mask over the bucket, then np.flatnonzero keeps corpus order.
Worth it on large lists (100k+ words) where the Python loop in the memory
backend dominates.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List

import numpy as np

from wordhint.engine.constraints import LetterConstraintRequest
from .base import WordCorpus, clean_words, register


def _letter_mask(letters: FrozenSet[str]) -> int:
    m = 0
    for ch in letters:
        m |= 1 << (ord(ch) - ord("a"))
    return m


class _Bucket:
    """All words of one length, encoded for vectorized matching."""

    def __init__(self, words: List[str]):
        self.words = words
        L = len(words[0])
        raw = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
        self.codes = (raw - ord("a")).reshape(len(words), L)
        # presence bitmask per word (duplicates within a word collapse)
        self.bits = np.bitwise_or.reduce(
            np.left_shift(np.uint32(1), self.codes.astype(np.uint32)), axis=1
        )


@register
class ArrayCorpus(WordCorpus):
    id = "array"
    name = "Numpy vectorized scan"

    def __init__(self, words: Iterable[str]):
        self.words: List[str] = clean_words(words)
        grouped: Dict[int, List[str]] = defaultdict(list)
        for w in self.words:
            grouped[len(w)].append(w)
        self._buckets: Dict[int, _Bucket] = {L: _Bucket(ws) for L, ws in grouped.items()}

    def query(self, request: LetterConstraintRequest) -> List[str]:
        bucket = self._buckets.get(request.length)
        if bucket is None:
            return []

        mask = np.ones(len(bucket.words), dtype=bool)
        for i, ch in request.pinned.items():
            mask &= bucket.codes[:, i] == (ord(ch) - ord("a"))

        req = np.uint32(_letter_mask(request.required))
        if req:
            mask &= (bucket.bits & req) == req

        exc = np.uint32(_letter_mask(request.excluded))
        if exc:
            mask &= (bucket.bits & exc) == 0

        return [bucket.words[i] for i in np.flatnonzero(mask)]

    def __len__(self) -> int:
        return len(self.words)
