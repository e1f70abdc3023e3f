"""
Letter-constraint model and candidate filtering.

A LetterConstraintRequest carries what a player of a letter-guessing game
knows so far:
  - exact    : letters confirmed in place (None = any letter at that slot)
  - required : letters confirmed present somewhere
  - excluded : letters confirmed absent

A word matches when it passes all three predicates:
  1) positional : same length as `exact`, and equal at every pinned slot
  2) required   : contains every required letter (pinned slots count)
  3) excluded   : contains none of the excluded letters

The predicates are independent, so they are exposed separately (and tested
separately). `filter_candidates` is the plain in-process scan; corpus
backends may evaluate the same predicates another way but must agree with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from wordhint.errors import InvalidConstraint
from .validation import is_letter, normalize_word, parse_exact, parse_letters


def _canonical_exact(exact) -> Tuple[Optional[str], ...]:
    out = []
    for i, ch in enumerate(exact):
        if ch is None:
            out.append(None)
        elif isinstance(ch, str) and is_letter(ch):
            out.append(ch.lower())
        else:
            raise InvalidConstraint(f"exact has invalid entry {ch!r} at position {i}")
    return tuple(out)


def _canonical_set(letters, field: str) -> FrozenSet[str]:
    out = set()
    for ch in letters:
        if not (isinstance(ch, str) and is_letter(ch)):
            raise InvalidConstraint(f"{field} has invalid entry {ch!r}")
        out.add(ch.lower())
    return frozenset(out)


@dataclass(frozen=True)
class LetterConstraintRequest:
    """One filter request; every letter is canonicalized to lowercase a-z."""
    exact: Tuple[Optional[str], ...]
    required: FrozenSet[str] = frozenset()
    excluded: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if not self.exact:
            raise InvalidConstraint("exact must contain at least one position")

        # frozen: canonicalize through object.__setattr__
        object.__setattr__(self, "exact", _canonical_exact(self.exact))
        object.__setattr__(self, "required", _canonical_set(self.required, "required"))
        object.__setattr__(self, "excluded", _canonical_set(self.excluded, "excluded"))

        clash = self.required & self.excluded
        if clash:
            raise InvalidConstraint(
                f"letters both required and excluded: {''.join(sorted(clash))}")

        pinned_clash = {ch for ch in self.exact if ch is not None} & self.excluded
        if pinned_clash:
            raise InvalidConstraint(
                f"letters both pinned in exact and excluded: {''.join(sorted(pinned_clash))}")

    @property
    def length(self) -> int:
        return len(self.exact)

    @property
    def pattern(self) -> str:
        """Pattern string with '?' for wildcards, e.g. 'a???e'."""
        return "".join(ch if ch is not None else "?" for ch in self.exact)

    @property
    def pinned(self) -> Dict[int, str]:
        """Position -> letter for every non-wildcard slot."""
        return {i: ch for i, ch in enumerate(self.exact) if ch is not None}

    def as_dict(self) -> Dict[str, str]:
        return {
            "exact": self.pattern,
            "required": "".join(sorted(self.required)),
            "excluded": "".join(sorted(self.excluded)),
        }


def build_request(exact: str, required: Iterable[str] | None = "",
                  excluded: Iterable[str] | None = "") -> LetterConstraintRequest:
    """
    Canonicalize caller input into a LetterConstraintRequest.

    Args:
      exact    : positional pattern, e.g. "a???e" ('?', '_', '.', '*' are wildcards)
      required : letters that must appear anywhere, e.g. "l"
      excluded : letters that must not appear, e.g. "p"

    Raises:
      InvalidConstraint for an empty/malformed pattern, non-letter input, or a
      contradictory request (a letter both required and excluded, or pinned
      and excluded).
    """
    return LetterConstraintRequest(
        exact=parse_exact(exact),
        required=parse_letters(required, "required"),
        excluded=parse_letters(excluded, "excluded"),
    )


# -----------------------------
# Predicates
# -----------------------------

def matches_positions(word: str, request: LetterConstraintRequest) -> bool:
    if len(word) != len(request.exact):
        return False
    for ch, want in zip(word, request.exact):
        if want is not None and ch != want:
            return False
    return True


def has_required(word: str, request: LetterConstraintRequest) -> bool:
    return all(ch in word for ch in request.required)


def lacks_excluded(word: str, request: LetterConstraintRequest) -> bool:
    return request.excluded.isdisjoint(word)


def matches(word: str, request: LetterConstraintRequest) -> bool:
    """
    All three predicates. Positional first: it also fixes the length, so it
    rejects most of a mixed-length corpus before the set checks run.
    `word` is expected to be lowercase already.
    """
    return (
        matches_positions(word, request)
        and lacks_excluded(word, request)
        and has_required(word, request)
    )


def filter_candidates(words: Iterable[str], request: LetterConstraintRequest) -> List[str]:
    """
    Keep only the words that satisfy `request` (order preserved as in `words`).

    Tokens are canonicalized (strip + lowercase); anything that isn't a clean
    a-z token is skipped.
    """
    out: List[str] = []
    for raw in words:
        w = normalize_word(raw)
        if w is not None and matches(w, request):
            out.append(w)
    return out
