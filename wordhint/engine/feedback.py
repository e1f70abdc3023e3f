"""
Turn game feedback into a LetterConstraintRequest.

Given a history of (guess, pattern) pairs (see scoring.score):
  - 'G' pins the letter at that slot
  - 'G' and 'Y' letters become required
  - '-' letters become excluded, but only if the same letter never scored
    G or Y anywhere in the history ("geese" vs "crane": the early e's are
    grey because the answer has a single one, not because 'e' is absent)

This is coarser than full feedback consistency (it drops "not at this
slot" and letter counts); it keeps exactly the three predicate families the
filter understands.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from wordhint.errors import InvalidConstraint
from .constraints import LetterConstraintRequest
from .scoring import is_pattern
from .validation import normalize_word

History = Iterable[Tuple[str, str]]  # (guess, pattern)


def request_from_feedback(history: History, N: int) -> LetterConstraintRequest:
    """
    Fold every (guess, pattern) into one request for words of length N.

    Raises InvalidConstraint for a malformed guess/pattern, a length mismatch,
    or two different green letters claimed for the same slot.
    """
    if N < 1:
        raise InvalidConstraint("word length must be >= 1")

    exact: List[Optional[str]] = [None] * N
    present: Set[str] = set()
    grey: Set[str] = set()

    for guess, patt in history:
        g = normalize_word(guess)
        if g is None or len(g) != N:
            raise InvalidConstraint(f"guess {guess!r} is not a {N}-letter word")
        patt = patt.upper() if isinstance(patt, str) else patt
        if not is_pattern(patt, N):
            raise InvalidConstraint(f"pattern {patt!r} is not {N} chars of G/Y/-")

        for i, (ch, mark) in enumerate(zip(g, patt)):
            if mark == "G":
                if exact[i] is not None and exact[i] != ch:
                    raise InvalidConstraint(
                        f"conflicting greens at position {i}: {exact[i]!r} vs {ch!r}")
                exact[i] = ch
                present.add(ch)
            elif mark == "Y":
                present.add(ch)
            else:
                grey.add(ch)

    return LetterConstraintRequest(
        exact=tuple(exact),
        required=frozenset(present),
        excluded=frozenset(grey - present),
    )
