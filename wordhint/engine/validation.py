"""
Input canonicalization for the letter-constraint filter.

This module answers the question: "What did the caller actually ask for?"
Raw caller strings are turned into canonical, lowercase pieces:
  - a positional pattern: one letter or wildcard (None) per position
  - a letter set: deduplicated lowercase letters

Anything that isn't a-z (after lowercasing) is rejected with
InvalidConstraint; nothing is silently dropped except the separators listed
below.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Tuple

from wordhint.errors import InvalidConstraint

# '_' is what SQL LIKE-style clients send; '?' is what the
# frontend sends. Both (and a few other common markers) mean "any letter".
WILDCARDS = frozenset("?_.* ")

# Characters tolerated between letters in required/excluded strings
SEPARATORS = frozenset(" ,\t")


def is_letter(ch: str) -> bool:
    """True for a single ASCII letter a-z (case-insensitive)."""
    return len(ch) == 1 and "a" <= ch.lower() <= "z"


def normalize_word(word: str) -> Optional[str]:
    """
    Canonicalize a corpus token: strip + lowercase.
    Returns None if the token is empty or not purely a-z.
    """
    if not isinstance(word, str):
        return None
    w = word.strip().lower()
    if not w or not all(is_letter(ch) for ch in w):
        return None
    return w


def parse_exact(exact: str) -> Tuple[Optional[str], ...]:
    """
    Parse a positional pattern like "a??le" into ('a', None, None, 'l', 'e').

    Raises InvalidConstraint if the pattern is empty or contains a character
    that is neither a letter nor a wildcard marker.
    """
    if not isinstance(exact, str):
        raise InvalidConstraint("exact must be a string")
    if not exact:
        raise InvalidConstraint("exact must contain at least one position")

    out = []
    for i, ch in enumerate(exact):
        if ch in WILDCARDS:
            out.append(None)
        elif is_letter(ch):
            out.append(ch.lower())
        else:
            raise InvalidConstraint(f"exact has invalid character {ch!r} at position {i}")
    return tuple(out)


def parse_letters(letters: Iterable[str] | None, field: str) -> FrozenSet[str]:
    """
    Parse "LpL" / "l, p" / ["l", "p"] into frozenset({'l', 'p'}).
    None or "" is the empty set.
    """
    if letters is None:
        return frozenset()
    if isinstance(letters, str):
        chars: Iterable[str] = letters
    else:
        chars = "".join(letters)

    out = set()
    for ch in chars:
        if ch in SEPARATORS:
            continue
        if not is_letter(ch):
            raise InvalidConstraint(f"{field} has invalid character {ch!r}")
        out.add(ch.lower())
    return frozenset(out)
