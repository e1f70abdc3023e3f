"""
Wordle-style feedback for a single (guess, answer) pair.

Pattern characters:
  - 'G' : letter in the right slot
  - 'Y' : letter present elsewhere
  - '-' : letter absent (or already used up by other G/Y marks)

Two passes, so repeated letters are handled the way the game does:
  1) mark greens and count the answer letters that were NOT matched in place
  2) hand out yellows only while such unmatched copies remain
"""

from collections import Counter
from typing import Literal

PatternChar = Literal["G", "Y", "-"]
PATTERN_CHARS = frozenset("GY-")


def score(guess: str, answer: str) -> str:
    """
    Feedback pattern for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer differ in length: {guess!r} vs {answer!r}")

    pattern = ["-"] * len(guess)

    leftover = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            leftover[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if leftover[g] > 0:
            pattern[i] = "Y"
            leftover[g] -= 1

    return "".join(pattern)


def is_pattern(patt: str, N: int) -> bool:
    """True if `patt` is an N-long string of 'G'/'Y'/'-'."""
    return isinstance(patt, str) and len(patt) == N and set(patt) <= PATTERN_CHARS
