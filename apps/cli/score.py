# apps/cli/score.py
"""
CLI: print the feedback pattern a guess earns against an answer.

The output is what --feedback in apps.cli.filter expects after the colon.

Usage:
    python -m apps.cli.score raise crane        # -> YY--G
    python -m apps.cli.filter --feedback raise:$(python -m apps.cli.score raise crane)
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from wordhint.engine import score
from wordhint.engine.validation import normalize_word


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordhint: score a guess against an answer")
    ap.add_argument("guess")
    ap.add_argument("answer")
    args = ap.parse_args(argv)

    guess, answer = normalize_word(args.guess), normalize_word(args.answer)
    if guess is None or answer is None:
        print("error: guess and answer must be letters a-z only", file=sys.stderr)
        return 2
    try:
        print(score(guess, answer))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
