# apps/cli/filter.py
"""
CLI: filter a word list by letter constraints.

Prints every matching word, one per line, in word-list order. Constraints
come either from --exact/--required/--excluded, or from game feedback
(--feedback GUESS:PATTERN, repeatable; pattern is G/Y/- per letter).

Usage:
    python -m apps.cli.filter --exact a???e --required l --excluded p
    python -m apps.cli.filter --words my_words.txt --exact "?a??" --backend array
    python -m apps.cli.filter --feedback raise:YY--G --feedback cloth:G----
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

from wordhint.corpus import get_corpus_ids, open_corpus
from wordhint.datasets import default_wordlist
from wordhint.engine import build_request, filter_words, request_from_feedback
from wordhint.engine.constraints import LetterConstraintRequest
from wordhint.engine.validation import parse_letters
from wordhint.errors import CorpusUnavailable, InvalidConstraint


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def parse_feedback(items: List[str]) -> List[Tuple[str, str]]:
    """'raise:YY--G' -> ('raise', 'YY--G')."""
    history = []
    for item in items:
        guess, sep, patt = item.partition(":")
        if not sep:
            raise InvalidConstraint(f"feedback {item!r} is not GUESS:PATTERN")
        history.append((guess, patt))
    return history


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordhint: filter words by letter constraints")
    ap.add_argument("--words", default=str(default_wordlist()),
                    help="word list file (one word per line)")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--exact",
                        help="positional pattern, '?' (or _ . *) for any letter, e.g. a???e")
    source.add_argument("--feedback", action="append", metavar="GUESS:PATTERN",
                        help="a scored guess, e.g. raise:YY--G (repeatable)")
    ap.add_argument("--required", default="", help="letters that must appear anywhere")
    ap.add_argument("--excluded", default="", help="letters that must not appear")
    ap.add_argument("--backend", default="memory", choices=get_corpus_ids(),
                    help="corpus backend")
    ap.add_argument("--sqlite-path", help="database for the sqlite backend "
                                          "(default: word list path with .db suffix)")
    ap.add_argument("--limit", type=positive_int, help="print at most this many words")
    ap.add_argument("--count", action="store_true", help="print only the number of matches")
    return ap


def request_from_args(args: argparse.Namespace) -> LetterConstraintRequest:
    if args.feedback:
        history = parse_feedback(args.feedback)
        req = request_from_feedback(history, N=len(history[0][0].strip()))
        # --required / --excluded add to what the feedback implies
        return LetterConstraintRequest(
            exact=req.exact,
            required=req.required | parse_letters(args.required, "required"),
            excluded=req.excluded | parse_letters(args.excluded, "excluded"),
        )
    return build_request(args.exact, args.required, args.excluded)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        request = request_from_args(args)
    except InvalidConstraint as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        corpus = open_corpus(args.backend, args.words, args.sqlite_path)
        words = filter_words(corpus, request, limit=args.limit)
    except (FileNotFoundError, CorpusUnavailable) as e:
        print(f"error: corpus unavailable: {e}", file=sys.stderr)
        return 1

    if args.count:
        print(len(words))
    else:
        for w in words:
            print(w)
    return 0


if __name__ == "__main__":
    sys.exit(main())
