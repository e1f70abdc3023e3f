# apps/cli/validate.py
"""
CLI: validate a corpus word list and print a one-line summary.

Exit status is 0 when the list passes (non-empty, no invalid or duplicate
lines), 1 otherwise. Issues go to stderr.

Usage:
    python -m apps.cli.validate --words wordhint/datasets/data/words.txt
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from wordhint.datasets import default_wordlist, pretty_summary, validate_wordlist


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordhint: validate a word list")
    ap.add_argument("--words", default=str(default_wordlist()), help="word list file")
    ap.add_argument("--min-length", type=int, default=1,
                    help="treat shorter words as invalid")
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    args = ap.parse_args(argv)

    rep = validate_wordlist(args.words, min_length=args.min_length)
    if args.json:
        print(json.dumps(rep, indent=2))
    else:
        print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}", file=sys.stderr)
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
