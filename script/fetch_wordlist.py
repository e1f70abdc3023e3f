"""
Download a plain-text word list and write a clean corpus file.

What it does:
- Downloads the list (one word per line, any case).
- Keeps only a–z tokens, lowercased; optional length filter.
- De-duplicates while preserving source order (or sorts with --sort).

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out wordhint/datasets/data/words.txt --min-length 4 --max-length 6
"""

import argparse

import requests

from wordhint.corpus import clean_words
from wordhint.datasets.io import write_lines


def fetch_words(url: str, timeout: float = 30.0) -> list[str]:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return clean_words(r.text.splitlines())


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean a word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="wordhint/datasets/data/words.txt")
    ap.add_argument("--min-length", type=int, default=1)
    ap.add_argument("--max-length", type=int)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of "
                                                        "keeping source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    words = [w for w in words
             if len(w) >= args.min_length and (args.max_length is None or len(w) <= args.max_length)]
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
