"""
Load a word list into a SQLite database for the `sqlite` corpus backend.

What it does:
- Reads a text word list (one word per line).
- Lowercases, drops non a–z tokens and duplicates (first occurrence wins).
- Inserts into table word_list(word) in chunks, with a progress bar.
- Existing rows are kept; re-running with more words appends.

Usage:
    python -m script.build_sqlite_corpus --in wordhint/datasets/data/words.txt \
        --out data/words.db
"""

import argparse
from pathlib import Path

from tqdm import tqdm

from wordhint.corpus import SqliteCorpus, clean_words
from wordhint.corpus.sqlite import write_words
from wordhint.datasets.io import read_lines


def chunked(items: list[str], size: int):
    for i in range(0, len(items), size):
        yield items[i:i + size]


def main():
    ap = argparse.ArgumentParser(description="Build a SQLite word corpus")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt word list")
    ap.add_argument("--out", dest="out", help="output .db (default: input with .db suffix)")
    ap.add_argument("--chunk", type=int, default=5000, help="rows per insert batch")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp.with_suffix(".db")

    raw = read_lines(inp)
    words = clean_words(raw)

    inserted = 0
    with tqdm(total=len(words), ncols=80, desc="Loading", unit="word") as bar:
        for batch in chunked(words, args.chunk):
            inserted += write_words(outp, batch)
            bar.update(len(batch))

    total = len(SqliteCorpus(outp))
    print(f"Input: {inp} ({len(raw)} lines, {len(words)} clean) → {outp} "
          f"(+{inserted} new, {total} total)")


if __name__ == "__main__":
    main()
