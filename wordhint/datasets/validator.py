"""
Word list validator for wordhint corpora.

What this module does:
- Validate one corpus file (one word per line, any word length).
- Enforce formatting rules (lowercase, a–z only, non-empty).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Count valid words per length (useful to see what patterns can ever match).
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordhint.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordhint/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordhint.engine.validation import normalize_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Validation result for one corpus file."""
    path: str               # file path (as given)
    exists: bool            # did the file exist on disk?
    count: int              # number of VALID lines
    unique_count: int       # unique valid words
    invalid_lines: int      # lines that are empty, non a–z, or not lowercase
    sha256: str             # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> unique words
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must already be lowercase a–z (no normalization at rest)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and normalize_word(w) == w:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, min_length: int = 1) -> Dict:
    """
    Validate a corpus word list.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    min_length : int
        Words shorter than this count as invalid (e.g. 2 to drop "a", "i").

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport) with counts,
        SHA-256, per-length histogram, `passed` (non-empty, no invalid lines,
        no duplicates) and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path=path, exists=False, count=0, unique_count=0,
                             invalid_lines=0, sha256="",
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    if min_length > 1:
        short = [w for w in words if len(w) < min_length]
        invalid += len(short)
        words = [w for w in words if len(w) >= min_length]

    unique = set(words)
    lengths: Dict[int, int] = {}
    for w in unique:
        lengths[len(w)] = lengths.get(len(w), 0) + 1

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate line(s)")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        lengths=dict(sorted(lengths.items())),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console output.

    Example:
        words=120 (uniq=120, sha=abc123...) | lengths 4:30 5:60 6:30 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = " ".join(f"{L}:{n}" for L, n in report.get("lengths", {}).items()) or "-"
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths {lengths} | {status}"
    )
