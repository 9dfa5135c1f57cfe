"""
Word-list validator.

What this module does:
- Check a dictionary source file before a session starts.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

The loader itself is lenient (it normalizes case and whitespace); this
report tells you how much normalization a given file needed.

Typical use:
    from elimsolver.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/wordle.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from elimsolver.engine.types import WORD_LENGTH
from .io import normalize_words


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics for one word-list file."""
    path: str            # file path (as given)
    N: int               # required word length
    exists: bool         # did the file exist on disk?
    count: int = 0       # number of VALID words
    unique_count: int = 0
    invalid_lines: int = 0
    loadable: int = 0    # words load_dictionary() would keep after normalizing
    sha256: str = ""     # SHA-256 of raw file bytes (empty string if missing)
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


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns a JSON-serializable dict (see WordlistReport). `passed` is
    strict: the file exists, is non-empty, and has no invalid or
    duplicate lines.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path=str(path), N=N, exists=False,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))
    loadable = len(normalize_words(p.read_text(encoding="utf-8").splitlines(), N))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = WordlistReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        loadable=loadable,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for logs.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, loadable=2315, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"N={report['N']} | missing: {report['path']} | {status}"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, loadable={report['loadable']}, sha={sha}) | {status}"
    )
