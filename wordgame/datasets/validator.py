"""
Dictionary file validator.

What this module does:
- Validate a word-list file before a game or a batch run uses it.
- Enforce formatting rules (one word per line, 5 letters after normalization).
- Count lines the loader will have to normalize (upper case, 'ё', stray symbols).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordgame.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("data/russian_nouns.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordgame.engine.normalize import WORD_LENGTH, normalize


@dataclass
class DictionaryReport:
    """Per-file diagnostics and metadata."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    lines: int             # raw line count
    count: int             # number of VALID words after normalization
    unique_count: int      # unique valid words (after dedupe)
    invalid_lines: int     # lines that do not yield a 5-letter word
    normalized_lines: int  # valid lines that differed from their normalized form
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int, int, int]:
    """
    Returns:
      (valid_words, raw_lines, invalid_count, normalized_count)
    """
    valid: List[str] = []
    raw_lines = invalid = normalized = 0

    with path.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            raw_lines += 1
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            nw = normalize(w)
            if len(nw) != WORD_LENGTH:
                invalid += 1
                continue
            if nw != w:
                normalized += 1
            valid.append(nw)

    return valid, raw_lines, invalid, normalized


def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    `passed` is strict about content (file present, at least one valid word,
    no duplicates) but tolerant of invalid lines, which the loader skips;
    those are still reported in `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(str(path), False, 0, 0, 0, 0, 0, "",
                               passed=False, issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    words, raw_lines, invalid, normalized = _load_and_check(p)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append(f"dictionary contains 0 valid {WORD_LENGTH}-letter words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if normalized:
        issues.append(f"{normalized} line(s) change under normalization")
    if unique != len(words):
        issues.append(f"dictionary contains {len(words) - unique} duplicate word(s)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        lines=raw_lines,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        normalized_lines=normalized,
        sha256=_sha256_file(p),
        passed=bool(words) and unique == len(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console/logs.

    Example:
        dict=russian_nouns.txt | words=4213 (uniq=4213, invalid=120, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"dict={report['path']} | missing | {status}"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"dict={Path(report['path']).name} | words={report['count']} "
        f"(uniq={report['unique_count']}, invalid={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )
