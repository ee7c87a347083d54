"""
Batch output: one CSV row per game, plus a JSON manifest per run.

Row layout: answer, success, guesses, time_ms, then a word/pattern pair per
turn up to the attempt budget, blank once the game has ended. Patterns are
written with a leading apostrophe: "+^--+" and "-+^--" would otherwise be
read as formulas by spreadsheet apps.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, Iterable, List

from wordgame.game import MAX_ATTEMPTS
from .core import GameRecord


def csv_header(max_turns: int = MAX_ATTEMPTS) -> List[str]:
    turns = [col for t in range(1, max_turns + 1) for col in (f"word_{t}", f"pattern_{t}")]
    return ["answer", "success", "guesses", "time_ms"] + turns


def csv_row(record: GameRecord, max_turns: int = MAX_ATTEMPTS) -> List[str]:
    cells = [record.answer, str(record.success), str(record.guesses), f"{record.time_ms:.3f}"]
    for a in record.attempts[:max_turns]:
        cells += [a.word, "'" + a.pattern]
    cells += [""] * (2 * (max_turns - min(len(record.attempts), max_turns)))
    return cells


def write_csv(records: Iterable[GameRecord], path: Path | str,
              max_turns: int = MAX_ATTEMPTS) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(csv_header(max_turns))
        w.writerows(csv_row(r, max_turns) for r in records)
    return p


def run_provenance() -> Dict[str, str]:
    """UTC run id (e.g. 20251018T104500Z) and the short git commit, 'unknown' outside a checkout."""
    run_id = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    try:
        commit = subprocess.run(["git", "rev-parse", "--short", "HEAD"], capture_output=True,
                                text=True, check=True).stdout.strip()
    except (OSError, subprocess.CalledProcessError):
        commit = "unknown"
    return {"run_id": run_id, "git_commit": commit}


def write_manifest(manifest: Dict, path: Path | str) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return p
