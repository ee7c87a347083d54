"""
Automated play primitives.

- run_case:  play one game against a known secret by always taking the hint.
- run_batch: play many games in sequence (optionally a sample prefix).
- summarize: aggregate win rate and guess distribution.

The "player" here is the hint itself: a random word still consistent with
every constraint. That makes a batch run a direct measure of how much the
constraint tracker narrows the dictionary within the attempt budget.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import numpy as np

from wordgame.datasets.dictionary import Dictionary
from wordgame.game import MAX_ATTEMPTS, Attempt, Session

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRecord:
    """Outcome of one autoplayed session."""
    answer: str
    success: bool
    attempts: Tuple[Attempt, ...]  # straight from Session.history()
    time_ms: float

    @property
    def guesses(self) -> int:
        return len(self.attempts)


def run_case(dictionary: Dictionary, secret: str, *, seed: int | None = None) -> GameRecord:
    """Play one session to the end, submitting `request_hint()` every turn."""
    session = Session(dictionary, random.Random(seed), secret=secret)

    t0 = time.perf_counter()
    while not session.is_terminal():
        hint = session.request_hint()
        if hint is None:
            # Constraints are sound for the secret, so this means a broken dictionary.
            log.warning("No consistent word left for secret %r", session.secret)
            break
        session.submit_attempt(hint)
    dt = (time.perf_counter() - t0) * 1000.0

    return GameRecord(session.secret, session.is_won(), session.history(), dt)


def run_batch(dictionary: Dictionary, secrets: Iterable[str], *,
              seed: int | None = None, sample: int | None = None) -> List[GameRecord]:
    """
    Run many cases back-to-back. If `sample` is provided, only the first K
    secrets are used.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[GameRecord] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(dictionary, secret, seed=case_seed))
    return out


def summarize(records: List[GameRecord], max_turns: int = MAX_ATTEMPTS) -> Dict:
    """
    Aggregate a batch.

    Returns:
        games, wins, win_rate, mean_guesses (over wins, 0.0 if none),
        distribution (list: index k = games won in k+1 guesses; last slot = losses)
    """
    if not records:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": 0.0,
                "distribution": [0] * (max_turns + 1)}

    success = np.array([r.success for r in records], dtype=bool)
    guesses = np.array([r.guesses for r in records], dtype=int)

    won = guesses[success]
    dist = np.bincount(won - 1, minlength=max_turns)[:max_turns] if won.size else \
        np.zeros(max_turns, dtype=int)
    distribution = [int(x) for x in dist] + [int((~success).sum())]

    return {
        "games": len(records),
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "mean_guesses": float(won.mean()) if won.size else 0.0,
        "distribution": distribution,
    }
