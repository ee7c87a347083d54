"""
One guessing game, from secret selection to win or loss.

State machine:
  IN_PROGRESS --submit_attempt(secret)--------------> WON
  IN_PROGRESS --submit_attempt(last allowed, wrong)--> LOST
  WON / LOST  --submit_attempt(...)-----------------> GameOver raised

Rejected input (wrong length, unknown word) never consumes an attempt.
Hints are read-only and allowed in any state.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from wordgame.datasets.dictionary import Dictionary
from wordgame.engine import (
    ConstraintSet, EmptyDictionary, GameError, GameOver, WordNotFound, analyze, check_guess, encode,
    filter_candidates, normalize, update,
)
from wordgame.engine.scoring import VerdictSequence

log = logging.getLogger(__name__)

# Single source of truth for the attempt budget.
MAX_ATTEMPTS = 6


class GameState(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Attempt:
    word: str
    verdicts: VerdictSequence

    @property
    def pattern(self) -> str:
        return encode(self.verdicts)


@dataclass(frozen=True)
class AttemptResult:
    attempt: Attempt
    won: bool
    remaining: int
    state: GameState

    @property
    def word(self) -> str:
        return self.attempt.word

    @property
    def pattern(self) -> str:
        return self.attempt.pattern


class Session:
    """
    Owns the secret, the attempt counter, the history and the constraints.

    Args:
      dictionary   : Dictionary (or any iterable of words, wrapped once)
      rng          : random.Random used for the secret and for hints;
                     pass a seeded one for reproducible games
      secret       : force the secret instead of drawing it (must be in the
                     dictionary)
      max_attempts : attempt budget, 6 for the standard game
      constraints  : knowledge to start from (e.g. carried over from notes);
                     attempts only ever add to it
    """

    def __init__(self, dictionary: Dictionary | Iterable[str],
                 rng: random.Random | None = None, *,
                 secret: str | None = None, max_attempts: int = MAX_ATTEMPTS,
                 constraints: ConstraintSet | None = None):
        if not isinstance(dictionary, Dictionary):
            dictionary = Dictionary(dictionary)
        if not len(dictionary):
            raise EmptyDictionary()
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive; got {max_attempts}")

        self.dictionary = dictionary
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

        if secret is None:
            self._secret = dictionary.random_word(self.rng)
        else:
            self._secret = normalize(secret)
            if self._secret not in dictionary:
                raise WordNotFound(self._secret)

        self._remaining = max_attempts
        self._history: List[Attempt] = []
        self._constraints = constraints if constraints is not None else ConstraintSet()
        self._state = GameState.IN_PROGRESS
        log.debug("New session over %d words, %d attempts", len(dictionary), max_attempts)

    # ---- read-only views ----

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def constraints(self) -> ConstraintSet:
        return self._constraints

    def is_terminal(self) -> bool:
        return self._state is not GameState.IN_PROGRESS

    def is_won(self) -> bool:
        return self._state is GameState.WON

    def remaining_attempts(self) -> int:
        return self._remaining

    def attempts_used(self) -> int:
        return len(self._history)

    def history(self) -> Tuple[Attempt, ...]:
        return tuple(self._history)

    # ---- transitions ----

    def submit_attempt(self, raw: str) -> AttemptResult:
        """
        Score one guess and advance the game.

        Raises:
          GameOver      : the session is already WON or LOST
          InvalidLength : input does not normalize to 5 letters
          WordNotFound  : input is not in the dictionary
        The two input errors leave the session untouched.
        """
        if self.is_terminal():
            raise GameOver(f"game is over ({self._state.value}), no more attempts accepted")

        try:
            word = check_guess(raw, self.dictionary)
        except GameError as e:
            log.debug("Rejected attempt %r: %s", raw, e)
            raise

        verdicts = analyze(word, self._secret)
        attempt = Attempt(word, verdicts)
        self._history.append(attempt)
        self._remaining = max(0, self._remaining - 1)
        self._constraints = update(self._constraints, word, verdicts)

        if word == self._secret:
            self._state = GameState.WON
            log.info("Won in %d attempt(s) with %r", len(self._history), word)
        elif self._remaining == 0:
            self._state = GameState.LOST
            log.info("Lost after %d attempts, secret was %r", len(self._history), self._secret)
        else:
            log.debug("Attempt %d: %s %s", len(self._history), word, attempt.pattern)

        return AttemptResult(attempt, self.is_won(), self._remaining, self._state)

    # ---- hints ----

    def candidates(self) -> List[str]:
        """Dictionary words consistent with everything learned so far."""
        return filter_candidates(self.dictionary, self._constraints)

    def request_hint(self, rng: random.Random | None = None) -> Optional[str]:
        """
        A uniformly random consistent word, or None when nothing fits.
        Does not touch the attempt counter or the history.
        """
        pool = self.candidates()
        if not pool:
            log.debug("No hint available")
            return None
        hint = (rng or self.rng).choice(pool)
        log.debug("Hint %r out of %d candidates", hint, len(pool))
        return hint
