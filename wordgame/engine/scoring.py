"""
Per-letter feedback for a single (guess, answer) pair.

Conventions (display contract, one marker per position):
  - '+' : exact   = correct letter in the correct position
  - '^' : present = letter occurs elsewhere in the answer
  - '-' : absent  = letter not in the answer (or all its copies already used)

Algorithm (two-pass, duplicate-safe):
  1) Mark every exact match and consume that answer position.
  2) For each remaining guess position, left to right, consume the first
     unconsumed answer position holding the same letter and mark present.
  3) Whatever is left stays absent.

So a letter guessed k times against an answer holding it m times is marked
exact/present at most min(k, m) times, and exact matches always win the
answer position over a present match elsewhere.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from .errors import InvalidLength
from .normalize import WORD_LENGTH, is_word


class Verdict(str, Enum):
    EXACT = "+"
    PRESENT = "^"
    ABSENT = "-"


VerdictSequence = Tuple[Verdict, ...]

WIN_PATTERN = Verdict.EXACT.value * WORD_LENGTH


def _require_word(w: str) -> None:
    if not is_word(w):
        raise InvalidLength(w, len(w), WORD_LENGTH)


def analyze(guess: str, answer: str) -> VerdictSequence:
    """
    Compute the verdict of every position of `guess` against `answer`.

    Both words must already be normalized and WORD_LENGTH long; anything else
    raises InvalidLength.

    Examples (as patterns):
      analyze("стуль", "столи") -> "++-+-"
      analyze("слони", "столи") -> "+^+-+"
    """
    _require_word(guess)
    _require_word(answer)

    n = len(guess)
    verdicts: List[Verdict] = [Verdict.ABSENT] * n
    consumed = [False] * n

    # Pass 1: exact matches claim their own answer position.
    for i in range(n):
        if guess[i] == answer[i]:
            verdicts[i] = Verdict.EXACT
            consumed[i] = True

    # Pass 2: each leftover guess letter claims the first free copy in the answer.
    for i in range(n):
        if verdicts[i] is Verdict.EXACT:
            continue
        for j in range(n):
            if not consumed[j] and answer[j] == guess[i]:
                verdicts[i] = Verdict.PRESENT
                consumed[j] = True
                break

    return tuple(verdicts)


def encode(verdicts: Iterable[Verdict]) -> str:
    """Verdicts -> marker string, e.g. (EXACT, ABSENT, ...) -> '+-...'."""
    return "".join(v.value for v in verdicts)


def decode(pattern: str) -> VerdictSequence:
    """Marker string -> verdicts. Raises ValueError on bad length or marker."""
    if len(pattern) != WORD_LENGTH:
        raise ValueError(f"pattern must have {WORD_LENGTH} markers, got {pattern!r}")
    return tuple(Verdict(ch) for ch in pattern)


def score(guess: str, answer: str) -> str:
    """Pattern string for `guess` against `answer` (see `analyze`)."""
    return encode(analyze(guess, answer))
