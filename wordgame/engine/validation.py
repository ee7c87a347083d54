"""
Guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is acceptable iff, after normalization:
  - it has exactly WORD_LENGTH letters   (else InvalidLength)
  - it exists in the dictionary          (else WordNotFound)

Neither failure consumes an attempt; the session checks before scoring.
"""

from __future__ import annotations

from typing import Container

from .errors import GameError, WordNotFound
from .normalize import normalize_word


def check_guess(raw: str, dictionary: Container[str]) -> str:
    """
    Return the normalized guess, or raise the reason it is not acceptable.

    Args:
      raw        : user input as typed
      dictionary : anything supporting `in` over normalized words
                   (a Dictionary, a set, a list)
    """
    w = normalize_word(raw)
    if w not in dictionary:
        raise WordNotFound(w)
    return w


def validate_guess(raw: str, dictionary: Container[str]) -> bool:
    """Non-raising form of `check_guess`."""
    try:
        check_guess(raw, dictionary)
    except GameError:
        return False
    return True
