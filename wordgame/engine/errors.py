"""
Error kinds raised by the game core.

Every error here is a local, recoverable condition: the caller decides
whether to re-prompt, stop issuing attempts, or refuse to start a game.
Each exception carries an `ErrorKind` so callers can branch on `err.kind`
without an isinstance ladder.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_LENGTH = "invalid_length"
    WORD_NOT_FOUND = "word_not_found"
    GAME_OVER = "game_over"
    EMPTY_DICTIONARY = "empty_dictionary"


class GameError(Exception):
    """Base class for all recoverable game errors."""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidLength(GameError, ValueError):
    """Input normalizes to something other than WORD_LENGTH letters."""
    kind = ErrorKind.INVALID_LENGTH

    def __init__(self, word: str, length: int, expected: int = 5):
        super().__init__(f"word must have {expected} letters, got {length}: {word!r}"
                         if length != expected else f"not a normalized {expected}-letter word: {word!r}")
        self.word = word
        self.length = length


class WordNotFound(GameError, LookupError):
    """Normalized input is not in the dictionary."""
    kind = ErrorKind.WORD_NOT_FOUND

    def __init__(self, word: str):
        super().__init__(f"word not found in dictionary: {word!r}")
        self.word = word


class GameOver(GameError):
    """An attempt was submitted after the session reached a terminal state."""
    kind = ErrorKind.GAME_OVER

    def __init__(self, message: str = "game is over, no attempts left"):
        super().__init__(message)


# Same condition seen from the counter's side.
OutOfAttempts = GameOver


class EmptyDictionary(GameError, ValueError):
    """A session (or a random draw) was requested from zero words."""
    kind = ErrorKind.EMPTY_DICTIONARY

    def __init__(self, message: str = "dictionary contains no 5-letter words"):
        super().__init__(message)
