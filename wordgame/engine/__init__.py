from .errors import (
    ErrorKind, GameError, InvalidLength, WordNotFound, GameOver, OutOfAttempts, EmptyDictionary,
)
from .normalize import WORD_LENGTH, normalize, normalize_word
from .scoring import Verdict, WIN_PATTERN, analyze, score, encode, decode
from .constraints import ConstraintSet, update, update_all, filter_candidates
from .validation import check_guess, validate_guess

__all__ = [
    "ErrorKind", "GameError", "InvalidLength", "WordNotFound", "GameOver", "OutOfAttempts",
    "EmptyDictionary", "WORD_LENGTH", "normalize", "normalize_word", "Verdict", "WIN_PATTERN",
    "analyze", "score", "encode", "decode", "ConstraintSet", "update", "update_all",
    "filter_candidates", "check_guess", "validate_guess",
]
