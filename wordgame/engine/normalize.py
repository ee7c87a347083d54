"""
Word normalization.

Every comparison and every stored word goes through `normalize` first:
  - lower-case
  - fold 'ё' to 'е'
  - drop anything outside the Russian alphabet а..я

`normalize` never checks length; `normalize_word` does.
"""

from __future__ import annotations

import re

from .errors import InvalidLength

WORD_LENGTH = 5

# а..я is contiguous in Unicode and excludes 'ё', which folds to 'е' first.
ALPHABET = "абвгдежзийклмнопрстуфхцчшщъыьэюя"
_NOT_ALPHABET = re.compile(r"[^а-я]")


def normalize(raw: str) -> str:
    """
    Case-fold, fold the diacritic and strip foreign symbols.

    Examples:
      normalize("ЁЛКА")   -> "елка"
      normalize(" Мёд-1") -> "мед"
    """
    return _NOT_ALPHABET.sub("", raw.lower().replace("ё", "е"))


def normalize_word(raw: str, length: int = WORD_LENGTH) -> str:
    """Normalize `raw` and require exactly `length` letters."""
    w = normalize(raw)
    if len(w) != length:
        raise InvalidLength(raw, len(w), length)
    return w


def is_word(s: str, length: int = WORD_LENGTH) -> bool:
    """True if `s` is already a normalized word of the right length."""
    return len(s) == length and not _NOT_ALPHABET.search(s)
