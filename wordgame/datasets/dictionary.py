"""
The game dictionary and its file loader.

A `Dictionary` is built once and then only read: words are kept in a tuple
(stable order, used for filtering and random draws) and a frozenset (O(1)
membership). Sessions hold a reference to it; nothing copies it per game.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Tuple

from wordgame.engine.errors import EmptyDictionary
from wordgame.engine.normalize import WORD_LENGTH, normalize

log = logging.getLogger(__name__)


class DictionaryLoadError(OSError):
    """The file exists but yields no usable 5-letter word."""


class Dictionary:
    """Immutable, ordered, de-duplicated collection of normalized words."""

    __slots__ = ("_words", "_index")

    def __init__(self, words: Iterable[str]):
        ordered: List[str] = []
        seen = set()
        for raw in words:
            w = normalize(raw)
            if len(w) != WORD_LENGTH or w in seen:
                continue
            seen.add(w)
            ordered.append(w)
        self._words: Tuple[str, ...] = tuple(ordered)
        self._index: FrozenSet[str] = frozenset(seen)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return normalize(word) in self._index

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"

    def random_word(self, rng: random.Random) -> str:
        """Uniform draw with the caller's generator; EmptyDictionary when there is nothing to draw."""
        if not self._words:
            raise EmptyDictionary()
        return rng.choice(self._words)


def load_dictionary(path: Path | str) -> Dictionary:
    """
    Read a one-word-per-line UTF-8 file into a Dictionary.

    Lines are normalized (case, 'ё', foreign symbols); anything that is not
    5 letters afterwards is skipped.

    Raises:
      FileNotFoundError   : path does not exist
      DictionaryLoadError : no line yields a 5-letter word
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    # Word lists may start with a BOM.
    lines = p.read_text(encoding="utf-8-sig").splitlines()
    d = Dictionary(lines)
    if not len(d):
        raise DictionaryLoadError(f"dictionary is empty or has no {WORD_LENGTH}-letter words: {path}")
    log.info("Loaded %d words from %s (%d lines read)", len(d), path, len(lines))
    return d
