"""
Cumulative constraints derived from feedback, and candidate filtering.

Given:
  - the verdicts of every attempt made so far
Track:
  - required letters       (seen exact or present)
  - excluded letters       (seen absent and never exact/present)
  - fixed positions        (position -> letter confirmed exact)
  - excluded at position   (position -> letters known wrong there)

`ConstraintSet` is an immutable value: `update` returns a new one and never
drops anything already known. `filter_candidates` turns it into the list of
dictionary words still worth suggesting as a hint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from .scoring import Verdict, VerdictSequence


@dataclass(frozen=True)
class ConstraintSet:
    required_letters: FrozenSet[str] = frozenset()
    excluded_letters: FrozenSet[str] = frozenset()
    fixed_positions: Mapping[int, str] = field(default_factory=dict)
    excluded_at_position: Mapping[int, FrozenSet[str]] = field(default_factory=dict)

    def __post_init__(self):
        # Mapping fields are held as read-only views over private copies.
        object.__setattr__(self, "required_letters", frozenset(self.required_letters))
        object.__setattr__(self, "excluded_letters", frozenset(self.excluded_letters))
        object.__setattr__(self, "fixed_positions", MappingProxyType(dict(self.fixed_positions)))
        object.__setattr__(self, "excluded_at_position", MappingProxyType(
            {i: frozenset(s) for i, s in self.excluded_at_position.items()}))

    def __hash__(self) -> int:
        return hash((self.required_letters, self.excluded_letters,
                     frozenset(self.fixed_positions.items()),
                     frozenset(self.excluded_at_position.items())))

    def is_empty(self) -> bool:
        return not (self.required_letters or self.excluded_letters
                    or self.fixed_positions or self.excluded_at_position)

    def __le__(self, other: "ConstraintSet") -> bool:
        """Field-wise subset: everything known in `self` is known in `other`."""
        if not isinstance(other, ConstraintSet):
            return NotImplemented
        if not (self.required_letters <= other.required_letters
                and self.excluded_letters <= other.excluded_letters):
            return False
        if any(other.fixed_positions.get(i) != ch for i, ch in self.fixed_positions.items()):
            return False
        return all(s <= other.excluded_at_position.get(i, frozenset())
                   for i, s in self.excluded_at_position.items())

    def allows(self, word: str) -> bool:
        """True if `word` satisfies every constraint at once."""
        letters = set(word)
        if not self.required_letters <= letters:
            return False
        if self.excluded_letters & letters:
            return False
        for i, ch in self.fixed_positions.items():
            if i >= len(word) or word[i] != ch:
                return False
        for i, forbidden in self.excluded_at_position.items():
            if i < len(word) and word[i] in forbidden:
                return False
        return True


def update(constraints: ConstraintSet, guess: str,
           verdicts: VerdictSequence) -> ConstraintSet:
    """
    Fold one attempt's verdicts into `constraints` and return the result.

    Absent is only a global exclusion when the letter scored nowhere in this
    guess and was not already required. Otherwise the guess simply held more
    copies than the answer, and all we learn is that the letter is not at
    that position.
    """
    if len(guess) != len(verdicts):
        raise ValueError(f"guess/verdict length mismatch: {guess!r} vs {len(verdicts)}")

    required = set(constraints.required_letters)
    excluded = set(constraints.excluded_letters)
    fixed = dict(constraints.fixed_positions)
    wrong_at: Dict[int, set] = {i: set(s) for i, s in constraints.excluded_at_position.items()}

    # Letters that scored somewhere in this guess, decided before any exclusion.
    hits = {ch for ch, v in zip(guess, verdicts) if v is not Verdict.ABSENT}
    required |= hits

    for i, (ch, v) in enumerate(zip(guess, verdicts)):
        if v is Verdict.EXACT:
            fixed[i] = ch
        elif v is Verdict.PRESENT:
            wrong_at.setdefault(i, set()).add(ch)
        elif ch in required:
            wrong_at.setdefault(i, set()).add(ch)
        else:
            excluded.add(ch)

    return ConstraintSet(
        required_letters=frozenset(required),
        excluded_letters=frozenset(excluded),
        fixed_positions=fixed,
        excluded_at_position={i: frozenset(s) for i, s in wrong_at.items()},
    )


def update_all(constraints: ConstraintSet,
               attempts: Iterable[Tuple[str, VerdictSequence]]) -> ConstraintSet:
    """Apply `update` for every (guess, verdicts) pair in order."""
    for guess, verdicts in attempts:
        constraints = update(constraints, guess, verdicts)
    return constraints


def filter_candidates(words: Iterable[str], constraints: ConstraintSet) -> List[str]:
    """
    Keep only words consistent with every constraint.

    Args:
      words       : candidate words, already normalized (usually the dictionary)
      constraints : cumulative ConstraintSet

    Returns:
      List[str] of matching words, order preserved as in `words`; empty when
      nothing qualifies.
    """
    if constraints.is_empty():
        return list(words)
    return [w for w in words if constraints.allows(w)]
