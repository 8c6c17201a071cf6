"""
constraints.py

Folds a guess history into a compact set of constraints.

The set is rebuilt from scratch on every call; there is no incremental
update path. Per-letter occurrence bounds are derived row by row:
- a row where every copy of a letter is yellow/green proves at least that
  many copies
- a row where some copies are gray and others are not proves the exact
  count (the grays are only there because the guess over-used the letter)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Set, Tuple

from wsolver.marks import GuessHistory, GuessRow, LetterState


def _frozen(d: dict) -> Mapping:
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class ConstraintSet:
    """
    Read-only summary of a guess history.

    exact_position      {position: letter}          green cells
    forbidden_positions {letter: {positions}}       yellow cells
    min_occurrences     {letter: count}
    max_occurrences     {letter: count}             only bounded letters; missing == unbounded
    contradictory       two rows put different greens in one position (the later one is kept)
    """

    exact_position: Mapping[int, str] = field(default_factory=lambda: _frozen({}))
    forbidden_positions: Mapping[str, FrozenSet[int]] = field(default_factory=lambda: _frozen({}))
    min_occurrences: Mapping[str, int] = field(default_factory=lambda: _frozen({}))
    max_occurrences: Mapping[str, int] = field(default_factory=lambda: _frozen({}))
    contradictory: bool = False

    def bounds(self, letter: str) -> Tuple[int, Optional[int]]:
        """Return (min, max) for `letter`; max is None when unbounded."""
        letter = letter.upper()
        return self.min_occurrences.get(letter, 0), self.max_occurrences.get(letter)

    @property
    def absent_letters(self) -> FrozenSet[str]:
        """Letters proven not to occur at all (max == 0)."""
        return frozenset(letter for letter, c in self.max_occurrences.items() if c == 0)

    @property
    def is_empty(self) -> bool:
        return not (
            self.exact_position
            or self.forbidden_positions
            or self.min_occurrences
            or self.max_occurrences
        )


def aggregate(history: GuessHistory) -> ConstraintSet:
    """
    Derive the ConstraintSet for every row in `history`.

    Rows with no filled cell are skipped. Items that are not GuessRow raise
    TypeError rather than being guessed at.
    """
    exact: Dict[int, str] = {}
    forbidden: Dict[str, Set[int]] = {}
    min_counts: Dict[str, int] = {}
    max_counts: Dict[str, int] = {}
    contradictory = False

    for r, row in enumerate(history):
        if not isinstance(row, GuessRow):
            raise TypeError(f"history[{r}] must be a GuessRow, got {type(row).__name__}")
        if row.is_empty:
            continue

        # Pass 1: slot-level constraints and per-row tallies
        row_counts: Dict[str, int] = {}
        row_non_absent: Dict[str, int] = {}
        for pos, mark in enumerate(row):
            if not mark.is_filled:
                continue
            letter, state = mark.letter, mark.state
            if state is LetterState.CORRECT:
                if exact.get(pos, letter) != letter:
                    contradictory = True
                exact[pos] = letter
            elif state is LetterState.PRESENT:
                forbidden.setdefault(letter, set()).add(pos)
            elif state is not LetterState.ABSENT:
                raise ValueError(f"unknown letter state: {state!r}")

            row_counts[letter] = row_counts.get(letter, 0) + 1
            if state is not LetterState.ABSENT:
                row_non_absent[letter] = row_non_absent.get(letter, 0) + 1

        # Pass 2: fold this row's occurrence bounds into the running ones
        for letter, k in row_counts.items():
            m = row_non_absent.get(letter, 0)
            if m < k:
                # a gray next to yellow/green copies caps the count at m
                min_counts[letter] = max(min_counts.get(letter, 0), m)
                max_counts[letter] = min(max_counts.get(letter, m), m)
            else:
                min_counts[letter] = max(min_counts.get(letter, 0), k)

    return ConstraintSet(
        exact_position=_frozen(exact),
        forbidden_positions=_frozen({letter: frozenset(p) for letter, p in forbidden.items()}),
        min_occurrences=_frozen(min_counts),
        max_occurrences=_frozen(max_counts),
        contradictory=contradictory,
    )
