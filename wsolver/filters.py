"""
filters.py

Narrows a word list to the words consistent with a ConstraintSet.

filter_candidates returns the surviving words; candidate_mask returns a
0/1 array aligned with the list, which SolverSession turns into
vocabulary indices.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

import numpy as np

from wsolver.constraints import ConstraintSet
from wsolver.marks import WORD_LENGTH


def _normalize(word: str) -> str:
    if not isinstance(word, str):
        raise TypeError(f"words must be str, got {type(word).__name__}")
    if len(word) != WORD_LENGTH or not word.isascii() or not word.isalpha():
        raise ValueError(f"word must be {WORD_LENGTH} ASCII letters: {word!r}")
    return word.upper()


def matches(word: str, constraints: ConstraintSet) -> bool:
    """True iff `word` (any case) satisfies every constraint."""
    w = _normalize(word)

    # Rule 1: greens
    for pos, letter in constraints.exact_position.items():
        if w[pos] != letter:
            return False

    # Rule 2: yellows must be somewhere, just not where they were guessed
    for letter, positions in constraints.forbidden_positions.items():
        if letter not in w:
            return False
        for pos in positions:
            if w[pos] == letter:
                return False

    # Rule 3: occurrence bounds
    counts = Counter(w)
    for letter, lo in constraints.min_occurrences.items():
        if counts[letter] < lo:
            return False
    for letter, hi in constraints.max_occurrences.items():
        if counts[letter] > hi:
            return False

    return True


def filter_candidates(words: Iterable[str], constraints: ConstraintSet) -> List[str]:
    """
    Keep only words that match `constraints`.

    Stable: the result is a subsequence of `words` with the source casing.
    """
    return [w for w in words if matches(w, constraints)]


def candidate_mask(words: Sequence[str], constraints: ConstraintSet) -> np.ndarray:
    """Return an int8 0/1 mask aligned with `words`."""
    return np.fromiter((matches(w, constraints) for w in words), dtype=np.int8, count=len(words))
