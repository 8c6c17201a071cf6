"""
session.py

One solving session: a vocabulary plus the guess grid being edited.

Every query recomputes constraints and candidates from the current grid
snapshot. Nothing derived is cached, so an edit anywhere in the grid can
never leave a stale candidate list behind.

API
---
grid                      the GuessGrid to edit
constraints()             ConstraintSet for the current grid
mask(cs)                  int8 0/1 mask over the vocabulary
candidate_indices(cs)     vocabulary indices where the mask is set
candidates(cs)            every word still possible, vocabulary order
visible_candidates(found) candidates capped to config.word_limit
has_more(found)           True when the cap hid some candidates

The optional arguments take an already computed ConstraintSet or
candidate list so one prompt aggregates and scans only once.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from wsolver.config import SolverConfig
from wsolver.constraints import ConstraintSet, aggregate
from wsolver.grid import GuessGrid
from wsolver.marks import GuessRow
from wsolver.vocab import WordVocab

log = logging.getLogger(__name__)


class SolverSession:
    def __init__(self, vocab: WordVocab, config: Optional[SolverConfig] = None) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        self.vocab = vocab
        self.config = config or SolverConfig()
        self.grid = GuessGrid(rows=self.config.max_rows)

    # -------------------------
    # Derived state
    # -------------------------
    @property
    def history(self) -> Tuple[GuessRow, ...]:
        return self.grid.history()

    def constraints(self) -> ConstraintSet:
        return aggregate(self.history)

    def mask(self, constraints: Optional[ConstraintSet] = None) -> np.ndarray:
        return self.vocab.mask(constraints if constraints is not None else self.constraints())

    def candidate_indices(self, constraints: Optional[ConstraintSet] = None) -> List[int]:
        """Vocabulary indices of the words still possible."""
        return np.flatnonzero(self.mask(constraints)).tolist()

    def candidates(self, constraints: Optional[ConstraintSet] = None) -> List[str]:
        cs = constraints if constraints is not None else self.constraints()
        if cs.contradictory:
            log.warning("feedback marks two different letters green in the same position; using the later one")
        found = [self.vocab.word_at(i) for i in self.candidate_indices(cs)]
        log.debug("%d of %d words remain", len(found), len(self.vocab))
        return found

    def visible_candidates(self, found: Optional[List[str]] = None) -> List[str]:
        if found is None:
            found = self.candidates()
        return found[: self.config.word_limit]

    def has_more(self, found: Optional[List[str]] = None) -> bool:
        if found is None:
            found = self.candidates()
        return len(found) > self.config.word_limit

    # -------------------------
    # Editing shortcuts
    # -------------------------
    def add_row(self, row: GuessRow) -> int:
        """Put `row` into the first completely empty grid row; returns its index."""
        for r, existing in enumerate(self.grid.history()):
            if existing.is_empty:
                self.grid.load_row(r, row)
                return r
        raise ValueError(f"grid is full ({self.config.max_rows} rows)")

    def undo(self) -> bool:
        """Blank out the last row that has any letters."""
        hist = self.grid.history()
        for r in range(len(hist) - 1, -1, -1):
            if not hist[r].is_empty:
                self.grid.load_row(r, GuessRow.empty())
                return True
        return False

    def reset(self) -> None:
        self.grid.clear()
