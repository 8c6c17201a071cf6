"""
grid.py

The editable guess grid a front end keeps while the user types.

Cells are mutable here; `history()` takes an immutable snapshot for the
solver. Typing a letter that already sits in the same column of an earlier
row copies that row's colour, and recolouring a cell recolours the same
letter in the same column everywhere, so the user rarely has to set a
colour twice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from wsolver.marks import WORD_LENGTH, GuessRow, LetterMark, LetterState


@dataclass
class Cell:
    letter: str = ""
    state: LetterState = LetterState.ABSENT


class GuessGrid:
    def __init__(self, rows: int = 6) -> None:
        if not isinstance(rows, int) or rows <= 0:
            raise ValueError("rows must be a positive integer")
        self.n_rows = rows
        self._cells: List[List[Cell]] = [[Cell() for _ in range(WORD_LENGTH)] for _ in range(rows)]

    # -------------------------
    # Editing
    # -------------------------
    def type_letter(self, letter: str) -> bool:
        """Fill the first empty cell. Returns False when the grid is full."""
        letter = self._check_letter(letter)
        spot = self._first_empty()
        if spot is None:
            return False
        r, c = spot
        self._put(r, c, letter)
        return True

    def backspace(self) -> bool:
        """Clear the last filled cell. Returns False when the grid is empty."""
        for r in range(self.n_rows - 1, -1, -1):
            for c in range(WORD_LENGTH - 1, -1, -1):
                cell = self._cells[r][c]
                if cell.letter:
                    cell.letter = ""
                    cell.state = LetterState.ABSENT
                    return True
        return False

    def cycle(self, row: int, col: int) -> Optional[LetterState]:
        """
        Advance the colour of a filled cell and apply it to the same letter
        in the same column of every row. Empty cells are left alone.
        """
        cell = self._cell(row, col)
        if not cell.letter:
            return None
        new_state = cell.state.next()
        self._recolour(col, cell.letter, new_state)
        return new_state

    def set_state(self, row: int, col: int, state: LetterState) -> None:
        if not isinstance(state, LetterState):
            raise TypeError("state must be a LetterState")
        cell = self._cell(row, col)
        if not cell.letter:
            raise ValueError(f"cell ({row}, {col}) is empty")
        self._recolour(col, cell.letter, state)

    def fill_suggestion(self, word: str) -> bool:
        """
        Write `word` into the first row that has an empty cell, starting at
        that row's first empty column. Letters that do not fit are dropped.
        """
        if not isinstance(word, str) or not word.isascii() or not word.isalpha():
            raise ValueError(f"suggestion must be alphabetic: {word!r}")
        target = next((r for r in range(self.n_rows)
                       if any(not c.letter for c in self._cells[r])), None)
        if target is None:
            return False
        start = next(c for c in range(WORD_LENGTH) if not self._cells[target][c].letter)
        for i, ch in enumerate(word.upper()):
            if start + i >= WORD_LENGTH:
                break
            self._put(target, start + i, ch)
        return True

    def clear(self) -> None:
        self._cells = [[Cell() for _ in range(WORD_LENGTH)] for _ in range(self.n_rows)]

    def load_row(self, row: int, guess_row: GuessRow) -> None:
        """Overwrite one grid row with a GuessRow."""
        if not 0 <= row < self.n_rows:
            raise IndexError(f"row out of range: {row}")
        self._cells[row] = [Cell(m.letter, m.state) for m in guess_row]

    # -------------------------
    # Snapshot
    # -------------------------
    def history(self) -> Tuple[GuessRow, ...]:
        return tuple(
            GuessRow(tuple(LetterMark(c.letter, c.state) for c in row))
            for row in self._cells
        )

    def filled_rows(self) -> int:
        return sum(1 for row in self._cells if any(c.letter for c in row))

    def __getitem__(self, pos: Tuple[int, int]) -> Cell:
        return self._cell(*pos)

    # -------------------------
    # Helpers
    # -------------------------
    @staticmethod
    def _check_letter(letter: str) -> str:
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isascii() or not letter.isalpha():
            raise ValueError(f"expected a single letter, got {letter!r}")
        return letter.upper()

    def _cell(self, row: int, col: int) -> Cell:
        if not 0 <= row < self.n_rows or not 0 <= col < WORD_LENGTH:
            raise IndexError(f"cell out of range: ({row}, {col})")
        return self._cells[row][col]

    def _first_empty(self) -> Optional[Tuple[int, int]]:
        for r in range(self.n_rows):
            for c in range(WORD_LENGTH):
                if not self._cells[r][c].letter:
                    return r, c
        return None

    def _put(self, row: int, col: int, letter: str) -> None:
        cell = self._cells[row][col]
        cell.letter = letter
        cell.state = LetterState.ABSENT
        # most recent earlier row with the same letter in this column wins
        for prev in range(row - 1, -1, -1):
            above = self._cells[prev][col]
            if above.letter == letter:
                cell.state = above.state
                break

    def _recolour(self, col: int, letter: str, state: LetterState) -> None:
        for row in self._cells:
            if row[col].letter == letter:
                row[col].state = state
