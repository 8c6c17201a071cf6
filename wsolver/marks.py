"""
marks.py

Value types for one row of Wordle-style feedback.

A cell is a letter plus the colour the user gave it. Cells without a letter
are unfilled and carry no information. Everything here is frozen so that a
history snapshot can be handed to the filter without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

WORD_LENGTH = 5


class LetterState(Enum):
    ABSENT = "absent"    # gray
    PRESENT = "present"  # yellow
    CORRECT = "correct"  # green

    def next(self) -> "LetterState":
        """Cycle gray -> yellow -> green -> gray, the order a cell is clicked through."""
        order = (LetterState.ABSENT, LetterState.PRESENT, LetterState.CORRECT)
        return order[(order.index(self) + 1) % len(order)]


@dataclass(frozen=True)
class LetterMark:
    letter: str = ""
    state: LetterState = LetterState.ABSENT

    def __post_init__(self) -> None:
        if not isinstance(self.letter, str):
            raise TypeError("letter must be a str")
        if self.letter:
            if len(self.letter) != 1 or not self.letter.isascii() or not self.letter.isalpha():
                raise ValueError(f"letter must be a single ASCII letter, got {self.letter!r}")
            # frozen: bypass __setattr__ to store the normalized letter
            object.__setattr__(self, "letter", self.letter.upper())
        if not isinstance(self.state, LetterState):
            raise TypeError(f"state must be a LetterState, got {type(self.state).__name__}: {self.state!r}")

    @property
    def is_filled(self) -> bool:
        return self.letter != ""


@dataclass(frozen=True)
class GuessRow:
    """
    One submitted guess with per-letter feedback.

    The feedback is whatever the user assigned; nothing here checks it
    against an answer.
    """

    marks: Tuple[LetterMark, ...]

    def __post_init__(self) -> None:
        marks = tuple(self.marks)
        if len(marks) != WORD_LENGTH:
            raise ValueError(f"a row must have exactly {WORD_LENGTH} marks, got {len(marks)}")
        for i, m in enumerate(marks):
            if not isinstance(m, LetterMark):
                raise TypeError(f"marks[{i}] must be a LetterMark, got {type(m).__name__}")
        object.__setattr__(self, "marks", marks)

    # ---------- Construction helpers ----------

    @classmethod
    def from_word(cls, word: str, states: Sequence[LetterState]) -> "GuessRow":
        """Build a full row from a 5-letter word and its 5 feedback states."""
        if not isinstance(word, str) or len(word) != WORD_LENGTH:
            raise ValueError(f"word must be a string of length {WORD_LENGTH}")
        if len(states) != WORD_LENGTH:
            raise ValueError(f"states must have length {WORD_LENGTH}")
        return cls(tuple(LetterMark(ch, st) for ch, st in zip(word, states)))

    @classmethod
    def empty(cls) -> "GuessRow":
        return cls(tuple(LetterMark() for _ in range(WORD_LENGTH)))

    # ---------- Queries ----------

    def __iter__(self):
        return iter(self.marks)

    def __len__(self) -> int:
        return len(self.marks)

    def __getitem__(self, idx: int) -> LetterMark:
        return self.marks[idx]

    @property
    def letters(self) -> str:
        """Filled letters in order, unfilled cells skipped."""
        return "".join(m.letter for m in self.marks)

    @property
    def states(self) -> List[LetterState]:
        return [m.state for m in self.marks]

    @property
    def is_empty(self) -> bool:
        return not any(m.is_filled for m in self.marks)

    @property
    def is_complete(self) -> bool:
        return all(m.is_filled for m in self.marks)


GuessHistory = Sequence[GuessRow]
