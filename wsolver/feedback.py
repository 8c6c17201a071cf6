"""
Feedback utilities.

- parse_feedback turns what a user typed after a guess into LetterStates.
- score_pattern is a reference referee: the feedback a guess would get
  against a known answer. The solver itself never calls it; it exists so
  tests and simulations can produce feedback that is guaranteed consistent.
"""

import re
from collections import Counter
from typing import List

from wsolver.marks import WORD_LENGTH, GuessRow, LetterState

_SYMBOLS = {
    "g": LetterState.CORRECT,
    "y": LetterState.PRESENT,
    "b": LetterState.ABSENT,
    "x": LetterState.ABSENT,
    ".": LetterState.ABSENT,
    "2": LetterState.CORRECT,
    "1": LetterState.PRESENT,
    "0": LetterState.ABSENT,
}


def parse_feedback(s: str) -> List[LetterState]:
    """Parse a 5-char feedback into LetterStates.
    Accepted forms:
      - letters: g/y/b  (green/yellow/black; x or . also mean black)
      - digits:  2/1/0
      - list:   [0, 1, 2, 2, 0]
    Raises ValueError on invalid input.
    """
    if not isinstance(s, str):
        raise TypeError("feedback must be a string")
    s = s.strip().lower()
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != WORD_LENGTH or re.search(r"[^012,\s\[\]]", s):
            raise ValueError("list form must contain exactly five 0/1/2 values")
        return [_SYMBOLS[n] for n in nums]

    if len(s) != WORD_LENGTH:
        raise ValueError("feedback must be length 5 (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return [_SYMBOLS[ch] for ch in s]
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b or 2/1/0") from e


def score_pattern(guess: str, answer: str) -> List[LetterState]:
    """
    Compute the feedback for `guess` against `answer` (case-insensitive).

    Two passes so duplicates are handled the way the game does it:
    greens consume their letter first, then yellows are handed out left to
    right while copies of the letter remain; everything else is gray.
    """
    if not isinstance(guess, str) or not isinstance(answer, str):
        raise TypeError("guess and answer must be strings")
    if len(guess) != WORD_LENGTH or len(answer) != WORD_LENGTH:
        raise ValueError("guess and answer must be length 5")
    if not guess.isalpha() or not answer.isalpha():
        raise ValueError("guess and answer must be alphabetic")
    guess, answer = guess.upper(), answer.upper()

    pattern = [LetterState.ABSENT] * WORD_LENGTH
    remaining = Counter(answer)

    # Pass 1: greens
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = LetterState.CORRECT
            remaining[g] -= 1

    # Pass 2: yellows where counts allow
    for i, g in enumerate(guess):
        if pattern[i] is LetterState.ABSENT and remaining[g] > 0:
            pattern[i] = LetterState.PRESENT
            remaining[g] -= 1

    return pattern


def row_for(guess: str, answer: str) -> GuessRow:
    """The GuessRow a player would enter after guessing `guess` against `answer`."""
    return GuessRow.from_word(guess.upper(), score_pattern(guess, answer))
