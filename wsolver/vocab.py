from __future__ import annotations

import csv
import logging
from typing import Iterable, List

import numpy as np
import pandas as pd

from wsolver.constraints import ConstraintSet
from wsolver.filters import candidate_mask, filter_candidates

log = logging.getLogger(__name__)


def clean_words(
    raw_iter: Iterable[object],
    *,
    word_len: int,
    lowercase: bool,
    dedupe: bool,
    alpha_only: bool,
) -> List[str]:
    """Strip, case-fold and length-check raw entries; first occurrence wins."""
    clean: List[str] = []
    seen = set()
    skipped = 0

    for val in raw_iter:
        if not isinstance(val, str):
            val = str(val) if val is not None else ""
        w = val.strip()
        w = w.lower() if lowercase else w

        if len(w) != word_len or (alpha_only and not (w.isascii() and w.isalpha())):
            skipped += 1
            continue

        if dedupe:
            # case-insensitive so "Crane" and "CRANE" count as one word
            key = w.lower()
            if key in seen:
                continue
            seen.add(key)

        clean.append(w)

    if skipped:
        log.debug("skipped %d entries that are not %d-letter words", skipped, word_len)
    return clean


class WordVocab:
    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Enforce uniqueness (first occurrence policy should be handled by the loaders)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: List[str] = list(words)  # make a defensive copy
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: int = 5,
        lowercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int, default=5
            Required word length.
        lowercase : bool, default=True
            If True, lowercase words before validation.
        dedupe : bool, default=True
            If True, keep the first occurrence and drop later duplicates.
        alpha_only : bool, default=True
            If True, keep only ASCII alphabetic words.

        Raises
        ------
        FileNotFoundError, KeyError, ValueError, TypeError
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")

        clean = clean_words(
            df[column].tolist(),
            word_len=word_len, lowercase=lowercase, dedupe=dedupe, alpha_only=alpha_only,
        )
        if not clean:
            raise ValueError("no valid words after filtering")
        log.info("loaded %d words from %s", len(clean), path)
        return cls(clean)

    @classmethod
    def from_text(
        cls,
        path: str,
        *,
        word_len: int = 5,
        lowercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Load a plain word list, one word per line, keeping the file's order.

        Lists may be pre-sorted (e.g. most useful words first), so no sorting
        happens here. Each line is read whole: quotes and commas are
        ordinary characters, so a stray one only costs that line.
        """
        # \x1f (unit separator) never appears in a word list
        df = pd.read_csv(
            path, header=None, names=["word"], dtype=str, sep="\x1f",
            quoting=csv.QUOTE_NONE, index_col=False, on_bad_lines="skip",
            keep_default_na=False, skip_blank_lines=True,
        )
        clean = clean_words(
            df["word"].tolist(),
            word_len=word_len, lowercase=lowercase, dedupe=dedupe, alpha_only=alpha_only,
        )
        if not clean:
            raise ValueError(f"no valid {word_len}-letter words found in {path}")
        log.info("loaded %d words from %s", len(clean), path)
        return cls(clean)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the vocabulary (case-sensitive)."""
        return word in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]

    # ---------- Filtering ----------

    def filter(self, constraints: ConstraintSet) -> List[str]:
        """Words still possible under `constraints`, in vocabulary order."""
        return filter_candidates(self._words, constraints)

    def mask(self, constraints: ConstraintSet) -> np.ndarray:
        """0/1 int8 mask over the vocabulary for `constraints`."""
        return candidate_mask(self._words, constraints)
