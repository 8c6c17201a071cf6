import logging
from pathlib import Path

import pandas as pd

from wsolver.config import SolverConfig
from wsolver.vocab import WordVocab, clean_words

log = logging.getLogger(__name__)


def load_answer_vocab(csv_path: str) -> WordVocab:
    """
    Load only the official Wordle answers from the CSV.
    Keeps rows where 'day' is not null, and returns a WordVocab.
    """
    df = pd.read_csv(csv_path)
    answer_df = df[df["day"].notna()].copy()
    answer_words = clean_words(
        answer_df["word"].tolist(), word_len=5, lowercase=True, dedupe=True, alpha_only=True,
    )
    if not answer_words:
        raise ValueError(f"no answer rows (non-null 'day') in {csv_path}")
    log.info("loaded %d answers from %s", len(answer_words), csv_path)
    return WordVocab(answer_words)


def load_word_list(path) -> WordVocab:
    """Load a CSV (expects a 'word' column) or a one-word-per-line text file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list file not found: {path}")
    if path.suffix.lower() == ".csv":
        return WordVocab.from_csv(str(path))
    return WordVocab.from_text(str(path))


def resolve_word_list(config: SolverConfig) -> WordVocab:
    """Load the full or the common word list, whichever `config` selects."""
    log.debug("using %s word list at %s",
              "common" if config.use_common_words else "full", config.word_list_path)
    return load_word_list(config.word_list_path)
