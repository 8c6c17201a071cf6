from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

FULL_LIST_NAME = "wordlist.txt"
COMMON_LIST_NAME = "common.txt"


@dataclass
class SolverConfig:
    """
    Solver preferences.

    data_dir          directory holding wordlist.txt / common.txt
    use_common_words  use the shorter common-words list instead of the full one
    word_limit        how many candidates to show at once (display cap only)
    max_rows          number of guess rows in the grid
    """

    data_dir: Path = Path(".")
    use_common_words: bool = False
    word_limit: int = 20
    max_rows: int = 6

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir)
        if not isinstance(self.word_limit, int) or self.word_limit <= 0:
            raise ValueError("word_limit must be a positive integer")
        if not isinstance(self.max_rows, int) or self.max_rows <= 0:
            raise ValueError("max_rows must be a positive integer")

    @property
    def word_list_path(self) -> Path:
        name = COMMON_LIST_NAME if self.use_common_words else FULL_LIST_NAME
        return self.data_dir / name

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SolverConfig":
        return cls(
            data_dir=Path(getattr(args, "data_dir", ".")),
            use_common_words=bool(getattr(args, "common", False)),
            word_limit=int(getattr(args, "limit", 20)),
        )
