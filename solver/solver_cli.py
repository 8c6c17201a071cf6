"""
solver/solver_cli.py

Interactive Wordle helper (human-in-the-loop):
- YOU type each guessed word and the feedback pattern you saw.
- Feedback accepted as: 'gybby', '21001', or a Python-like list '[0, 0, 2, 2, 2]'.
- The solver prunes the word list and shows the words still possible.

Run:
  python -m solver.solver_cli --words wordlist.txt
  python -m solver.solver_cli --csv word_list.csv
  python -m solver.solver_cli --data-dir public --common

Shortcuts:
  quit / q / exit  -> exit
  :undo            -> drop the last guess
  :reset           -> start over

undo and reset take a colon so they never collide with a guess (RESET is a word).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from wsolver.config import SolverConfig
from wsolver.data_utils import load_answer_vocab, load_word_list, resolve_word_list
from wsolver.feedback import parse_feedback
from wsolver.marks import GuessRow, LetterState
from wsolver.session import SolverSession
from wsolver.vocab import WordVocab

QUIT = {"q", "quit", "exit", ":q", ":quit"}
UNDO = ":undo"
RESET = ":reset"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Interactive Wordle solver (manual feedback)")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--words", help="Path to a word list (one word per line, or a CSV with a 'word' column)")
    src.add_argument("--csv", help="Path to word_list.csv; only rows with a 'day' (official answers) are used")
    ap.add_argument("--data-dir", default=".", help="Directory holding wordlist.txt / common.txt")
    ap.add_argument("--common", action="store_true", help="Use common.txt instead of wordlist.txt")
    ap.add_argument("--limit", type=int, default=20, help="How many candidates to print")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _load_vocab(args: argparse.Namespace, config: SolverConfig) -> WordVocab:
    if args.csv:
        return load_answer_vocab(args.csv)
    if args.words:
        return load_word_list(args.words)
    return resolve_word_list(config)


def format_candidates(session: SolverSession) -> List[str]:
    cs = session.constraints()
    found = session.candidates(cs)
    shown = session.visible_candidates(found)
    lines = [f"Remaining candidates: {len(found)}"]
    if cs.contradictory:
        lines.append("Two different letters are marked green in the same spot; using the later one.")
    if shown:
        more = "  ..." if session.has_more(found) else ""
        lines.append("Candidates: " + ", ".join(shown) + more)
    else:
        lines.append("No candidates remain. Check your feedback inputs.")
    return lines


def run(session: SolverSession, read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None) -> int:
    """Prompt loop. Returns the number of guess rows entered."""
    read = read or input
    write = write or print
    write("\nWordle helper: after EACH guess you make in the game, paste the feedback here.")
    write("Accepted: g/y/b, 2/1/0, or [0,1,2,2,0]. Commands: :undo, :reset, quit.\n")

    while True:
        guess = read("Enter your guess word: ").strip().lower()
        if guess in QUIT:
            write("bye!")
            break
        if guess == UNDO:
            if session.undo():
                for line in format_candidates(session):
                    write(line)
            else:
                write("Nothing to undo.")
            continue
        if guess == RESET:
            session.reset()
            write(f"Starting over with {len(session.vocab)} words.")
            continue
        if len(guess) != 5 or not guess.isascii() or not guess.isalpha():
            write("Please enter a 5-letter alphabetic word.")
            continue

        states: Optional[List[LetterState]] = None
        while states is None:
            fb = read("Feedback for that guess (g/y/b or 2/1/0 or [..]): ").strip()
            if fb.lower() in QUIT:
                write("bye!")
                return session.grid.filled_rows()
            try:
                states = parse_feedback(fb)
            except ValueError as e:
                write(f"Invalid feedback: {e}")

        try:
            session.add_row(GuessRow.from_word(guess, states))
        except ValueError as e:
            write(str(e))
            break

        if all(s is LetterState.CORRECT for s in states):
            write("Solved!")
            break

        for line in format_candidates(session):
            write(line)

    return session.grid.filled_rows()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = SolverConfig.from_args(args)
        vocab = _load_vocab(args, config)
    except (OSError, ValueError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    session = SolverSession(vocab, config)
    try:
        run(session)
    except (EOFError, KeyboardInterrupt):
        print("\nbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
