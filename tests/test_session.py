import logging

import pytest

from wsolver.config import SolverConfig
from wsolver.feedback import parse_feedback
from wsolver.marks import GuessRow, LetterState
from wsolver.session import SolverSession
from wsolver.vocab import WordVocab

WORDS = ["crane", "slate", "plate", "grape", "brave"]


def _make_session(**kwargs) -> SolverSession:
    return SolverSession(WordVocab(list(WORDS)), SolverConfig(**kwargs))


def test_fresh_session_keeps_everything():
    s = _make_session()
    assert s.constraints().is_empty
    assert s.candidates() == WORDS


def test_rows_narrow_candidates_and_undo_restores():
    s = _make_session()
    s.add_row(GuessRow.from_word("crane", parse_feedback("bbgbg")))
    assert s.candidates() == ["slate", "plate"]
    assert s.mask().tolist() == [0, 1, 1, 0, 0]
    assert s.candidate_indices() == [1, 2]
    assert s.undo()
    assert s.candidates() == WORDS
    assert s.undo() is False


def test_word_limit_caps_display_only():
    s = _make_session(word_limit=2)
    assert s.visible_candidates() == ["crane", "slate"]
    assert s.has_more()
    s.add_row(GuessRow.from_word("crane", parse_feedback("bbgbg")))
    assert s.visible_candidates() == ["slate", "plate"]
    assert not s.has_more()


def test_grid_edits_are_picked_up():
    s = _make_session()
    s.grid.fill_suggestion("crane")
    # all gray: nothing with C, R, A, N or E survives
    assert s.candidates() == []
    s.grid.set_state(0, 2, LetterState.CORRECT)
    s.grid.set_state(0, 4, LetterState.CORRECT)
    assert s.candidates() == ["slate", "plate"]
    s.reset()
    assert s.candidates() == WORDS


def test_add_row_when_grid_full():
    s = _make_session(max_rows=1)
    s.add_row(GuessRow.from_word("crane", parse_feedback("bbbbb")))
    with pytest.raises(ValueError):
        s.add_row(GuessRow.from_word("slate", parse_feedback("bbbbb")))


def test_conflicting_greens_are_logged_and_later_one_wins(caplog):
    s = SolverSession(WordVocab(["abbey", "flaky", "fling"]))
    s.add_row(GuessRow.from_word("abcde", parse_feedback("gbbbb")))
    s.add_row(GuessRow.from_word("fghij", parse_feedback("gbbbb")))
    with caplog.at_level(logging.WARNING, logger="wsolver.session"):
        assert s.candidates() == ["flaky"]
    assert "same position" in caplog.text


def test_session_needs_a_vocab():
    with pytest.raises(TypeError):
        SolverSession(list(WORDS))


def test_config_validation(tmp_path):
    with pytest.raises(ValueError):
        SolverConfig(word_limit=0)
    with pytest.raises(ValueError):
        SolverConfig(max_rows=-1)
    assert SolverConfig(data_dir=tmp_path).word_list_path == tmp_path / "wordlist.txt"
    assert SolverConfig(data_dir=str(tmp_path), use_common_words=True).word_list_path == tmp_path / "common.txt"


def test_precomputed_constraints_give_same_answer():
    s = _make_session(word_limit=1)
    s.add_row(GuessRow.from_word("crane", parse_feedback("bbgbg")))
    cs = s.constraints()
    found = s.candidates(cs)
    assert found == s.candidates()
    assert s.visible_candidates(found) == ["slate"]
    assert s.has_more(found)
    assert s.mask(cs).dtype.name == "int8"
