import numpy as np
import pytest

from wsolver.constraints import aggregate
from wsolver.feedback import parse_feedback, row_for
from wsolver.filters import candidate_mask, filter_candidates, matches
from wsolver.marks import GuessRow, LetterMark, LetterState


def row(word: str, fb: str) -> GuessRow:
    return GuessRow.from_word(word, parse_feedback(fb))


def is_subsequence(short, long) -> bool:
    it = iter(long)
    return all(w in it for w in short)


def test_end_to_end_scenario():
    words = ["CRANE", "SLATE", "PLATE", "GRAPE", "BRAVE"]
    cs = aggregate([row("CRANE", "bbgbg")])
    assert filter_candidates(words, cs) == ["SLATE", "PLATE"]


def test_output_keeps_source_casing_and_order():
    words = ["crane", "Slate", "plate", "GRAPE", "brave"]
    cs = aggregate([row("CRANE", "bbgbg")])
    assert filter_candidates(words, cs) == ["Slate", "plate"]


def test_empty_constraints_return_words_unchanged():
    words = ["zebra", "CRANE", "allot", "smell"]
    assert filter_candidates(words, aggregate([])) == words
    assert filter_candidates(words, aggregate([GuessRow.empty()])) == words


def test_exact_position():
    words = ["HERON", "CARRY", "ROUTE", "BARON", "THREW"]
    got = filter_candidates(words, aggregate([row("BIRDS", "bbgbb")]))
    assert got == ["HERON", "CARRY", "THREW"]
    assert all(w[2] == "R" for w in got)


def test_present_but_misplaced():
    words = ["CLOUD", "DUCTS", "MOUSY", "TOPIC", "SCALE"]
    got = filter_candidates(words, aggregate([row("CRANE", "ybbbb")]))
    assert got == ["DUCTS", "TOPIC"]
    for w in got:
        assert "C" in w and w[0] != "C"


def test_duplicate_letter_exactness():
    # ALLOT with the first L green and the second L gray: exactly one L
    cs = aggregate([row("ALLOT", "ggbyb")])
    assert cs.bounds("L") == (1, 1)
    assert not matches("SMELL", cs)
    assert matches("ALONE", cs)
    assert filter_candidates(["SMELL", "ALLOY", "ALONE"], cs) == ["ALONE"]


def test_gray_duplicate_is_not_treated_as_globally_absent():
    # Only the two L cells filled. Treating the gray L as "no L anywhere" would
    # wipe out every word; the right answer keeps words with exactly one L at 1.
    cells = (LetterMark(), LetterMark("L", LetterState.CORRECT), LetterMark("L", LetterState.ABSENT),
             LetterMark(), LetterMark())
    cs = aggregate([GuessRow(cells)])
    words = ["ALONE", "BLUFF", "ALLOY", "SMELL", "FLAIL"]
    assert filter_candidates(words, cs) == ["ALONE", "BLUFF"]


def test_count_cap_from_yellow_and_gray():
    # SPEED with one yellow E and one gray E: exactly one E, not at 2
    cs = aggregate([row("SPEED", "bbybb")])
    words = ["creep", "ember", "enter", "venom", "plumb", "steel", "below", "melon"]
    assert filter_candidates(words, cs) == ["venom", "below", "melon"]


def test_minimum_count_requires_every_copy():
    cs = aggregate([row("EERIE", "yybbb")])
    # needs two E's, neither at 0 nor 1, and no third E
    assert filter_candidates(["THEME", "TEPEE", "MERGE", "HEDGE"], cs) == ["THEME"]


def test_conflicting_greens_filter_on_the_later_letter():
    cs = aggregate([row("ABCDE", "gbbbb"), row("FGHIJ", "gbbbb")])
    assert filter_candidates(["FLAKY", "ABBEY", "FLING"], cs) == ["FLAKY"]


def test_impossible_counts_match_nothing():
    impossible = aggregate([row("LLAMA", "yybbb"), row("LOYAL", "ybbbb")])
    assert filter_candidates(["HELLO", "ATOLL", "BLOAT"], impossible) == []


def test_answer_is_never_filtered_out():
    answers = ["TOTAL", "EERIE", "SPEED", "ABBEY", "CRANE"]
    guesses = ["ALLOT", "LLAMA", "EMBER", "STEEL", "BOBBY", "TEPEE"]
    for answer in answers:
        history = [row_for(g, answer) for g in guesses]
        assert matches(answer, aggregate(history)), answer


def test_adding_rows_never_grows_the_candidates():
    words = ["total", "stoal", "tonal", "atoll", "allot", "metal", "local", "tidal", "coral"]
    answer = "total"
    history = []
    prev = filter_candidates(words, aggregate(history))
    for guess in ["crane", "allot", "stoal", "total"]:
        history.append(row_for(guess, answer))
        cur = filter_candidates(words, aggregate(history))
        assert is_subsequence(cur, prev)
        assert answer in cur
        prev = cur
    assert prev == ["total"]


def test_candidate_mask_aligns_with_words():
    words = ["CRANE", "SLATE", "PLATE", "GRAPE", "BRAVE"]
    mask = candidate_mask(words, aggregate([row("CRANE", "bbgbg")]))
    assert mask.dtype == np.int8
    assert mask.tolist() == [0, 1, 1, 0, 0]


def test_malformed_words_are_rejected():
    cs = aggregate([])
    with pytest.raises(ValueError):
        filter_candidates(["CRANES"], cs)
    with pytest.raises(ValueError):
        filter_candidates(["CAF3S"], cs)
    with pytest.raises(TypeError):
        filter_candidates([12345], cs)
