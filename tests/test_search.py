import re

import pytest

from navipanel.search import SearchState, match_names

NAMES = ["alpha.txt", "Beta.png", "gamma.txt", "delta.md", "ALPHABET"]


def test_contains_ignores_case():
    assert match_names(NAMES, "alpha") == [0, 4]


def test_contains_no_match():
    assert match_names(NAMES, "zzz") == []


def test_empty_text_matches_everything():
    assert match_names(NAMES, "") == list(range(len(NAMES)))


def test_regex_search_unanchored():
    assert match_names(NAMES, r"\.txt$", regex=True) == [0, 2]


def test_regex_ignores_case():
    assert match_names(NAMES, "^beta", regex=True) == [1]


def test_plain_text_is_not_a_pattern():
    assert match_names(["a.b", "axb"], ".", regex=False) == [0]


def test_bad_regex_raises():
    with pytest.raises(re.error):
        match_names(NAMES, "(", regex=True)


def test_search_selects_first_match():
    state = SearchState()
    assert state.search(NAMES, "txt") == 0
    assert state.index == 0
    assert state.count == 2
    assert state.text == "txt"
    assert state.stale is False


def test_next_wraps_to_top():
    state = SearchState()
    state.search(NAMES, "txt")
    assert state.next() == 2
    assert state.wrapped is False
    assert state.next() == 0
    assert state.wrapped is True


def test_prev_wraps_to_bottom():
    state = SearchState()
    state.search(NAMES, "a")
    last = state.matches[-1]
    assert state.prev() == last
    assert state.wrapped is True
    assert state.index == state.count - 1


def test_next_then_prev_round_trip():
    state = SearchState()
    first = state.search(NAMES, "a")
    state.next()
    assert state.prev() == first


def test_no_match_keeps_previous_text():
    state = SearchState()
    state.search(NAMES, "txt")
    assert state.search(NAMES, "nothing") is None
    assert state.text == "txt"
    with pytest.raises(LookupError):
        state.next()


def test_prev_without_search_raises():
    with pytest.raises(LookupError):
        SearchState().prev()


def test_reset_keeps_text_and_marks_stale():
    state = SearchState()
    state.search(NAMES, "delta", regex=True)
    state.reset()
    assert state.stale is True
    assert state.text == "delta"
    assert state.regex is True
    assert state.count == 0
    with pytest.raises(LookupError):
        state.next()