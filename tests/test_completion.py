import pytest

from navipanel.completion import CompletionList, apply_completion


@pytest.fixture
def completions():
    items = CompletionList(True)
    items.set_completions(["copy", "cut", "Chmod", "delete"])
    return items


def test_apply_completion_without_space():
    assert apply_completion("co", "copy") == "copy "


def test_apply_completion_replaces_last_word():
    assert apply_completion("open co", "copy") == "open copy "


def test_empty_filter_shows_all(completions):
    assert completions.filter("") == completions.completions()


def test_filter_is_substring(completions):
    result = completions.filter("c")
    assert result == ["copy", "cut"]
    assert all("c" in item for item in result)


def test_filter_case_insensitive():
    items = CompletionList(False)
    items.set_completions(["copy", "Chmod"])
    assert items.filter("C") == ["copy", "Chmod"]


def test_no_selection_initially(completions):
    completions.filter("")
    assert completions.current() is None
    assert completions.accept("x") == "x"


def test_move_down_and_up(completions):
    completions.filter("")
    completions.move_down()
    assert completions.current() == "copy"
    completions.move_down()
    assert completions.current() == "cut"
    completions.move_up()
    assert completions.current() == "copy"
    completions.move_up()
    assert completions.current() == "copy"


def test_move_down_stops_at_end(completions):
    matches = completions.filter("c")
    for _ in range(len(matches) + 3):
        completions.move_down()
    assert completions.current() == matches[-1]


def test_move_up_without_selection_keeps_none(completions):
    completions.move_up()
    assert completions.current() is None


def test_accept_applies_current(completions):
    completions.filter("de")
    completions.move_down()
    assert completions.accept("rm de") == apply_completion("rm de", "delete")


def test_set_completions_keeps_filter(completions):
    completions.filter("x")
    completions.set_completions(["xa", "b", "xc"])
    assert completions.matches == ["xa", "xc"]
    assert completions.total == 3


def test_filter_resets_selection(completions):
    completions.filter("")
    completions.move_down()
    completions.filter("cu")
    assert completions.current() is None