import io

from navipanel.bulk_rename import (
    HEADER_LINES,
    RenameOutcome,
    apply_renames,
    parse_rename_list,
    write_rename_list,
)


def test_write_rename_list_format():
    buffer = io.StringIO()
    write_rename_list(["/a/one.txt", "/b/two.png"], buffer)
    lines = buffer.getvalue().splitlines()
    assert lines[0] == "# This is a comment line"
    assert lines[: len(HEADER_LINES)] == list(HEADER_LINES)
    assert lines[-2:] == ["/a/one.txt -> ", "/b/two.png -> "]


def test_unedited_list_parses_to_nothing():
    buffer = io.StringIO()
    write_rename_list(["/a/one.txt", "/b/two.png"], buffer)
    assert list(parse_rename_list(buffer.getvalue().splitlines())) == []


def test_edited_list_round_trip():
    buffer = io.StringIO()
    write_rename_list(["/a/one.txt", "/b/two.png"], buffer)
    edited = buffer.getvalue().replace("/a/one.txt -> ", "/a/one.txt -> uno.txt")
    pairs = list(parse_rename_list(io.StringIO(edited)))
    assert pairs == [("/a/one.txt", "uno.txt")]


def test_parse_skips_comments_and_malformed_lines():
    lines = [
        "# /x -> y",
        "no arrow here",
        "/p/a -> b -> c",
        "",
        "  /p/keep.txt  ->   kept.txt  ",
    ]
    assert list(parse_rename_list(lines)) == [("/p/keep.txt", "kept.txt")]


def test_apply_renames_moves_files(tmp_path):
    first = tmp_path / "first.txt"
    first.write_text("1")
    outcomes = apply_renames([(str(first), "renamed.txt")])
    assert len(outcomes) == 1
    assert outcomes[0].succeeded
    assert outcomes[0].destination == str(tmp_path) + "/renamed.txt"
    assert not first.exists()
    assert (tmp_path / "renamed.txt").read_text() == "1"


def test_apply_renames_refuses_overwrite(tmp_path):
    source = tmp_path / "a.txt"
    source.write_text("a")
    existing = tmp_path / "b.txt"
    existing.write_text("b")
    (outcome,) = apply_renames([(str(source), "b.txt")])
    assert not outcome.succeeded
    assert source.read_text() == "a"
    assert existing.read_text() == "b"


def test_apply_renames_reports_missing_source(tmp_path):
    (outcome,) = apply_renames([(str(tmp_path / "ghost.txt"), "real.txt")])
    assert outcome.succeeded is False
    assert outcome.error


def test_apply_renames_continues_after_failure(tmp_path):
    good = tmp_path / "good.txt"
    good.write_text("g")
    outcomes = apply_renames(
        [(str(tmp_path / "ghost.txt"), "x.txt"), (str(good), "better.txt")]
    )
    assert [o.succeeded for o in outcomes] == [False, True]
    assert (tmp_path / "better.txt").exists()


def test_outcome_succeeded_property():
    assert RenameOutcome("a", "b").succeeded is True
    assert RenameOutcome("a", "b", "failed").succeeded is False