import os

import pytest

from navipanel.properties import (
    FolderInfo,
    describe_item,
    folder_info,
    format_data_size,
    item_property,
)


def test_format_zero():
    assert format_data_size(0) == "0 bytes"


def test_format_kib():
    assert format_data_size(1536) == "1.50 KiB"


def test_format_mib():
    assert format_data_size(1024 * 1024) == "1.00 MiB"


def test_format_below_kib_keeps_bytes_unit():
    assert format_data_size(1023).endswith(" bytes")
    assert format_data_size(1023).startswith("1023")


def test_item_property_file(tmp_path):
    f = tmp_path / "note.txt"
    f.write_text("abc")
    prop = item_property(f)
    assert prop.name == "note.txt"
    assert prop.size == format_data_size(3)


def test_item_property_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        item_property(tmp_path / "missing")


def test_folder_info_counts_nested_files(tmp_path):
    (tmp_path / "a").write_bytes(b"123")
    (tmp_path / "d").mkdir()
    (tmp_path / "d" / "b").write_bytes(b"12345")
    assert folder_info(tmp_path) == FolderInfo(2, 8)


def test_folder_info_empty(tmp_path):
    assert folder_info(tmp_path) == FolderInfo(0, 0)


def test_describe_file_rows(tmp_path):
    f = tmp_path / "data.bin"
    f.write_bytes(b"xy")
    rows = describe_item(f)
    assert list(rows) == [
        "Name", "Type", "Size", "Last modified", "Path", "Permissions", "Mime Type",
    ]
    assert rows["Type"] == "File"
    assert rows["Path"] == str(f)
    assert rows["Size"] == format_data_size(2)
    assert rows["Permissions"].startswith("-")


def test_describe_directory_rows(tmp_path):
    d = tmp_path / "folder"
    d.mkdir()
    (d / "x").write_bytes(b"1")
    rows = describe_item(d)
    assert rows["Type"] == "Directory"
    assert rows["Total files"] == "1"
    assert rows["Mime Type"] == item_property(d).mime_name
    assert rows["Permissions"].startswith("d")


def test_describe_symlink_file(tmp_path):
    f = tmp_path / "real.txt"
    f.write_text("r")
    link = tmp_path / "alias"
    os.symlink(f, link)
    rows = describe_item(link)
    assert rows["Type"] == "Symbolic Link File"
    assert rows["Target"] == str(f)
    assert rows["Symlink"] == str(link)
    assert "Path" not in rows


def test_describe_broken_symlink_is_empty(tmp_path):
    link = tmp_path / "dangling"
    os.symlink(tmp_path / "gone", link)
    assert describe_item(link) == {}