import pytest

from navipanel.desktop_file import DesktopFile, load_desktop_file, parse_desktop_entry

SAMPLE = """\
[Desktop Entry]
Name=Viewer
GenericName=Image Viewer
Exec=viewer %f
Icon=viewer-icon
Type=Application
NoDisplay=false
Terminal=true
Categories=Graphics; Viewer;
MimeType=image/png;image/jpeg;

[Desktop Action New]
Name=New Window
Exec=viewer --new
"""


def test_parse_reads_only_requested_group():
    entry = parse_desktop_entry(SAMPLE, "Desktop Entry")
    assert entry["Name"] == "Viewer"
    assert entry["Exec"] == "viewer %f"


def test_parse_other_group():
    entry = parse_desktop_entry(SAMPLE, "Desktop Action New")
    assert entry == {"Name": "New Window", "Exec": "viewer --new"}


def test_parse_empty_group_reads_everything():
    entry = parse_desktop_entry(SAMPLE, "")
    assert entry["Name"] == "New Window"
    assert entry["Icon"] == "viewer-icon"


def test_value_keeps_later_equals_signs():
    entry = parse_desktop_entry("[Desktop Entry]\nExec=run --opt=1\n", "Desktop Entry")
    assert entry["Exec"] == "run --opt=1"


def test_lines_before_group_ignored():
    entry = parse_desktop_entry("Name=Stray\n[Desktop Entry]\nIcon=i\n", "Desktop Entry")
    assert "Name" not in entry
    assert entry["Icon"] == "i"


def test_load_fields(tmp_path):
    path = tmp_path / "viewer.desktop"
    path.write_text(SAMPLE)
    desktop = load_desktop_file(path)
    assert desktop.name == "Viewer"
    assert desktop.generic_name == "Image Viewer"
    assert desktop.icon == "viewer-icon"
    assert desktop.type == "Application"
    assert desktop.no_display is False
    assert desktop.terminal is True
    assert desktop.categories == ["Graphics", "Viewer"]
    assert desktop.mime_types == ["image/png", "image/jpeg"]
    assert desktop.file_name == str(path)


def test_pure_file_name(tmp_path):
    path = tmp_path / "viewer.desktop"
    path.write_text(SAMPLE)
    assert load_desktop_file(path).pure_file_name() == "viewer"


def test_missing_keys_default():
    desktop = DesktopFile.from_entry("x.desktop", {})
    assert desktop.name == ""
    assert desktop.terminal is False
    assert desktop.categories == []


@pytest.mark.parametrize("raw", ["0", "FALSE", ""])
def test_false_values(raw):
    desktop = DesktopFile.from_entry("x.desktop", {"Terminal": raw})
    assert desktop.terminal is False


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_desktop_file(tmp_path / "absent.desktop")