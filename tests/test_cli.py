"""Tests for the command line front end."""

import io
import json

import pytest

from exifbridge import cli
from exifbridge.cli import format_output, main


@pytest.fixture(autouse=True)
def log_levels(monkeypatch):
    """Keep main() from replacing the loguru sinks of the test session."""

    levels = []
    monkeypatch.setattr(cli, "init_logging", lambda level: levels.append(level))
    return levels


GROUPS = {
    "Exif": {"Make": "Canon", "FNumber": "f/2.8"},
    "GPS": {"GPSLatitudeRef": "North"},
}


def test_format_output_text():
    assert format_output(GROUPS) == (
        "[Exif]\n"
        "FNumber: f/2.8\n"
        "Make: Canon\n"
        "\n"
        "[GPS]\n"
        "GPSLatitudeRef: North"
    )


def test_format_output_json():
    assert json.loads(format_output(GROUPS, "json")) == GROUPS


def test_format_output_csv_escapes_quotes():
    output = format_output({"Exif": {"UserComment": 'say "hi"'}}, "csv")

    assert output.splitlines() == ["Group,Tag,Value", '"Exif","UserComment","say ""hi"""']


def test_format_output_empty():
    assert format_output({}) == ""


def test_main_reads_file(tmp_path, capsys, log_levels):
    source = tmp_path / "attributes.json"
    source.write_text(json.dumps({"FNumber": "28/10", "GPSLatitudeRef": "N"}), encoding="utf-8")

    assert main([str(source), "--log-level", "DEBUG"]) == 0

    out = capsys.readouterr().out
    assert "[Exif]" in out
    assert "FNumber: f/2.8" in out
    assert "GPSLatitudeRef: North" in out
    assert log_levels == ["DEBUG"]


def test_main_group_and_json(tmp_path, capsys):
    source = tmp_path / "attributes.json"
    source.write_text(json.dumps({"Make": "Canon", "GPSLatitudeRef": "S"}), encoding="utf-8")

    assert main([str(source), "--group", "GPS", "--format", "json"]) == 0

    assert json.loads(capsys.readouterr().out) == {"GPS": {"GPSLatitudeRef": "South"}}


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"Orientation": "6"}'))

    assert main(["-"]) == 0

    assert "Orientation: Rotate 90 CW" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1

    assert capsys.readouterr().err.startswith("Error: ")


def test_main_invalid_document(tmp_path, capsys):
    source = tmp_path / "attributes.json"
    source.write_text("[1, 2]", encoding="utf-8")

    assert main([str(source)]) == 1

    assert "Expected a JSON object" in capsys.readouterr().err


def test_main_rejects_unknown_group(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "a.json"), "--group", "IPTC"])


def test_main_invalid_utf8_file(tmp_path, capsys):
    source = tmp_path / "attributes.json"
    source.write_bytes(b'{"Make": "\xff\xfe"}')

    assert main([str(source)]) == 1

    assert capsys.readouterr().err.startswith("Error: Source is not valid UTF-8")


def test_main_rejects_unknown_log_level(tmp_path, log_levels):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "a.json"), "--log-level", "LOUD"])

    assert log_levels == []


def test_main_log_level_is_case_insensitive(tmp_path, log_levels):
    source = tmp_path / "attributes.json"
    source.write_text("{}", encoding="utf-8")

    assert main([str(source), "--log-level", "debug"]) == 0

    assert log_levels == ["DEBUG"]
