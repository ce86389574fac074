# printdiff/tests/test_cli.py
"""Tests for the printdiff command line."""

import json

import pytest

from printdiff.cli import EXIT_DIFFERENT, EXIT_EQUAL, EXIT_ERROR, main


TEXT = "a\nb\nc\nd\ne\nf\ng\nh\n"


@pytest.fixture
def write(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class TestTextFiles:

    def test_different_files(self, write, capsys):
        old = write("old.txt", TEXT)
        new = write("new.txt", TEXT.replace("e\n", "ex\n"))

        assert main([old, new, "--no-color", "--width", "80"]) == EXIT_DIFFERENT

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "2   b", "3   c", "4   d", "-5  e", "+   ex", "6   f", "7   g", "8   h",
        ]

    def test_equal_files(self, write, capsys):
        old = write("old.txt", TEXT)
        new = write("new.txt", TEXT)

        assert main([old, new]) == EXIT_EQUAL
        assert capsys.readouterr().out == ""

    def test_options_forwarded(self, write, capsys):
        old = write("old.txt", TEXT)
        new = write("new.txt", TEXT.replace("e\n", "ex\n"))

        main([old, new, "--no-color", "-C", "0", "--gaps"])

        assert capsys.readouterr().out.splitlines() == ["...", "-5  e", "+   ex", "..."]

    def test_invalid_option_value_ignored(self, write, capsys):
        old = write("old.txt", TEXT)
        new = write("new.txt", TEXT.replace("e\n", "ex\n"))

        assert main([old, new, "--no-color", "--max-chunks", "lots"]) == EXIT_DIFFERENT
        assert len(capsys.readouterr().out.splitlines()) == 8

    def test_missing_file(self, write, tmp_path, capsys):
        old = write("old.txt", TEXT)

        assert main([old, str(tmp_path / "missing.txt")]) == EXIT_ERROR
        assert "printdiff:" in capsys.readouterr().err


class TestStructuredFiles:

    def test_json(self, write, capsys):
        old = write("old.json", json.dumps({"a": 1, "b": [1, 2]}))
        new = write("new.json", json.dumps({"a": 2, "b": [1, 2]}))

        assert main(["--structured", "--no-color", old, new]) == EXIT_DIFFERENT
        assert capsys.readouterr().out == "*   a = 1 -> 2\n"

    def test_yaml_against_json(self, write, capsys):
        old = write("old.json", json.dumps({"a": {"b": True}}))
        new = write("new.yaml", "a:\n  b: false\n")

        assert main(["-s", "--no-color", old, new]) == EXIT_DIFFERENT
        assert capsys.readouterr().out == "*   a.b = True -> False\n"

    def test_unparseable_input(self, write, capsys):
        old = write("old.json", "{not json")
        new = write("new.json", "{}")

        assert main(["-s", old, new]) == EXIT_ERROR
        assert "cannot parse input" in capsys.readouterr().err


class TestUndecodableInput:

    def test_invalid_utf8(self, tmp_path, write, capsys):
        old = tmp_path / "old.txt"
        old.write_bytes(b"\xff\xfe bad\n")
        new = write("new.txt", "fine\n")

        assert main([str(old), new]) == EXIT_ERROR
        assert "cannot decode input" in capsys.readouterr().err


class TestFinalNewline:

    def test_missing_final_newline_is_a_difference(self, write, capsys):
        old = write("old.txt", "a")
        new = write("new.txt", "a\n")

        assert main([old, new, "--no-color"]) == EXIT_DIFFERENT
        assert "newline added at end of text" in capsys.readouterr().out
