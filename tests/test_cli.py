"""Tests for cli.py and commands.py — argparse, global flags, command dispatch."""

import io
import json

import pytest

from termutil import config, console
from termutil.cli import _emit_cli_error, _extract_global_flags, build_parser, main
from termutil.commands import parse_table_input
from termutil.exceptions import CliError


@pytest.fixture
def no_terminal(monkeypatch):
    monkeypatch.setattr(console, "_terminal_size", lambda: None)
    for name in ("COLUMNS", "LINES", "ROWS"):
        monkeypatch.delenv(name, raising=False)


def run(argv):
    """Run main() and return its exit code (0 when it returns normally)."""
    try:
        main(argv)
    except SystemExit as e:
        return e.code
    return 0


# ---------------------------------------------------------------------------
# _extract_global_flags
# ---------------------------------------------------------------------------


class TestExtractGlobalFlags:
    def test_no_flags(self):
        quiet, remaining = _extract_global_flags(["size"])
        assert quiet is False
        assert remaining == ["size"]

    def test_quiet_anywhere(self):
        quiet, remaining = _extract_global_flags(["table", "-q", "data.json"])
        assert quiet is True
        assert remaining == ["table", "data.json"]

    def test_version_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _extract_global_flags(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out == f"termutil {config.VERSION}\n"


# ---------------------------------------------------------------------------
# build_parser
# ---------------------------------------------------------------------------


class TestBuildParser:
    def test_table_options(self):
        ns = build_parser().parse_args(["table", "d.json", "--variable-width", "--unicode"])
        assert ns.file == "d.json"
        assert ns.variable_width is True
        assert ns.unicode is True
        assert ns.min_width is None

    def test_widths_validated(self):
        with pytest.raises(CliError):
            build_parser().parse_args(["table", "--widths", "3,x"])

    def test_negative_min_width_rejected(self):
        with pytest.raises(CliError):
            build_parser().parse_args(["table", "--min-width", "-1"])

    def test_wrap_width_must_be_positive(self):
        with pytest.raises(CliError):
            build_parser().parse_args(["wrap", "--width", "0"])

    def test_rgb_and_hsv_exclusive(self):
        with pytest.raises(CliError):
            build_parser().parse_args(["color", "--rgb", "1", "2", "3", "--hsv", "0", "1", "1"])

    def test_unknown_command(self):
        with pytest.raises(CliError):
            build_parser().parse_args(["frobnicate"])


# ---------------------------------------------------------------------------
# parse_table_input
# ---------------------------------------------------------------------------


class TestParseTableInput:
    def test_columns_object(self):
        assert parse_table_input('{"a": [1, 2]}') == ({"a": [1, 2]}, None)

    def test_rows_array(self):
        assert parse_table_input("[[1, 2], [3]]") == ([[1, 2], [3]], None)

    def test_records(self):
        data, header = parse_table_input('[{"a": 1}, {"a": 2, "b": 3}]')
        assert data == {"a": [1, 2], "b": [None, 3]}
        assert header is None

    def test_csv_with_header(self):
        data, header = parse_table_input("x,y\n1,2\n", use_csv=True)
        assert header == ["x", "y"]
        assert data == [["1", "2"]]

    def test_csv_without_header(self):
        data, header = parse_table_input("1,2\n", use_csv=True, csv_header=False)
        assert data == [["1", "2"]]
        assert header is None

    def test_invalid_json(self):
        with pytest.raises(CliError, match="Invalid JSON in table input"):
            parse_table_input("{nope")

    def test_scalar_json_rejected(self):
        with pytest.raises(CliError, match="Table JSON must be"):
            parse_table_input("42")


# ---------------------------------------------------------------------------
# main / commands
# ---------------------------------------------------------------------------


class TestMain:
    def test_no_args_prints_help(self, capsys):
        assert run([]) == 0
        assert "Usage: termutil" in capsys.readouterr().out

    def test_help_flag(self, capsys):
        assert run(["--help"]) == 0
        assert "Commands:" in capsys.readouterr().out

    def test_version_command(self, capsys):
        assert run(["version"]) == 0
        assert capsys.readouterr().out.strip() == "termutil 0.3.0"

    def test_cli_error_exit_code(self, capsys):
        assert run(["frobnicate"]) == 1
        assert capsys.readouterr().err.startswith("[ERROR]")

    def test_emit_cli_error_adds_tag(self, capsys):
        _emit_cli_error(CliError("plain message"))
        assert capsys.readouterr().err == "[ERROR] plain message\n"


class TestTableCommand:
    def test_json_file(self, tmp_path, capsys, plain):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"a": [11, 37, 7], "b": [22, 27, "z"], "c": [333, 17]}))
        assert run(["table", str(path)]) == 0
        lines = plain(capsys.readouterr().out).splitlines()
        assert lines[0] == "  a  |  b  |  c  "
        assert lines[-1] == " 7   | z   |     "

    def test_stdin(self, monkeypatch, capsys, plain):
        monkeypatch.setattr("sys.stdin", io.StringIO("[[1, 2]]"))
        assert run(["table", "--no-header"]) == 0
        assert plain(capsys.readouterr().out) == " 1 | 2 \n"

    def test_csv_and_title(self, tmp_path, capsys, plain):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n1,2\n")
        assert run(["table", str(path), "--csv", "--title", "Results"]) == 0
        lines = plain(capsys.readouterr().out).splitlines()
        assert lines[0].strip() == "Results"
        assert lines[-1] == " 1  | 2  "

    def test_header_option(self, tmp_path, capsys, plain):
        path = tmp_path / "data.json"
        path.write_text("[[1, 2]]")
        assert run(["table", str(path), "--header", "left, right"]) == 0
        header = plain(capsys.readouterr().out).splitlines()[0]
        assert [h.strip() for h in header.split("|")] == ["left", "right"]

    def test_widths_option(self, tmp_path, capsys, plain):
        path = tmp_path / "data.json"
        path.write_text("[[1, 2]]")
        assert run(["table", str(path), "--no-header", "--widths", "5,3"]) == 0
        assert plain(capsys.readouterr().out) == " 1   | 2 \n"

    def test_unicode_from_config(self, tmp_path, monkeypatch, capsys, plain):
        monkeypatch.setattr(config, "UNICODE_BORDERS", True)
        path = tmp_path / "data.json"
        path.write_text("[[1, 2]]")
        assert run(["table", str(path), "--no-header"]) == 0
        assert "│" in plain(capsys.readouterr().out)

    def test_empty_input_warns(self, tmp_path, capsys):
        path = tmp_path / "data.json"
        path.write_text("[]")
        assert run(["table", str(path)]) == 0
        assert "[WARN] Table input has no rows." in capsys.readouterr().err

    def test_quiet_silences_warning(self, tmp_path, capsys):
        path = tmp_path / "data.json"
        path.write_text("[]")
        assert run(["table", str(path), "--quiet"]) == 0
        assert capsys.readouterr().err == ""

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "data.json"
        path.write_text("{broken")
        assert run(["table", str(path)]) == 1
        assert "Invalid JSON in table input" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert run(["table", str(tmp_path / "missing.json")]) == 1
        assert "[ERROR] Cannot read" in capsys.readouterr().err


class TestTextCommands:
    def test_strip(self, tmp_path, capsys):
        path = tmp_path / "colored.txt"
        path.write_text("\033[1;31mred\033[0m text\n")
        assert run(["strip", str(path)]) == 0
        assert capsys.readouterr().out == "red text\n"

    def test_center(self, capsys):
        assert run(["center", "hi", "6"]) == 0
        assert capsys.readouterr().out == "  hi  \n"

    def test_center_explicit_zero_width(self, no_terminal, capsys):
        assert run(["center", "hi", "0"]) == 0
        assert capsys.readouterr().out == "hi\n"

    def test_center_terminal_width(self, no_terminal, capsys):
        assert run(["center", "hi"]) == 0
        assert len(capsys.readouterr().out.rstrip("\n")) == 80

    def test_wrap(self, tmp_path, capsys):
        path = tmp_path / "words.txt"
        path.write_text("aaa bbb ccc")
        assert run(["wrap", str(path), "--width", "8"]) == 0
        assert capsys.readouterr().out == "aaa bbb\nccc\n"

    def test_size(self, no_terminal, capsys):
        assert run(["size"]) == 0
        assert capsys.readouterr().out == "80x25\n"


class TestColorCommand:
    def test_rgb(self, capsys):
        assert run(["color", "--rgb", "255", "0", "0"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("\033[38;5;196m")
        assert "rgb(255, 0, 0)" in out
        assert "palette 196" in out

    def test_truecolor_fallback_background(self, capsys):
        assert run(["color", "--rgb", "1", "2", "3", "--truecolor", "--fallback", "--background"]) == 0
        assert "\033[48;2;1;2;3m" in capsys.readouterr().out

    def test_hsv(self, capsys):
        assert run(["color", "--hsv", "0.5", "1", "1", "--truecolor"]) == 0
        assert "\033[38;2;0;255;255m" in capsys.readouterr().out

    def test_requires_a_color(self, capsys):
        assert run(["color"]) == 1
        assert "Give a color" in capsys.readouterr().err


class TestSyntaxCommand:
    def test_guesses_language(self, tmp_path, capsys, plain):
        path = tmp_path / "demo.py"
        path.write_text("def demo():\n    return 1\n")
        assert run(["syntax", str(path)]) == 0
        out = capsys.readouterr().out
        assert "\033[" in out
        assert "return 1" in plain(out)

    def test_explicit_language(self, tmp_path, capsys, plain):
        path = tmp_path / "demo.txt"
        path.write_text('{"a": 1}\n')
        assert run(["syntax", str(path), "--language", "json"]) == 0
        assert '"a"' in plain(capsys.readouterr().out)
