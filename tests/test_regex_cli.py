import pytest

from zerokit.regex_cli import main, match_file, match_lines
from zerokit.regex_parser import ParseError


def test_match_lines_keeps_lines_matching_anywhere():
    lines = ["xxabc", "def", "", "ab", "abcabc"]
    assert list(match_lines("abc", lines)) == ["xxabc", "abcabc"]


def test_match_lines_result_is_subset_in_order():
    lines = ["cd", "zzab", "q", "abcd", "dc"]
    result = list(match_lines("(ab|cd)+", lines))
    assert result == [line for line in lines if line in result]
    assert "q" not in result and "dc" not in result


def test_match_lines_propagates_parse_error():
    with pytest.raises(ParseError):
        list(match_lines("*a", ["aaa"]))


def test_match_file_strips_line_endings(tmp_path):
    target = tmp_path / "input.txt"
    target.write_bytes(b"hello\r\nworld\nyellow\n")
    assert match_file("ll", target) == ["hello", "yellow"]


def test_main_prints_listing_and_matches(tmp_path, capsys):
    target = tmp_path / "input.txt"
    target.write_text("apple\nbanana\ncherry\n", encoding="utf-8")
    assert main(["an", str(target)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "expr: an"
    assert "banana" in out
    assert "apple" not in out and "cherry" not in out


def test_main_requires_two_arguments(capsys):
    assert main(["abc"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_reports_bad_expression(tmp_path, capsys):
    target = tmp_path / "input.txt"
    target.write_text("abc\n", encoding="utf-8")
    assert main(["abc)", str(target)]) == 1
    assert "invalid right parenthesis" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path, capsys):
    assert main(["abc", str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().out == ""