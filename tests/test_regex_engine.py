import pytest

from zerokit.regex_engine import describe, do_matching
from zerokit.regex_parser import ParseError


@pytest.mark.parametrize("expr", ["+b", "*b", "|b", "?b"])
def test_parse_errors(expr):
    with pytest.raises(ParseError):
        do_matching(expr, "bbb", True)


@pytest.mark.parametrize(
    "expr, line",
    [
        ("abc|def", "def"),
        ("(abc)*", "abcabc"),
        ("(ab|cd)+", "abcdcd"),
        ("abc?", "ab"),
        ("((((a*)*)*)*)", "aaaaaaaaa"),
        ("(a*)*b", "aaaaaaaaab"),
        ("(a*)*b", "b"),
        ("a**b", "aaaaaaaaab"),
        ("a**b", "b"),
    ],
)
def test_matching_succeeds(expr, line):
    assert do_matching(expr, line, True) is True


@pytest.mark.parametrize(
    "expr, line",
    [
        ("abc|def", "efa"),
        ("(ab|cd)+", ""),
        ("abc?", "acb"),
    ],
)
def test_matching_fails(expr, line):
    assert do_matching(expr, line, True) is False


@pytest.mark.parametrize(
    "expr, line",
    [
        ("a?a?aa", "aa"),
        ("a?a?a?a?aaaa", "aaaa"),
        ("a?a?a?a?a?a?aaaaaa", "aaaaaa"),
        ("a?a?a?a?a?a?a?a?aaaaaaaa", "aaaaaaaa"),
        ("a?a?a?a?a?a?a?a?a?a?aaaaaaaaaa", "aaaaaaaaaa"),
    ],
)
@pytest.mark.parametrize("is_depth", [True, False])
def test_benchmark_inputs_match(expr, line, is_depth):
    assert do_matching(expr, line, is_depth) is True


@pytest.mark.parametrize(
    "expr, line",
    [
        ("abc|def", "def"),
        ("abc|def", "efa"),
        ("(abc)*", "abcabc"),
        ("(ab|cd)+", "abcdcd"),
        ("(ab|cd)+", ""),
        ("abc?", "ab"),
        ("abc?", "acb"),
    ],
)
def test_depth_and_width_agree(expr, line):
    assert do_matching(expr, line, True) == do_matching(expr, line, False)


def test_describe_listing():
    lines = describe("abc").splitlines()
    assert lines[0] == "expr: abc"
    assert lines[1].startswith("AST: ")
    assert lines[3] == "code:"
    assert lines[4:] == [
        "0000: char a",
        "0001: char b",
        "0002: char c",
        "0003: match",
    ]


def test_describe_invalid_expression():
    with pytest.raises(ParseError):
        describe("abc)")