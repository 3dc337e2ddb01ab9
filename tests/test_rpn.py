import pytest

from zerokit.rpn import U64_MAX, Add, Mul, Num, ParseError, evaluate, main, parse, parse_expr


def test_parse_addition_structure():
    assert parse("+ 1 2") == Add(Num(1), Num(2))


def test_parse_nested_structure():
    assert parse("* + 1 2 3") == Mul(Add(Num(1), Num(2)), Num(3))


def test_parse_expr_returns_rest():
    assert parse_expr("12 rest") == (Num(12), " rest")


def test_leading_spaces_are_skipped():
    assert parse("   7") == Num(7)


def test_evaluate_nested():
    assert evaluate(parse("* + 1 2 3")) == 9


@pytest.mark.parametrize("a,b", [(0, 5), (3, 4), (10, 25)])
def test_addition_and_multiplication_commute(a, b):
    assert evaluate(parse(f"+ {a} {b}")) == evaluate(parse(f"+ {b} {a}"))
    assert evaluate(parse(f"* {a} {b}")) == evaluate(parse(f"* {b} {a}"))


@pytest.mark.parametrize("n", [0, 1, 42, U64_MAX])
def test_identities(n):
    assert evaluate(parse(f"* {n} 1")) == n
    assert evaluate(parse(f"+ {n} 0")) == n


def test_largest_number_parses():
    assert parse(str(U64_MAX)) == Num(U64_MAX)


@pytest.mark.parametrize("text", ["", "abc", "+ 1", "- 1 2", str(U64_MAX + 1)])
def test_parse_errors(text):
    with pytest.raises(ParseError):
        parse(text)


def test_evaluate_overflow():
    with pytest.raises(OverflowError):
        evaluate(Mul(Num(U64_MAX), Num(2)))


def test_main_reads_until_end_of_input(monkeypatch, capsys):
    lines = iter(["+", "+ 1 2"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "result: 3" in out
    assert repr(Add(Num(1), Num(2))) in out