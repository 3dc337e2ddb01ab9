"""Front end of the regular-expression engine: parse, compile and match."""

from __future__ import annotations

from zerokit.regex_codegen import get_code
from zerokit.regex_eval import evaluate
from zerokit.regex_parser import parse


def describe(expr: str) -> str:
    """Return a listing of the AST and the instruction code for ``expr``.

    Raises the parser's or code generator's error if ``expr`` is invalid.
    """
    ast = parse(expr)
    code = get_code(ast)
    lines = [f"expr: {expr}", f"AST: {ast!r}", "", "code:"]
    lines.extend(f"{n:04d}: {inst}" for n, inst in enumerate(code))
    return "\n".join(lines)


def do_matching(expr: str, line: str, is_depth: bool) -> bool:
    """Return whether ``line`` matches ``expr`` from its first character.

    ``is_depth`` selects depth-first search; otherwise the queue-driven
    evaluator is used. Invalid expressions raise the parser's
    :class:`~zerokit.regex_parser.ParseError`; failures while compiling or
    running raise the corresponding error of those stages.
    """
    ast = parse(expr)
    code = get_code(ast)
    return evaluate(code, line, is_depth)