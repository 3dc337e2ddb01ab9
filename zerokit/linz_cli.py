"""Command that parses and type checks a program in the linear language."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from zerokit.linz_parser import ParseError, TypeExpr, parse_expr
from zerokit.linz_typing import TypeEnv, TypingError, typing

_PROG = "zerokit-linz"


def check_source(content: str) -> TypeExpr:
    """Parse ``content`` and return the type of the expression it holds."""
    return typing(parse_expr(content), TypeEnv(), 0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            f"give the name of a source file, for example:\n{_PROG} codes/ex1.lin",
            file=sys.stderr,
        )
        return 1

    try:
        content = Path(args[0]).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"{_PROG}: {exc}", file=sys.stderr)
        return 1

    try:
        ast = parse_expr(content)
    except ParseError as exc:
        print(f"parse error:\n{exc}", file=sys.stderr)
        return 1

    print(f"AST:\n{ast!r}\n")
    print(f"expression:\n{content}")

    try:
        ty = typing(ast, TypeEnv(), 0)
    except TypingError as exc:
        print(f"{_PROG}: {exc}", file=sys.stderr)
        return 1

    print(f"has type\n{ty}")
    return 0


if __name__ == "__main__":
    sys.exit(main())