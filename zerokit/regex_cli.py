"""Command that prints the lines of a file matching a regular expression."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from zerokit.regex_codegen import CodeGenError
from zerokit.regex_engine import describe, do_matching
from zerokit.regex_eval import EvalError
from zerokit.regex_parser import ParseError

_PROG = "zerokit-regex"


def match_lines(expr: str, lines: Iterable[str]) -> Iterator[str]:
    """Yield the lines in which ``expr`` matches starting at some character."""
    for line in lines:
        if any(do_matching(expr, line[i:], True) for i in range(len(line))):
            yield line


def _read_lines(path: Path) -> Iterator[str]:
    with path.open(encoding="utf-8") as handle:
        for raw in handle:
            line = raw[:-1] if raw.endswith("\n") else raw
            yield line[:-1] if line.endswith("\r") else line


def match_file(expr: str, path) -> list:
    """Return the lines of the file at ``path`` that match ``expr``."""
    return list(match_lines(expr, _read_lines(Path(path))))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"usage: {_PROG} regex file", file=sys.stderr)
        return 1

    expr, path = args[0], args[1]
    try:
        lines = _read_lines(Path(path))
        first = next(lines, None)
        listing = describe(expr)
        print(listing)
        print()
        pending = [] if first is None else [first]
        for line in match_lines(expr, _chain(pending, lines)):
            print(line)
    except (OSError, ParseError, CodeGenError, EvalError) as exc:
        print(f"{_PROG}: {exc}", file=sys.stderr)
        return 1
    return 0


def _chain(head: list, tail: Iterator[str]) -> Iterator[str]:
    yield from head
    yield from tail


if __name__ == "__main__":
    sys.exit(main())