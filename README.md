# zerokit

A collection of small, self-contained language tools and worked examples:

- **A regular-expression engine** that parses a pattern into an AST
  (`zerokit.regex_parser`), compiles it into instructions for a tiny virtual
  machine — `char`, `match`, `jump`, `split` — (`zerokit.regex_codegen`) and
  runs them with backtracking (`zerokit.regex_eval`), either by recursive
  depth-first search or with an explicit queue of saved contexts.
  Supported syntax: literal characters, concatenation, `|`, `*`, `+`, `?`,
  grouping with `(...)` and the escapes `\\ \( \) \| \+ \* \?`.
- **A linear type checker** for a small lambda calculus with `lin` and `un`
  qualified values, `let`, `if`, `split`, `free` and function application
  (`zerokit.linz_parser`, `zerokit.linz_typing`).
- **A prefix calculator** for expressions of `+` and `*` over unsigned
  64-bit integers, such as `+ 1 * 2 3` (`zerokit.rpn`).
- **The Ackermann function**, directly recursive and in a tail-call form
  (`zerokit.ackermann`).
- Smaller examples: checked 32-bit multiplication and an `ImaginaryNumber`
  type (`zerokit.basics`), an immutable linked list
  (`zerokit.linked_list`), encoding that list as JSON, YAML and MessagePack
  (`zerokit.list_codec`), a xorshift random generator with a sorting
  benchmark (`zerokit.sort_bench`), and a reader/writer-lock gallery
  simulation (`zerokit.gallery`).

## Installation

```
pip install zerokit
```

To run the test suite:

```
pip install "zerokit[test]"
pytest
```

## Library use

### Regular expressions

```python
from zerokit.regex_engine import describe, do_matching

do_matching("abc|(de|cd)+", "decddede", True)   # True, depth-first search
do_matching("abc|(de|cd)+", "decddede", False)  # True, queue-driven search

print(describe("abc|(de|cd)+"))  # the AST and the numbered instruction listing
```

`do_matching` succeeds when the pattern matches starting at the first
character of the line; the rest of the line may be anything. Malformed
patterns such as `"+b"`, `"*b"`, `"|b"` or `"?b"` raise
`zerokit.regex_parser.ParseError`. Errors while compiling or running raise
`zerokit.regex_codegen.CodeGenError` or `zerokit.regex_eval.EvalError`.

The stages can be used separately: `zerokit.regex_parser.parse(expr)`,
`zerokit.regex_codegen.get_code(ast)` and
`zerokit.regex_eval.evaluate(insts, line, is_depth)`.

`zerokit.regex_cli.match_lines(expr, lines)` yields each line in which the
pattern matches at some position, and `match_file(expr, path)` returns those
lines of a file as a list.

### Linear type checking

```python
from zerokit.linz_cli import check_source
from zerokit.linz_parser import parse_expr
from zerokit.linz_typing import TypeEnv, typing

source = "let x : lin bool = lin true; free x; un true"
str(typing(parse_expr(source), TypeEnv(), 0))  # 'un bool'
str(check_source(source))                      # the same, in one step
```

`parse_expr` turns source text into an expression tree (raising
`zerokit.linz_parser.ParseError` on bad syntax), and `typing` returns its
`TypeExpr` or raises `zerokit.linz_typing.TypingError` — for example when a
`lin` variable is used twice, never consumed, or captured by an `un`
function.

### Prefix calculator

```python
from zerokit.rpn import evaluate, parse

evaluate(parse("+ 1 * 2 3"))  # 7
```

`parse` ignores text after the first complete expression; `parse_expr`
returns the expression together with the unread rest. Results beyond
64 unsigned bits raise `OverflowError`.

### Other modules

```python
from zerokit.ackermann import ackermann, ackermann_tail
from zerokit.basics import ImaginaryNumber, mul, pred
from zerokit.linked_list import LinkedList

ackermann(3, 3)                             # 61
ackermann_tail(3, 3)                        # 61
mul(10, 20)                                 # 200; OverflowError outside 32-bit range
pred(0)                                     # None
str(ImaginaryNumber(3.0, 4.0))              # '3 + 4i'
list(LinkedList().cons(0).cons(1).cons(2))  # [2, 1, 0]
```

`zerokit.list_codec` converts a `LinkedList` to and from JSON (`to_json`,
`from_json`), YAML (`to_yaml`, `from_yaml`, `write_yaml`, `read_yaml`) and
MessagePack (`to_msgpack`, `from_msgpack`). An empty list is stored as
`"Nil"` and a node as `{"Node": {"data": ..., "next": ...}}`; in MessagePack
a node's fields are an array `[data, next]`. Malformed input raises
`ValueError`.

`zerokit.sort_bench.XorShift64(seed)` is a 64-bit xorshift generator;
`randomized_lists(num)`, `single_threaded(num)` and `multi_threaded(num)`
build and time the sorting of two random lists.

`zerokit.gallery.Gallery` holds exhibits behind a read-write lock
(`snapshot()`, `replace(exhibits)`); `run(visitors, rounds, changes,
interval)` simulates visitors and a staff member and returns what the first
visitor saw.

## Command-line tools

Print the pattern's AST and instruction listing, then every line of a file
in which the pattern matches at some position:

```
zerokit-regex 'abc|(de|cd)+' input.txt
```

Parse and type-check a program in the linear language, printing its AST and
its type:

```
zerokit-linz program.lin
```

Start the interactive prefix calculator (end input with Ctrl+D):

```
zerokit-rpn
```

Run the remaining examples:

```
zerokit-ackermann [M N]        # defaults to 4 4, which takes a very long time
zerokit-list-codec [FILE]      # writes and reads back FILE, default test.yml
zerokit-sort-bench [COUNT]     # default 200,000,000 values per list
zerokit-gallery [--interval SECONDS]
```

`zerokit-sort-bench` with its default count needs a great deal of memory and
time; pass a smaller count. `zerokit-gallery` runs for about eight intervals
while its visitor and staff threads take turns on the shared exhibits.

## What it does not do

- The regular-expression engine has no character classes, `.`, anchors,
  counted repetition or capture groups, and it reports only whether a match
  exists, not where it ends.
- The linear language is only parsed and type-checked; there is no
  evaluator that runs its programs.