# cfgparse

Small backtracking recursive-descent parsers built on a token stack with
checkpoints.

## Modules

- `cfgparse.codes` — integer token codes as `IntEnum`s: `TokenType`
  (`BOOLEAN`, `INTEGERS_COLLECTION`, `REAL_NUMBERS_COLLECTION`, `STRING`,
  `VARIABLE`, `IPv4`), `Operator` (arithmetic, relational, logical, bitwise,
  assignment operators, parentheses, brackets and `COMMA`), `Function`
  (`MIN`, `MAX`, `ROOT`, `POW`, `SIN`, `COS`, `TAN`) and `Special`
  (`END_OF_LINE`, `NOT_IN_A_DICTIONARY`, `EXIT_REQUESTED`, `WHITESPACE`).
- `cfgparse.stack` — the `ParsedData` dataclass (`code`, `text`, `length`)
  and `DataStack` with `push`, `pop`, `peek`, `clear` and `len()`. `pop` and
  `peek` raise `IndexError` on an empty stack.
- `cfgparse.parser` — `Parser`, a cursor over an input string that reads
  tokens through a lexer you supply and records each one on its `stack`.
- `cfgparse.math_grammar` — `parse_expression`, `parse_inequality` and
  `parse_logical`.
- `cfgparse.sql_select` — `parse_select_query`, `parse_columns`,
  `parse_column` and `parse_table`.
- `cfgparse.console` — `Style`, ANSI escape sequences for terminal text, and
  `styled(text, *styles)`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The parser

`Parser(lexer)` takes a callable. It is called with the unread rest of the
input and returns `(code, lexeme)` for the token at its start. A token coded
`Special.WHITESPACE` is recorded on the stack with no text and skipped; a
zero-length whitespace token raises `ValueError`.

- `scan(text)` starts reading `text` from the beginning.
- `forward()` reads one token, pushes it and returns its code.
- `fastforward()` reads tokens until the input runs out or a token is coded
  `Special.NOT_IN_A_DICTIONARY` (that one stays unread) and returns the list
  of codes read.
- `rewind(count)` pops the last `count` entries and moves the cursor back;
  it does nothing when `count <= 0` or the cursor is at the start, and raises
  `IndexError` when fewer entries are recorded.
- `skip_whitespace(count)` consumes `count` characters as whitespace.
- `checkpoint()` returns a marker; `restore(marker)` undoes every token read
  since it was taken.

## Grammars

Every grammar function takes a `Parser` and returns `True` when its rule
matched, consuming the matched tokens, or `False`, leaving the parser exactly
where it was.

```
E -> E + S | E - S | S
S -> S * W | S / W | W
W -> ( E ) | <integer> | <double> | <variable>
U -> E (== | != | < | > | <= | >=) E       parse_inequality
P -> E (and | or | not) E                  parse_logical
```

`parse_expression` parses `E` and stops before the first token that cannot
continue it.

`parse_select_query` accepts `SELECT <col>, <col>, ... FROM <table>` followed
by an end-of-line token. `SELECT` and `FROM` are variable tokens matched in
any letter case; columns and the table are variable tokens. On success the
end-of-line token is given back to the input. `parse_table` accepts the table
token already read by the caller and consumes nothing. Accepted columns and
queries are reported at debug level on the `cfgparse.sql_select` logger.

## Example

```python
import re

from cfgparse.codes import Operator, Special, TokenType
from cfgparse.math_grammar import parse_expression
from cfgparse.parser import Parser
from cfgparse.sql_select import parse_select_query

TOKENS = [
    (re.compile(r"\n"), Special.END_OF_LINE),
    (re.compile(r"[ \t]+"), Special.WHITESPACE),
    (re.compile(r"\d+\.\d+"), TokenType.REAL_NUMBERS_COLLECTION),
    (re.compile(r"\d+"), TokenType.INTEGERS_COLLECTION),
    (re.compile(r"[A-Za-z_]\w*"), TokenType.VARIABLE),
    (re.compile(r"<="), Operator.LESS_THAN_OR_EQUAL_TO),
    (re.compile(r">="), Operator.GREATER_THAN_OR_EQUAL_TO),
    (re.compile(r"=="), Operator.EQUAL_TO),
    (re.compile(r"!="), Operator.NOT_EQUAL_TO),
    (re.compile(r"<"), Operator.LESS_THAN),
    (re.compile(r">"), Operator.GREATER_THAN),
    (re.compile(r"\+"), Operator.PLUS),
    (re.compile(r"-"), Operator.MINUS),
    (re.compile(r"\*"), Operator.TIMES),
    (re.compile(r"/"), Operator.OBELUS),
    (re.compile(r"\("), Operator.OPEN_PARENTHESES),
    (re.compile(r"\)"), Operator.CLOSED_PARENTHESES),
    (re.compile(r","), Operator.COMMA),
]


def lexer(rest):
    for pattern, code in TOKENS:
        match = pattern.match(rest)
        if match:
            return code, match.group()
    return Special.NOT_IN_A_DICTIONARY, rest[:1]


parser = Parser(lexer)
parser.scan("(a + 2) * 3.5\n")
assert parse_expression(parser)          # stops before the "\n"

parser = Parser(lexer)
parser.scan("select name, age from people\n")
assert parse_select_query(parser)
```

Backtracking by hand:

```python
mark = parser.checkpoint()
parser.forward()
parser.restore(mark)  # the token is unread again
```

Highlighting terminal output:

```python
from cfgparse.console import Style, styled

print(styled("parse failed", Style.BOLD, Style.TEXT_RED))
```

`styled` accepts `Style` members or their escape strings (an unknown string
raises `ValueError`), appends `Style.RESET_ALL`, and returns the text
unchanged when no style is given.

## What it does not do

- There is no lexer: you supply the callable that turns input into token
  codes.
- The grammars only recognise input; they build no syntax tree and evaluate
  nothing. The `Function` codes are defined but no grammar uses them.
- There is no command-line program or interactive prompt.