# texsolve

texsolve breaks LaTeX-style math expressions such as `x + 5 \times y` into
tokens. It also models expressions as a small tree of nodes. When the input
contains something it cannot read, it reports an error that points at the
exact spot in the source.

## Installation

```
pip install texsolve
```

To run the tests as well:

```
pip install "texsolve[test]"
pytest
```

## Command line

```
texsolve
```

This prints the banner `LaTeX Solver` and exits. `texsolve --help` shows the
usage. The command takes no other options.

## Tokenizing

```python
from texsolve.lexer import Lexer

tokens = Lexer("x + 5 * y").lex()
for token in tokens:
    print(token.kind, token.span, token.value)
```

`Lexer.lex()` returns the tokens as a list. The list always ends with a
`TokenKind.END` token. A `Lexer` can also be iterated directly, which yields
the tokens one at a time. `Lexer.source` holds the text being read.

Each `texsolve.tokens.Token` has these fields:

- `kind`: a `TokenKind`.
- `span`: a `texsolve.errors.Span` with the `start` and `end` UTF-8 byte
  offsets.
- `value`: the number as a `float` for number tokens, or the name for
  identifiers. For all other tokens it is `None`.

The lexer recognises the following input:

- Symbols: `+ - * / ^ ( ) { } =`.
- The commands `\times` and `\div`. These give `MUL` and `DIV` tokens.
- Numbers: digits with at most one decimal point, such as `42`, `3.14` or
  `.5`.
- Identifiers: a letter followed by letters and underscores.

Whitespace between tokens is skipped.

## Error reports

If the input is malformed, `lex()` raises one of these subclasses of
`texsolve.errors.SolverError`:

- `UnexpectedCharacterError`: a character that starts no token.
- `InvalidNumberError`: a number that cannot be read. A lone `.` is one
  example.
- `UnknownCommandError`: a backslash command other than `\times` or `\div`.

`UnexpectedTokenError`, which holds an expected and a found description, is
also defined for use by callers. The lexer never raises it.

Each error has a `span`. `str(error)` gives a one-line message with the byte
position, such as `unexpected character '@' at position 4`. The function
`texsolve.pretty.render_error` turns an error into a report that shows the
line and column, the source line, and carets under the problem:

```python
from texsolve.errors import SolverError
from texsolve.lexer import Lexer
from texsolve.pretty import render_error

source = "x + @"
try:
    Lexer(source).lex()
except SolverError as error:
    print(render_error(source, error))
```

```
error: unexpected character '@'
 --> 1:5
  |
 1 | x + @
  |     ^
```

`texsolve.pretty.line_col_at(source, byte_pos)` returns the 1-based line and
column of a byte offset.

## Expression trees

`texsolve.ast` provides these frozen node classes:

- `Number(value)`
- `Symbol(name)`
- `Function(name, argument)`
- `BinaryOperation(left, operator, right)`, where `operator` is an
  `OperatorType`: `ADD`, `SUB`, `MUL` or `DIV`.

`str()` of a node renders it as text. For example,
`BinaryOperation(Symbol("x"), OperatorType.ADD, Number(2.0))` renders as
`(x + 2)`. Every node has an `accept(visitor)` method that calls the matching
method of an `ExprVisitor` subclass: `visit_binary_op`, `visit_function`,
`visit_number` or `visit_symbol`.

## What it does not do

texsolve does not parse tokens into expression trees, and it does not evaluate
or solve expressions or equations. Trees must be built by hand from the node
classes. The command line only prints its banner.