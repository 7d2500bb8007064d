# loxinterp

A small tree-walking interpreter for a subset of the Lox scripting language.

Supported features:

- `nil`, booleans, numbers (double precision) and strings
- arithmetic (`+ - * /`), comparison (`< <= > >=`) and equality (`== !=`)
- unary `-` and `!`, and grouping with parentheses
- string concatenation with `+`
- `var` declarations, assignment and nested block scopes
- `print`, `if`/`else` and `while`
- `//` line comments

Only `nil` and `false` are false; every other value, including `0` and `""`, is true.
Numbers are printed with up to six decimal places and trailing zeros removed,
so `print 10 / 4;` prints `2.5` and `print 1 / 3;` prints `0.333333`.

Running a program reports runtime errors such as division by zero, operands of the
wrong type, or use of an undefined variable. A runtime error is written to
standard error as `RuntimeError: <message>` followed by `[line N]`, and stops the
rest of the program.

## What it does not do

The language here is a subset. The scanner recognises the keywords `and`, `or`,
`for`, `fun`, `class`, `return`, `super` and `this`, but the parser does not accept
them: there are no logical operators, `for` loops, functions, classes or `return`.
Call expressions are not parsed, and if one is evaluated the interpreter raises
`Can only call functions and classes.` Strings have no escape sequences.

## Installation

```
pip install .
```

## Usage

Run a script:

```
loxinterp script.lox
```

Start an interactive prompt (leave it with end-of-file, Ctrl-D). Variables
defined on one line stay available on the next:

```
loxinterp
```

Print the syntax tree of each statement before running it:

```
loxinterp --print-ast script.lox
```

Exit statuses:

- `64` if more than one script path is given (a usage line is printed);
- `74` if the script file cannot be opened;
- `65` if the script has lexical or syntax errors, in which case nothing is run;
- `0` otherwise, including when the script stopped on a runtime error.

Lexical and syntax errors are written to standard error, for example
`[line 1] Error at '=': Invalid assignment target.`

### Example

```
var i = 0;
while (i < 3) {
  print i;
  i = i + 1;
}
```

prints

```
0
1
2
```

## Library use

```python
from loxinterp.scanner import Scanner
from loxinterp.parser import Parser
from loxinterp.interpreter import Interpreter
from loxinterp.printer import AstPrinter

tokens = Scanner('print 3 * (2 + 1);').scan_tokens()
statements = Parser(tokens).parse()

printer = AstPrinter()
print(printer.print(statements[0]))   # (print (* 3 (group (+ 2 1))))

Interpreter().interpret(statements)   # 9
```

- `Scanner.scan_tokens()` returns a list of `Token` values ending with
  `TokenType.END_OF_FILE`; lexical errors are collected in `Scanner.errors`.
- `Parser.parse()` returns the statements that parsed; each syntax error is kept
  as a `ParseError` in `Parser.errors` (and `Parser.had_error` tells whether any
  occurred), and the parser skips to the next statement.
- `Interpreter` takes optional `out` and `err` text streams, so program output and
  error reports can be captured. `Interpreter.interpret()` returns `True` if every
  statement ran and `False` if a runtime error stopped it.
- `Environment` (in `loxinterp.environment`) holds variable scopes; looking up or
  assigning an unknown name raises `LoxRuntimeError` from `loxinterp.errors`.
- `value_to_string` in `loxinterp.values` gives the text `print` shows for a value.

The `run`, `run_file` and `run_prompt` functions in `loxinterp.cli` give the same
flow as the command; `run` and `run_file` return `True` when the source had
lexical or syntax errors.

## Tests

```
pip install .[test]
pytest
```