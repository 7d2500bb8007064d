"""Command-line entry point: run a script file or an interactive prompt."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .interpreter import Interpreter
from .parser import Parser
from .printer import AstPrinter
from .scanner import Scanner

_USAGE = "Usage: loxinterp [--print-ast] [script]"

EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_IO_ERROR = 74


def run(source: str, interpreter: Optional[Interpreter] = None, print_ast: bool = False) -> bool:
    """Scan, parse and run ``source``.

    Returns True if a syntax error was found, in which case nothing is run.
    """
    if interpreter is None:
        interpreter = Interpreter()

    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    parser = Parser(tokens)
    statements = parser.parse()

    if scanner.errors or parser.errors:
        return True

    if print_ast:
        printer = AstPrinter()
        print("--- AST ---", file=interpreter.out)
        for statement in statements:
            print(printer.print(statement), file=interpreter.out)
        print("\n--- Output ---", file=interpreter.out)

    interpreter.interpret(statements)
    return False


def run_file(path: str, interpreter: Optional[Interpreter] = None, print_ast: bool = False) -> bool:
    """Run the script at ``path``; returns True if it had a syntax error.

    Raises OSError if the file cannot be read.
    """
    with open(path, encoding="utf-8") as handle:
        source = handle.read()
    return run(source, interpreter, print_ast)


def run_prompt(interpreter: Optional[Interpreter] = None, print_ast: bool = False) -> None:
    """Read and run one line at a time until end of input."""
    if interpreter is None:
        interpreter = Interpreter()
    print("Lox Interpreter")
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break
        run(line, interpreter, print_ast)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run a script or the prompt; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    print_ast = False
    file_path: Optional[str] = None

    for arg in args:
        if arg == "--print-ast":
            print_ast = True
        elif file_path is not None:
            print(_USAGE)
            return EXIT_USAGE
        else:
            file_path = arg

    if file_path is None:
        run_prompt(print_ast=print_ast)
        return 0

    try:
        had_error = run_file(file_path, print_ast=print_ast)
    except OSError:
        print(f"Could not open file: {file_path}", file=sys.stderr)
        return EXIT_IO_ERROR
    return EXIT_DATA_ERROR if had_error else 0


if __name__ == "__main__":
    sys.exit(main())