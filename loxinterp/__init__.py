"""A tree-walking interpreter for a small subset of the Lox language: scanner, parser, syntax-tree printer, interpreter and command line."""

__version__ = "1.0.0"