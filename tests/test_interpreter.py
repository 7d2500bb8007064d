import io

import pytest

from loxinterp.errors import LoxRuntimeError
from loxinterp.interpreter import Interpreter, is_truthy
from loxinterp.parser import Parser
from loxinterp.scanner import Scanner
from loxinterp.syntax import Binary, Call, Literal, Variable
from loxinterp.tokens import Token, TokenType


def run_interpreter(source, buffer):
    interpreter = Interpreter(out=buffer, err=buffer)
    tokens = Scanner(source).scan_tokens()
    statements = Parser(tokens).parse()
    return interpreter.interpret(statements)


def op(kind, lexeme):
    return Token(kind, lexeme, None, 1)


def test_print_output():
    buffer = io.StringIO()
    run_interpreter("print 3 * (2 + 1);", buffer)
    assert buffer.getvalue() == "9\n"


def test_variable_scope():
    buffer = io.StringIO()
    source = (
        'var a = "global a";'
        'var b = "global b";'
        "{"
        '  var a = "outer a";'
        "  print a;"
        "  print b;"
        '  b = "outer b";'
        "  {"
        "    print a;"
        "    print b;"
        "  }"
        "}"
        "print a;"
        "print b;"
    )
    run_interpreter(source, buffer)
    expected = "outer a\nglobal b\nouter a\nouter b\nglobal a\nouter b\n"
    assert buffer.getvalue() == expected


def test_truthiness():
    buffer = io.StringIO()
    run_interpreter('if (nil) print "no"; else print "yes";', buffer)
    run_interpreter('if (false) print "no"; else print "yes";', buffer)
    run_interpreter('if (true) print "yes"; else print "no";', buffer)
    run_interpreter('if (0) print "yes"; else print "no";', buffer)
    run_interpreter('if ("") print "yes"; else print "no";', buffer)
    assert buffer.getvalue() == "yes\nyes\nyes\nyes\nyes\n"


def test_if_else_statement():
    buffer = io.StringIO()
    source = 'var n = 5;if (n > 10) {  print "maior";} else {  print "menor";}'
    run_interpreter(source, buffer)
    assert buffer.getvalue() == "menor\n"


def test_while_loop():
    buffer = io.StringIO()
    source = "var i = 0;while (i < 3) {  print i;  i = i + 1;}"
    run_interpreter(source, buffer)
    assert buffer.getvalue() == "0\n1\n2\n"


def test_runtime_error_division_by_zero():
    buffer = io.StringIO()
    assert run_interpreter("print 10 / 0;", buffer) is False
    assert "Division by zero." in buffer.getvalue()


def test_runtime_error_invalid_operand():
    buffer = io.StringIO()
    run_interpreter('print 5 + "cinco";', buffer)
    assert "Operands must be two numbers or two strings." in buffer.getvalue()


def test_runtime_error_undefined_variable():
    buffer = io.StringIO()
    run_interpreter("print variavel_inexistente;", buffer)
    assert "Undefined variable" in buffer.getvalue()


def test_runtime_error_report_format_and_stop():
    out = io.StringIO()
    err = io.StringIO()
    interpreter = Interpreter(out=out, err=err)
    statements = Parser(Scanner('print "a";\nprint -"x";\nprint "b";').scan_tokens()).parse()
    assert interpreter.interpret(statements) is False
    assert out.getvalue() == "a\n"
    assert err.getvalue() == "RuntimeError: Operand must be a number.\n[line 2]\n"


def test_string_concatenation():
    buffer = io.StringIO()
    assert run_interpreter('print "ab" + "cd";', buffer) is True
    assert buffer.getvalue() == "abcd\n"


def test_equality_is_type_aware():
    interpreter = Interpreter(out=io.StringIO(), err=io.StringIO())
    expr = Binary(Literal(1.0), op(TokenType.EQUAL_EQUAL, "=="), Literal(True))
    assert interpreter.evaluate(expr) is False
    expr = Binary(Literal(None), op(TokenType.EQUAL_EQUAL, "=="), Literal(None))
    assert interpreter.evaluate(expr) is True
    expr = Binary(Literal("a"), op(TokenType.BANG_EQUAL, "!="), Literal("a"))
    assert interpreter.evaluate(expr) is False


def test_comparison_requires_numbers():
    interpreter = Interpreter(out=io.StringIO(), err=io.StringIO())
    expr = Binary(Literal("a"), op(TokenType.LESS, "<"), Literal(1.0))
    with pytest.raises(LoxRuntimeError, match="Operands must be numbers."):
        interpreter.evaluate(expr)


def test_call_is_rejected():
    interpreter = Interpreter(out=io.StringIO(), err=io.StringIO())
    paren = op(TokenType.RIGHT_PAREN, ")")
    expr = Call(Variable(op(TokenType.IDENTIFIER, "f")), paren, [])
    with pytest.raises(LoxRuntimeError) as info:
        interpreter.evaluate(expr)
    assert info.value.message == "Can only call functions and classes."
    assert info.value.token == paren


def test_block_scope_restored_after_error():
    buffer = io.StringIO()
    interpreter = Interpreter(out=buffer, err=buffer)
    first = Parser(Scanner("var a = 1; { var a = 2; print nope; }").scan_tokens()).parse()
    interpreter.interpret(first)
    second = Parser(Scanner("print a;").scan_tokens()).parse()
    assert interpreter.interpret(second) is True
    assert buffer.getvalue().endswith("1\n")


def test_unary_not():
    buffer = io.StringIO()
    run_interpreter("print !nil; print !0;", buffer)
    assert buffer.getvalue() == "true\nfalse\n"


@pytest.mark.parametrize(
    "value, expected",
    [(None, False), (False, False), (True, True), (0.0, True), ("", True)],
)
def test_is_truthy(value, expected):
    assert is_truthy(value) is expected