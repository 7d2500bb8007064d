import pytest

from loxinterp.environment import Environment
from loxinterp.errors import LoxRuntimeError
from loxinterp.tokens import Token, TokenType


def ident(name, line=1):
    return Token(TokenType.IDENTIFIER, name, None, line)


def test_define_then_get():
    env = Environment()
    env.define("a", 1.0)
    assert env.get(ident("a")) == 1.0


def test_get_looks_in_enclosing_scope():
    outer = Environment()
    outer.define("a", "outer")
    inner = Environment(outer)
    assert inner.get(ident("a")) == "outer"


def test_inner_definition_shadows_outer():
    outer = Environment()
    outer.define("a", "outer")
    inner = Environment(outer)
    inner.define("a", "inner")
    assert inner.get(ident("a")) == "inner"
    assert outer.get(ident("a")) == "outer"


def test_assign_updates_enclosing_binding():
    outer = Environment()
    outer.define("b", "before")
    inner = Environment(outer)
    inner.assign(ident("b"), "after")
    assert outer.get(ident("b")) == "after"
    assert inner.get(ident("b")) == "after"


def test_redefine_replaces_value():
    env = Environment()
    env.define("a", 1.0)
    env.define("a", None)
    assert env.get(ident("a")) is None


def test_get_undefined_raises():
    env = Environment(Environment())
    token = ident("missing", line=7)
    with pytest.raises(LoxRuntimeError) as info:
        env.get(token)
    assert info.value.message == "Undefined variable 'missing'."
    assert info.value.token == token


def test_assign_undefined_raises():
    env = Environment()
    with pytest.raises(LoxRuntimeError) as info:
        env.assign(ident("nope"), 1.0)
    assert info.value.message == "Undefined variable 'nope'."