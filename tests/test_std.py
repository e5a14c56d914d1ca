from yaliir.builtin_function import BuiltinFunction
from yaliir.environment import Environment
from yaliir.std import populate_globals
from yaliir.std.clock import Clock
from yaliir.tokens import Token, TokenType


def test_clock_uses_its_source():
    assert Clock(lambda: 42).now() == 42.0


def test_globals_hold_clock_native():
    env = populate_globals(Environment())
    clock = env.get(Token(TokenType.IDENTIFIER, 'clock', 1))
    assert isinstance(clock, BuiltinFunction)
    assert clock.arity() == 0
    assert str(clock) == '<native fn>'
    assert isinstance(clock.call(None, []), float)
