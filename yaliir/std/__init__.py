"""Standard native environment for Lox programs."""

from yaliir.builtin_function import BuiltinFunction
from yaliir.environment import Environment
from .clock import Clock


def populate_globals(env: Environment) -> Environment:
    """Bind every native function into `env` and return it."""
    clock = Clock()

    def std_clock(args):
        return clock.now()

    env.define('clock', BuiltinFunction('clock', 0, std_clock))
    return env
