from typing import Any, Dict, Optional

from yaliir.errors import LoxRuntimeError
from yaliir.tokens import Token


class Environment:
    """A scope mapping names to values, chained to its enclosing scope.

    The enclosing link is fixed at construction. Closures hold a reference
    to the scope they were declared in, so a scope stays alive as long as
    any function value still refers to it and every holder sees the same
    bindings.
    """
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any):
        # redeclaring in the same scope overwrites
        self.values[name] = value

    def get(self, name: Token) -> Any:
        env = self.find(name.lexeme)
        if env is None:
            raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")
        return env.values[name.lexeme]

    def assign(self, name: Token, value: Any):
        env = self.find(name.lexeme)
        if env is None:
            raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")
        env.values[name.lexeme] = value

    def find(self, name: str) -> Optional['Environment']:
        """Return the nearest scope on the chain that binds `name`."""
        env = self
        while env is not None:
            if name in env.values:
                return env
            env = env.enclosing
        return None

    def depth(self) -> int:
        count = 0
        env = self.enclosing
        while env is not None:
            count += 1
            env = env.enclosing
        return count
