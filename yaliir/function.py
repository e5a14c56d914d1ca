"""Callable values: the common interface and user-defined functions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List

from .ast import FuncDecl
from .environment import Environment
from .outcome import Returned

if TYPE_CHECKING:
    from .interpreter import Interpreter


class LoxCallable(ABC):
    """Anything a Lox call expression can invoke."""

    @abstractmethod
    def arity(self) -> int:
        ...

    @abstractmethod
    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        ...


class LoxFunction(LoxCallable):
    """A user-defined function together with the scope it was declared in."""
    def __init__(self, declaration: FuncDecl, closure: Environment):
        self.declaration = declaration
        self.closure = closure

    @property
    def name(self) -> str:
        return self.declaration.name.lexeme

    def arity(self) -> int:
        return len(self.declaration.params)

    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        # lexical scoping: the call scope encloses the closure, not the caller
        call_env = Environment(enclosing=self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            call_env.define(param.lexeme, argument)
        outcome = interpreter.execute_block(self.declaration.body, call_env)
        if isinstance(outcome, Returned):
            return outcome.value
        return None

    def __str__(self) -> str:
        return f"<fn {self.name}>"

    def __repr__(self) -> str:
        return f"<function {self.name}>"
