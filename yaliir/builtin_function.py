from dataclasses import dataclass
from typing import Any, Callable, List

from yaliir.function import LoxCallable


@dataclass(eq=False)
class BuiltinFunction(LoxCallable):
    """A native function provided by the host.

    Natives take the evaluated argument list and create no scope of their
    own.
    """
    name: str
    params: int
    fn: Callable[[List[Any]], Any]

    def arity(self) -> int:
        return self.params

    def call(self, interpreter, arguments: List[Any]) -> Any:
        return self.fn(arguments)

    def __str__(self) -> str:
        return "<native fn>"

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
