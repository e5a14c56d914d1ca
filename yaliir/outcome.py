"""Execution outcomes of statements.

Executing a statement either runs to completion or unwinds with a return
value. Both are ordinary values handed back by `Interpreter.execute`, never
exceptions, so a return can only be consumed by the function call that is
waiting for it. Runtime failures travel as `LoxRuntimeError` and become a
`Failed` outcome only at the top level of `Interpreter.interpret`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .errors import LoxRuntimeError


@dataclass(frozen=True)
class Completed:
    pass


@dataclass(frozen=True)
class Returned:
    value: Any


@dataclass(frozen=True)
class Failed:
    error: LoxRuntimeError


Outcome = Union[Completed, Returned, Failed]

COMPLETED = Completed()
