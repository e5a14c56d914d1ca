"""Value model helpers for Lox.

Lox values map onto Python objects: `nil` is None, booleans are bool,
numbers are always float, strings are str, and callables are instances of
`LoxCallable`. This module holds the language rules that differ from
Python's own: truthiness, equality and display formatting.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any


def is_truthy(value: Any) -> bool:
    """Only nil and false are falsy; 0 and "" are truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    """Equality between Lox values.

    Values of different kinds are never equal, so `0 == false` and
    `nil == false` are false even though Python would disagree about the
    first one.
    """
    if a is None and b is None:
        return True
    if type(a) is not type(b):
        return False
    return a == b


def is_number(value: Any) -> bool:
    return isinstance(value, float)


def type_name(value: Any) -> str:
    """Return the Lox type name of a runtime value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return 'function'


def format_number(value: float) -> str:
    """Positional notation of the shortest round-trip digits.

    `1e16` prints as `10000000000000000` and `1e-07` as `0.0000001`; whole
    numbers drop their fractional zero.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    text = format(Decimal(repr(value)), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


def stringify(value: Any) -> str:
    """Convert a Lox value to the text `print` writes."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    return str(value)
