"""
Projections from scanned values to Python primitives.
"""

import math

from ..security.exceptions import TypeMismatchError
from .constants import TRUE_LITERAL
from .scanner import Cursor
from .tokens import Kind, Value


def _span(cursor: Cursor, value: Value) -> str:
    return cursor.text[value.start:value.end]


def as_string(cursor: Cursor, value: Value) -> str:
    """Return the raw string contents. Escape sequences are not decoded."""
    if value.kind != Kind.STRING:
        raise TypeMismatchError("Value is not a string", Kind.STRING, value.kind)
    return _span(cursor, value)


def as_number(cursor: Cursor, value: Value) -> float:
    """Parse a number span as a float; malformed text gives nan."""
    if value.kind != Kind.NUMBER:
        raise TypeMismatchError("Value is not a number", Kind.NUMBER, value.kind)
    try:
        return float(_span(cursor, value))
    except ValueError:
        return math.nan


def as_bool(cursor: Cursor, value: Value) -> bool:
    if value.kind != Kind.BOOL:
        raise TypeMismatchError("Value is not a boolean", Kind.BOOL, value.kind)
    return _span(cursor, value) == TRUE_LITERAL


def is_null(value: Value) -> bool:
    return value.kind == Kind.NULL
