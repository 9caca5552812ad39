"""
Token value types produced by the bigjson scanner.
"""

from enum import IntEnum
from typing import NamedTuple


class Kind(IntEnum):
    """Token kinds. The integer values are part of the public contract."""

    ERROR = 0
    END = 1
    ARRAY = 2
    OBJECT = 3
    NUMBER = 4
    STRING = 5
    BOOL = 6
    NULL = 7


class Position(NamedTuple):
    """1-based line and column in source text."""

    line: int
    column: int


class Value(NamedTuple):
    """One scanned token: its kind, span in the buffer and depth at emission.

    For strings the span excludes the quotes. For a container open the depth
    is the nesting level after opening.
    """

    kind: Kind
    start: int
    end: int
    depth: int

    @property
    def is_container(self) -> bool:
        """Whether this token opens an array or object."""
        return self.kind in (Kind.ARRAY, Kind.OBJECT)


class Member(NamedTuple):
    """A key/value pair produced by object iteration."""

    key: Value
    value: Value
