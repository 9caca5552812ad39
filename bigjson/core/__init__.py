"""
bigjson core reader.

This module provides the cursor, token scanner, iterators and accessors.
"""

from .accessors import as_bool, as_number, as_string, is_null
from .error_handling import locate, locate_offset
from .iterators import (
    ArrayIterator,
    ObjectIterator,
    array_iterator,
    discard_until,
    next_element,
    next_member,
    object_iterator,
    skip_value,
)
from .scanner import Cursor, create_reader, load_reader, scan
from .tokens import Kind, Member, Position, Value

__all__ = [
    'Cursor', 'create_reader', 'load_reader', 'scan',
    'Kind', 'Value', 'Member', 'Position',
    'locate', 'locate_offset',
    'as_string', 'as_number', 'as_bool', 'is_null',
    'ArrayIterator', 'ObjectIterator', 'array_iterator', 'object_iterator',
    'next_element', 'next_member', 'discard_until', 'skip_value',
]
