"""
bigjson - Memory-efficient streaming JSON reader.

bigjson scans JSON text token by token without building a document tree.
A caller pulls tokens from a single Cursor and walks arrays and objects with
lazy iterators; nested values that are not needed can simply be abandoned.

Key Features:
- One token at a time; nothing but the input buffer is held in memory
- Array and object iterators that resume correctly after a nested value
  was partially read or skipped
- Sticky errors: the first structural error is kept on the cursor and
  every later scan returns it without consuming input
- Line/column resolution for diagnostics
- Optional input-size and nesting-depth limits for untrusted input

Quick Start:
    import bigjson

    cursor = bigjson.create_reader('{"users": [{"name": "Ada"}], "total": 1}')
    root = bigjson.scan(cursor)
    for key, value in bigjson.object_iterator(cursor, root):
        if bigjson.as_string(cursor, key) == "total":
            print(bigjson.as_number(cursor, value))

    cursor.raise_for_error()
"""

from .core.accessors import as_bool, as_number, as_string, is_null
from .core.error_handling import locate, locate_offset
from .core.iterators import (
    ArrayIterator,
    ObjectIterator,
    array_iterator,
    discard_until,
    next_element,
    next_member,
    object_iterator,
    skip_value,
)
from .core.scanner import Cursor, create_reader, load_reader, scan
from .core.tokens import Kind, Member, Position, Value
from .security.exceptions import (
    BigJSONError,
    ErrorKind,
    ScanError,
    SecurityError,
    TypeMismatchError,
)
from .utils.config import ReaderConfig, ReaderLimits

__version__ = "0.1.0"
__author__ = "bigjson contributors"

__all__ = [
    # Reading
    "create_reader", "load_reader", "scan", "locate", "locate_offset",
    # Value accessors
    "as_string", "as_number", "as_bool", "is_null",
    # Iteration
    "array_iterator", "object_iterator", "ArrayIterator", "ObjectIterator",
    "next_element", "next_member", "discard_until", "skip_value",
    # Types
    "Cursor", "Kind", "Value", "Member", "Position", "ErrorKind",
    # Exception classes
    "BigJSONError", "ScanError", "TypeMismatchError", "SecurityError",
    # Configuration classes
    "ReaderConfig", "ReaderLimits",
]
