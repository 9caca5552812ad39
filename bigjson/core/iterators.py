"""
Forward iteration over arrays and objects.

Every step first discards whatever the caller left unread inside the
previous child, so a parent iterator resumes correctly whether a nested
value was consumed fully, partly or not at all.
"""

from collections.abc import Iterator
from typing import Optional

from ..security.exceptions import ErrorKind, TypeMismatchError
from .scanner import Cursor, scan
from .tokens import Kind, Member, Value


def discard_until(cursor: Cursor, depth: int) -> None:
    """Scan and drop tokens until the cursor is back at depth or failed."""
    while cursor.depth != depth:
        if scan(cursor).kind == Kind.ERROR:
            return


def skip_value(cursor: Cursor, value: Value) -> None:
    """Consume the unread remainder of a container value.

    Scalars are already fully consumed when scanned, so this is a no-op for
    them and for containers whose close has already been scanned.
    """
    if value.is_container and cursor.depth >= value.depth:
        discard_until(cursor, value.depth - 1)


def next_element(cursor: Cursor, array: Value) -> Optional[Value]:
    """Return the next element of array, or None when exhausted."""
    discard_until(cursor, array.depth)
    value = scan(cursor)
    if value.kind in (Kind.ERROR, Kind.END):
        return None
    return value


def next_member(cursor: Cursor, obj: Value) -> Optional[Member]:
    """Return the next key/value pair of obj, or None when exhausted.

    The key's kind is not checked. An object closing where a value was
    expected records UNEXPECTED_OBJECT_END on the cursor.
    """
    discard_until(cursor, obj.depth)
    key = scan(cursor)
    if key.kind in (Kind.ERROR, Kind.END):
        return None

    value = scan(cursor)
    if value.kind == Kind.END:
        cursor.record_error(
            ErrorKind.UNEXPECTED_OBJECT_END,
            "value missing for key",
            value.start,
            value.end,
        )
        return None
    if value.kind == Kind.ERROR:
        return None

    return Member(key, value)


class ArrayIterator:
    """Lazy iterable over the elements of an array value.

    Iterating again continues from wherever the cursor currently sits; it
    never restarts from the beginning of the array.
    """

    def __init__(self, cursor: Cursor, array: Value):
        if array.kind != Kind.ARRAY:
            raise TypeMismatchError("Value is not an array", Kind.ARRAY, array.kind)
        self.cursor = cursor
        self.array = array

    def __iter__(self) -> Iterator[Value]:
        while True:
            value = next_element(self.cursor, self.array)
            if value is None:
                return
            yield value


class ObjectIterator:
    """Lazy iterable over the key/value pairs of an object value."""

    def __init__(self, cursor: Cursor, obj: Value):
        if obj.kind != Kind.OBJECT:
            raise TypeMismatchError("Value is not an object", Kind.OBJECT, obj.kind)
        self.cursor = cursor
        self.object = obj

    def __iter__(self) -> Iterator[Member]:
        while True:
            member = next_member(self.cursor, self.object)
            if member is None:
                return
            yield member


def array_iterator(cursor: Cursor, value: Value) -> ArrayIterator:
    """Iterate the elements of an array value."""
    return ArrayIterator(cursor, value)


def object_iterator(cursor: Cursor, value: Value) -> ObjectIterator:
    """Iterate the key/value pairs of an object value."""
    return ObjectIterator(cursor, value)
