"""
Cursor and token scanner for bigjson.

A Cursor is the single mutable scan position over one text buffer. scan()
advances it past exactly one token and returns a Value describing that
token. Structural failures are recorded on the cursor instead of raised:
once an error is recorded every later scan returns the same Error value
without consuming input.
"""

from typing import IO, Optional, Union

from ..security.exceptions import ErrorKind, ScanError, SecurityError
from ..security.limits import LimitValidator
from ..utils.config import ReaderConfig
from .constants import (
    CLOSE_CHARS,
    LITERALS,
    NUMBER_PATTERN,
    NUMBER_START_CHARS,
    OPEN_CHARS,
    SKIP_CHARS,
    STRING_BODY_PATTERN,
)
from .error_handling import ErrorReporter, locate
from .tokens import Kind, Position, Value


class Cursor:
    """Scan state over one buffer: position, nesting depth and sticky error.

    Share one instance between every iterator reading the same input. It is
    not safe to scan from several threads at once.
    """

    def __init__(self, text: str, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self.text = text
        self.pos = 0
        self.end = len(text)
        self.depth = 0
        self.error: Optional[ScanError] = None
        self.logger = self.config.get_logger(__name__)

        self._error_value: Optional[Value] = None
        self._validator = LimitValidator(self.config.limits)
        self._check_depth = self._validator.limits.max_nesting_depth is not None

    def __repr__(self) -> str:
        state = f"error={self.error.kind.name}" if self.error else "ok"
        return f"<Cursor pos={self.pos}/{self.end} depth={self.depth} {state}>"

    @property
    def failed(self) -> bool:
        """Whether a sticky error has been recorded."""
        return self._error_value is not None

    def remaining(self) -> int:
        """Number of characters not yet scanned."""
        return self.end - self.pos

    def location(self) -> Position:
        """Line and column of the current position."""
        return locate(self)

    def raise_for_error(self) -> None:
        """Raise the recorded ScanError, if any."""
        if self.error is not None:
            raise self.error

    def record_error(
        self, kind: ErrorKind, message: str, start: int, end: int
    ) -> Value:
        """Record a sticky error and return its Error value.

        Only the first error is kept; later calls return the stored value.
        """
        if self._error_value is not None:
            return self._error_value

        reporter = ErrorReporter(
            self.text, self.config.max_error_context, self.config.include_suggestions
        )
        self.error = reporter.create_scan_error(kind, message, start)
        self._error_value = Value(Kind.ERROR, start, end, self.depth)

        position = self.error.position
        self.logger.debug(
            f"Scan failed ({kind.name}): {message} "
            f"at line {position.line}, column {position.column}"
        )
        return self._error_value


def create_reader(text: str, config: Optional[ReaderConfig] = None) -> Cursor:
    """Open a cursor over a complete JSON text."""
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    cursor = Cursor(text, config)
    cursor._validator.validate_input_size(text)
    cursor.logger.debug(f"Reader opened over {cursor.end} characters")
    return cursor


def load_reader(
    fp: IO[Union[str, bytes]], config: Optional[ReaderConfig] = None
) -> Cursor:
    """Read a file object fully into memory and open a cursor over it."""
    content = fp.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    return create_reader(content, config)


def scan(cursor: Cursor) -> Value:
    """Advance past the next token and return it."""
    if cursor._error_value is not None:
        return cursor._error_value

    text = cursor.text
    pos = cursor.pos
    end = cursor.end

    while pos < end and text[pos] in SKIP_CHARS:
        pos += 1
    cursor.pos = pos

    if pos >= end:
        return cursor.record_error(
            ErrorKind.UNEXPECTED_END_OF_INPUT, "unexpected end of input", pos, pos
        )

    char = text[pos]

    if char == '"':
        return _scan_string(cursor, pos)

    if char in NUMBER_START_CHARS:
        stop = NUMBER_PATTERN.match(text, pos).end()
        cursor.pos = stop
        return Value(Kind.NUMBER, pos, stop, cursor.depth)

    kind = OPEN_CHARS.get(char)
    if kind is not None:
        return _open_container(cursor, kind, pos)

    if char in CLOSE_CHARS:
        return _close_container(cursor, char, pos)

    for literal, kind in LITERALS:
        if text.startswith(literal, pos):
            stop = pos + len(literal)
            cursor.pos = stop
            return Value(kind, pos, stop, cursor.depth)

    return cursor.record_error(
        ErrorKind.UNKNOWN_TOKEN, f"unknown token {char!r}", pos, pos
    )


def _scan_string(cursor: Cursor, quote: int) -> Value:
    start = quote + 1
    stop = STRING_BODY_PATTERN.match(cursor.text, start).end()

    if stop >= cursor.end or cursor.text[stop] != '"':
        cursor.pos = cursor.end
        return cursor.record_error(
            ErrorKind.UNCLOSED_STRING, "unclosed string", quote, cursor.end
        )

    cursor.pos = stop + 1
    return Value(Kind.STRING, start, stop, cursor.depth)


def _open_container(cursor: Cursor, kind: Kind, pos: int) -> Value:
    depth = cursor.depth + 1
    if cursor._check_depth:
        try:
            cursor._validator.validate_nesting_depth(depth)
        except SecurityError as exc:
            return cursor.record_error(
                ErrorKind.NESTING_TOO_DEEP, exc.message, pos, pos + 1
            )

    cursor.depth = depth
    cursor.pos = pos + 1
    return Value(kind, pos, pos + 1, depth)


def _close_container(cursor: Cursor, char: str, pos: int) -> Value:
    if cursor.depth == 0:
        return cursor.record_error(
            ErrorKind.STRAY_CONTAINER_CLOSE, f"stray '{char}'", pos, pos + 1
        )

    closed = cursor.depth
    cursor.depth -= 1
    cursor.pos = pos + 1
    return Value(Kind.END, pos, pos + 1, closed)
