"""
Exception types and error context for bigjson.

Scan-time failures are recorded on the cursor as ScanError instances rather
than raised; callers raise them explicitly with Cursor.raise_for_error().
Accessor misuse and limit violations raise immediately.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.tokens import Kind, Position


class ErrorKind(Enum):
    """Categories of reader failures."""

    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNCLOSED_STRING = "unclosed_string"
    UNKNOWN_TOKEN = "unknown_token"
    STRAY_CONTAINER_CLOSE = "stray_container_close"
    UNEXPECTED_OBJECT_END = "unexpected_object_end"
    TYPE_MISMATCH = "type_mismatch"
    NESTING_TOO_DEEP = "nesting_too_deep"


@dataclass
class ErrorContext:
    """Source excerpt around an error location."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class BigJSONError(Exception):
    """Base exception for bigjson errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            parts.append("Context:")
            parts.append(f"  {self.context.line_text}")
            parts.append(f"  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)


class ScanError(BigJSONError):
    """A structural error found while scanning. Stored on the cursor."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        offset: int,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.kind = kind
        self.offset = offset
        super().__init__(message, position, context, suggestions)


class TypeMismatchError(BigJSONError, TypeError):
    """Raised when a value is projected or iterated as the wrong kind."""

    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, message: str, expected: Kind, actual: Kind):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class SecurityError(BigJSONError):
    """Raised when a configured reader limit is exceeded."""


class ErrorSuggestionEngine:
    """Produces short hints for common scan failures."""

    @staticmethod
    def suggest_for(kind: ErrorKind, char: str = "") -> list[str]:
        """Return suggestions for an error kind and the offending character."""
        if kind is ErrorKind.UNCLOSED_STRING:
            return [
                "Add the missing closing double quote",
                "Check for a backslash escaping the intended closing quote",
            ]
        if kind is ErrorKind.UNEXPECTED_END_OF_INPUT:
            return ["Input ended early; check for a truncated document"]
        if kind is ErrorKind.STRAY_CONTAINER_CLOSE:
            opener = "{" if char == "}" else "["
            return [f"Remove the extra '{char}' or add a matching '{opener}'"]
        if kind is ErrorKind.UNEXPECTED_OBJECT_END:
            return ["Every object key needs a value after the colon"]
        if kind is ErrorKind.NESTING_TOO_DEEP:
            return ["Raise ReaderLimits.max_nesting_depth if the input is trusted"]
        if kind is ErrorKind.UNKNOWN_TOKEN:
            return ErrorSuggestionEngine.suggest_for_unknown_char(char)
        return []

    @staticmethod
    def suggest_for_unknown_char(char: str) -> list[str]:
        """Suggestions for a character that cannot start a token."""
        if char == "'":
            return ["Use double quotes for strings"]
        if char in ("T", "F", "N"):
            return ["Literals are lowercase: true, false, null"]
        if char in ("/", "#"):
            return ["Comments are not supported"]
        if char.isalpha() or char == "_":
            return ["Quote bare words and object keys with double quotes"]
        return []
