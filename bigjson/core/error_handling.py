"""
Location resolution and error context building.

This module turns buffer offsets into 1-based line/column positions and
builds the source excerpts attached to recorded scan errors. None of it runs
on the scanning hot path.
"""

from typing import TYPE_CHECKING, Optional

from ..security.exceptions import (
    ErrorContext,
    ErrorKind,
    ErrorSuggestionEngine,
    ScanError,
)
from .tokens import Position

if TYPE_CHECKING:
    from .scanner import Cursor


def locate_offset(text: str, offset: int) -> Position:
    """Resolve an offset in text to a 1-based line and column."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1)


def locate(cursor: "Cursor") -> Position:
    """Resolve the cursor's current offset to a 1-based line and column."""
    return locate_offset(cursor.text, cursor.pos)


class ErrorContextBuilder:
    """Builds error context information from a buffer and offset."""

    @staticmethod
    def build_context(
        text: str, offset: int, context_length: int = 50
    ) -> ErrorContext:
        """Build an excerpt around offset.

        The excerpt is clipped to the offending line and to context_length
        characters, since a large document is often a single line.
        """
        offset = max(0, min(offset, len(text)))
        position = locate_offset(text, offset)
        half = context_length // 2

        line_start = offset - (position.column - 1)
        line_end = text.find("\n", offset)
        if line_end == -1:
            line_end = len(text)

        window_start = max(line_start, offset - half)
        window_end = min(line_end, offset + half)

        return ErrorContext(
            text=text,
            position=position,
            context_before=text[max(0, offset - half):offset],
            context_after=text[offset:offset + half],
            error_char=text[offset] if offset < len(text) else "",
            line_text=text[window_start:window_end],
            column_indicator=" " * (offset - window_start) + "^",
        )


class ErrorReporter:
    """Creates scan errors with position, context and suggestions."""

    def __init__(
        self, text: str, max_context: int = 50, include_suggestions: bool = True
    ):
        self.text = text
        self.max_context = max_context
        self.include_suggestions = include_suggestions

    def create_scan_error(
        self, kind: ErrorKind, message: str, offset: int
    ) -> ScanError:
        """Create a ScanError for a failure at offset."""
        context: Optional[ErrorContext] = None
        if self.max_context > 0:
            context = ErrorContextBuilder.build_context(
                self.text, offset, self.max_context
            )
            position = context.position
        else:
            position = locate_offset(self.text, offset)

        suggestions: list[str] = []
        if self.include_suggestions:
            char = self.text[offset] if 0 <= offset < len(self.text) else ""
            suggestions = ErrorSuggestionEngine.suggest_for(kind, char)

        return ScanError(
            kind,
            message,
            offset,
            position=position,
            context=context,
            suggestions=suggestions,
        )
