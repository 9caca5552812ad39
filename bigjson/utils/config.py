"""
Configuration and limits for bigjson readers.

Limits are off by default: the reader is meant for documents too large to
load into a tree, so any cap has to be opted into.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_GUARDED_INPUT_SIZE = 100 * 1024 * 1024
DEFAULT_GUARDED_NESTING_DEPTH = 512


@dataclass
class ReaderLimits:
    """Optional resource limits enforced while reading."""

    max_input_size: Optional[int] = None
    max_nesting_depth: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_input_size is not None and self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_nesting_depth is not None and self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")


@dataclass
class ReaderConfig:
    """Configuration for a reader session.

    Args:
        limits: Resource limits, or None for none at all
        max_error_context: Characters of source shown around an error
        include_suggestions: Attach fix hints to recorded errors
        logger: Logger to use instead of the module logger
    """

    limits: Optional[ReaderLimits] = None
    max_error_context: int = 50
    include_suggestions: bool = True
    logger: Optional[logging.Logger] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.max_error_context < 0:
            raise ValueError("max_error_context must not be negative")

    @classmethod
    def permissive(cls) -> "ReaderConfig":
        """No limits; suitable for trusted input."""
        return cls(limits=None)

    @classmethod
    def guarded(cls) -> "ReaderConfig":
        """Conservative limits for untrusted input."""
        return cls(
            limits=ReaderLimits(
                max_input_size=DEFAULT_GUARDED_INPUT_SIZE,
                max_nesting_depth=DEFAULT_GUARDED_NESTING_DEPTH,
            )
        )

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger or the named module logger."""
        return self.logger or logging.getLogger(name)
