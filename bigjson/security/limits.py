"""
Resource limits for bigjson readers.
This module enforces the optional input-size and nesting-depth caps.
"""

from typing import Optional

from ..utils.config import ReaderLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates reader limits. A missing limit is never enforced."""

    def __init__(self, limits: Optional[ReaderLimits]):
        self.limits = limits or ReaderLimits()

    @property
    def enabled(self) -> bool:
        """Whether any limit is configured."""
        return (
            self.limits.max_input_size is not None
            or self.limits.max_nesting_depth is not None
        )

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        limit = self.limits.max_input_size
        if limit is not None and len(text) > limit:
            raise SecurityError(f"Input size {len(text)} exceeds limit {limit}")

    def validate_nesting_depth(self, depth: int) -> None:
        """Validate the depth reached after opening a container."""
        limit = self.limits.max_nesting_depth
        if limit is not None and depth > limit:
            raise SecurityError(f"Nesting depth {depth} exceeds limit {limit}")
