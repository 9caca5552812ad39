"""
bigjson errors and limits.

This module provides the exception hierarchy and resource limit checks.
"""

from .exceptions import (
    BigJSONError, ErrorContext, ErrorKind, ErrorSuggestionEngine,
    ScanError, SecurityError, TypeMismatchError,
)
from .limits import LimitValidator

__all__ = [
    'BigJSONError', 'ErrorContext', 'ErrorKind', 'ErrorSuggestionEngine',
    'ScanError', 'SecurityError', 'TypeMismatchError', 'LimitValidator',
]
