"""
bigjson configuration.
"""

from .config import ReaderConfig, ReaderLimits

__all__ = ['ReaderConfig', 'ReaderLimits']
