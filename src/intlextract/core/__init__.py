"""Core utilities shared across the icu, syntax and extractor layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- icu, syntax <- extractor

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    BabelImportError: Raised when a Babel-backed feature runs without Babel
    require_babel: Fail-fast check for the optional Babel dependency

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = [
    "BabelImportError",
    "DepthGuard",
    "DepthLimitExceededError",
    "is_babel_available",
    "require_babel",
]
