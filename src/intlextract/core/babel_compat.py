"""Babel compatibility layer for the optional dependency.

intlextract installs in two modes:
    - Extraction only: `pip install intlextract` (catalogs as JSON)
    - With Babel: `pip install intlextract[babel]` (Babel extraction method,
      POT export)

Babel is imported lazily at the point of use so extraction-only
installations never trigger the import, and every Babel-dependent feature
fails with the same installation hint.

Usage Pattern:
    from intlextract.core.babel_compat import require_babel

    def write_pot(results, path) -> None:
        require_babel("write_pot")
        from babel.messages.catalog import Catalog  # Safe now
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog

__all__ = [
    "BabelImportError",
    "get_catalog_class",
    "get_po_writer",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for message catalogs. "
            "Install with: pip install intlextract[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_catalog_class() -> type[Catalog]:
    """Get babel.messages.catalog.Catalog.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_catalog_class")
    from babel.messages.catalog import Catalog  # noqa: PLC0415

    return Catalog


def get_po_writer() -> Any:
    """Get babel.messages.pofile.write_po.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_po_writer")
    from babel.messages.pofile import write_po  # noqa: PLC0415

    return write_po
