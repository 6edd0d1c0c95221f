"""Tests for babel_compat module - centralized Babel dependency handling.

Tests the lazy import infrastructure, error handling, and availability checking
for the optional Babel dependency.
"""

from unittest.mock import patch

import pytest

from intlextract.core.babel_compat import (
    BabelImportError,
    get_catalog_class,
    get_po_writer,
    is_babel_available,
    require_babel,
)


class TestBabelAvailability:
    """Test Babel availability checking."""

    def test_babel_is_available_in_test_environment(self) -> None:
        """Babel is installed through the test extra."""
        assert is_babel_available() is True

    def test_require_babel_does_not_raise_when_available(self) -> None:
        """require_babel does not raise when Babel is installed."""
        require_babel("write_pot")


class TestBabelImportError:
    """Test BabelImportError exception class."""

    def test_message_includes_feature_and_install_hint(self) -> None:
        """Error message names the feature and the extra to install."""
        error = BabelImportError("write_pot")
        assert "write_pot" in str(error)
        assert "pip install intlextract[babel]" in str(error)
        assert error.feature == "write_pot"

    def test_is_import_error(self) -> None:
        """BabelImportError is a subclass of ImportError."""
        assert isinstance(BabelImportError("x"), ImportError)


class TestBabelUnavailable:
    """Behaviour when the availability check fails."""

    def test_require_babel_raises(self) -> None:
        """require_babel raises BabelImportError naming the feature."""
        with (
            patch("intlextract.core.babel_compat._check_babel_available", return_value=False),
            pytest.raises(BabelImportError, match="write_pot"),
        ):
            require_babel("write_pot")

    @pytest.mark.parametrize("getter", [get_catalog_class, get_po_writer])
    def test_getters_raise(self, getter: object) -> None:
        """Accessors fail with the same error."""
        with (
            patch("intlextract.core.babel_compat._check_babel_available", return_value=False),
            pytest.raises(BabelImportError),
        ):
            getter()  # type: ignore[operator]


class TestGetters:
    """Accessors return the Babel objects."""

    def test_catalog_class(self) -> None:
        """get_catalog_class returns babel's Catalog."""
        from babel.messages.catalog import Catalog  # noqa: PLC0415

        assert get_catalog_class() is Catalog

    def test_po_writer(self) -> None:
        """get_po_writer returns babel's write_po."""
        from babel.messages.pofile import write_po  # noqa: PLC0415

        assert get_po_writer() is write_po
