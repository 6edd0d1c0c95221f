"""Tests for the top-level public API."""

from pathlib import Path

import pytest

import intlextract
from intlextract import (
    ExtractionOptions,
    MessageExtractor,
    MessageSyntaxError,
    extract_file,
    normalize_message,
)
from intlextract.syntax import SourceFile


class TestPublicApi:
    """Names exported from the package root."""

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ exists."""
        for name in intlextract.__all__:
            assert hasattr(intlextract, name), name

    def test_version(self) -> None:
        """A version string is always available."""
        assert isinstance(intlextract.__version__, str)
        assert intlextract.__version__

    def test_normalize_message(self) -> None:
        """normalize_message canonicalizes message text."""
        assert normalize_message("Hi {  who  }") == "Hi {who}"

    def test_normalize_message_error(self) -> None:
        """Invalid text raises MessageSyntaxError."""
        with pytest.raises(MessageSyntaxError):
            normalize_message("Hi {")


class TestExtractFile:
    """File-based extraction."""

    def test_extract_file(self, tmp_path: Path) -> None:
        """Reads, extracts and reports the path as filename."""
        source = tmp_path / "App.js"
        source.write_text(
            "import {msgs} from 'react-intl';\nmsgs({a: {id: 'a', defaultMessage: 'A'}});\n",
            encoding="utf-8",
        )
        result = extract_file(source)
        assert result.filename == str(source)
        assert [m.id for m in result.messages] == ["a"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Unreadable files raise OSError."""
        with pytest.raises(OSError):
            extract_file(tmp_path / "missing.js")


class TestMessageExtractor:
    """Driving the hooks directly."""

    def test_one_extractor_many_units(self) -> None:
        """State is per unit; the extractor is reusable."""
        extractor = MessageExtractor(ExtractionOptions())
        source = "import {msgs} from 'react-intl';\nmsgs({a: {id: 'a', defaultMessage: 'A'}});\n"
        first = extractor.extract(SourceFile(source, "a.js"))
        second = extractor.extract(SourceFile(source, "b.js"))
        assert first.registry is not second.registry
        assert len(first.registry) == len(second.registry) == 1

    def test_metadata_on_unit(self) -> None:
        """Exit attaches messages to the unit metadata."""
        unit = SourceFile("const x = 1;", "a.js")
        MessageExtractor().extract(unit)
        assert unit.metadata == {"react-intl": {"messages": []}}
