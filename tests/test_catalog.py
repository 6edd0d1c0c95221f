"""Tests for catalog paths, rendering and emission."""

import json
import os
from pathlib import Path

import pytest

from intlextract.constants import METADATA_KEY
from intlextract.enums import DescriptorField
from intlextract.extractor import MessageDescriptor, MessageRegistry, catalog_path, emit, render_catalog
from intlextract.syntax import SourceFile


class TestCatalogPath:
    """Source tree mirrored under messages_dir."""

    def test_relative_source(self, tmp_path: Path) -> None:
        """Directories of the source are kept."""
        path = catalog_path("src/components/Greeting.jsx", "Greeting", "build/messages", cwd=tmp_path)
        assert path == Path("build/messages/src/components/Greeting.json")

    def test_absolute_source_under_cwd(self, tmp_path: Path) -> None:
        """Absolute paths are made relative to cwd."""
        source = tmp_path / "src" / "App.js"
        assert catalog_path(source, "App", "out", cwd=tmp_path) == Path("out/src/App.json")

    def test_source_outside_cwd_stays_inside(self, tmp_path: Path) -> None:
        """.. segments cannot escape messages_dir."""
        cwd = tmp_path / "project"
        path = catalog_path(tmp_path / "shared" / "a.js", "a", "out", cwd=cwd)
        assert path == Path("out/shared/a.json")

    def test_top_level_file(self, tmp_path: Path) -> None:
        """Files in cwd land directly in messages_dir."""
        assert catalog_path("App.js", "App", "out", cwd=tmp_path) == Path("out/App.json")

    def test_default_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without cwd, the process working directory is used."""
        monkeypatch.chdir(tmp_path)
        assert catalog_path(os.path.join("lib", "x.js"), "x", "m") == Path("m/lib/x.json")


class TestRenderCatalog:
    """JSON catalog text."""

    def test_two_space_array(self) -> None:
        """Array of descriptor objects, indented by two spaces."""
        text = render_catalog([MessageDescriptor("a", "Hi", "d")])
        assert text == (
            "[\n"
            "  {\n"
            '    "id": "a",\n'
            '    "description": "d",\n'
            '    "defaultMessage": "Hi"\n'
            "  }\n"
            "]"
        )

    def test_non_ascii_kept(self) -> None:
        """Non-ASCII text is written as-is."""
        assert "Grüß" in render_catalog([MessageDescriptor("a", "Grüß")])


class TestEmit:
    """Publishing a unit's descriptors."""

    @staticmethod
    def _registry(*ids: str) -> MessageRegistry:
        registry = MessageRegistry()
        path = SourceFile("x;", "a.js").root
        for message_id in ids:
            registry.store(
                {DescriptorField.ID: message_id, DescriptorField.DEFAULT_MESSAGE: message_id.upper()},
                path,
            )
        return registry

    def test_metadata_always_attached(self) -> None:
        """Metadata is filled even without messages_dir."""
        metadata: dict[str, object] = {}
        written = emit(self._registry("a"), metadata, filename="a.js", basename="a")
        assert written is None
        assert metadata[METADATA_KEY] == {"messages": [{"id": "a", "defaultMessage": "A"}]}

    def test_writes_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A catalog is written under messages_dir."""
        monkeypatch.chdir(tmp_path)
        metadata: dict[str, object] = {}
        written = emit(
            self._registry("b", "a"), metadata, filename="src/a.js", basename="a", messages_dir="out"
        )
        assert written == Path("out/src/a.json")
        data = json.loads((tmp_path / "out" / "src" / "a.json").read_text(encoding="utf-8"))
        assert [entry["id"] for entry in data] == ["b", "a"]

    def test_no_file_for_empty_unit(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Units without messages write nothing."""
        monkeypatch.chdir(tmp_path)
        metadata: dict[str, object] = {}
        assert emit(self._registry(), metadata, filename="a.js", basename="a", messages_dir="out") is None
        assert metadata[METADATA_KEY] == {"messages": []}
        assert not (tmp_path / "out").exists()
