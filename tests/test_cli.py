"""Tests for the intlextract command line."""

import json
from pathlib import Path

import pytest

from intlextract.cli import build_parser, iter_source_files, main

GOOD = (
    "import {FormattedMessage} from 'react-intl';\n"
    "export const Hello = () => <FormattedMessage id='hello' defaultMessage='Hello' />;\n"
)

BAD = (
    "import {defineMessages} from 'react-intl';\n"
    "defineMessages(messages);\n"
)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A small source tree; cwd is its root."""
    (tmp_path / "src" / "components").mkdir(parents=True)
    (tmp_path / "src" / "components" / "Hello.jsx").write_text(GOOD, encoding="utf-8")
    (tmp_path / "src" / "util.js").write_text("export const x = 1;\n", encoding="utf-8")
    (tmp_path / "src" / "notes.txt").write_text("not a source\n", encoding="utf-8")
    (tmp_path / "src" / "node_modules" / "lib").mkdir(parents=True)
    (tmp_path / "src" / "node_modules" / "lib" / "index.js").write_text(BAD, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestSourceDiscovery:
    """Which files the CLI extracts."""

    def test_walks_directories(self, project: Path) -> None:
        """JS sources only, sorted, node_modules skipped."""
        files = list(iter_source_files([Path("src")]))
        assert files == [Path("src/components/Hello.jsx"), Path("src/util.js")]

    def test_files_as_given(self, project: Path) -> None:
        """Explicit files are used regardless of suffix."""
        assert list(iter_source_files([Path("src/notes.txt")])) == [Path("src/notes.txt")]


class TestMain:
    """Exit codes and outputs."""

    def test_writes_catalogs(self, project: Path) -> None:
        """Exit 0 and one catalog per file with messages."""
        assert main(["src", "--messages-dir", "build/messages"]) == 0
        catalog = project / "build" / "messages" / "src" / "components" / "Hello.json"
        assert json.loads(catalog.read_text(encoding="utf-8")) == [
            {"id": "hello", "defaultMessage": "Hello"}
        ]
        assert not (project / "build" / "messages" / "src" / "util.json").exists()

    def test_failed_unit_exit_code(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Exit 1 when a unit fails; other units are still extracted."""
        (project / "src" / "bad.js").write_text(BAD, encoding="utf-8")
        assert main(["src", "--messages-dir", "out", "--format", "simple"]) == 1
        err = capsys.readouterr().err
        assert "src/bad.js:2:1: INVALID_CALL_SHAPE:" in err
        assert (project / "out" / "src" / "components" / "Hello.json").is_file()
        assert not (project / "out" / "src" / "bad.json").exists()

    def test_json_errors(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--format json prints one JSON object per failure."""
        (project / "bad.js").write_text(BAD, encoding="utf-8")
        assert main(["bad.js", "--format", "json"]) == 1
        data = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert data["code"] == "INVALID_CALL_SHAPE"
        assert data["line"] == 2

    def test_enforce_descriptions_flag(self, project: Path) -> None:
        """CLI flags override defaults."""
        assert main(["src", "--enforce-descriptions"]) == 1

    def test_custom_component(self, project: Path) -> None:
        """--component replaces the stock component names."""
        assert main(["src", "--component", "Other", "--messages-dir", "out"]) == 0
        assert not (project / "out").exists()

    def test_missing_path(self, project: Path) -> None:
        """Nonexistent inputs are a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["missing.js"])
        assert exc_info.value.code == 2

    def test_config_file(self, project: Path) -> None:
        """--config reads [tool.intlextract]; flags win over it."""
        config = project / "pyproject.toml"
        config.write_text("[tool.intlextract]\nmessages-dir = 'from-config'\n", encoding="utf-8")
        assert main(["src", "--config", str(config)]) == 0
        assert (project / "from-config" / "src" / "components" / "Hello.json").is_file()
        assert main(["src", "--config", str(config), "--messages-dir", "from-flag"]) == 0
        assert (project / "from-flag" / "src" / "components" / "Hello.json").is_file()

    def test_missing_config(self, project: Path) -> None:
        """A named config file must exist."""
        with pytest.raises(SystemExit) as exc_info:
            main(["src", "--config", "nope.toml"])
        assert exc_info.value.code == 2

    def test_invalid_config(self, project: Path) -> None:
        """Bad options are a usage error."""
        config = project / "bad.toml"
        config.write_text("[tool.intlextract]\nunknown = 1\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["src", "--config", str(config)])
        assert exc_info.value.code == 2

    def test_pot_export(self, project: Path) -> None:
        """--pot writes a gettext template of all extracted units."""
        pytest.importorskip("babel")
        assert main(["src", "--pot", "messages.pot"]) == 0
        text = (project / "messages.pot").read_text(encoding="utf-8")
        assert 'msgctxt "hello"' in text


class TestParser:
    """Argument parsing."""

    def test_repeatable_names(self) -> None:
        """Name options accumulate."""
        args = build_parser().parse_args(["a.js", "--function", "m", "--function", "n"])
        assert args.function_names == ["m", "n"]
        assert args.enforce_descriptions is None

    def test_verbose_quiet_exclusive(self) -> None:
        """-v and -q cannot be combined."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["a.js", "-v", "-q"])
