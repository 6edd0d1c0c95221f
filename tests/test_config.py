"""Tests for extraction options and their loading."""

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intlextract.config import ExtractionOptions, load_options
from intlextract.constants import DEFAULT_COMPONENT_NAMES, DEFAULT_FUNCTION_NAMES


class TestDefaults:
    """ExtractionOptions() is the stock react-intl setup."""

    def test_defaults(self) -> None:
        """Stock markers, no description policy, no catalogs."""
        options = ExtractionOptions()
        assert options.module_source_names == ("react-intl",)
        assert options.component_names == DEFAULT_COMPONENT_NAMES
        assert options.function_names == DEFAULT_FUNCTION_NAMES
        assert options.enforce_descriptions is False
        assert options.messages_dir is None

    def test_frozen(self) -> None:
        """Options are immutable."""
        options = ExtractionOptions()
        with pytest.raises(AttributeError):
            options.messages_dir = "x"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"component_names": ["FormattedMessage"]},
            {"function_names": ("ok", 1)},
            {"enforce_descriptions": "yes"},
        ],
    )
    def test_type_validation(self, kwargs: dict[str, object]) -> None:
        """Wrong field types are rejected at construction."""
        with pytest.raises(TypeError):
            ExtractionOptions(**kwargs)  # type: ignore[arg-type]


class TestFromMapping:
    """Mapping keys in any common spelling."""

    @pytest.mark.parametrize("key", ["messagesDir", "messages_dir", "messages-dir"])
    def test_key_spellings(self, key: str) -> None:
        """camelCase, snake_case and kebab-case are equivalent."""
        assert ExtractionOptions.from_mapping({key: "out"}).messages_dir == "out"

    def test_babel_plugin_style(self) -> None:
        """A Babel plugin options object converts directly."""
        options = ExtractionOptions.from_mapping({
            "moduleSourceNames": ["@app/intl"],
            "componentNames": ["T"],
            "functionNames": ["m"],
            "enforceDescriptions": True,
        })
        assert options.module_source_names == ("@app/intl",)
        assert options.component_names == ("T",)
        assert options.function_names == ("m",)
        assert options.enforce_descriptions is True

    def test_unknown_key(self) -> None:
        """Typos are reported, not ignored."""
        with pytest.raises(ValueError, match="Unknown option 'messageDir'"):
            ExtractionOptions.from_mapping({"messageDir": "out"})

    def test_name_list_must_be_list(self) -> None:
        """A bare string is not a list of names."""
        with pytest.raises(ValueError, match="list of strings"):
            ExtractionOptions.from_mapping({"componentNames": "FormattedMessage"})

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("0", False), ("On", True), (1, True)])
    def test_enforce_descriptions_coercion(self, raw: object, expected: bool) -> None:
        """Flags from text configs are coerced to bool."""
        assert ExtractionOptions.from_mapping({"enforce_descriptions": raw}).enforce_descriptions is expected

    def test_path_messages_dir(self, tmp_path: Path) -> None:
        """Path objects are stored as strings."""
        assert ExtractionOptions.from_mapping({"messages_dir": tmp_path}).messages_dir == str(tmp_path)

    @given(names=st.lists(st.text(min_size=1, max_size=10), max_size=5))
    def test_name_lists_become_tuples(self, names: list[str]) -> None:
        """PROPERTY: any list of strings round-trips as a tuple."""
        assert ExtractionOptions.from_mapping({"function-names": names}).function_names == tuple(names)


class TestMerged:
    """Layering overrides."""

    def test_merged_keeps_unset_fields(self) -> None:
        """Only given keys change."""
        base = ExtractionOptions(messages_dir="out", enforce_descriptions=True)
        merged = base.merged({"component_names": ["T"]})
        assert merged.messages_dir == "out"
        assert merged.enforce_descriptions is True
        assert merged.component_names == ("T",)
        assert base.component_names == DEFAULT_COMPONENT_NAMES


class TestLoadOptions:
    """[tool.intlextract] in pyproject.toml."""

    def test_reads_table(self, tmp_path: Path) -> None:
        """Options come from the tool table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            "[project]\nname = 'web'\n\n"
            "[tool.intlextract]\n"
            "messages-dir = 'build/messages'\n"
            "enforce-descriptions = true\n"
            "component-names = ['FormattedMessage']\n",
            encoding="utf-8",
        )
        options = load_options(pyproject)
        assert options.messages_dir == "build/messages"
        assert options.enforce_descriptions is True
        assert options.component_names == ("FormattedMessage",)

    def test_missing_table(self, tmp_path: Path) -> None:
        """A pyproject without the table gives defaults."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'web'\n", encoding="utf-8")
        assert load_options(pyproject) == ExtractionOptions()

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file gives defaults."""
        assert load_options(tmp_path / "nope.toml") == ExtractionOptions()

    def test_default_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a path, ./pyproject.toml is read."""
        (tmp_path / "pyproject.toml").write_text("[tool.intlextract]\nmessagesDir = 'm'\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert load_options().messages_dir == "m"

    def test_invalid_table(self, tmp_path: Path) -> None:
        """Unknown keys in the table are errors."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.intlextract]\ncolour = 'red'\n", encoding="utf-8")
        with pytest.raises(ValueError, match="colour"):
            load_options(pyproject)
