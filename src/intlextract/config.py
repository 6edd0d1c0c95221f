"""Extraction options and their loading from mappings and pyproject.toml.

Options can come from three places, later ones overriding earlier ones:
defaults, the ``[tool.intlextract]`` table of a pyproject.toml, and CLI
flags. Keys are accepted in camelCase, as in Babel plugin configs
(``moduleSourceNames``), snake_case (``module_source_names``) or kebab-case
(``module-source-names``, the TOML convention).

Example pyproject.toml:

    [tool.intlextract]
    messages-dir = "build/messages"
    enforce-descriptions = true
    component-names = ["FormattedMessage", "Msg"]

Python 3.13+.
"""

import logging
import os
import re
import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from intlextract.constants import (
    DEFAULT_COMPONENT_NAMES,
    DEFAULT_FUNCTION_NAMES,
    DEFAULT_MODULE_SOURCE_NAMES,
)

__all__ = ["ExtractionOptions", "load_options"]

logger = logging.getLogger(__name__)

_TOOL_TABLE = "intlextract"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")

_NAME_LIST_FIELDS: frozenset[str] = frozenset({
    "module_source_names",
    "component_names",
    "function_names",
})


@dataclass(frozen=True, slots=True)
class ExtractionOptions:
    """Immutable extraction configuration.

    All fields have defaults; ``ExtractionOptions()`` extracts from the
    stock react-intl markers and writes no catalog files.

    Attributes:
        module_source_names: Modules whose exports count as markers
        component_names: JSX components that declare a message
        function_names: Functions whose object argument declares messages
        enforce_descriptions: Require a non-empty description on every message
        messages_dir: Root directory for per-file JSON catalogs (None: do
            not write catalogs)

    Example:
        >>> options = ExtractionOptions.from_mapping({"messagesDir": "build/messages"})
        >>> options.messages_dir
        'build/messages'
    """

    module_source_names: tuple[str, ...] = DEFAULT_MODULE_SOURCE_NAMES
    component_names: tuple[str, ...] = DEFAULT_COMPONENT_NAMES
    function_names: tuple[str, ...] = DEFAULT_FUNCTION_NAMES
    enforce_descriptions: bool = False
    messages_dir: str | None = None

    def __post_init__(self) -> None:
        """Validate field types at construction time.

        Raises:
            TypeError: If a name list is not a tuple of strings or
                enforce_descriptions is not a bool.
        """
        for name in _NAME_LIST_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, tuple) or not all(isinstance(item, str) for item in value):
                msg = f"{name} must be a tuple of strings, got {value!r}"
                raise TypeError(msg)
        if not isinstance(self.enforce_descriptions, bool):
            msg = f"enforce_descriptions must be a bool, got {self.enforce_descriptions!r}"
            raise TypeError(msg)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ExtractionOptions":
        """Build options from a config mapping.

        Args:
            mapping: Keys in camelCase, snake_case or kebab-case

        Raises:
            ValueError: Unknown key, or a name list that is not a list of strings
        """
        return cls().merged(mapping)

    def merged(self, mapping: Mapping[str, Any]) -> "ExtractionOptions":
        """Copy with the values in mapping applied on top.

        Raises:
            ValueError: Unknown key, or a name list that is not a list of strings
        """
        known = {f.name for f in fields(self)}
        changes: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _field_name(key)
            if name not in known:
                msg = f"Unknown option {key!r}; expected one of {sorted(known)}"
                raise ValueError(msg)
            changes[name] = _coerce(name, value)
        return replace(self, **changes)


def load_options(pyproject: str | os.PathLike[str] | None = None) -> ExtractionOptions:
    """Read options from the ``[tool.intlextract]`` table of a pyproject.toml.

    A missing file or table yields the defaults.

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML
        ValueError: The table contains unknown or malformed options
    """
    path = Path(pyproject) if pyproject is not None else Path("pyproject.toml")
    if not path.is_file():
        logger.debug("No %s, using default options", path)
        return ExtractionOptions()
    with path.open("rb") as f:
        data = tomllib.load(f)
    table = data.get("tool", {}).get(_TOOL_TABLE, {})
    logger.debug("Loaded %d options from %s", len(table), path)
    return ExtractionOptions.from_mapping(table)


def _field_name(key: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower().replace("-", "_")


def _coerce(name: str, value: Any) -> Any:
    if name in _NAME_LIST_FIELDS:
        if isinstance(value, str) or not isinstance(value, Sequence):
            msg = f"{name} must be a list of strings, got {value!r}"
            raise ValueError(msg)
        if not all(isinstance(item, str) for item in value):
            msg = f"{name} must be a list of strings, got {value!r}"
            raise ValueError(msg)
        return tuple(value)
    if name == "messages_dir":
        return None if value is None else os.fspath(value)
    if name == "enforce_descriptions":
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)
    return value
