"""Shared constants for intlextract.

Centralizes the marker defaults, descriptor property names and depth limits
used across the syntax, icu and extractor packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Marker defaults: Names recognized as message markers out of the box
- Descriptor properties: Fields extracted from a marker usage
- Depth limits: Recursion protection for parsing and evaluation
- Catalog output: Metadata key and file naming

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Marker defaults
    "DEFAULT_MODULE_SOURCE_NAMES",
    "DEFAULT_COMPONENT_NAMES",
    "DEFAULT_FUNCTION_NAMES",
    "PLURAL_COMPONENT_NAME",
    # Descriptor properties
    "DESCRIPTOR_PROPS",
    # Depth limits
    "MAX_DEPTH",
    # Catalog output
    "METADATA_KEY",
    "CATALOG_SUFFIX",
    "SOURCE_SUFFIXES",
    # Documentation links
    "MESSAGE_SYNTAX_URL",
    "JSX_GOTCHAS_URL",
]

# ============================================================================
# MARKER DEFAULTS
# ============================================================================

# Module sources whose exports count as "the" message library.
DEFAULT_MODULE_SOURCE_NAMES: tuple[str, ...] = ("react-intl",)

# Markup components that declare a message through their attributes.
DEFAULT_COMPONENT_NAMES: tuple[str, ...] = (
    "FormattedMessage",
    "FormattedHTMLMessage",
    "Msg",
    "HtmlMsg",
)

# Functions whose object-expression argument holds message descriptors.
DEFAULT_FUNCTION_NAMES: tuple[str, ...] = (
    "defineMessages",
    "msgs",
)

# Looks like a marker but carries no extractable default message.
PLURAL_COMPONENT_NAME: str = "FormattedPlural"

# ============================================================================
# DESCRIPTOR PROPERTIES
# ============================================================================

DESCRIPTOR_PROPS: frozenset[str] = frozenset({"id", "description", "defaultMessage"})

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: message syntax parser (nested options), constant evaluator
# (nested expressions and const chains), message printer.
MAX_DEPTH: int = 100

# ============================================================================
# CATALOG OUTPUT
# ============================================================================

# Key under which a unit's descriptors are attached to its metadata.
METADATA_KEY: str = "react-intl"

CATALOG_SUFFIX: str = ".json"

# File suffixes picked up when a directory is given to the CLI.
SOURCE_SUFFIXES: frozenset[str] = frozenset({".js", ".jsx", ".mjs", ".cjs"})

# ============================================================================
# DOCUMENTATION LINKS
# ============================================================================

MESSAGE_SYNTAX_URL: str = "http://formatjs.io/guides/message-syntax/"
JSX_GOTCHAS_URL: str = "http://facebook.github.io/react/docs/jsx-gotchas.html"
