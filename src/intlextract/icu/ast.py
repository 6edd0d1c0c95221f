"""ICU MessageFormat AST node definitions.

Mirrors the structure produced by the message parser used by react-intl:
a pattern is a sequence of text runs and arguments; arguments optionally
carry a simple (number/date/time) or optional (plural/select) format.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from intlextract.enums import ArgumentType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern structure
    "Pattern",
    "TextElement",
    "ArgumentElement",
    # Formats
    "SimpleFormat",
    "PluralFormat",
    "SelectFormat",
    "Option",
    # Type aliases
    "PatternElement",
    "ArgumentFormat",
    "MessageNode",
]


@dataclass(frozen=True, slots=True)
class Pattern:
    """Root node: sequence of text and argument elements.

    Example:
        "Hello {name}!" ->
        Pattern((TextElement("Hello "), ArgumentElement("name"), TextElement("!")))
    """

    elements: tuple["PatternElement", ...]


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text with escapes already decoded.

    `\\#` is the one escape kept verbatim, so printing can reproduce it.
    """

    value: str


@dataclass(frozen=True, slots=True)
class SimpleFormat:
    """number, date or time format with optional style.

    Examples:
        {price, number, currency}
        {when, date}
    """

    type: ArgumentType
    style: str | None = None


@dataclass(frozen=True, slots=True)
class Option:
    """One selector branch of a plural/select argument: `one {# item}`."""

    selector: str
    value: Pattern


@dataclass(frozen=True, slots=True)
class PluralFormat:
    """plural or selectordinal format.

    Attributes:
        ordinal: True for selectordinal
        offset: Plural offset (0 when absent)
        options: Selector branches in source order
    """

    ordinal: bool
    offset: int
    options: tuple[Option, ...]

    @property
    def type(self) -> ArgumentType:
        """Argument type as printed."""
        return ArgumentType.SELECTORDINAL if self.ordinal else ArgumentType.PLURAL


@dataclass(frozen=True, slots=True)
class SelectFormat:
    """select format: `{gender, select, male {He} female {She} other {They}}`."""

    options: tuple[Option, ...]

    @property
    def type(self) -> ArgumentType:
        """Argument type as printed."""
        return ArgumentType.SELECT


@dataclass(frozen=True, slots=True)
class ArgumentElement:
    """Placeholder `{id}` with optional format."""

    id: str
    format: "ArgumentFormat | None" = None


type PatternElement = TextElement | ArgumentElement
type ArgumentFormat = SimpleFormat | PluralFormat | SelectFormat
type MessageNode = Pattern | TextElement | ArgumentElement | SimpleFormat | PluralFormat | SelectFormat | Option
