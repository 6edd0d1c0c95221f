"""Enumerations for intlextract type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class MarkerKind(StrEnum):
    """Shape of a marker usage.

    StrEnum provides automatic string conversion: str(MarkerKind.MARKUP) == "markup"
    """

    MARKUP = "markup"
    """Component usage: <FormattedMessage id="..." defaultMessage="..." />"""

    FUNCTION = "function"
    """Function call usage: defineMessages({ greeting: { id: ..., ... } })"""


class DescriptorField(StrEnum):
    """Recognized message descriptor properties."""

    ID = "id"
    DESCRIPTION = "description"
    DEFAULT_MESSAGE = "defaultMessage"


class ArgumentType(StrEnum):
    """ICU argument format types as they are printed."""

    NUMBER = "number"
    DATE = "date"
    TIME = "time"
    PLURAL = "plural"
    SELECTORDINAL = "selectordinal"
    SELECT = "select"


__all__ = [
    "ArgumentType",
    "DescriptorField",
    "MarkerKind",
]
