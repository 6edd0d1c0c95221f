"""Extraction exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
A raised ExtractionError aborts the current compilation unit; warnings never
raise and are reported through the unit's warning sink instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ExtractionError(Exception):
    """Base exception for all extraction errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ExtractionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DescriptorError(ExtractionError):
    """Descriptor is incomplete.

    Raised when `id` or `defaultMessage` is missing, or when descriptions are
    enforced and `description` is missing.
    """


class DuplicateMessageError(DescriptorError):
    """Same id registered twice with a different description or default message.

    Attributes:
        message_id: The conflicting id
    """

    def __init__(self, message: str | Diagnostic, *, message_id: str) -> None:
        super().__init__(message)
        self.message_id = message_id


class MessageShapeError(ExtractionError):
    """Marker function called with something other than an object expression.

    Example:
        defineMessages(messages)  ← argument must be written inline
    """


class MessageFormatError(ExtractionError):
    """Default message text failed message-syntax validation.

    The underlying MessageSyntaxError is chained as ``__cause__``.
    """


class SourceParseError(ExtractionError):
    """Compilation unit is not valid JavaScript/JSX.

    Tree-sitter recovers from syntax errors, but a unit with errors is not
    extracted: descriptors found around a broken region cannot be trusted.
    """


class MessageSyntaxError(ExtractionError):
    """Invalid ICU message syntax.

    Raised by the message-syntax validator (intlextract.icu). Carries the
    reason and the 1-indexed position inside the message text.

    Attributes:
        reason: Human-readable parse failure reason
        line: Line inside the message text (1-indexed)
        column: Column inside the message text (1-indexed)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        reason: str = "",
        line: int = 1,
        column: int = 1,
    ) -> None:
        super().__init__(message)
        self.reason = reason or str(message)
        self.line = line
        self.column = column
