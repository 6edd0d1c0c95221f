"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Descriptor errors (fatal to the compilation unit)
        2000-2999: Extraction warnings (offending property or usage dropped)
        3000-3999: Message syntax errors (raised by the ICU validator)
    """

    # Descriptor errors (1000-1999)
    MISSING_REQUIRED_FIELDS = 1001
    MISSING_DEFAULT_MESSAGE = 1002
    DESCRIPTION_REQUIRED = 1003
    DUPLICATE_MESSAGE_ID = 1004
    INVALID_CALL_SHAPE = 1005
    MESSAGE_PARSE_FAILED = 1006
    JSX_ESCAPE_IN_LITERAL = 1007
    SOURCE_PARSE_FAILED = 1008

    # Extraction warnings (2000-2999)
    NOT_STATICALLY_EVALUABLE_KEY = 2001
    NOT_STATICALLY_EVALUABLE_VALUE = 2002
    UNSUPPORTED_PLURAL_COMPONENT = 2003

    # Message syntax errors (3000-3999)
    MESSAGE_SYNTAX = 3001
    UNEXPECTED_EOF = 3002
    NESTING_DEPTH_EXCEEDED = 3003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Offsets are character offsets (Unicode code points), not bytes.
        Tree-sitter reports byte offsets; SourceFile converts them.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1, or column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Templates build diagnostics
    without location; NodePath.locate() fills in filename, span and the
    offending source line once the node is known.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None until located)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        filename: Compilation unit the diagnostic belongs to
        source_line: Text of the line the span starts on (for code frames)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    filename: str | None = None
    source_line: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def location(self) -> str | None:
        """Location as ``file:line:column`` (parts omitted when unknown)."""
        parts: list[str] = []
        if self.filename:
            parts.append(self.filename)
        if self.span is not None:
            parts.extend((str(self.span.line), str(self.span.column)))
        return ":".join(parts) if parts else None

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DUPLICATE_MESSAGE_ID]: [React Intl] Duplicate message id: "greeting", ...
              --> src/App.js:12:5
               |
            12 |     <FormattedMessage id="greeting" defaultMessage="Hi" />
               |     ^
              = help: Give each distinct message its own id

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
