"""Diagnostic system for extraction errors and warnings.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DescriptorError,
    DuplicateMessageError,
    ExtractionError,
    MessageFormatError,
    MessageShapeError,
    MessageSyntaxError,
    SourceParseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DescriptorError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateMessageError",
    "ErrorTemplate",
    "ExtractionError",
    "MessageFormatError",
    "MessageShapeError",
    "MessageSyntaxError",
    "OutputFormat",
    "SourceParseError",
    "SourceSpan",
]
