"""Rendering of extraction diagnostics for terminals and tooling.

The CLI picks a style with ``--format``: rust-style frames for people,
JSON lines for editors and CI annotations.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output with code frame (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns a Diagnostic into rust-style, one-line or JSON text.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)
        code_frame: Show the offending source line under the location

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        src/App.js:4:7: DUPLICATE_MESSAGE_ID: [React Intl] Duplicate message id: "greeting", ...
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False
    code_frame: bool = True

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[MESSAGE_PARSE_FAILED]: [React Intl] Message failed to parse. ...
              --> src/App.js:3:39
               |
             3 | <FormattedMessage id="x" defaultMessage="{oops" />
               |                                       ^
              = help: Expected '}' at 1:6
              = note: see http://formatjs.io/guides/message-syntax/
        """
        severity = diagnostic.severity

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        location = diagnostic.location
        if location:
            parts.append(f"  --> {location}")

        if self.code_frame and diagnostic.span and diagnostic.source_line is not None:
            gutter = len(str(diagnostic.span.line))
            pad = " " * gutter
            parts.append(f" {pad} |")
            parts.append(f" {diagnostic.span.line} | {diagnostic.source_line}")
            parts.append(f" {pad} | {' ' * (diagnostic.span.column - 1)}^")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            src/App.js:4:7: MISSING_REQUIRED_FIELDS: [React Intl] Message Descriptors require ...
        """
        prefix = f"{diagnostic.location}: " if diagnostic.location else ""
        return f"{prefix}{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "DUPLICATE_MESSAGE_ID", "code_value": 1004, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.filename:
            data["filename"] = diagnostic.filename

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)
