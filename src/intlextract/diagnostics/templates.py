"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from intlextract.constants import JSX_GOTCHAS_URL, MESSAGE_SYNTAX_URL, PLURAL_COMPONENT_NAME

from .codes import Diagnostic, DiagnosticCode

_PREFIX = "[React Intl]"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Templates return unlocated diagnostics; callers attach the location with
    NodePath.locate().
    """

    # =========================================================================
    # DESCRIPTOR ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def missing_required_fields() -> Diagnostic:
        """Descriptor lacks `id` or `defaultMessage`.

        Returns:
            Diagnostic for MISSING_REQUIRED_FIELDS
        """
        msg = f"{_PREFIX} Message Descriptors require an `id` and `defaultMessage`."
        return Diagnostic(
            code=DiagnosticCode.MISSING_REQUIRED_FIELDS,
            message=msg,
            hint="Declare both properties with values known at build time",
        )

    @staticmethod
    def missing_default_message() -> Diagnostic:
        """Descriptor inside a marker function call lacks `defaultMessage`.

        Returns:
            Diagnostic for MISSING_DEFAULT_MESSAGE
        """
        msg = f"{_PREFIX} Message is missing a `defaultMessage`."
        return Diagnostic(
            code=DiagnosticCode.MISSING_DEFAULT_MESSAGE,
            message=msg,
            hint="Every descriptor passed to a message function needs a default message",
        )

    @staticmethod
    def description_required() -> Diagnostic:
        """Descriptions are enforced and this descriptor has none.

        Returns:
            Diagnostic for DESCRIPTION_REQUIRED
        """
        msg = f"{_PREFIX} Message must have a `description`."
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTION_REQUIRED,
            message=msg,
            hint="Add a `description` giving translators context",
        )

    @staticmethod
    def duplicate_message_id(message_id: str) -> Diagnostic:
        """Same id declared twice with different content.

        Args:
            message_id: The conflicting id

        Returns:
            Diagnostic for DUPLICATE_MESSAGE_ID
        """
        msg = (
            f'{_PREFIX} Duplicate message id: "{message_id}", '
            "but the `description` and/or `defaultMessage` are different."
        )
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MESSAGE_ID,
            message=msg,
            hint="Give each distinct message its own id",
        )

    @staticmethod
    def invalid_call_shape(function_name: str) -> Diagnostic:
        """Marker function called without inline object expressions.

        Args:
            function_name: Name of the marker function as written at the call

        Returns:
            Diagnostic for INVALID_CALL_SHAPE
        """
        msg = (
            f"{_PREFIX} `{function_name}()` must be called with an object expression "
            "with values that are React Intl Message Descriptors, also defined as "
            "object expressions."
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_CALL_SHAPE,
            message=msg,
            hint="Write the descriptors inline as object literals",
        )

    @staticmethod
    def message_parse_failed(reason: str) -> Diagnostic:
        """Default message is not valid message syntax.

        Args:
            reason: Underlying parse failure reason (with position in the message)

        Returns:
            Diagnostic for MESSAGE_PARSE_FAILED
        """
        msg = f"{_PREFIX} Message failed to parse. See: {MESSAGE_SYNTAX_URL}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_PARSE_FAILED,
            message=msg,
            hint=reason,
            help_url=MESSAGE_SYNTAX_URL,
        )

    @staticmethod
    def jsx_escape_in_literal() -> Diagnostic:
        """Backslash escapes used inside a JSX string attribute.

        Returns:
            Diagnostic for JSX_ESCAPE_IN_LITERAL
        """
        msg = (
            f"{_PREFIX} Message failed to parse. It looks like `\\`s were used for "
            "escaping, this won't work with JSX string literals. Wrap with `{}`. "
            f"See: {JSX_GOTCHAS_URL}"
        )
        return Diagnostic(
            code=DiagnosticCode.JSX_ESCAPE_IN_LITERAL,
            message=msg,
            hint='Use defaultMessage={"..."} so the string is a JavaScript literal',
            help_url=JSX_GOTCHAS_URL,
        )

    @staticmethod
    def source_parse_failed(what: str) -> Diagnostic:
        """Source text has a syntax error.

        Args:
            what: Description of the offending construct

        Returns:
            Diagnostic for SOURCE_PARSE_FAILED
        """
        msg = f"Unable to parse source: {what}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_PARSE_FAILED,
            message=msg,
            hint="Only JavaScript with JSX is supported",
        )

    # =========================================================================
    # EXTRACTION WARNINGS (2000-2999)
    # =========================================================================

    @staticmethod
    def key_not_evaluable(filename: str) -> Diagnostic:
        """Descriptor key could not be evaluated statically.

        Args:
            filename: Compilation unit being processed

        Returns:
            Diagnostic for NOT_STATICALLY_EVALUABLE_KEY
        """
        msg = (
            f"{_PREFIX} Skipping key, messages must be statically evaluate-able "
            f"for extraction. See {filename}"
        )
        return Diagnostic(
            code=DiagnosticCode.NOT_STATICALLY_EVALUABLE_KEY,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def value_not_evaluable(filename: str) -> Diagnostic:
        """Descriptor value could not be evaluated statically.

        Args:
            filename: Compilation unit being processed

        Returns:
            Diagnostic for NOT_STATICALLY_EVALUABLE_VALUE
        """
        msg = (
            f"{_PREFIX} Skipping value, messages must be statically evaluate-able "
            f"for extraction. See {filename}"
        )
        return Diagnostic(
            code=DiagnosticCode.NOT_STATICALLY_EVALUABLE_VALUE,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def unsupported_plural_component(line: int) -> Diagnostic:
        """Pluralization-only component used where a message was expected.

        Args:
            line: Line of the component usage (1-indexed)

        Returns:
            Diagnostic for UNSUPPORTED_PLURAL_COMPONENT
        """
        msg = (
            f"{_PREFIX} Line {line}: Default messages are not extracted from "
            f"<{PLURAL_COMPONENT_NAME}>, use <FormattedMessage> instead."
        )
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_PLURAL_COMPONENT,
            message=msg,
            severity="warning",
        )

    # =========================================================================
    # MESSAGE SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def message_syntax(reason: str, line: int, column: int) -> Diagnostic:
        """Message text violates ICU message syntax.

        Args:
            reason: What the parser expected or found
            line: Line inside the message text (1-indexed)
            column: Column inside the message text (1-indexed)

        Returns:
            Diagnostic for MESSAGE_SYNTAX
        """
        msg = f"{reason} at {line}:{column}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_SYNTAX,
            message=msg,
            help_url=MESSAGE_SYNTAX_URL,
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Message text ended inside an argument.

        Args:
            position: The position where the end was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected end of message at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check for unclosed braces",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Options nested deeper than the configured limit.

        Args:
            max_depth: The limit that was exceeded

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten nested plural/select arguments",
        )
