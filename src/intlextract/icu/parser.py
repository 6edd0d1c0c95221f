"""ICU MessageFormat parser.

Parses message text into the AST defined in :mod:`intlextract.icu.ast`,
accepting the same grammar as the message parser react-intl ships with.

Architecture:
    Every rule takes an immutable :class:`~intlextract.icu.cursor.Cursor`
    and returns a :class:`~intlextract.icu.cursor.ParseResult`. There is no
    error recovery: the first error aborts the parse with
    :class:`~intlextract.diagnostics.MessageSyntaxError`.

Grammar:
    pattern   := (text | argument)*
    argument  := '{' _ id _ (',' _ format)? _ '}'
    format    := simple | plural | selectordinal | select
    simple    := ('number' | 'date' | 'time') _ (',' _ style)?
    plural    := 'plural' _ ',' _ ('offset' _ ':' _ number)? option+
    ordinal   := 'selectordinal' _ ',' _ option+
    select    := 'select' _ ',' _ option+
    option    := _ selector _ '{' _ pattern '}'
"""

import re
from typing import NoReturn

from intlextract.constants import MAX_DEPTH
from intlextract.core.depth_guard import DepthGuard, DepthLimitExceededError
from intlextract.diagnostics import ErrorTemplate, MessageSyntaxError
from intlextract.enums import ArgumentType

from .ast import (
    ArgumentElement,
    ArgumentFormat,
    Option,
    Pattern,
    PatternElement,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
    TextElement,
)
from .cursor import WHITESPACE, Cursor, ParseResult

__all__ = ["MessageFormatParser"]

# Characters that terminate an argument id.
_ID_STOP: frozenset[str] = WHITESPACE | frozenset(",.+={}#")

# Characters that terminate a style or selector token.
_TOKEN_STOP: frozenset[str] = WHITESPACE | frozenset("{}\\")

_CANONICAL_NUMBER = re.compile(r"0|[1-9][0-9]*")

_HEX_DIGITS: str = "0123456789abcdefABCDEF"

_UNICODE_ESCAPE_LEN: int = 4

_SIMPLE_TYPES: dict[str, ArgumentType] = {
    "number": ArgumentType.NUMBER,
    "date": ArgumentType.DATE,
    "time": ArgumentType.TIME,
}


def _is_control(ch: str) -> bool:
    """Control characters are only allowed as whitespace."""
    return (ord(ch) < 0x20 and ch not in WHITESPACE) or ch == "\x7f"


class MessageFormatParser:
    """ICU message parser using immutable cursor pattern.

    Attributes:
        max_nesting_depth: Maximum nesting of plural/select options (default: 100)
    """

    __slots__ = ("_max_nesting_depth",)

    def __init__(self, *, max_nesting_depth: int | None = None) -> None:
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed option nesting depth."""
        return self._max_nesting_depth

    def parse(self, text: str) -> Pattern:
        """Parse message text into a Pattern.

        Args:
            text: Message text, e.g. "Hello {name}"

        Returns:
            Parsed Pattern

        Raises:
            MessageSyntaxError: On the first syntax error
        """
        guard = DepthGuard(max_depth=self._max_nesting_depth)
        result = self._parse_pattern(Cursor(text, 0), guard, nested=False)
        if not result.cursor.is_eof:
            # Only an unbalanced '}' stops a top-level pattern early.
            self._fail(result.cursor, "Unexpected '}'")
        return result.value

    # ------------------------------------------------------------------
    # Error reporting
    # ------------------------------------------------------------------

    @staticmethod
    def _fail(cursor: Cursor, reason: str) -> NoReturn:
        line, column = cursor.compute_line_col()
        if cursor.is_eof:
            reason = f"{reason} but found end of message"
        raise MessageSyntaxError(
            ErrorTemplate.message_syntax(reason, line, column),
            reason=reason,
            line=line,
            column=column,
        )

    def _require(self, cursor: Cursor, char: str) -> Cursor:
        advanced = cursor.expect(char)
        if advanced is None:
            self._fail(cursor, f"Expected '{char}'")
        return advanced

    # ------------------------------------------------------------------
    # Pattern and text
    # ------------------------------------------------------------------

    def _parse_pattern(
        self, cursor: Cursor, guard: DepthGuard, *, nested: bool
    ) -> ParseResult[Pattern]:
        elements: list[PatternElement] = []
        while not cursor.is_eof:
            ch = cursor.current
            if ch == "}":
                break
            if ch == "{":
                argument = self._parse_argument(cursor, guard)
                elements.append(argument.value)
                cursor = argument.cursor
            else:
                text = self._parse_text(cursor)
                elements.append(text.value)
                cursor = text.cursor
        if nested and cursor.is_eof:
            self._fail(cursor, "Expected '}'")
        return ParseResult(Pattern(tuple(elements)), cursor)

    def _parse_text(self, cursor: Cursor) -> ParseResult[TextElement]:
        chars: list[str] = []
        while not cursor.is_eof and cursor.current not in "{}":
            ch = cursor.current
            if ch == "\\":
                decoded = self._parse_escape(cursor)
                chars.append(decoded.value)
                cursor = decoded.cursor
                continue
            if _is_control(ch):
                self._fail(cursor, f"Invalid character U+{ord(ch):04X}")
            chars.append(ch)
            cursor = cursor.advance()
        return ParseResult(TextElement("".join(chars)), cursor)

    def _parse_escape(self, cursor: Cursor) -> ParseResult[str]:
        nxt = cursor.peek(1)
        match nxt:
            case "{" | "}":
                return ParseResult(nxt, cursor.advance(2))
            case "#":
                return ParseResult("\\#", cursor.advance(2))
            case "u":
                digits = cursor.advance(2).slice_ahead(_UNICODE_ESCAPE_LEN)
                if len(digits) == _UNICODE_ESCAPE_LEN and all(d in _HEX_DIGITS for d in digits):
                    return ParseResult(chr(int(digits, 16)), cursor.advance(2 + _UNICODE_ESCAPE_LEN))
                self._fail(cursor, "Invalid unicode escape sequence")
            case _:
                self._fail(cursor, "Invalid escape sequence")

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------

    def _parse_argument(self, cursor: Cursor, guard: DepthGuard) -> ParseResult[ArgumentElement]:
        cursor = self._require(cursor, "{").skip_whitespace()

        id_start = cursor
        arg_id = cursor.take_while(lambda ch: ch not in _ID_STOP and not _is_control(ch))
        if not arg_id.value:
            self._fail(id_start, "Expected argument id")
        if arg_id.value[0].isdigit() and not _CANONICAL_NUMBER.fullmatch(arg_id.value):
            self._fail(id_start, f"Invalid argument id '{arg_id.value}'")
        cursor = arg_id.cursor.skip_whitespace()

        arg_format: ArgumentFormat | None = None
        if not cursor.is_eof and cursor.current == ",":
            parsed = self._parse_format(cursor.advance().skip_whitespace(), guard)
            arg_format = parsed.value
            cursor = parsed.cursor.skip_whitespace()

        cursor = self._require(cursor, "}")
        return ParseResult(ArgumentElement(arg_id.value, arg_format), cursor)

    def _parse_format(self, cursor: Cursor, guard: DepthGuard) -> ParseResult[ArgumentFormat]:
        start = cursor
        keyword = cursor.take_while(str.isalpha)
        cursor = keyword.cursor.skip_whitespace()

        if keyword.value in _SIMPLE_TYPES:
            style: str | None = None
            if not cursor.is_eof and cursor.current == ",":
                cursor = cursor.advance().skip_whitespace()
                token = self._parse_token(cursor, "Expected format style")
                style, cursor = token.value, token.cursor
            return ParseResult(SimpleFormat(_SIMPLE_TYPES[keyword.value], style), cursor)

        match keyword.value:
            case "plural":
                cursor = self._require(cursor, ",").skip_whitespace()
                offset = 0
                if cursor.slice_ahead(6) == "offset":
                    cursor = cursor.advance(6).skip_whitespace()
                    cursor = self._require(cursor, ":").skip_whitespace()
                    number = self._parse_number(cursor)
                    offset, cursor = int(number.value), number.cursor
                options = self._parse_options(cursor, guard)
                return ParseResult(PluralFormat(False, offset, options.value), options.cursor)
            case "selectordinal":
                cursor = self._require(cursor, ",").skip_whitespace()
                options = self._parse_options(cursor, guard)
                return ParseResult(PluralFormat(True, 0, options.value), options.cursor)
            case "select":
                cursor = self._require(cursor, ",").skip_whitespace()
                options = self._parse_options(cursor, guard)
                return ParseResult(SelectFormat(options.value), options.cursor)
            case _:
                self._fail(
                    start,
                    "Expected argument type (number, date, time, plural, selectordinal, select)",
                )

    def _parse_options(self, cursor: Cursor, guard: DepthGuard) -> ParseResult[tuple[Option, ...]]:
        options: list[Option] = []
        while True:
            cursor = cursor.skip_whitespace()
            if cursor.is_eof or cursor.current == "}":
                break

            if cursor.current == "=":
                number = self._parse_number(cursor.advance())
                selector, cursor = f"={number.value}", number.cursor
            else:
                token = self._parse_token(cursor, "Expected option selector")
                selector, cursor = token.value, token.cursor

            cursor = self._require(cursor.skip_whitespace(), "{").skip_whitespace()
            try:
                with guard:
                    value = self._parse_pattern(cursor, guard, nested=True)
            except DepthLimitExceededError:
                self._fail(cursor, f"Maximum nesting depth ({guard.max_depth}) exceeded")
            cursor = self._require(value.cursor, "}")
            options.append(Option(selector, value.value))

        if not options:
            self._fail(cursor, "Expected at least one option")
        return ParseResult(tuple(options), cursor)

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def _parse_token(self, cursor: Cursor, expectation: str) -> ParseResult[str]:
        token = cursor.take_while(lambda ch: ch not in _TOKEN_STOP and not _is_control(ch))
        if not token.value:
            self._fail(cursor, expectation)
        return token

    def _parse_number(self, cursor: Cursor) -> ParseResult[str]:
        digits = cursor.take_while(lambda ch: ch in "0123456789")
        if not digits.value:
            self._fail(cursor, "Expected number")
        if not _CANONICAL_NUMBER.fullmatch(digits.value):
            self._fail(cursor, f"Invalid number '{digits.value}'")
        return digits
