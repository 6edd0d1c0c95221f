"""Print a message AST back to normalized ICU message text.

The printed form is what ends up as `defaultMessage` in the catalog:
whitespace inside arguments is canonicalized, escapes are rewritten in one
consistent style, and text is reproduced otherwise unchanged.

Python 3.13+.
"""

from .ast import (
    ArgumentElement,
    Option,
    Pattern,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
    TextElement,
)
from .visitor import MessageVisitor

__all__ = ["MessagePrinter", "print_message"]

# `\#` survives parsing verbatim and is printed as-is.
_ESCAPED_HASH = "\\#"


def _escape_char(ch: str) -> str:
    match ch:
        case "{" | "}":
            return "\\" + ch
        case "\\":
            # A lone backslash can only come from a \u escape; the escape
            # grammar has no `\\`, so it is printed back as a unicode escape.
            return "\\u005C"
        case _ if (ord(ch) < 0x20 and ch not in " \t\n\r") or ch == "\x7f":
            return f"\\u{ord(ch):04X}"
        case _:
            return ch


def _escape_text(value: str) -> str:
    parts: list[str] = []
    i = 0
    while i < len(value):
        if value.startswith(_ESCAPED_HASH, i):
            parts.append(_ESCAPED_HASH)
            i += len(_ESCAPED_HASH)
            continue
        parts.append(_escape_char(value[i]))
        i += 1
    return "".join(parts)


class MessagePrinter(MessageVisitor[str]):
    """Converts a message AST to normalized message text.

    Usage:
        >>> from intlextract.icu import parse
        >>> print_message(parse("{ count ,plural,one{# item}other{# items}}"))
        '{count, plural, one {# item} other {# items}}'
    """

    def visit_Pattern(self, node: Pattern) -> str:
        return "".join(self.visit(element) for element in node.elements)

    def visit_TextElement(self, node: TextElement) -> str:
        return _escape_text(node.value)

    def visit_ArgumentElement(self, node: ArgumentElement) -> str:
        if node.format is None:
            return f"{{{node.id}}}"
        return f"{{{node.id}, {self.visit(node.format)}}}"

    def visit_SimpleFormat(self, node: SimpleFormat) -> str:
        if node.style:
            return f"{node.type}, {node.style}"
        return str(node.type)

    def visit_PluralFormat(self, node: PluralFormat) -> str:
        offset = f" offset:{node.offset}" if node.offset else ""
        return f"{node.type},{offset}{self._print_options(node.options)}"

    def visit_SelectFormat(self, node: SelectFormat) -> str:
        return f"{node.type},{self._print_options(node.options)}"

    def visit_Option(self, node: Option) -> str:
        return f" {node.selector} {{{self.visit(node.value)}}}"

    def _print_options(self, options: tuple[Option, ...]) -> str:
        return "".join(self.visit(option) for option in options)


def print_message(pattern: Pattern) -> str:
    """Print a parsed message in normalized form."""
    return MessagePrinter().visit(pattern)
