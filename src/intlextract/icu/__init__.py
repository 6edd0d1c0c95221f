"""ICU MessageFormat syntax: parser, AST, printer.

This is the message-syntax validator the extractor runs every default
message through. ``normalize`` either returns the canonical rendering of a
message or raises MessageSyntaxError with the reason and position.

Python 3.13+.
"""

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
from .cursor import Cursor, ParseResult
from .parser import MessageFormatParser
from .printer import MessagePrinter, print_message
from .visitor import MessageVisitor

__all__ = [
    "ArgumentElement",
    "ArgumentFormat",
    "Cursor",
    "MessageFormatParser",
    "MessagePrinter",
    "MessageVisitor",
    "Option",
    "ParseResult",
    "Pattern",
    "PatternElement",
    "PluralFormat",
    "SelectFormat",
    "SimpleFormat",
    "TextElement",
    "normalize",
    "parse",
    "print_message",
]


def parse(text: str) -> Pattern:
    """Parse ICU message text into AST.

    Example:
        >>> parse("Hello {name}").elements[1].id
        'name'

    Raises:
        MessageSyntaxError: If the text is not valid message syntax
    """
    return MessageFormatParser().parse(text)


def normalize(text: str) -> str:
    """Validate message text and return its normalized rendering.

    Example:
        >>> normalize("Hello { name }")
        'Hello {name}'

    Raises:
        MessageSyntaxError: If the text is not valid message syntax
    """
    return print_message(parse(text))
