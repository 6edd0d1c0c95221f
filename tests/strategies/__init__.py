"""Hypothesis strategies for intlextract property-based testing.

Strategies are organized by domain:

- icu: ICU message text and AST strategies
- descriptors: Message ids, descriptor field mappings, JS identifiers

Usage:
    from tests.strategies import icu_messages, descriptor_fields
    from tests.strategies.icu import icu_plain_text
"""

from .descriptors import (
    descriptor_fields,
    descriptions,
    js_identifiers,
    message_ids,
)
from .icu import (
    icu_argument_ids,
    icu_messages,
    icu_plain_text,
    icu_selectors,
)

__all__ = [
    "descriptions",
    "descriptor_fields",
    "icu_argument_ids",
    "icu_messages",
    "icu_plain_text",
    "icu_selectors",
    "js_identifiers",
    "message_ids",
]
