"""Hypothesis property tests for message normalization.

normalize() output is what gets stored in catalogs, so it must be stable:
normalizing twice changes nothing, and the normalized text parses to the
same AST as the original.
"""

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from intlextract.diagnostics import MessageSyntaxError
from intlextract.icu import normalize, parse
from tests.strategies import icu_messages, icu_plain_text


class TestNormalizeProperties:
    """Properties of normalize() over generated valid messages."""

    @given(message=icu_messages)
    def test_valid_messages_parse(self, message: str) -> None:
        """PROPERTY: generated messages are accepted."""
        event(f"has_argument={'{' in message.replace(chr(92) + '{', '')}")
        parse(message)

    @given(message=icu_messages)
    def test_normalize_is_idempotent(self, message: str) -> None:
        """INVARIANT: normalize(normalize(x)) == normalize(x)."""
        once = normalize(message)
        assert normalize(once) == once

    @given(message=icu_messages)
    def test_normalize_preserves_ast(self, message: str) -> None:
        """INVARIANT: normalized text parses to the same AST."""
        assert parse(normalize(message)) == parse(message)

    @given(text=icu_plain_text)
    def test_plain_text_unchanged(self, text: str) -> None:
        """PROPERTY: text without special characters normalizes to itself."""
        assert normalize(text) == text


class TestNormalizeArbitraryText:
    """normalize() either succeeds idempotently or raises MessageSyntaxError."""

    @given(text=st.text(max_size=40))
    @settings(max_examples=300)
    def test_total_over_text(self, text: str) -> None:
        """PROPERTY: no other exception type escapes the parser."""
        try:
            once = normalize(text)
        except MessageSyntaxError as exc:
            event("outcome=error")
            assert exc.line >= 1
            assert exc.column >= 1
            return
        event("outcome=ok")
        assert normalize(once) == once

    @pytest.mark.fuzz
    @given(text=st.text(alphabet="{},# \\u0123456789abcdefpluralselectother=:", max_size=60))
    @settings(max_examples=2000)
    def test_syntax_heavy_text(self, text: str) -> None:
        """PROPERTY: syntax-dense input never crashes the parser."""
        try:
            once = normalize(text)
        except MessageSyntaxError:
            return
        assert normalize(once) == once
