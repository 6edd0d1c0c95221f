"""Hypothesis strategies for message descriptors."""

from hypothesis import strategies as st

from intlextract.enums import DescriptorField

__all__ = [
    "descriptions",
    "descriptor_fields",
    "js_identifiers",
    "message_ids",
]

message_ids = st.from_regex(r"[a-z][a-z0-9_.]{0,15}", fullmatch=True)

descriptions = st.one_of(st.none(), st.text(max_size=20))

_default_messages = st.text(
    alphabet=st.characters(blacklist_categories=["Cc", "Cs"], blacklist_characters=["{", "}", "\\"]),
    min_size=1,
    max_size=20,
)

# Underscore prefix keeps clear of reserved words.
js_identifiers = st.from_regex(r"_[a-zA-Z0-9_]{0,10}", fullmatch=True)


@st.composite
def descriptor_fields(
    draw: st.DrawFn,
    message_id: st.SearchStrategy[str] = message_ids,
) -> dict[DescriptorField, str]:
    """Complete descriptor fields (id and defaultMessage, maybe description)."""
    fields = {
        DescriptorField.ID: draw(message_id),
        DescriptorField.DEFAULT_MESSAGE: draw(_default_messages),
    }
    description = draw(descriptions)
    if description is not None:
        fields[DescriptorField.DESCRIPTION] = description
    return fields
