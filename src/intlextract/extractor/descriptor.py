"""Message descriptors and the builder that reduces marker properties to them.

Python 3.13+.
"""

from dataclasses import dataclass
from typing import Any

from intlextract.constants import DESCRIPTOR_PROPS
from intlextract.diagnostics import ErrorTemplate, MessageFormatError, MessageSyntaxError
from intlextract.enums import DescriptorField, MarkerKind
from intlextract.icu import normalize
from intlextract.syntax import Confident, NodePath, js_to_string

from .evaluation import evaluate_key, evaluate_value

__all__ = [
    "DescriptorFields",
    "MessageDescriptor",
    "PropertyPair",
    "build_descriptor",
    "markup_pairs",
    "object_pairs",
]

type PropertyPair = tuple[NodePath, NodePath | None]
"""(key node, value node) before evaluation; value is None for `<Msg flag />`."""

type DescriptorFields = dict[DescriptorField, str]
"""Whatever descriptor properties a usage resolved; completeness is checked on store."""


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """An extracted message.

    Attributes:
        id: Message identifier, unique within a compilation unit
        default_message: Normalized ICU message text
        description: Optional context for translators
    """

    id: str
    default_message: str
    description: str | None = None

    @classmethod
    def from_fields(cls, fields: DescriptorFields) -> "MessageDescriptor":
        """Create from builder output that has both required fields."""
        return cls(
            id=fields[DescriptorField.ID],
            default_message=fields[DescriptorField.DEFAULT_MESSAGE],
            description=fields.get(DescriptorField.DESCRIPTION),
        )

    def to_dict(self) -> dict[str, Any]:
        """Catalog form: ``id``, ``description`` (when present), ``defaultMessage``."""
        data: dict[str, Any] = {"id": self.id}
        if self.description is not None:
            data["description"] = self.description
        data["defaultMessage"] = self.default_message
        return data


def markup_pairs(element: NodePath) -> list[PropertyPair]:
    """``key=value`` attributes of a JSX element; spread attributes are ignored."""
    pairs: list[PropertyPair] = []
    for attribute in element.get_all("attribute"):
        if not attribute.is_markup_attribute():
            continue
        children = [child for child in attribute.named_children if child.type != "ERROR"]
        pairs.append((children[0], children[1] if len(children) > 1 else None))
    return pairs


def object_pairs(obj: NodePath) -> list[PropertyPair]:
    """``key: value`` members of an object expression.

    Shorthand members (``{ id }``) pair the name with itself; spreads and
    methods carry no descriptor property and are skipped.
    """
    pairs: list[PropertyPair] = []
    for member in obj.named_children:
        match member.type:
            case "pair":
                key, value = member.get("key"), member.get("value")
                if key is not None and value is not None:
                    pairs.append((key, value))
            case "shorthand_property_identifier":
                pairs.append((member, member))
            case _:
                pass
    return pairs


def build_descriptor(pairs: list[PropertyPair], *, kind: MarkerKind) -> DescriptorFields:
    """Reduce property pairs to descriptor fields.

    Keys outside ``id``/``description``/``defaultMessage`` are ignored. Keys
    or values that are not statically known are skipped with a warning. The
    default message is validated and stored normalized.

    Args:
        pairs: Key/value nodes in source order (later pairs win)
        kind: Shape of the usage; markup usages get a JSX-specific hint
            when escapes break the default message

    Raises:
        MessageFormatError: Default message is not valid message syntax
    """
    fields: DescriptorFields = {}
    for key_path, value_path in pairs:
        match evaluate_key(key_path):
            case Confident(value=str() as key) if key in DESCRIPTOR_PROPS:
                prop = DescriptorField(key)
            case _:
                continue

        match evaluate_value(value_path):
            case Confident(value=value):
                pass
            case _:
                continue

        if prop is DescriptorField.DEFAULT_MESSAGE:
            fields[prop] = _normalize_default_message(value, value_path or key_path, kind=kind)
        elif value is not None:
            fields[prop] = value if isinstance(value, str) else js_to_string(value)
    return fields


def _normalize_default_message(value: object, value_path: NodePath, *, kind: MarkerKind) -> str:
    if not isinstance(value, str):
        reason = f"Expected message text but found {js_to_string(value)}"
        raise MessageFormatError(value_path.locate(ErrorTemplate.message_parse_failed(reason)))
    try:
        return normalize(value)
    except MessageSyntaxError as exc:
        if kind is MarkerKind.MARKUP and value_path.is_literal() and "\\\\" in value:
            raise MessageFormatError(value_path.locate(ErrorTemplate.jsx_escape_in_literal())) from exc
        reason = exc.diagnostic.message if exc.diagnostic is not None else exc.reason
        raise MessageFormatError(value_path.locate(ErrorTemplate.message_parse_failed(reason))) from exc
