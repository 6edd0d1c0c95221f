"""Per-unit message registry with conflict detection.

One registry exists per compilation unit. It is filled while the unit is
traversed and read once when the unit is done.
"""

import logging
from collections.abc import Iterator, Mapping

from intlextract.diagnostics import DescriptorError, DuplicateMessageError, ErrorTemplate
from intlextract.enums import DescriptorField
from intlextract.syntax import NodePath

from .descriptor import MessageDescriptor

__all__ = ["MessageRegistry"]

logger = logging.getLogger(__name__)


class MessageRegistry:
    """Descriptors of one compilation unit keyed by id, in registration order.

    Example:
        >>> registry = MessageRegistry()
        >>> registry.store({DescriptorField.ID: "a", DescriptorField.DEFAULT_MESSAGE: "A"}, path)
        MessageDescriptor(id='a', default_message='A', description=None)
        >>> len(registry)
        1
    """

    __slots__ = ("_lines", "_messages", "enforce_descriptions")

    def __init__(self, *, enforce_descriptions: bool = False) -> None:
        self.enforce_descriptions = enforce_descriptions
        self._messages: dict[str, MessageDescriptor] = {}
        self._lines: dict[str, int] = {}

    def store(self, fields: Mapping[DescriptorField, str], path: NodePath) -> MessageDescriptor:
        """Register a descriptor found at path.

        Re-registering an identical descriptor is a no-op.

        Raises:
            DescriptorError: ``id`` or ``defaultMessage`` missing, or
                ``description`` missing while descriptions are enforced
            DuplicateMessageError: ``id`` already registered with a different
                ``description`` or ``defaultMessage``
        """
        message_id = fields.get(DescriptorField.ID)
        default_message = fields.get(DescriptorField.DEFAULT_MESSAGE)
        description = fields.get(DescriptorField.DESCRIPTION)

        if not (message_id and default_message):
            raise DescriptorError(path.locate(ErrorTemplate.missing_required_fields()))

        existing = self._messages.get(message_id)
        if existing is not None and (
            existing.description != description or existing.default_message != default_message
        ):
            raise DuplicateMessageError(
                path.locate(ErrorTemplate.duplicate_message_id(message_id)),
                message_id=message_id,
            )

        if self.enforce_descriptions and not description:
            raise DescriptorError(path.locate(ErrorTemplate.description_required()))

        if existing is not None:
            return existing

        descriptor = MessageDescriptor(message_id, default_message, description)
        self._messages[message_id] = descriptor
        self._lines[message_id] = path.line
        logger.debug("%s:%d: registered %r", path.unit.filename, path.line, message_id)
        return descriptor

    def get(self, message_id: str) -> MessageDescriptor | None:
        return self._messages.get(message_id)

    def lineno(self, message_id: str) -> int:
        """Line of the usage that first registered message_id."""
        return self._lines[message_id]

    def descriptors(self) -> tuple[MessageDescriptor, ...]:
        """All descriptors, in the order their ids were first registered."""
        return tuple(self._messages.values())

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._messages

    def __iter__(self) -> Iterator[MessageDescriptor]:
        return iter(self._messages.values())

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"MessageRegistry({len(self)} messages)"
