"""MessageExtractor: the extraction hooks driven by the tree traversal.

Per-unit state lives in a UnitState created by ``on_compilation_unit_enter``
and handed back to every other hook; the extractor itself holds only the
options, so one instance can serve any number of units.

Python 3.13+.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from intlextract.config import ExtractionOptions
from intlextract.diagnostics import DescriptorError, ErrorTemplate, MessageShapeError
from intlextract.enums import DescriptorField, MarkerKind
from intlextract.syntax import NodePath, SourceFile, traverse

from .catalog import emit
from .descriptor import build_descriptor, markup_pairs, object_pairs
from .matcher import is_function_marker, is_markup_marker, is_unsupported_marker
from .registry import MessageRegistry

__all__ = ["MessageExtractor", "UnitState"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UnitState:
    """State of one compilation unit while it is being extracted.

    Attributes:
        unit: The compilation unit
        registry: Descriptors registered so far
        catalog_path: Catalog written on exit, if any
    """

    unit: SourceFile
    registry: MessageRegistry
    catalog_path: Path | None = field(default=None)


class MessageExtractor:
    """Extracts message descriptors from marker usages.

    Implements the ExtractionHooks protocol; ``extract()`` runs all hooks
    over one unit.

    Example:
        >>> unit = SourceFile(
        ...     "import {FormattedMessage} from 'react-intl';\\n"
        ...     "<FormattedMessage id='hi' defaultMessage='Hello {name}' />;",
        ...     "hello.js",
        ... )
        >>> state = MessageExtractor().extract(unit)
        >>> state.registry.get("hi").default_message
        'Hello {name}'
    """

    __slots__ = ("options",)

    def __init__(self, options: ExtractionOptions | None = None) -> None:
        self.options = options if options is not None else ExtractionOptions()

    def extract(self, unit: SourceFile) -> UnitState:
        """Check the unit parses cleanly, then traverse it with these hooks.

        Raises:
            SourceParseError: The unit has syntax errors
            ExtractionError: A marker usage is invalid (subclass says which)
        """
        unit.check_syntax()
        return traverse(unit, self)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def on_compilation_unit_enter(self, unit: SourceFile) -> UnitState:
        logger.debug("Extracting %s", unit.filename)
        return UnitState(unit, MessageRegistry(enforce_descriptions=self.options.enforce_descriptions))

    def on_markup_node(self, path: NodePath, state: UnitState) -> None:
        options = self.options
        if is_unsupported_marker(path, options.module_source_names):
            path.unit.warn(path.locate(ErrorTemplate.unsupported_plural_component(path.line)))
            return
        if not is_markup_marker(path, options.module_source_names, options.component_names):
            return

        fields = build_descriptor(markup_pairs(path), kind=MarkerKind.MARKUP)
        # `<FormattedMessage {...descriptor} />` is declared elsewhere; only a
        # literal defaultMessage makes this usage a declaration.
        if fields.get(DescriptorField.DEFAULT_MESSAGE):
            state.registry.store(fields, path)

    def on_call_node(self, path: NodePath, state: UnitState) -> None:
        options = self.options
        if not is_function_marker(path, options.module_source_names, options.function_names):
            return
        arguments = path.get("arguments")
        if arguments is None or arguments.type != "arguments":
            return

        args = arguments.named_children
        messages = self._require_object(args[0] if args else None, path)
        for member in messages.named_children:
            descriptor = self._require_object(member.get("value") if member.type == "pair" else None, path)
            fields = build_descriptor(object_pairs(descriptor), kind=MarkerKind.FUNCTION)
            if not fields.get(DescriptorField.DEFAULT_MESSAGE):
                raise DescriptorError(path.locate(ErrorTemplate.missing_default_message()))
            state.registry.store(fields, path)

    def on_compilation_unit_exit(self, unit: SourceFile, state: UnitState) -> None:
        state.catalog_path = emit(
            state.registry,
            unit.metadata,
            filename=unit.filename,
            basename=unit.basename,
            messages_dir=self.options.messages_dir,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _require_object(candidate: NodePath | None, call: NodePath) -> NodePath:
        """Return candidate if it is an object expression, else fail at the call."""
        if candidate is None or not candidate.is_object_expression():
            callee = call.get("function")
            name = callee.text if callee is not None else call.text
            raise MessageShapeError(call.locate(ErrorTemplate.invalid_call_shape(name)))
        return candidate
