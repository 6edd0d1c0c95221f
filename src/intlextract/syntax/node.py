"""Node paths: tree-sitter nodes bound to their compilation unit.

NodePath is the host-facing surface the extraction engine works against:
classification queries, child access, import resolution, constant
evaluation and located diagnostics. The engine never touches tree-sitter
nodes directly.

Python 3.13+.
"""

from collections.abc import Iterator
from dataclasses import replace
from typing import TYPE_CHECKING

from tree_sitter import Node

from intlextract.diagnostics import Diagnostic, SourceSpan

if TYPE_CHECKING:
    from .evaluate import EvaluationResult
    from .source import SourceFile

__all__ = ["NodePath"]

# Identifier-like nodes whose text is their name.
_IDENTIFIER_TYPES: frozenset[str] = frozenset({
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
})

_MARKUP_TYPES: frozenset[str] = frozenset({"jsx_opening_element", "jsx_self_closing_element"})

_LITERAL_TYPES: frozenset[str] = frozenset({
    "string",
    "number",
    "true",
    "false",
    "null",
    "regex",
    "template_string",
})


class NodePath:
    """A syntax node within its SourceFile.

    Example:
        >>> unit = SourceFile("<FormattedMessage id='a' />", "a.js")
        >>> element = next(p for p in unit.root.walk() if p.is_markup_element())
        >>> element.get("name").text
        'FormattedMessage'
    """

    __slots__ = ("node", "unit")

    def __init__(self, node: Node, unit: "SourceFile") -> None:
        self.node = node
        self.unit = unit

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def type(self) -> str:
        """Tree-sitter node type."""
        return self.node.type

    @property
    def text(self) -> str:
        """Source text covered by the node."""
        return self.unit.node_text(self.node)

    @property
    def parent(self) -> "NodePath | None":
        parent = self.node.parent
        return NodePath(parent, self.unit) if parent is not None else None

    def get(self, field_name: str) -> "NodePath | None":
        """Child stored under a grammar field, e.g. ``call.get("function")``."""
        child = self.node.child_by_field_name(field_name)
        return NodePath(child, self.unit) if child is not None else None

    def get_all(self, field_name: str) -> list["NodePath"]:
        """All children stored under a repeated grammar field."""
        return [NodePath(child, self.unit) for child in self.node.children_by_field_name(field_name)]

    @property
    def named_children(self) -> list["NodePath"]:
        """Named children, skipping comments."""
        return [
            NodePath(child, self.unit)
            for child in self.node.named_children
            if child.type != "comment"
        ]

    def walk(self) -> Iterator["NodePath"]:
        """Yield this node and its descendants in source (pre-)order."""
        stack = [self.node]
        while stack:
            node = stack.pop()
            yield NodePath(node, self.unit)
            stack.extend(reversed(node.children))

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_identifier(self) -> bool:
        return self.node.type in _IDENTIFIER_TYPES

    def is_markup_element(self) -> bool:
        """Opening or self-closing JSX element (the node carrying the tag and attributes)."""
        return self.node.type in _MARKUP_TYPES

    def is_call(self) -> bool:
        return self.node.type == "call_expression"

    def is_object_expression(self) -> bool:
        return self.node.type == "object"

    def is_literal(self) -> bool:
        return self.node.type in _LITERAL_TYPES

    def is_expression_container(self) -> bool:
        """JSX ``{...}`` wrapper around an expression."""
        return self.node.type == "jsx_expression"

    def is_markup_attribute(self) -> bool:
        """``name=value`` JSX attribute (spread attributes excluded)."""
        return self.node.type == "jsx_attribute"

    # ------------------------------------------------------------------
    # Host capabilities
    # ------------------------------------------------------------------

    def references_import(self, module_source: str, imported_name: str) -> bool:
        """Whether this identifier is bound to ``imported_name`` from ``module_source``."""
        from .scope import references_import  # noqa: PLC0415 - circular

        return references_import(self, module_source, imported_name)

    def evaluate(self) -> "EvaluationResult":
        """Statically evaluate this expression."""
        from .evaluate import evaluate  # noqa: PLC0415 - circular

        return evaluate(self)

    @property
    def span(self) -> SourceSpan:
        return self.unit.span(self.node)

    @property
    def line(self) -> int:
        """1-indexed line the node starts on."""
        return self.node.start_point[0] + 1

    def locate(self, diagnostic: Diagnostic) -> Diagnostic:
        """Attach file name, span and source line of this node to a diagnostic."""
        span = self.span
        return replace(
            diagnostic,
            span=span,
            filename=self.unit.filename,
            source_line=self.unit.line_text(span.line),
        )

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodePath):
            return NotImplemented
        return self.unit is other.unit and self.node.id == other.node.id

    def __hash__(self) -> int:
        return hash((id(self.unit), self.node.id))

    def __repr__(self) -> str:
        return f"NodePath({self.type!r} at {self.unit.filename}:{self.line})"
