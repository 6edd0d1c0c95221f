"""Compilation unit: one JavaScript/JSX source file parsed with tree-sitter.

A SourceFile owns everything the engine needs from the host for a single
unit: the syntax tree, the file name and base name, the metadata dict the
catalog is attached to, and the per-file warning sink.

Line Ending Support:
    LF and CRLF are supported (\\n is the line delimiter), matching
    tree-sitter's own row counting.

Python 3.13+.
"""

import logging
from functools import cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser, Tree

from intlextract.diagnostics import Diagnostic, ErrorTemplate, SourceParseError, SourceSpan

if TYPE_CHECKING:
    from .node import NodePath

__all__ = ["SourceFile", "javascript_language"]

logger = logging.getLogger(__name__)

# Nodes under which tree-sitter reports a bare `&` (`R&D`) as an error although
# JSX reads it as literal text.
_JSX_TEXT_CONTAINERS: frozenset[str] = frozenset({
    "jsx_element",
    "jsx_attribute",
    "jsx_opening_element",
    "jsx_self_closing_element",
})


@cache
def javascript_language() -> Language:
    """Tree-sitter JavaScript grammar (includes JSX)."""
    return Language(tree_sitter_javascript.language())


class SourceFile:
    """One compilation unit.

    Attributes:
        filename: Path of the file as given by the caller
        text: Source text
        tree: Tree-sitter syntax tree
        metadata: Per-unit metadata; the catalog emitter attaches results here
        warnings: Warning diagnostics recorded through warn()
        scope_cache: Per-scope binding tables, filled lazily by syntax.scope
        written_bindings: Ids of let/var bindings written after declaration,
            computed on first use by syntax.scope

    Example:
        >>> unit = SourceFile("const a = 1;", "src/a.js")
        >>> unit.basename
        'a'
        >>> unit.root.type
        'program'
    """

    __slots__ = (
        "_data",
        "_line_starts",
        "filename",
        "metadata",
        "scope_cache",
        "text",
        "tree",
        "warnings",
        "written_bindings",
    )

    def __init__(self, text: str, filename: str) -> None:
        self.filename = filename
        self.text = text
        self._data = text.encode("utf-8")
        self.tree: Tree = Parser(javascript_language()).parse(self._data)
        self.metadata: dict[str, Any] = {}
        self.warnings: list[Diagnostic] = []
        self.scope_cache: dict[int, dict[str, Any]] = {}
        self.written_bindings: frozenset[int] | None = None

        starts = [0]
        for i, byte in enumerate(self._data):
            if byte == 0x0A:
                starts.append(i + 1)
        self._line_starts: tuple[int, ...] = tuple(starts)

    @classmethod
    def from_path(cls, path: str | Path, *, encoding: str = "utf-8") -> "SourceFile":
        """Read and parse a file from disk."""
        path = Path(path)
        return cls(path.read_text(encoding=encoding), str(path))

    @property
    def basename(self) -> str:
        """File name without directory and extension."""
        return Path(self.filename).stem

    @property
    def root(self) -> "NodePath":
        """Program node of the unit."""
        from .node import NodePath  # noqa: PLC0415 - circular

        return NodePath(self.tree.root_node, self)

    # ------------------------------------------------------------------
    # Source text access
    # ------------------------------------------------------------------

    def node_text(self, node: Node) -> str:
        """Source text covered by node."""
        return self.byte_range_text(node.start_byte, node.end_byte)

    def byte_range_text(self, start: int, end: int) -> str:
        """Source text between two UTF-8 byte offsets."""
        return self._data[start:end].decode("utf-8")

    def jsx_string_text(self, node: Node) -> str:
        """Content of a JSX attribute string between its quotes, read from source.

        JSX strings have no escapes, so the first repeat of the opening quote
        closes the string whatever the grammar made of the text in between.
        """
        quote = self._data[node.start_byte]
        end = self._data.find(quote, node.start_byte + 1)
        if end < 0:
            end = node.end_byte - 1
        return self.byte_range_text(node.start_byte + 1, end)

    def char_offset(self, byte_offset: int) -> int:
        """Convert a UTF-8 byte offset into a character offset."""
        return len(self._data[:byte_offset].decode("utf-8", errors="replace"))

    def span(self, node: Node) -> SourceSpan:
        """Character span of node with 1-indexed line and column."""
        row = node.start_point[0]
        line_start = self._line_starts[row]
        column = len(self._data[line_start : node.start_byte].decode("utf-8", errors="replace"))
        return SourceSpan(
            start=self.char_offset(node.start_byte),
            end=self.char_offset(node.end_byte),
            line=row + 1,
            column=column + 1,
        )

    def line_text(self, line: int) -> str:
        """Content of a 1-indexed line without its line ending."""
        start = self._line_starts[line - 1]
        end = self._line_starts[line] - 1 if line < len(self._line_starts) else len(self._data)
        return self._data[start:end].decode("utf-8", errors="replace").rstrip("\r")

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def warn(self, diagnostic: Diagnostic) -> None:
        """Per-file warning sink: record and log a non-fatal diagnostic."""
        self.warnings.append(diagnostic)
        logger.warning("%s: %s", diagnostic.location or self.filename, diagnostic.message)

    def check_syntax(self) -> None:
        """Raise SourceParseError at the first syntax error in the tree.

        Raises:
            SourceParseError: If tree-sitter had to recover from an error other
                than a bare ampersand in JSX text or a JSX attribute string
        """
        root = self.tree.root_node
        if not root.has_error:
            return
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_missing:
                what = f"missing {node.type!r}"
            elif node.type == "ERROR":
                if self._is_bare_ampersand(node):
                    continue
                what = f"unexpected {self.node_text(node)[:40]!r}"
            else:
                if node.has_error:
                    stack.extend(reversed(node.children))
                continue
            from .node import NodePath  # noqa: PLC0415 - circular

            raise SourceParseError(NodePath(node, self).locate(ErrorTemplate.source_parse_failed(what)))

    def _is_bare_ampersand(self, error: Node) -> bool:
        if not self.node_text(error).startswith("&"):
            return False
        parent = error.parent
        while parent is not None and parent.type == "ERROR":
            parent = parent.parent
        if parent is None:
            return False
        if parent.type == "string":
            return parent.parent is not None and parent.parent.type == "jsx_attribute"
        return parent.type in _JSX_TEXT_CONTAINERS

    def __repr__(self) -> str:
        return f"SourceFile({self.filename!r})"
