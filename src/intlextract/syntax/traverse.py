"""Tree traversal driving the extraction hooks.

The traversal is the host side of the extraction contract: it walks a
compilation unit in source order and calls the hooks for the node kinds
the engine cares about. Anything implementing ExtractionHooks can be
driven, which keeps the engine independent of how the tree is produced.

Python 3.13+.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .node import NodePath
    from .source import SourceFile

__all__ = ["ExtractionHooks", "traverse"]


class ExtractionHooks[S](Protocol):
    """Callbacks invoked by traverse(), in this order:

    1. ``on_compilation_unit_enter`` once, returning the per-unit state
    2. ``on_markup_node`` / ``on_call_node`` for each matching node in
       source order, receiving that state
    3. ``on_compilation_unit_exit`` once, after the last node
    """

    def on_compilation_unit_enter(self, unit: "SourceFile") -> S: ...

    def on_markup_node(self, path: "NodePath", state: S) -> None: ...

    def on_call_node(self, path: "NodePath", state: S) -> None: ...

    def on_compilation_unit_exit(self, unit: "SourceFile", state: S) -> None: ...


def traverse[S](unit: "SourceFile", hooks: ExtractionHooks[S]) -> S:
    """Walk unit in source order, dispatching nodes to hooks.

    Exceptions raised by a hook propagate unchanged and end the traversal;
    the exit hook is not called for an aborted unit.

    Returns:
        The per-unit state created by the enter hook
    """
    state = hooks.on_compilation_unit_enter(unit)
    dispatch: dict[str, Callable[["NodePath", S], None]] = {
        "jsx_opening_element": hooks.on_markup_node,
        "jsx_self_closing_element": hooks.on_markup_node,
        "call_expression": hooks.on_call_node,
    }
    for path in unit.root.walk():
        handler = dispatch.get(path.type)
        if handler is not None:
            handler(path, state)
    hooks.on_compilation_unit_exit(unit, state)
    return state
