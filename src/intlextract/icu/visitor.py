"""Visitor pattern for message AST traversal.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name.

Python 3.13+.
"""

from collections.abc import Callable
from typing import ClassVar

from .ast import (
    ArgumentElement,
    MessageNode,
    Option,
    Pattern,
    PluralFormat,
    SelectFormat,
)

__all__ = ["MessageVisitor"]


class MessageVisitor[T = None]:
    """Base visitor for traversing a message AST.

    Dispatch table is built once per subclass via __init_subclass__; bound
    methods are cached per instance.

    Example:
        >>> class ArgumentNames(MessageVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.names = []
        ...
        ...     def visit_ArgumentElement(self, node):
        ...         self.names.append(node.id)
        ...         self.generic_visit(node)
    """

    __slots__ = ("_instance_dispatch_cache",)

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self) -> None:
        self._instance_dispatch_cache: dict[type, Callable[[MessageNode], T]] = {}

    def visit(self, node: MessageNode) -> T:
        """Visit a node, dispatching to visit_<ClassName> or generic_visit."""
        node_type = type(node)
        cached = self._instance_dispatch_cache.get(node_type)
        if cached is not None:
            return cached(node)

        method_name = self._class_visit_methods.get(node_type.__name__)
        method = getattr(self, method_name) if method_name else self.generic_visit
        self._instance_dispatch_cache[node_type] = method
        return method(node)  # type: ignore[no-any-return]

    def generic_visit(self, node: MessageNode) -> T:
        """Visit all children of node. Returns None."""
        match node:
            case Pattern():
                for element in node.elements:
                    self.visit(element)
            case ArgumentElement() if node.format is not None:
                self.visit(node.format)
            case PluralFormat() | SelectFormat():
                for option in node.options:
                    self.visit(option)
            case Option():
                self.visit(node.value)
            case _:
                pass
        return None  # type: ignore[return-value]
