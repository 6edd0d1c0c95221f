"""Lexical binding resolution for identifiers.

Answers the two questions the engine asks about a name: which ES import
does it refer to (marker matching), and which constant does it hold
(static evaluation). Scopes are resolved by walking the ancestors of the
reference; each scope's binding table is computed once per unit and cached
on the SourceFile.

Covered declarations: ES imports, const/let/var (var hoisted to the
enclosing function or program), function and class declarations, function
parameters (including destructuring patterns), catch parameters, for-loop
heads and declarations inside switch cases. Writes to let/var bindings
(assignment, update, redeclaration) are collected once per unit so the
evaluator can tell a never-changed variable from a reassigned one.

Python 3.13+.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from tree_sitter import Node

if TYPE_CHECKING:
    from .node import NodePath
    from .source import SourceFile

__all__ = [
    "Binding",
    "BindingKind",
    "constant_initializer",
    "find_binding",
    "references_import",
]

_FUNCTION_TYPES: frozenset[str] = frozenset({
    "function_declaration",
    "function_expression",
    "function",
    "generator_function_declaration",
    "generator_function",
    "arrow_function",
    "method_definition",
})

_BLOCK_TYPES: frozenset[str] = frozenset({"program", "statement_block", "class_static_block", "switch_body"})

_LOOP_TYPES: frozenset[str] = frozenset({"for_statement", "for_in_statement"})

_SCOPE_TYPES: frozenset[str] = _FUNCTION_TYPES | _BLOCK_TYPES | _LOOP_TYPES | {"catch_clause"}

# `{ name }` in an object literal reads the binding `name`.
_REFERENCE_TYPES: frozenset[str] = frozenset({"identifier", "shorthand_property_identifier"})

# Declaration kinds whose initializer can be followed during evaluation.
_VARIABLE_KINDS: frozenset[str] = frozenset({"const", "let", "var"})


class BindingKind(StrEnum):
    """How a name was declared."""

    MODULE = "module"
    CONST = "const"
    LET = "let"
    VAR = "var"
    PARAM = "param"
    FUNCTION = "function"
    CLASS = "class"
    CATCH = "catch"


@dataclass(frozen=True, slots=True)
class Binding:
    """A declared name.

    Attributes:
        name: Local name
        kind: Declaration kind
        identifier: Node declaring the name
        declarator: variable_declarator for const/let/var bindings
        module_source: Import source for module bindings ("react-intl")
        imported_name: Imported name for module bindings ("default" for a
            default import, "*" for a namespace import)
    """

    name: str
    kind: BindingKind
    identifier: Node
    declarator: Node | None = None
    module_source: str | None = None
    imported_name: str | None = None


type _Table = dict[str, Binding]


def find_binding(path: "NodePath") -> Binding | None:
    """Nearest binding for an identifier reference, or None for globals."""
    if path.type not in _REFERENCE_TYPES:
        return None
    return _lookup(path.unit, path.node, path.text)


def references_import(path: "NodePath", module_source: str, imported_name: str) -> bool:
    """Whether the identifier at path refers to ``imported_name`` from ``module_source``."""
    binding = find_binding(path)
    return (
        binding is not None
        and binding.kind is BindingKind.MODULE
        and binding.module_source == module_source
        and binding.imported_name == imported_name
    )


def constant_initializer(path: "NodePath") -> Node | None:
    """Initializer of the variable the identifier refers to, if it never changes.

    Returns None unless the name comes from a plain ``name = value``
    declarator that precedes the reference. ``let`` and ``var`` bindings
    must also never be written again anywhere in the unit.
    """
    binding = find_binding(path)
    if binding is None or binding.kind not in _VARIABLE_KINDS or binding.declarator is None:
        return None
    declarator = binding.declarator
    if declarator.child_by_field_name("name") != binding.identifier:
        return None
    if path.node.start_byte < declarator.end_byte:
        return None
    if binding.kind is not BindingKind.CONST and binding.identifier.id in _written_bindings(path.unit):
        return None
    return declarator.child_by_field_name("value")


def _lookup(unit: "SourceFile", node: Node, name: str) -> Binding | None:
    scope = node.parent
    while scope is not None:
        if scope.type in _SCOPE_TYPES:
            binding = _scope_table(unit, scope).get(name)
            if binding is not None:
                return binding
        scope = scope.parent
    return None


# ----------------------------------------------------------------------
# Writes
# ----------------------------------------------------------------------


def _written_bindings(unit: "SourceFile") -> frozenset[int]:
    if unit.written_bindings is None:
        unit.written_bindings = frozenset(_collect_writes(unit))
    return unit.written_bindings


def _collect_writes(unit: "SourceFile") -> Iterator[int]:
    """Declaring-identifier ids of bindings assigned, updated or redeclared."""
    stack = [unit.tree.root_node]
    while stack:
        node = stack.pop()
        stack.extend(node.named_children)
        match node.type:
            case "assignment_expression" | "augmented_assignment_expression":
                target = node.child_by_field_name("left")
            case "update_expression":
                target = node.child_by_field_name("argument")
            case "for_in_statement" if node.child_by_field_name("kind") is None:
                target = node.child_by_field_name("left")
            case "variable_declarator" if node.parent is not None and node.parent.type == "variable_declaration":
                target = node.child_by_field_name("name")
            case _:
                continue
        if target is None:
            continue
        for identifier in _pattern_identifiers(target):
            binding = _lookup(unit, identifier, unit.node_text(identifier))
            if binding is not None and binding.declarator != node:
                yield binding.identifier.id


# ----------------------------------------------------------------------
# Scope tables
# ----------------------------------------------------------------------


def _scope_table(unit: "SourceFile", scope: Node) -> _Table:
    table = unit.scope_cache.get(scope.id)
    if table is None:
        table = _build_table(unit, scope)
        unit.scope_cache[scope.id] = table
    return table


def _build_table(unit: "SourceFile", scope: Node) -> _Table:
    table: _Table = {}
    match scope.type:
        case "program":
            for statement in scope.named_children:
                _declare_statement(unit, statement, table, is_program=True)
            _declare_hoisted_vars(unit, scope, table)
        case "statement_block" | "class_static_block":
            for statement in scope.named_children:
                _declare_statement(unit, statement, table, is_program=False)
        case "switch_body":
            for clause in scope.named_children:
                for statement in clause.children_by_field_name("body"):
                    _declare_statement(unit, statement, table, is_program=False)
        case "catch_clause":
            parameter = scope.child_by_field_name("parameter")
            if parameter is not None:
                _declare_pattern(unit, parameter, BindingKind.CATCH, table)
        case "for_statement":
            initializer = scope.child_by_field_name("initializer")
            if initializer is not None:
                _declare_statement(unit, initializer, table, is_program=False)
        case "for_in_statement":
            kind = scope.child_by_field_name("kind")
            left = scope.child_by_field_name("left")
            if kind is not None and left is not None:
                _declare_pattern(unit, left, _declaration_kind(kind.type), table)
        case _:
            _declare_function(unit, scope, table)
    return table


def _declare_function(unit: "SourceFile", function: Node, table: _Table) -> None:
    parameter = function.child_by_field_name("parameter")
    if parameter is not None:
        _declare_pattern(unit, parameter, BindingKind.PARAM, table)
    parameters = function.child_by_field_name("parameters")
    if parameters is not None:
        for param in parameters.named_children:
            _declare_pattern(unit, param, BindingKind.PARAM, table)
    if function.type in ("function_expression", "function", "generator_function"):
        name = function.child_by_field_name("name")
        if name is not None:
            table.setdefault(unit.node_text(name), Binding(unit.node_text(name), BindingKind.FUNCTION, name))
    body = function.child_by_field_name("body")
    if body is not None and body.type == "statement_block":
        _declare_hoisted_vars(unit, body, table)


def _declare_statement(unit: "SourceFile", statement: Node, table: _Table, *, is_program: bool) -> None:
    match statement.type:
        case "lexical_declaration" | "variable_declaration":
            kind = _lexical_kind(statement)
            for declarator in statement.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name = declarator.child_by_field_name("name")
                if name is not None:
                    _declare_pattern(unit, name, kind, table, declarator=declarator)
        case "function_declaration" | "generator_function_declaration" | "class_declaration":
            name = statement.child_by_field_name("name")
            if name is not None:
                kind = BindingKind.CLASS if statement.type == "class_declaration" else BindingKind.FUNCTION
                table[unit.node_text(name)] = Binding(unit.node_text(name), kind, name)
        case "import_statement" if is_program:
            _declare_import(unit, statement, table)
        case "export_statement":
            declaration = statement.child_by_field_name("declaration")
            if declaration is not None:
                _declare_statement(unit, declaration, table, is_program=is_program)
        case _:
            pass


def _declare_hoisted_vars(unit: "SourceFile", body: Node, table: _Table) -> None:
    """var declarations anywhere in body, not crossing function boundaries."""
    stack = list(body.named_children)
    while stack:
        node = stack.pop()
        if node.type in _FUNCTION_TYPES or node.type in ("class_declaration", "class"):
            continue
        if node.type == "variable_declaration":
            for declarator in node.named_children:
                name = declarator.child_by_field_name("name") if declarator.type == "variable_declarator" else None
                if name is not None:
                    for identifier in _pattern_identifiers(name):
                        local = unit.node_text(identifier)
                        table.setdefault(local, Binding(local, BindingKind.VAR, identifier, declarator))
        stack.extend(node.named_children)


def _declare_import(unit: "SourceFile", statement: Node, table: _Table) -> None:
    source = statement.child_by_field_name("source")
    if source is None:
        return
    module_source = _unquote(unit.node_text(source))
    for clause in statement.named_children:
        if clause.type != "import_clause":
            continue
        for part in clause.named_children:
            match part.type:
                case "identifier":
                    _add_import(unit, table, part, module_source, "default")
                case "namespace_import":
                    for identifier in part.named_children:
                        if identifier.type == "identifier":
                            _add_import(unit, table, identifier, module_source, "*")
                case "named_imports":
                    for specifier in part.named_children:
                        if specifier.type != "import_specifier":
                            continue
                        name = specifier.child_by_field_name("name")
                        alias = specifier.child_by_field_name("alias")
                        if name is None:
                            continue
                        imported = unit.node_text(name)
                        if name.type == "string":
                            imported = _unquote(imported)
                        _add_import(unit, table, alias or name, module_source, imported)
                case _:
                    pass


def _add_import(
    unit: "SourceFile", table: _Table, local: Node, module_source: str, imported_name: str
) -> None:
    name = unit.node_text(local)
    table[name] = Binding(
        name,
        BindingKind.MODULE,
        local,
        module_source=module_source,
        imported_name=imported_name,
    )


def _declare_pattern(
    unit: "SourceFile",
    pattern: Node,
    kind: BindingKind,
    table: _Table,
    *,
    declarator: Node | None = None,
) -> None:
    for identifier in _pattern_identifiers(pattern):
        name = unit.node_text(identifier)
        table[name] = Binding(name, kind, identifier, declarator)


def _pattern_identifiers(pattern: Node) -> Iterator[Node]:
    """Identifiers bound by a (possibly destructuring) pattern."""
    stack = [pattern]
    while stack:
        node = stack.pop()
        match node.type:
            case "identifier" | "shorthand_property_identifier_pattern":
                yield node
            case "pair_pattern":
                value = node.child_by_field_name("value")
                if value is not None:
                    stack.append(value)
            case "assignment_pattern" | "object_assignment_pattern":
                left = node.child_by_field_name("left")
                if left is not None:
                    stack.append(left)
            case "object_pattern" | "array_pattern" | "rest_pattern":
                stack.extend(node.named_children)
            case _:
                pass


def _lexical_kind(declaration: Node) -> BindingKind:
    if declaration.type == "variable_declaration":
        return BindingKind.VAR
    kind = declaration.child_by_field_name("kind")
    keyword = kind.type if kind is not None else declaration.children[0].type
    return _declaration_kind(keyword)


def _declaration_kind(keyword: str) -> BindingKind:
    match keyword:
        case "const":
            return BindingKind.CONST
        case "let":
            return BindingKind.LET
        case _:
            return BindingKind.VAR


def _unquote(literal: str) -> str:
    if len(literal) >= 2 and literal[0] == literal[-1] and literal[0] in "'\"":
        return literal[1:-1]
    return literal
