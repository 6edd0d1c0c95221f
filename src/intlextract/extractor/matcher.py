"""Marker matching: which nodes declare translatable messages.

A node is a marker when its tag or callee is an identifier bound to one of
the configured names imported from one of the configured module sources.
Local bindings shadow imports, so a component that merely shares a name
with a marker is never matched.

Only direct identifiers are matched. Member forms such as ``this.msg(...)``
or ``<Intl.FormattedMessage>`` are not.
"""

from collections.abc import Iterable

from intlextract.constants import PLURAL_COMPONENT_NAME
from intlextract.syntax import NodePath

__all__ = [
    "is_function_marker",
    "is_markup_marker",
    "is_unsupported_marker",
    "references_any_import",
]


def references_any_import(
    path: NodePath | None,
    module_sources: Iterable[str],
    imported_names: Iterable[str],
) -> bool:
    """Whether path is an identifier importing any of the names from any of the sources."""
    if path is None or not path.is_identifier():
        return False
    module_sources = tuple(module_sources)
    return any(
        path.references_import(module_source, name)
        for name in imported_names
        for module_source in module_sources
    )


def is_markup_marker(
    path: NodePath, module_sources: Iterable[str], component_names: Iterable[str]
) -> bool:
    """Whether a JSX element's tag is a marker component."""
    return references_any_import(path.get("name"), module_sources, component_names)


def is_function_marker(
    path: NodePath, module_sources: Iterable[str], function_names: Iterable[str]
) -> bool:
    """Whether a call's callee is a marker function."""
    return references_any_import(path.get("function"), module_sources, function_names)


def is_unsupported_marker(path: NodePath, module_sources: Iterable[str]) -> bool:
    """Whether a JSX element is the pluralization-only component.

    It looks like a marker but has no default message to extract; callers
    warn and skip it.
    """
    return references_any_import(path.get("name"), module_sources, (PLURAL_COMPONENT_NAME,))
