"""Extraction engine: marker matching, descriptor building, registry, catalogs.

Python 3.13+.
"""

from .catalog import catalog_path, emit, render_catalog, write_catalog
from .descriptor import (
    DescriptorFields,
    MessageDescriptor,
    PropertyPair,
    build_descriptor,
    markup_pairs,
    object_pairs,
)
from .evaluation import evaluate_key, evaluate_value
from .matcher import is_function_marker, is_markup_marker, is_unsupported_marker, references_any_import
from .registry import MessageRegistry
from .visitor import MessageExtractor, UnitState

__all__ = [
    "DescriptorFields",
    "MessageDescriptor",
    "MessageExtractor",
    "MessageRegistry",
    "PropertyPair",
    "UnitState",
    "build_descriptor",
    "catalog_path",
    "emit",
    "evaluate_key",
    "evaluate_value",
    "is_function_marker",
    "is_markup_marker",
    "is_unsupported_marker",
    "markup_pairs",
    "object_pairs",
    "references_any_import",
    "render_catalog",
    "write_catalog",
]
