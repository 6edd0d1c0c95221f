"""intlextract - build-time extraction of react-intl message descriptors.

Finds the messages a JavaScript/JSX code base declares through react-intl's
marker components (``<FormattedMessage>``) and functions
(``defineMessages``), validates them, and writes per-file JSON catalogs for
translation tooling.

Public API:
    extract_source - Extract messages from source text
    extract_file - Extract messages from a file
    ExtractionOptions - Marker names, description policy, catalog directory
    MessageExtractor - Extraction hooks for driving your own traversal
    MessageRegistry - Per-unit descriptor store with conflict detection
    MessageDescriptor - One extracted message
    normalize_message - Validate and normalize ICU message text

Exceptions:
    ExtractionError - Base exception class
    DescriptorError - Missing id/defaultMessage/description
    DuplicateMessageError - Same id declared with different content
    MessageShapeError - Marker function called with a non-literal argument
    MessageFormatError - Default message is not valid ICU syntax
    MessageSyntaxError - Raised by normalize_message
    SourceParseError - Source is not valid JavaScript/JSX

Submodules:
    intlextract.icu - ICU MessageFormat parser, AST and printer
    intlextract.syntax - tree-sitter host tree: scopes, evaluation, traversal
    intlextract.diagnostics - Diagnostic codes, templates and formatting
    intlextract.babel_extract - Babel extraction method and POT export
"""

# Essential Public API - Minimal exports for clean namespace
from .config import ExtractionOptions, load_options
from .diagnostics import (
    DescriptorError,
    DuplicateMessageError,
    ExtractionError,
    MessageFormatError,
    MessageShapeError,
    MessageSyntaxError,
    SourceParseError,
)
from .extract import ExtractionResult, extract_file, extract_source
from .extractor import MessageDescriptor, MessageExtractor, MessageRegistry
from .icu import normalize as normalize_message

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intlextract")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DescriptorError",
    "DuplicateMessageError",
    "ExtractionError",
    "ExtractionOptions",
    "ExtractionResult",
    "MessageDescriptor",
    "MessageExtractor",
    "MessageFormatError",
    "MessageRegistry",
    "MessageShapeError",
    "MessageSyntaxError",
    "SourceParseError",
    "__version__",
    "extract_file",
    "extract_source",
    "load_options",
    "normalize_message",
]
