"""One-call extraction of a source text or file.

Python 3.13+.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from intlextract.config import ExtractionOptions
from intlextract.diagnostics import Diagnostic
from intlextract.extractor import MessageDescriptor, MessageExtractor
from intlextract.syntax import SourceFile

__all__ = ["ExtractionResult", "extract_file", "extract_source"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Outcome of extracting one compilation unit.

    Attributes:
        filename: Source file name as given
        messages: Descriptors in registration order
        warnings: Non-fatal diagnostics (skipped keys/values, unsupported markers)
        catalog_path: Catalog file written, or None
        metadata: Unit metadata; ``metadata["react-intl"]["messages"]`` holds
            the catalog entries as dicts
        line_numbers: Line of the usage that first declared each message id
    """

    filename: str
    messages: tuple[MessageDescriptor, ...]
    warnings: tuple[Diagnostic, ...] = ()
    catalog_path: Path | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    line_numbers: dict[str, int] = field(default_factory=dict)


def extract_source(
    source: str,
    filename: str = "<source>",
    options: ExtractionOptions | None = None,
) -> ExtractionResult:
    """Extract messages from JavaScript/JSX source text.

    Args:
        source: Program text
        filename: Name used in diagnostics and for the catalog path
        options: Extraction options (default: ExtractionOptions())

    Raises:
        ExtractionError: The unit is invalid; no catalog is written

    Example:
        >>> result = extract_source(
        ...     "import {defineMessages} from 'react-intl';\\n"
        ...     "defineMessages({hi: {id: 'hi', defaultMessage: 'Hi!'}});"
        ... )
        >>> [m.id for m in result.messages]
        ['hi']
    """
    unit = SourceFile(source, filename)
    state = MessageExtractor(options).extract(unit)
    registry = state.registry
    return ExtractionResult(
        filename=filename,
        messages=registry.descriptors(),
        warnings=tuple(unit.warnings),
        catalog_path=state.catalog_path,
        metadata=unit.metadata,
        line_numbers={descriptor.id: registry.lineno(descriptor.id) for descriptor in registry},
    )


def extract_file(
    path: str | os.PathLike[str],
    options: ExtractionOptions | None = None,
    *,
    encoding: str = "utf-8",
) -> ExtractionResult:
    """Read and extract a source file.

    Raises:
        OSError: The file cannot be read
        ExtractionError: The unit is invalid; no catalog is written
    """
    path = os.fspath(path)
    logger.debug("Reading %s", path)
    source = Path(path).read_text(encoding=encoding)
    return extract_source(source, path, options)
