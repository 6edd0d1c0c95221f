"""Babel integration: extraction method and POT export.

The extraction method lets ``pybabel extract`` read react-intl messages
from JavaScript sources. Register it in a Babel mapping file::

    [react_intl: src/**.jsx]
    component_names = FormattedMessage, Msg
    enforce_descriptions = true

or refer to it directly as ``intlextract.babel_extract:extract_messages``.

Each message is yielded with its default message as msgid; the translator
comments carry the description (when present) followed by ``id: <id>``.
``write_pot`` writes a template with the id as message context instead.

Requires the ``babel`` extra for ``write_pot``; the extraction method itself
is only ever called by Babel.

Python 3.13+.
"""

import logging
import os
import re
from collections.abc import Collection, Iterable, Iterator, Mapping
from typing import IO, Any

from intlextract.config import ExtractionOptions
from intlextract.core.babel_compat import get_catalog_class, get_po_writer, require_babel
from intlextract.extract import ExtractionResult, extract_source

__all__ = ["extract_messages", "write_pot"]

logger = logging.getLogger(__name__)

_LIST_SEPARATOR = re.compile(r"[\s,]+")

# Babel mapping options that are not extraction options.
_BABEL_OPTIONS: frozenset[str] = frozenset({"encoding"})

type BabelMessage = tuple[int, str | None, str, list[str]]


def extract_messages(
    fileobj: IO[bytes],
    keywords: Collection[str],  # noqa: ARG001 - fixed by the Babel extractor interface
    comment_tags: Collection[str],  # noqa: ARG001
    options: Mapping[str, Any],
) -> Iterator[BabelMessage]:
    """Babel extraction method for react-intl message descriptors.

    Args:
        fileobj: Source file opened in binary mode
        keywords: Ignored; markers are configured through options
        comment_tags: Ignored; descriptions are the translator comments
        options: Mapping-file options (see ExtractionOptions); list options
            are comma or whitespace separated

    Yields:
        ``(lineno, funcname, message, comments)`` tuples

    Raises:
        ExtractionError: The file declares an invalid message
    """
    encoding = options.get("encoding", "utf-8")
    filename = getattr(fileobj, "name", "<unknown>")
    if isinstance(filename, bytes):
        filename = os.fsdecode(filename)
    source = fileobj.read().decode(encoding)

    result = extract_source(source, str(filename), _options_from_mapping(options))
    for descriptor in result.messages:
        comments = [descriptor.description] if descriptor.description else []
        comments.append(f"id: {descriptor.id}")
        yield result.line_numbers[descriptor.id], None, descriptor.default_message, comments


def write_pot(
    results: Iterable[ExtractionResult],
    path: str | os.PathLike[str],
    *,
    project: str | None = None,
    version: str | None = None,
) -> int:
    """Write extracted messages to a gettext template.

    Messages are keyed by default message with the id as context, so two
    ids sharing a default message stay separate entries.

    Returns:
        Number of messages written

    Raises:
        BabelImportError: Babel is not installed
    """
    require_babel("write_pot")
    catalog_class = get_catalog_class()
    write_po = get_po_writer()

    catalog = catalog_class(project=project, version=version)
    count = 0
    for result in results:
        for descriptor in result.messages:
            catalog.add(
                descriptor.default_message,
                locations=[(result.filename, result.line_numbers.get(descriptor.id, 0))],
                auto_comments=[descriptor.description] if descriptor.description else [],
                context=descriptor.id,
            )
            count += 1

    with open(path, "wb") as f:
        write_po(f, catalog)
    logger.info("Wrote %d messages to %s", count, os.fspath(path))
    return count


def _options_from_mapping(options: Mapping[str, Any]) -> ExtractionOptions:
    parsed: dict[str, Any] = {}
    for key, value in options.items():
        if key in _BABEL_OPTIONS:
            continue
        if isinstance(value, str) and key.replace("-", "_").lower().endswith("names"):
            value = [item for item in _LIST_SEPARATOR.split(value) if item]
        parsed[key] = value
    return ExtractionOptions.from_mapping(parsed)
