"""Catalog emission: attach a unit's descriptors to its metadata and write JSON.

Path layout mirrors the source tree under the messages directory:

    src/components/Greeting.jsx  ->  <messages_dir>/src/components/Greeting.json

The source path is taken relative to the working directory and anchored at
the root before joining, so ``..`` segments cannot leave messages_dir.

Python 3.13+.
"""

import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from intlextract.constants import CATALOG_SUFFIX, METADATA_KEY

from .descriptor import MessageDescriptor
from .registry import MessageRegistry

__all__ = ["catalog_path", "emit", "render_catalog", "write_catalog"]

logger = logging.getLogger(__name__)


def catalog_path(
    filename: str | os.PathLike[str],
    basename: str,
    messages_dir: str | os.PathLike[str],
    *,
    cwd: str | os.PathLike[str] | None = None,
) -> Path:
    """Catalog location for a source file.

    Args:
        filename: Source file path (absolute or relative to cwd)
        basename: Source file name without extension
        messages_dir: Root directory for catalogs
        cwd: Directory filename is made relative to (default: process cwd)
    """
    base = os.fspath(cwd) if cwd is not None else os.getcwd()
    relative = os.path.relpath(os.path.abspath(os.path.join(base, filename)), base)
    anchored = os.path.normpath(os.path.join(os.sep, relative))
    directory = os.path.dirname(anchored).lstrip(os.sep)
    return Path(messages_dir, directory, basename + CATALOG_SUFFIX)


def render_catalog(descriptors: Sequence[MessageDescriptor]) -> str:
    """JSON array of descriptors, two-space indented."""
    return json.dumps([descriptor.to_dict() for descriptor in descriptors], indent=2, ensure_ascii=False)


def write_catalog(path: Path, descriptors: Sequence[MessageDescriptor]) -> None:
    """Write a catalog file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_catalog(descriptors), encoding="utf-8")


def emit(
    registry: MessageRegistry,
    metadata: dict[str, object],
    *,
    filename: str,
    basename: str,
    messages_dir: str | os.PathLike[str] | None = None,
) -> Path | None:
    """Publish a unit's descriptors.

    Always attaches them to metadata under ``"react-intl"``; writes a catalog
    file only when messages_dir is set and the unit declared messages.

    Returns:
        Path of the written catalog, or None when nothing was written
    """
    descriptors = registry.descriptors()
    metadata[METADATA_KEY] = {"messages": [descriptor.to_dict() for descriptor in descriptors]}

    if not messages_dir or not descriptors:
        logger.debug("%s: %d messages, no catalog written", filename, len(descriptors))
        return None

    path = catalog_path(filename, basename, messages_dir)
    write_catalog(path, descriptors)
    logger.info("%s: wrote %d messages to %s", filename, len(descriptors), path)
    return path
