"""Corpus reader: turns a data file into ``(document_id, text)`` pairs.

The data file alternates lines: an identifier (usually a URL) followed by
the body text of that document on the next line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_corpus(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Pair identifier lines with the body line that follows each one.

    A trailing identifier without a body line is kept with empty text.
    """
    documents: list[tuple[str, str]] = []
    doc_id: str | None = None

    for line_no, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if line_no % 2 == 1:
            doc_id = line
        else:
            documents.append((doc_id, line))
            doc_id = None

    if doc_id is not None:
        documents.append((doc_id, ""))

    return documents


def read_corpus(path: str) -> list[tuple[str, str]]:
    """Read a corpus file.  A missing or unreadable file gives no documents."""
    try:
        with Path(path).open(encoding="utf-8") as fh:
            documents = parse_corpus(fh)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read corpus from %s: %s", path, e)
        return []

    logger.debug("Read %d documents from %s", len(documents), path)
    return documents
