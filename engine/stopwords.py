"""Stop-word loading.

Stop words come from an optional plain-text list, one word per line.  The
list is normalized with the same pipeline as document text so that
"The" in the list filters "the" in a document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from engine.text import normalize

logger = logging.getLogger(__name__)


def load_stop_words(source: Iterable[str] | None = None) -> frozenset[str]:
    """Normalize each line of ``source`` into a stop-word set.

    ``None`` yields an empty set, which makes filtering a no-op.
    """
    if source is None:
        return frozenset()
    words = set()
    for line in source:
        token = normalize(line.strip())
        if token:
            words.add(token)
    return frozenset(words)


def read_stop_words(path: str | None) -> frozenset[str]:
    """Load stop words from a file.  Unreadable files give an empty set."""
    if not path:
        return frozenset()
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read stop words from %s: %s", path, e)
        return frozenset()

    words = load_stop_words(lines)
    logger.debug("Loaded %d stop words from %s", len(words), path)
    return words
