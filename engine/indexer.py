"""Indexer: builds the in-memory reverse index from ``(id, text)`` pairs.

The index maps each token to the set of document identifiers whose text
contains it.  It is built once per corpus and only read afterwards.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from engine.text import tokenize

logger = logging.getLogger(__name__)

Index = dict[str, set[str]]


# ── Token gathering ─────────────────────────────────────────────────

def gather_tokens(text: str, stopwords: frozenset[str] = frozenset()) -> set[str]:
    """Distinct tokens of ``text`` that are not stop words."""
    return {t for t in tokenize(text) if t not in stopwords}


# ── Index building ──────────────────────────────────────────────────

def build_index(
    documents: Iterable[tuple[str, str]],
    stopwords: frozenset[str] = frozenset(),
) -> tuple[Index, int]:
    """Build the reverse index for a corpus.

    Returns (index, document_count).  Every document counts, including
    ones that contribute no tokens.
    """
    index: defaultdict[str, set[str]] = defaultdict(set)
    document_count = 0

    for doc_id, text in documents:
        document_count += 1
        for token in gather_tokens(text, stopwords):
            index[token].add(doc_id)

    logger.debug(
        "Indexed %d documents into %d unique terms", document_count, len(index)
    )
    return dict(index), document_count


def summarize(index: Index, document_count: int) -> dict[str, int]:
    """Counts for reporting an index build."""
    pages: set[str] = set()
    for doc_ids in index.values():
        pages.update(doc_ids)

    return {
        "documents": document_count,
        "pages": len(pages),
        "terms": len(index),
    }
