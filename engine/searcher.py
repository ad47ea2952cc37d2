"""Query evaluation: parse → look up → fold into a result set.

A query is a whitespace-separated list of words.  A leading ``+``
intersects the running result with the word's documents, a leading ``-``
removes them, and a bare word adds them.  Words are applied strictly left
to right, with no precedence and no grouping.

Known quirk: folding starts from an empty result, so the operator of the
first word acts on nothing.  By default (``first_term="literal"``) that
operator is still applied to the empty start set: a bare first word adds
its documents, but a query beginning with ``+`` or ``-`` starts from the
empty set, so "+apple" finds nothing.  ``first_term="seed"`` instead lets
the first word seed the result whatever its sigil ("+apple -banana" is
apple minus banana).
"""

from __future__ import annotations

from enum import Enum

from engine.indexer import Index
from engine.text import normalize

FIRST_TERM_MODES = {"seed", "literal"}


class Operator(Enum):
    UNION = "union"
    INTERSECT = "intersect"
    EXCLUDE = "exclude"


SIGILS = {
    "+": Operator.INTERSECT,
    "-": Operator.EXCLUDE,
}


# ── Parsing ─────────────────────────────────────────────────────────

def parse_term(raw: str) -> tuple[Operator, str]:
    """Split the sigil off one query word and normalize the rest."""
    op = SIGILS.get(raw[:1])
    if op is None:
        return Operator.UNION, normalize(raw)
    return op, normalize(raw[1:])


def parse_query(query: str) -> list[tuple[Operator, str]]:
    return [parse_term(raw) for raw in query.split()]


# ── Evaluation ──────────────────────────────────────────────────────

def lookup(index: Index, term: str) -> set[str]:
    """Documents containing ``term``; a miss is the empty set."""
    return index.get(term, set())


def apply(op: Operator, result: set[str], docs: set[str]) -> set[str]:
    if op is Operator.INTERSECT:
        return result & docs
    if op is Operator.EXCLUDE:
        return result - docs
    return result | docs


def evaluate(index: Index, query: str, first_term: str = "literal") -> set[str]:
    """Fold the query's terms, left to right, into a set of document ids."""
    result: set[str] = set()

    for position, (op, term) in enumerate(parse_query(query)):
        if position == 0 and first_term == "seed":
            op = Operator.UNION
        result = apply(op, result, lookup(index, term))

    return result
