from __future__ import annotations

import pytest

from engine.indexer import build_index
from engine.searcher import Operator, evaluate, lookup, parse_query


@pytest.fixture
def index():
    idx, _ = build_index(
        [
            ("d1", "Hello World"),
            ("d2", "hello there"),
            ("d3", "apple banana"),
            ("d4", "apple pie"),
            ("d5", "banana split"),
        ]
    )
    return idx


def test_parse_query_sigils() -> None:
    assert parse_query("Hello +World! -there") == [
        (Operator.UNION, "hello"),
        (Operator.INTERSECT, "world"),
        (Operator.EXCLUDE, "there"),
    ]


def test_parse_query_strips_only_one_sigil() -> None:
    assert parse_query("+-apple -+pie") == [
        (Operator.INTERSECT, "apple"),
        (Operator.EXCLUDE, "pie"),
    ]
    assert parse_query("+ -") == [(Operator.INTERSECT, ""), (Operator.EXCLUDE, "")]


def test_single_terms(index) -> None:
    assert evaluate(index, "hello") == {"d1", "d2"}
    assert evaluate(index, "HELLO!") == {"d1", "d2"}


def test_union_intersect_exclude(index) -> None:
    assert evaluate(index, "hello +world") == {"d1"}
    assert evaluate(index, "hello -there") == {"d1"}
    assert evaluate(index, "world there") == {"d1", "d2"}


def test_first_operator_applies_to_empty_start(index) -> None:
    assert evaluate(index, "+apple") == set()
    assert evaluate(index, "-apple") == set()
    assert evaluate(index, "+apple -banana") == set()
    assert evaluate(index, "-apple banana") == {"d3", "d5"}
    assert evaluate(index, "apple -banana") == {"d4"}
    assert evaluate(index, "apple") != evaluate(index, "+apple")


def test_seeded_first_term(index) -> None:
    assert evaluate(index, "+apple -banana", first_term="seed") == {"d4"}
    assert evaluate(index, "-apple", first_term="seed") == {"d3", "d4"}
    assert evaluate(index, "+apple", first_term="seed") == evaluate(index, "apple")


def test_strict_left_to_right(index) -> None:
    # (apple ∪ banana) ∩ split, not apple ∪ (banana ∩ split)
    assert evaluate(index, "apple banana +split") == {"d5"}
    assert evaluate(index, "apple +split banana") == {"d3", "d5"}


def test_missing_terms_are_empty(index) -> None:
    assert evaluate(index, "zebra") == set()
    assert evaluate(index, "hello +zebra") == set()
    assert evaluate(index, "hello -zebra") == {"d1", "d2"}
    assert evaluate(index, "2024 hello") == {"d1", "d2"}
    assert lookup(index, "zebra") == set()


def test_empty_query(index) -> None:
    assert evaluate(index, "") == set()
    assert evaluate(index, "   \t ") == set()
    assert evaluate({}, "") == set()


def test_round_trip_every_token(index) -> None:
    for token, doc_ids in index.items():
        assert evaluate(index, token) == doc_ids


def test_evaluate_does_not_mutate_index(index) -> None:
    before = {t: set(ids) for t, ids in index.items()}
    result = evaluate(index, "hello")
    result.add("d99")
    evaluate(index, "apple banana -pie +split")
    assert index == before
