from __future__ import annotations

import pytest

from steporder.graph.dependency_graph import build_graph
from steporder.validator import error_codes
from steporder.validator.errors import MalformedInputError


_EXAMPLE_PAIRS = [
    ("C", "A"),
    ("C", "F"),
    ("A", "B"),
    ("A", "D"),
    ("B", "E"),
    ("D", "E"),
    ("F", "E"),
]


def test_build_graph_collects_vertices_adjacency_and_counts() -> None:
    graph = build_graph(_EXAMPLE_PAIRS)

    assert graph.vertices == ("A", "B", "C", "D", "E", "F")
    assert len(graph) == 6
    assert graph.dependents_of("C") == frozenset({"A", "F"})
    assert graph.dependents_of("E") == frozenset()
    assert graph.prerequisites_of("E") == frozenset({"B", "D", "F"})
    assert graph.prerequisite_count("E") == 3
    assert graph.prerequisite_count("C") == 0
    assert graph.edge_count == 7


def test_duplicate_pairs_do_not_double_count_prerequisites() -> None:
    deduped = build_graph(_EXAMPLE_PAIRS)
    duplicated = build_graph(_EXAMPLE_PAIRS + _EXAMPLE_PAIRS + [("C", "A")])

    assert duplicated == deduped
    assert duplicated.prerequisite_count("A") == 1
    assert duplicated.edge_count == 7


def test_prerequisite_counts_returns_fresh_copy() -> None:
    graph = build_graph([("A", "B")])

    counts = graph.prerequisite_counts()
    counts["B"] = 0

    assert graph.prerequisite_count("B") == 1
    assert graph.prerequisite_counts() == {"A": 0, "B": 1}


def test_steps_named_only_on_one_side_are_vertices() -> None:
    graph = build_graph([("X", "Y")])

    assert "X" in graph
    assert "Y" in graph
    assert "Z" not in graph
    assert graph.edges == (("X", "Y"),)


def test_explicit_isolated_step_is_a_vertex() -> None:
    graph = build_graph([], steps=["Solo"])

    assert graph.vertices == ("Solo",)
    assert graph.edge_count == 0


def test_empty_input_builds_empty_graph() -> None:
    graph = build_graph([])

    assert len(graph) == 0
    assert graph.vertices == ()
    assert graph.edges == ()


def test_build_graph_accepts_a_generator() -> None:
    graph = build_graph((p for p in [("A", "B"), ("B", "C")]))

    assert graph.vertices == ("A", "B", "C")


@pytest.mark.parametrize(
    "bad_pair, code",
    [
        (("", "B"), error_codes.EMPTY_STEP_ID),
        (("A", ""), error_codes.EMPTY_STEP_ID),
        (("A B", "C"), error_codes.INVALID_STEP_ID),
        ((None, "C"), error_codes.INVALID_STEP_ID),
        ((1, 2), error_codes.INVALID_STEP_ID),
        (("A",), error_codes.MALFORMED_PAIR),
        (("A", "B", "C"), error_codes.MALFORMED_PAIR),
        ("AB", error_codes.MALFORMED_PAIR),
    ],
)
def test_malformed_pair_is_rejected_with_offending_pair(bad_pair, code) -> None:
    pairs = [("A", "B"), bad_pair]

    with pytest.raises(MalformedInputError) as excinfo:
        build_graph(pairs)

    err = excinfo.value
    assert err.pair == bad_pair
    assert err.index == 1
    assert err.code == code
    assert repr(bad_pair) in str(err)


def test_malformed_isolated_step_is_rejected() -> None:
    with pytest.raises(MalformedInputError):
        build_graph([("A", "B")], steps=["bad step"])
