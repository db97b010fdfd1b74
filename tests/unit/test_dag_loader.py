from __future__ import annotations

from pathlib import Path

import pytest

from steporder.orchestrator.dag_loader import load_dag, parse_dag_document
from steporder.validator.errors import CycleError, DagFormatError, MalformedInputError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "dag.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_edge_list_document(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "edges:\n"
        "  - [C, A]\n"
        "  - [C, F]\n"
        "  - {before: A, after: B}\n"
        "  - [A, D]\n"
        "  - [B, E]\n"
        "  - [D, E]\n"
        "  - [F, E]\n",
    )

    dag = load_dag(path)

    assert dag.steps_order == ("C", "A", "B", "D", "F", "E")
    assert dag.pinned is False
    assert len(dag.graph) == 6


def test_edge_list_with_isolated_steps(tmp_path: Path) -> None:
    dag = load_dag(_write(tmp_path, "edges:\n  - [B, C]\nsteps: [A]\n"))

    assert dag.steps_order == ("A", "B", "C")


def test_steps_map_document(tmp_path: Path) -> None:
    path = _write(tmp_path, "steps:\n  AG-00: []\n  AG-01: [AG-00]\n  AG-10: [AG-00, AG-01]\n  AG-02:\n")

    dag = load_dag(str(path))

    assert dag.steps_order == ("AG-00", "AG-01", "AG-02", "AG-10")
    assert dag.graph.prerequisites_of("AG-10") == frozenset({"AG-00", "AG-01"})


def test_linear_list_is_a_chain(tmp_path: Path) -> None:
    dag = load_dag(_write(tmp_path, "- Z\n- B\n- A\n"))

    assert dag.steps_order == ("Z", "B", "A")
    assert dag.pairs == (("Z", "B"), ("B", "A"))


def test_single_step_list_is_one_element_schedule() -> None:
    assert parse_dag_document(["A"]).steps_order == ("A",)


def test_empty_document_is_empty_dag(tmp_path: Path) -> None:
    assert load_dag(_write(tmp_path, "")).steps_order == ()
    assert parse_dag_document([]).steps_order == ()


def test_scalars_are_coerced_and_stripped() -> None:
    dag = parse_dag_document({"edges": [[1, " 2 "], [2, 3]]})

    assert dag.steps_order == ("1", "2", "3")


def test_valid_pinned_order_is_honored() -> None:
    dag = parse_dag_document({"steps": {"A": [], "B": [], "C": ["A"]}, "order": ["B", "A", "C"]})

    assert dag.pinned is True
    assert dag.steps_order == ("B", "A", "C")


def test_invalid_pinned_order_is_rejected() -> None:
    with pytest.raises(DagFormatError) as excinfo:
        parse_dag_document({"steps": {"A": [], "C": ["A"]}, "order": ["C", "A"]})

    assert excinfo.value.issues[0].path == "$.order"


def test_unsupported_shape_fails_schema_validation() -> None:
    with pytest.raises(DagFormatError) as excinfo:
        parse_dag_document({"nodes": ["A"]})

    assert excinfo.value.issues
    payload = excinfo.value.to_payload()
    assert payload["code"] == "invalid_dag_format"
    assert payload["issues"][0]["path"] == "$"


def test_edge_with_three_items_fails_schema_validation() -> None:
    with pytest.raises(DagFormatError):
        parse_dag_document({"edges": [["A", "B", "C"]]})


def test_invalid_yaml_is_a_format_error(tmp_path: Path) -> None:
    with pytest.raises(DagFormatError):
        load_dag(_write(tmp_path, "edges: [\n"))


def test_empty_step_id_in_document_is_malformed() -> None:
    with pytest.raises(MalformedInputError) as excinfo:
        parse_dag_document({"steps": {"A": [""]}})

    assert not isinstance(excinfo.value, DagFormatError)


def test_cycle_in_document_propagates() -> None:
    with pytest.raises(CycleError) as excinfo:
        parse_dag_document({"edges": [["A", "B"], ["B", "A"]]})

    assert excinfo.value.unresolved == frozenset({"A", "B"})


def test_steps_map_mixed_with_edges_is_rejected() -> None:
    with pytest.raises(DagFormatError):
        parse_dag_document({"steps": {"A": []}, "edges": [["A", "B"]]})


def test_missing_file_is_a_format_error(tmp_path: Path) -> None:
    with pytest.raises(DagFormatError) as excinfo:
        load_dag(tmp_path / "absent.yml")

    assert excinfo.value.issues[0].path == "$"


def test_non_utf8_file_is_a_format_error(tmp_path: Path) -> None:
    path = tmp_path / "dag.yml"
    path.write_bytes(b"- \xff\xfe\n")

    with pytest.raises(DagFormatError):
        load_dag(path)


def test_empty_pinned_order_is_verified_not_skipped() -> None:
    with pytest.raises(DagFormatError) as excinfo:
        parse_dag_document({"steps": {"A": [], "B": ["A"]}, "order": []})

    messages = [issue.message for issue in excinfo.value.issues]
    assert messages == ["Step missing from order: A", "Step missing from order: B"]
