"""
    DESCRIPTION
    -----------
    dag_loader reads a DAG document (YAML) and returns the canonical execution order.
Three document shapes are supported; every shape is normalized into (before, after) pairs
before the graph is built, so all of them share one scheduler.
    """

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import yaml

from steporder.common.text_normalization import normalize_step_id
from steporder.graph.dependency_graph import DependencyGraph, build_graph
from steporder.orchestrator.ready_scheduler import schedule, verify_order
from steporder.validator.errors import DagFormatError
from steporder.validator.schema_validator import SchemaIssue, validate_dag_document

logger = logging.getLogger(__name__)


#note: A normalized DAG plus the order computed (or pinned and verified) for it.
@dataclass(frozen=True)
class DagSpec:
    """
    #note: steps_order is the deterministic topological order produced by the loader.
    """
    pairs: Tuple[Tuple[str, str], ...]
    steps: Tuple[str, ...]
    graph: DependencyGraph
    steps_order: Tuple[str, ...]
    pinned: bool = False


#note: Load a DAG file from disk and normalize into a DagSpec.
def load_dag(dag_path: Union[str, Path]) -> DagSpec:
    """
    #note: Supported formats:

    1) Linear list (each step depends on the previous one):
       - A
       - B
       - C

    2) Steps map (step -> prerequisites):
       steps:
         A: []
         B: [A]
         C: [A, B]
       order: [A, B, C]   # optional, verified against the graph

    3) Edge list:
       edges:
         - [C, A]
         - {before: A, after: B}
       steps: [Z]          # optional isolated steps
    """
    path = Path(dag_path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DagFormatError(
            f"Cannot read DAG document: {path}",
            issues=[SchemaIssue(path="$", message=str(exc))],
        ) from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DagFormatError(
            f"DAG document is not valid YAML: {path}",
            issues=[SchemaIssue(path="$", message=str(exc))],
        ) from exc
    logger.debug(f"Loaded DAG document from {path}")
    return parse_dag_document(raw, source=str(path))


def parse_dag_document(raw: Any, source: str = "<memory>") -> DagSpec:
    #note: An empty document is an empty DAG, not an error.
    if raw is None:
        raw = []

    issues = validate_dag_document(raw)
    if issues:
        raise DagFormatError(f"Unsupported DAG format in {source}", issues=issues)

    pairs, steps, pinned_order = _normalize(raw)
    graph = build_graph(pairs, steps=steps)
    computed = schedule(graph)

    if pinned_order is None:
        return DagSpec(pairs=pairs, steps=steps, graph=graph, steps_order=computed)

    violations = verify_order(graph, pinned_order)
    if violations:
        raise DagFormatError(
            f"Pinned order in {source} is not a valid execution order",
            issues=[SchemaIssue(path="$.order", message=v.message) for v in violations],
        )
    if tuple(pinned_order) != computed:
        logger.info(f"Pinned order in {source} differs from the lexicographically smallest order {list(computed)}")
    return DagSpec(pairs=pairs, steps=steps, graph=graph, steps_order=tuple(pinned_order), pinned=True)


def _normalize(raw: Any) -> Tuple[Tuple[Tuple[str, str], ...], Tuple[str, ...], Optional[List[str]]]:
    #note: Linear format: consecutive steps form a chain.
    if isinstance(raw, list):
        chain = [normalize_step_id(s) for s in raw]
        pairs = tuple(zip(chain, chain[1:]))
        return pairs, tuple(chain), None

    pinned = raw.get("order")
    pinned_order = [normalize_step_id(s) for s in pinned] if pinned is not None else None

    #note: Graph format.
    if "steps" in raw and isinstance(raw["steps"], dict):
        pairs_list: List[Tuple[str, str]] = []
        steps: List[str] = []
        for k, v in raw["steps"].items():
            step = normalize_step_id(k)
            steps.append(step)
            for dep in v or []:
                pairs_list.append((normalize_step_id(dep), step))
        return tuple(pairs_list), tuple(steps), pinned_order

    #note: Edge-list format.
    pairs_list = []
    for edge in raw.get("edges") or []:
        if isinstance(edge, dict):
            pairs_list.append((normalize_step_id(edge["before"]), normalize_step_id(edge["after"])))
        else:
            pairs_list.append((normalize_step_id(edge[0]), normalize_step_id(edge[1])))
    steps = [normalize_step_id(s) for s in raw.get("steps") or []]
    return tuple(pairs_list), tuple(steps), pinned_order
