"""
    DESCRIPTION
    -----------
    ready_scheduler produces the unique deterministic execution order for a DependencyGraph.
Among all valid topological orders it returns the lexicographically smallest one: whenever
several steps are unblocked at the same time, the smallest step id is scheduled first.

Scheduling whole "ready batches" in sorted order is NOT equivalent: a step unblocked by the
first member of a batch may be smaller than the batch's remaining members and must jump ahead
of them. The ready set is therefore a min-heap that is re-queried after every pop.
    """

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from steporder.graph.dependency_graph import DependencyGraph, build_graph
from steporder.validator import error_codes
from steporder.validator.errors import CycleError

logger = logging.getLogger(__name__)


#note: Steps whose prerequisites are all satisfied and which have not been scheduled yet.
class ReadySet:
    """Min-heap of eligible steps; each step may enter once and leave once."""

    def __init__(self, steps: Iterable[str] = ()) -> None:
        self._heap: List[str] = []
        self._entered: Set[str] = set()
        for step in steps:
            self.add(step)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def add(self, step: str) -> None:
        if step in self._entered:
            raise ValueError(f"Step entered the ready set twice: {step}")
        self._entered.add(step)
        heapq.heappush(self._heap, step)

    def pop_min(self) -> str:
        return heapq.heappop(self._heap)


#note: Stable-tie-break Kahn's algorithm.
def schedule(graph: DependencyGraph) -> Tuple[str, ...]:
    remaining: Dict[str, int] = graph.prerequisite_counts()
    ready = ReadySet(step for step, count in remaining.items() if count == 0)
    order: List[str] = []

    while ready:
        step = ready.pop_min()
        order.append(step)
        logger.debug(f"Scheduled {step} at position {len(order) - 1}")
        for dependent in graph.dependents_of(step):
            remaining[dependent] -= 1
            if remaining[dependent] == 0:
                ready.add(dependent)

    if len(order) < len(graph):
        unresolved = set(graph.dependents) - set(order)
        logger.warning(f"Cycle detected; {len(unresolved)} steps never became ready: {sorted(unresolved)}")
        raise CycleError(unresolved)

    logger.info(f"Schedule complete: {len(order)} steps")
    return tuple(order)


def schedule_pairs(pairs: Iterable[Tuple[str, str]], steps: Iterable[str] = ()) -> Tuple[str, ...]:
    """Build the graph from `pairs` and schedule it in one call."""
    return schedule(build_graph(pairs, steps=steps))


@dataclass(frozen=True)
class OrderViolation:
    code: str
    message: str


#note: Check an externally supplied order against the graph (used for pinned orders in DAG files).
def verify_order(graph: DependencyGraph, order: Sequence[str]) -> List[OrderViolation]:
    violations: List[OrderViolation] = []
    positions: Dict[str, int] = {}

    for idx, step in enumerate(order):
        if step not in graph:
            violations.append(OrderViolation(error_codes.UNKNOWN_STEP_IN_ORDER, f"Unknown step in order: {step}"))
            continue
        if step in positions:
            violations.append(OrderViolation(error_codes.DUPLICATE_STEP_IN_ORDER, f"Step listed twice: {step}"))
            continue
        positions[step] = idx

    for step in graph.vertices:
        if step not in positions:
            violations.append(OrderViolation(error_codes.MISSING_STEP_IN_ORDER, f"Step missing from order: {step}"))

    for before, after in graph.edges:
        if before in positions and after in positions and positions[before] >= positions[after]:
            violations.append(
                OrderViolation(error_codes.EDGE_VIOLATED_BY_ORDER, f"{before} must come before {after}")
            )

    return violations
