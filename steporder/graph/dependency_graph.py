"""
Dependency Graph

Turns a sequence of (before, after) precedence pairs into an explicit graph:

- adjacency: step -> set of direct dependents (steps that list it as a prerequisite)
- prerequisites: step -> set of direct prerequisites

The prerequisite count of a step is the size of its prerequisite set, so repeated
pairs never double-count. The graph is read-only after build_graph() returns; the
scheduler works on its own copy of the counts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, Set, Tuple

from steporder.validator.pair_validator import require_pair, require_step_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependencyGraph:
    """
    Explicit prerequisite graph over named steps.

    Attributes:
        dependents: Step -> steps that must come after it
        prerequisites: Step -> steps that must come before it
    """

    dependents: Dict[str, FrozenSet[str]] = field(default_factory=dict)
    prerequisites: Dict[str, FrozenSet[str]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.dependents)

    def __contains__(self, step: object) -> bool:
        return step in self.dependents

    def __iter__(self) -> Iterator[str]:
        return iter(self.vertices)

    @property
    def vertices(self) -> Tuple[str, ...]:
        return tuple(sorted(self.dependents))

    @property
    def edges(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(
            (before, after)
            for before in sorted(self.dependents)
            for after in sorted(self.dependents[before])
        )

    @property
    def edge_count(self) -> int:
        return sum(len(d) for d in self.dependents.values())

    def dependents_of(self, step: str) -> FrozenSet[str]:
        return self.dependents[step]

    def prerequisites_of(self, step: str) -> FrozenSet[str]:
        return self.prerequisites[step]

    def prerequisite_count(self, step: str) -> int:
        return len(self.prerequisites[step])

    #note: Fresh, mutable copy of the counts for one scheduling pass.
    def prerequisite_counts(self) -> Dict[str, int]:
        return {step: len(prereqs) for step, prereqs in self.prerequisites.items()}


#note: Build the graph from the full pair list; duplicates are merged.
def build_graph(pairs: Iterable[Tuple[str, str]], steps: Iterable[str] = ()) -> DependencyGraph:
    """
    Build a DependencyGraph from precedence pairs.

    Args:
        pairs: (before, after) tuples; `before` must be scheduled earlier than `after`
        steps: extra step ids to include as vertices even if no pair names them

    Raises:
        MalformedInputError: a pair is not a 2-tuple of well-formed step ids
    """
    dependents: Dict[str, Set[str]] = {}
    prerequisites: Dict[str, Set[str]] = {}
    pair_count = 0

    for index, raw in enumerate(pairs):
        before, after = require_pair(raw, index=index)
        pair_count += 1
        dependents.setdefault(before, set()).add(after)
        dependents.setdefault(after, set())
        prerequisites.setdefault(after, set()).add(before)
        prerequisites.setdefault(before, set())

    for step in steps:
        require_step_id(step)
        dependents.setdefault(step, set())
        prerequisites.setdefault(step, set())

    graph = DependencyGraph(
        dependents={k: frozenset(v) for k, v in dependents.items()},
        prerequisites={k: frozenset(v) for k, v in prerequisites.items()},
    )
    logger.debug(
        f"Built dependency graph: {len(graph)} steps, {graph.edge_count} edges from {pair_count} pairs"
    )
    return graph
