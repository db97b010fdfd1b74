"""
    DESCRIPTION
    -----------
    sequence_exporter renders a finished schedule for display and for export.

Outputs:
- render_sequence / render_string: the plain order (e.g. "CABDFE")
- exports/order.json: deterministic order payload with positions
- exports/report.md: human-readable markdown report

    """

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from steporder.graph.dependency_graph import DependencyGraph


def render_sequence(schedule: Sequence[str]) -> Tuple[str, ...]:
    return tuple(schedule)


#note: Concatenated display form; single-letter steps read as one word.
def render_string(schedule: Sequence[str], separator: str = "") -> str:
    return separator.join(schedule)


#note: Convert the schedule into a stable JSON export payload.
def build_order_export(schedule: Sequence[str], graph: Optional[DependencyGraph] = None, separator: str = "") -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "order": list(schedule),
        "order_string": render_string(schedule, separator),
        "step_count": len(schedule),
        "positions": {step: idx for idx, step in enumerate(schedule)},
    }
    if graph is not None:
        payload["edge_count"] = graph.edge_count
        payload["edges"] = [list(edge) for edge in graph.edges]
    return payload


#note: Render a markdown report listing each step with its position and prerequisites.
def build_report_markdown(schedule: Sequence[str], graph: DependencyGraph, title: str = "Step order") -> str:
    lines: List[str] = [f"# {title}", ""]
    if not schedule:
        lines.append("_No steps._")
        return "\n".join(lines) + "\n"

    lines.append(f"Order: `{render_string(schedule, ' ')}`")
    lines.append("")
    lines.append("| # | Step | Prerequisites |")
    lines.append("|---|------|---------------|")
    for idx, step in enumerate(schedule, start=1):
        prereqs = ", ".join(sorted(graph.prerequisites_of(step))) or "-"
        lines.append(f"| {idx} | {step} | {prereqs} |")
    return "\n".join(lines) + "\n"
