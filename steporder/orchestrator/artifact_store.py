"""
    DESCRIPTION
    -----------
    artifact_store persists the artifacts of one ordering run under an output directory.

Layout:
  <output_dir>/
    manifest.json
    exports/order.json
    exports/report.md
    logs/run.log

All writes go through a tmp file + replace so a failed run never leaves half-written exports.
    """

from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Sequence

from steporder.exporters.sequence_exporter import build_order_export, build_report_markdown
from steporder.graph.dependency_graph import DependencyGraph

ORDER_EXPORT = Path("exports") / "order.json"
REPORT_EXPORT = Path("exports") / "report.md"
MANIFEST = Path("manifest.json")


#note: Write text atomically (tmp -> replace).
def atomic_write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(content, encoding="utf-8")
    os.replace(tmp_path, path)


#note: Sorted keys + fixed indentation so identical schedules produce identical bytes.
def atomic_write_json(path: Path, payload: Any) -> None:
    text = json.dumps(payload, ensure_ascii=True, sort_keys=True, indent=2)
    atomic_write_text(path, text + "\n")


def _manifest_entry(path: Path, base_dir: Path) -> Dict[str, Any]:
    data = path.read_bytes()
    return {
        "path": path.relative_to(base_dir).as_posix(),
        "bytes": len(data),
        "sha256": hashlib.sha256(data).hexdigest(),
    }


#note: Write order.json + report.md for a finished schedule and return their manifest entries.
def write_exports(output_dir: Path, order: Sequence[str], graph: DependencyGraph, separator: str = "") -> List[Dict[str, Any]]:
    written = []
    atomic_write_json(output_dir / ORDER_EXPORT, build_order_export(order, graph, separator))
    written.append(output_dir / ORDER_EXPORT)
    atomic_write_text(output_dir / REPORT_EXPORT, build_report_markdown(order, graph))
    written.append(output_dir / REPORT_EXPORT)
    return [_manifest_entry(path, output_dir) for path in written]


def write_manifest(output_dir: Path, manifest: Dict[str, Any]) -> Path:
    path = output_dir / MANIFEST
    atomic_write_json(path, manifest)
    return path
