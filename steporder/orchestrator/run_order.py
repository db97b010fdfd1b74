"""
    DESCRIPTION
    -----------
    run_order is the headless + CLI entrypoint for ordering one DAG.

Responsibilities:
- Load a DAG document (or take pairs directly) and compute its order
- Map StepOrderError failures into a result manifest (ok=False, no partial order)
- Optionally persist exports (order.json, report.md) and a run manifest under --output-dir
- Map failures to exit codes in main(); the core never exits the process
    """

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

import yaml

from steporder.exporters.sequence_exporter import render_string
from steporder.graph.dependency_graph import build_graph
from steporder.orchestrator.artifact_store import write_exports, write_manifest
from steporder.orchestrator.dag_loader import DagSpec, load_dag
from steporder.orchestrator.logger import configure_logging, log_line
from steporder.orchestrator.ready_scheduler import schedule
from steporder.orchestrator.settings import SUPPORTED_FORMATS, Settings, load_settings
from steporder.validator.errors import ConfigError, CycleError, StepOrderError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MALFORMED = 2
EXIT_CYCLE = 3


#note: Order a DAG and return a result manifest; failures are reported, not raised.
def run_order(
    *,
    dag_path: Optional[Path] = None,
    pairs: Optional[Iterable[Tuple[str, str]]] = None,
    steps: Iterable[str] = (),
    output_dir: Optional[Path] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """
    #note: Exactly one of dag_path / pairs must be given.

    Manifest shape:
      {"ok": bool, "order": [...], "order_string": str, "errors": [...], "exports": [...]}
    """
    if (dag_path is None) == (pairs is None):
        raise ValueError("run_order needs exactly one of dag_path or pairs")
    settings = settings or Settings()

    manifest: Dict[str, Any] = {"ok": False, "order": [], "order_string": "", "errors": [], "exports": []}
    source = str(dag_path) if dag_path is not None else "<pairs>"

    try:
        if dag_path is not None:
            dag: DagSpec = load_dag(dag_path)
            graph = dag.graph
            order = dag.steps_order
            manifest["pinned"] = dag.pinned
        else:
            graph = build_graph(pairs, steps=steps)
            order = schedule(graph)
    except StepOrderError as exc:
        logger.error(f"Ordering failed for {source}: {exc}")
        manifest["errors"].append(exc.to_payload())
        _persist_failure(output_dir, manifest, source)
        return manifest

    manifest["ok"] = True
    manifest["order"] = list(order)
    manifest["order_string"] = render_string(order, settings.separator)
    manifest["step_count"] = len(order)

    if output_dir is not None:
        manifest["exports"] = write_exports(output_dir, order, graph, settings.separator)
        write_manifest(output_dir, manifest)
        log_line(output_dir / "logs" / "run.log", f"ok source={source} steps={len(order)}")

    return manifest


def _persist_failure(output_dir: Optional[Path], manifest: Dict[str, Any], source: str) -> None:
    if output_dir is None:
        return
    write_manifest(output_dir, manifest)
    codes = ",".join(e["code"] for e in manifest["errors"])
    log_line(output_dir / "logs" / "run.log", f"fail source={source} errors={codes}")


#note: Exit code for a failed manifest (first error decides).
def exit_code_for(manifest: Dict[str, Any]) -> int:
    if manifest["ok"]:
        return EXIT_OK
    if manifest["errors"] and manifest["errors"][0]["code"] == CycleError.code:
        return EXIT_CYCLE
    return EXIT_MALFORMED


def _render(manifest: Dict[str, Any], output_format: str) -> str:
    if output_format == "json":
        return json.dumps(manifest, sort_keys=True, indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(manifest, sort_keys=False).rstrip("\n")
    if manifest["ok"]:
        return manifest["order_string"]
    return "\n".join(f"error [{e['code']}]: {e['message']}" for e in manifest["errors"])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="steporder",
        description="Print the lexicographically smallest execution order for a DAG document.",
    )
    parser.add_argument("--dag-file", dest="dag_file", required=True, help="Path to a YAML DAG document.")
    parser.add_argument("--output-dir", dest="output_dir", required=False, help="Directory for order.json, report.md and manifest.json.")
    parser.add_argument("--format", dest="output_format", choices=SUPPORTED_FORMATS, default=None, help="Stdout format.")
    parser.add_argument("--separator", dest="separator", default=None, help="Separator for the text form of the order.")
    parser.add_argument("--log-level", dest="log_level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument("--config", dest="config", default=None, help="Path to a steporder.yml config file.")
    return parser


#note: CLI entrypoint (python -m steporder.orchestrator.run_order ... / steporder ...).
def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(Path(args.config).expanduser() if args.config else None)
        settings = settings.with_overrides(
            log_level=args.log_level,
            output_format=args.output_format,
            separator=args.separator,
        ).validated()
    except ConfigError as exc:
        print(f"error [{exc.code}]: {exc}", file=sys.stderr)
        return EXIT_MALFORMED
    configure_logging(settings.log_level)

    dag_path = Path(args.dag_file).expanduser().resolve()
    output_dir = Path(args.output_dir).expanduser().resolve() if args.output_dir else None

    manifest = run_order(dag_path=dag_path, output_dir=output_dir, settings=settings)
    stream = sys.stdout if manifest["ok"] else sys.stderr
    print(_render(manifest, settings.output_format), file=stream)
    return exit_code_for(manifest)


if __name__ == "__main__":
    raise SystemExit(main())
