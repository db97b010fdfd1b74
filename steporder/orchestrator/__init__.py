"""Scheduling and run orchestration for step ordering."""

from steporder.orchestrator.dag_loader import DagSpec, load_dag, parse_dag_document
from steporder.orchestrator.ready_scheduler import OrderViolation, ReadySet, schedule, schedule_pairs, verify_order
from steporder.orchestrator.settings import Settings, load_settings

__all__ = [
    "DagSpec",
    "OrderViolation",
    "ReadySet",
    "Settings",
    "load_dag",
    "load_settings",
    "parse_dag_document",
    "schedule",
    "schedule_pairs",
    "verify_order",
]
