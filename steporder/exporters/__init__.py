"""Exporters for finished schedules."""

from steporder.exporters.sequence_exporter import (
    build_order_export,
    build_report_markdown,
    render_sequence,
    render_string,
)

__all__ = [
    "build_order_export",
    "build_report_markdown",
    "render_sequence",
    "render_string",
]
