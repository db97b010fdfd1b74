from __future__ import annotations


EMPTY_STEP_ID = "empty_step_id"
INVALID_STEP_ID = "invalid_step_id"
MALFORMED_PAIR = "malformed_pair"
INVALID_DAG_FORMAT = "invalid_dag_format"
INVALID_SETTINGS = "invalid_settings"

CYCLE_DETECTED = "cycle_detected"

UNKNOWN_STEP_IN_ORDER = "unknown_step_in_order"
MISSING_STEP_IN_ORDER = "missing_step_in_order"
DUPLICATE_STEP_IN_ORDER = "duplicate_step_in_order"
EDGE_VIOLATED_BY_ORDER = "edge_violated_by_order"
