"""Validation helpers and the error taxonomy."""

from steporder.validator.errors import ConfigError, CycleError, DagFormatError, MalformedInputError, StepOrderError
from steporder.validator.pair_validator import require_pair, require_step_id, validate_pair, validate_step_id
from steporder.validator.schema_validator import SchemaIssue, validate_dag_document, validate_schema

__all__ = [
    "ConfigError",
    "CycleError",
    "DagFormatError",
    "MalformedInputError",
    "SchemaIssue",
    "StepOrderError",
    "require_pair",
    "require_step_id",
    "validate_dag_document",
    "validate_pair",
    "validate_schema",
    "validate_step_id",
]
