from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from jsonschema import Draft7Validator


_STEP_SCALAR = {"type": ["string", "integer"]}

#note: The three accepted DAG document shapes (linear list, steps map, edge list).
DAG_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "oneOf": [
        {"type": "array", "items": _STEP_SCALAR},
        {
            "type": "object",
            "required": ["steps"],
            "not": {"required": ["edges"]},
            "properties": {
                "steps": {
                    "type": "object",
                    "additionalProperties": {
                        "anyOf": [{"type": "array", "items": _STEP_SCALAR}, {"type": "null"}],
                    },
                },
                "order": {"type": "array", "items": _STEP_SCALAR},
            },
        },
        {
            "type": "object",
            "required": ["edges"],
            "properties": {
                "edges": {
                    "type": "array",
                    "items": {
                        "anyOf": [
                            {"type": "array", "items": _STEP_SCALAR, "minItems": 2, "maxItems": 2},
                            {
                                "type": "object",
                                "required": ["before", "after"],
                                "properties": {"before": _STEP_SCALAR, "after": _STEP_SCALAR},
                            },
                        ]
                    },
                },
                "steps": {"type": "array", "items": _STEP_SCALAR},
                "order": {"type": "array", "items": _STEP_SCALAR},
            },
        },
    ],
}


@dataclass(frozen=True)
class SchemaIssue:
    path: str
    message: str


def validate_schema(payload: Any, schema: Dict[str, Any]) -> List[SchemaIssue]:
    """Validates payload against a JSON schema and returns issues."""
    validator = Draft7Validator(schema)
    issues: List[SchemaIssue] = []
    for error in validator.iter_errors(payload):
        path = "$"
        if error.path:
            path = "$." + ".".join(str(p) for p in error.path)
        issues.append(SchemaIssue(path=path, message=error.message))
    return issues


def validate_dag_document(payload: Any) -> List[SchemaIssue]:
    return validate_schema(payload, DAG_DOCUMENT_SCHEMA)
