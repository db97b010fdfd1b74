"""
DESCRIPTION
-----------
pair_validator is the gatekeeper for dependency pairs before they reach the graph builder.

Policy:
- A pair is a 2-item list/tuple (before, after).
- Both sides must be strings that are non-empty tokens (no whitespace, no control chars).
- Self-referencing pairs are valid input; they surface later as a cycle.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from steporder.common.text_normalization import is_valid_step_id
from steporder.validator import error_codes
from steporder.validator.errors import MalformedInputError


#note: Validate a single step identifier and return a list of error payloads (empty means ok).
def validate_step_id(step_id: Any) -> List[Dict[str, Any]]:
    if not isinstance(step_id, str):
        return [{"code": error_codes.INVALID_STEP_ID, "message": f"Step id must be a string, got {type(step_id).__name__}"}]
    if step_id == "":
        return [{"code": error_codes.EMPTY_STEP_ID, "message": "Step id is empty"}]
    if not is_valid_step_id(step_id):
        return [{"code": error_codes.INVALID_STEP_ID, "message": f"Step id is not a well-formed token: {step_id!r}"}]
    return []


#note: Validate one dependency pair.
def validate_pair(pair: Any) -> Dict[str, Any]:
    """
    #note: Returns a validator result payload:
      {
        "ok": bool,
        "errors": [...],
        "warnings": [...]
      }
    """
    errors: List[Dict[str, Any]] = []
    warnings: List[Dict[str, Any]] = []

    if isinstance(pair, (str, bytes)) or not isinstance(pair, (list, tuple)) or len(pair) != 2:
        errors.append({"code": error_codes.MALFORMED_PAIR, "message": f"Pair must be a (before, after) 2-tuple: {pair!r}"})
        return {"ok": False, "errors": errors, "warnings": warnings}

    for side, step_id in zip(("before", "after"), pair):
        for issue in validate_step_id(step_id):
            issue["message"] = f"{side}: {issue['message']}"
            errors.append(issue)

    if not errors and pair[0] == pair[1]:
        warnings.append({"code": error_codes.CYCLE_DETECTED, "message": f"Step depends on itself: {pair[0]}"})

    return {"ok": len(errors) == 0, "errors": errors, "warnings": warnings}


#note: Hard-fail variant used by the builder; returns the pair as a normalized tuple.
def require_pair(pair: Any, index: Optional[int] = None) -> Tuple[str, str]:
    result = validate_pair(pair)
    if not result["ok"]:
        first = result["errors"][0]
        where = f" at index {index}" if index is not None else ""
        raise MalformedInputError(
            f"Malformed dependency pair{where}: {pair!r} ({first['message']})",
            pair=pair,
            index=index,
            code=first["code"],
        )
    return (pair[0], pair[1])


#note: Hard-fail variant for standalone step declarations.
def require_step_id(step_id: Any) -> str:
    issues = validate_step_id(step_id)
    if issues:
        raise MalformedInputError(
            f"Malformed step id: {step_id!r} ({issues[0]['message']})",
            pair=step_id,
            code=issues[0]["code"],
        )
    return step_id
