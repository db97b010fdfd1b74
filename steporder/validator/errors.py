"""
DESCRIPTION
-----------
Exception taxonomy shared by the graph builder, the scheduler and the DAG loader.
Every error carries a stable `code` (see error_codes) so boundary callers can map
failures to result payloads and exit codes without parsing messages.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence

from steporder.validator import error_codes


class StepOrderError(Exception):
    """Base class for all failures raised by steporder."""

    code: str = "steporder_error"

    def to_payload(self) -> Dict[str, Any]:
        return {"code": self.code, "message": str(self)}


class MalformedInputError(StepOrderError):
    """A dependency pair references an empty or invalid identifier."""

    code = error_codes.MALFORMED_PAIR

    def __init__(self, message: str, *, pair: Any = None, index: Optional[int] = None, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.pair = pair
        self.index = index
        if code:
            self.code = code

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["pair"] = _jsonable_pair(self.pair)
        payload["index"] = self.index
        return payload


class DagFormatError(MalformedInputError):
    """A DAG document does not match any supported shape."""

    code = error_codes.INVALID_DAG_FORMAT

    def __init__(self, message: str, *, issues: Sequence[Any] = ()) -> None:
        super().__init__(message)
        self.issues: List[Any] = list(issues)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": str(self),
            "issues": [{"path": i.path, "message": i.message} for i in self.issues],
        }


class CycleError(StepOrderError):
    """The prerequisite graph cannot be fully resolved."""

    code = error_codes.CYCLE_DETECTED

    def __init__(self, unresolved: Iterable[str]) -> None:
        self.unresolved: FrozenSet[str] = frozenset(unresolved)
        super().__init__(f"Dependency cycle among steps: {sorted(self.unresolved)}")

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["unresolved"] = sorted(self.unresolved)
        return payload


def _jsonable_pair(pair: Any) -> Any:
    if isinstance(pair, (list, tuple)):
        return [item if isinstance(item, (str, int, float, bool)) or item is None else repr(item) for item in pair]
    if pair is None or isinstance(pair, (str, int, float, bool)):
        return pair
    return repr(pair)


class ConfigError(StepOrderError):
    """Settings from the config file, environment or CLI flags are unusable."""

    code = error_codes.INVALID_SETTINGS
