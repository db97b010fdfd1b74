from __future__ import annotations

import re


STEP_ID_RE = re.compile(r"^[^\s\x00-\x1f\x7f]+$")


def normalize_whitespace(text: str) -> str:
    return " ".join(text.strip().split())


def normalize_step_id(value: object) -> str:
    if value is None:
        return ""
    return normalize_whitespace(str(value))


def is_valid_step_id(step_id: str) -> bool:
    return bool(STEP_ID_RE.match(step_id))
