from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[str, int] = "WARNING") -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def utc_ts() -> str:
    return datetime.now(timezone.utc).isoformat()


def log_line(log_path: Path, msg: str) -> None:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    line = f"{utc_ts()} | {msg}\n"
    with open(log_path, "a", encoding="utf-8") as f:
        f.write(line)
