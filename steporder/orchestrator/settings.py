"""
DESCRIPTION
-----------
Settings resolves runtime defaults for the steporder CLI.

Precedence (lowest to highest):
  built-in defaults < configs/steporder.yml < STEPORDER_* environment variables < CLI flags
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from steporder.validator.errors import ConfigError

SUPPORTED_FORMATS = ("text", "json", "yaml")

ENV_LOG_LEVEL = "STEPORDER_LOG_LEVEL"
ENV_FORMAT = "STEPORDER_FORMAT"
ENV_SEPARATOR = "STEPORDER_SEPARATOR"

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "steporder.yml"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    output_format: str = "text"
    separator: str = ""

    def with_overrides(self, **overrides: Any) -> "Settings":
        clean = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **clean)

    #note: Normalize and check values; raises ConfigError on anything the CLI cannot use.
    def validated(self) -> "Settings":
        level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level: {self.log_level}")
        if self.output_format not in SUPPORTED_FORMATS:
            raise ConfigError(f"Unsupported output format: {self.output_format}")
        return replace(self, log_level=level, separator=str(self.separator))


#note: Load YAML configs; a missing file means defaults.
def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc


def load_settings(config_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    source = env if env is not None else os.environ
    data = _load_yaml(config_path or DEFAULT_CONFIG_PATH)
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path or DEFAULT_CONFIG_PATH}")

    settings = Settings().with_overrides(
        log_level=data.get("log_level"),
        output_format=data.get("format"),
        separator=data.get("separator"),
    )
    settings = settings.with_overrides(
        log_level=source.get(ENV_LOG_LEVEL) or None,
        output_format=source.get(ENV_FORMAT) or None,
        separator=source.get(ENV_SEPARATOR),
    )
    return settings.validated()
