from __future__ import annotations

from pathlib import Path

import pytest

from steporder.orchestrator.settings import Settings, load_settings
from steporder.validator.errors import ConfigError


def test_missing_config_file_means_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.yml", env={})

    assert settings == Settings()


def test_config_file_then_env_override(tmp_path: Path) -> None:
    cfg = tmp_path / "steporder.yml"
    cfg.write_text("log_level: info\nformat: json\nseparator: ','\n", encoding="utf-8")

    from_file = load_settings(cfg, env={})
    from_env = load_settings(cfg, env={"STEPORDER_LOG_LEVEL": "debug", "STEPORDER_FORMAT": "yaml"})

    assert from_file == Settings(log_level="INFO", output_format="json", separator=",")
    assert from_env.log_level == "DEBUG"
    assert from_env.output_format == "yaml"
    assert from_env.separator == ","


def test_unknown_format_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "steporder.yml"
    cfg.write_text("format: xml\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(cfg, env={})


def test_with_overrides_ignores_none() -> None:
    base = Settings(separator="-")

    assert base.with_overrides(separator=None, output_format="json") == Settings(separator="-", output_format="json")


def test_unknown_log_level_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_settings(tmp_path / "absent.yml", env={"STEPORDER_LOG_LEVEL": "loud"})

    assert excinfo.value.code == "invalid_settings"


def test_validated_normalizes_level_case() -> None:
    assert Settings(log_level="debug").validated().log_level == "DEBUG"


@pytest.mark.parametrize("text", ["- not\n- a mapping\n", "log_level: [\n"])
def test_unusable_config_file_is_rejected(tmp_path: Path, text: str) -> None:
    cfg = tmp_path / "steporder.yml"
    cfg.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(cfg, env={})
