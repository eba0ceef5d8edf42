from __future__ import annotations

from pathlib import Path
from typing import Any
import os

import yaml
from loguru import logger

from jsonc_parser.config.schema import AppConfigRoot

_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "JSONC_PARSER_LOG_LEVEL": ("app", "log_level"),
    "JSONC_PARSER_STRIP_CACHE_SIZE": ("cache", "strip_cache_size"),
    "JSONC_PARSER_PARSE_CACHE_SIZE": ("cache", "parse_cache_size"),
}


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _apply_env(config_data: dict[str, Any]) -> dict[str, Any]:
    for env_var, (section, field) in _ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            config_data.setdefault(section, {})[field] = value
    return config_data


def load_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> AppConfigRoot:
    base_dir = Path.cwd()

    config_data: dict[str, Any] = {}
    config_data = _deep_merge(config_data, _read_yaml(base_dir / "configs" / "default.yaml"))

    if config_path:
        config_data = _deep_merge(config_data, _read_yaml(config_path))

    if overrides:
        config_data = _deep_merge(config_data, overrides)

    config_data = _apply_env(config_data)

    config = AppConfigRoot.model_validate(config_data)
    logger.debug("Loaded config from {}", base_dir)
    return config


def env_snapshot() -> dict[str, str | None]:
    return {env_var: os.getenv(env_var) for env_var in _ENV_OVERRIDES}
