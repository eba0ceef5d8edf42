"""Configuration loading and schema."""

from jsonc_parser.config.loader import load_config
from jsonc_parser.config.schema import AppConfig, AppConfigRoot, CacheConfig

__all__ = ["AppConfig", "AppConfigRoot", "CacheConfig", "load_config"]
