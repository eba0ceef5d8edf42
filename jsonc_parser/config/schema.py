from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    log_level: LogLevel = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class CacheConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # A size of 0 disables the corresponding cache.
    strip_cache_size: int = 100
    parse_cache_size: int = 50

    @field_validator("strip_cache_size", "parse_cache_size")
    @classmethod
    def _non_negative_int(cls, value: int) -> int:
        if value < 0:
            raise ValueError("cache sizes must be non-negative")
        return value


class AppConfigRoot(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app: AppConfig = AppConfig()
    cache: CacheConfig = CacheConfig()
