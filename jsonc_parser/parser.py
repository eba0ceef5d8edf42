from __future__ import annotations

from typing import Any
import threading

import orjson
from loguru import logger

from jsonc_parser.cache import BoundedCache, CacheStats
from jsonc_parser.config.schema import CacheConfig
from jsonc_parser.detector import has_comments
from jsonc_parser.errors import JsoncSyntaxError
from jsonc_parser.stripper import CommentStripper
from jsonc_parser.utils.hashing import input_digest

_default_parser: "JsoncParser | None" = None
_default_lock = threading.Lock()


def _loads(text: str) -> Any:
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise JsoncSyntaxError.from_decode_error(exc, text) from exc


class JsoncParser:
    """Parse JSON with ``//`` and ``/* */`` comments, memoizing results.

    The parser owns two LRU caches: stripped text keyed by raw text, and
    parsed values keyed by raw text. Either can be injected to share it
    between parsers. Cached values are returned as-is, so callers that mutate
    a parsed value should copy it first.
    """

    def __init__(
        self,
        config: CacheConfig | None = None,
        *,
        strip_cache: BoundedCache[str, str] | None = None,
        parse_cache: BoundedCache[str, Any] | None = None,
    ):
        self.config = config or CacheConfig()
        self.stripper = CommentStripper(cache=strip_cache, capacity=self.config.strip_cache_size)
        self.parse_cache: BoundedCache[str, Any] = (
            parse_cache if parse_cache is not None else BoundedCache(self.config.parse_cache_size, name="parse")
        )

    @property
    def strip_cache(self) -> BoundedCache[str, str]:
        return self.stripper.cache

    def strip_comments(self, text: str) -> str:
        return self.stripper.strip(text)

    def parse(self, text: str) -> Any:
        cached = self.parse_cache.get(text)
        if cached.hit:
            logger.bind(op="parse", cache="hit").trace("Parse cache hit")
            return cached.value

        if has_comments(text):
            value = _loads(self.strip_comments(text))
            path = "strip"
        else:
            value = _loads(text)
            path = "fast"

        logger.bind(op="parse", cache="miss", input_hash=input_digest(text)).debug("Parsed via {} path", path)
        self.parse_cache.set(text, value)
        return value

    def cache_stats(self) -> dict[str, CacheStats]:
        return {
            "strip": self.strip_cache.stats(),
            "parse": self.parse_cache.stats(),
        }

    def clear(self) -> None:
        self.strip_cache.clear()
        self.parse_cache.clear()


def init_default_parser(config: CacheConfig | None = None) -> JsoncParser:
    """Install a fresh default parser used by the module-level helpers."""
    global _default_parser
    with _default_lock:
        _default_parser = JsoncParser(config)
        return _default_parser


def get_default_parser() -> JsoncParser:
    global _default_parser
    with _default_lock:
        if _default_parser is None:
            _default_parser = JsoncParser()
        return _default_parser


def parse(text: str) -> Any:
    return get_default_parser().parse(text)


def strip_comments(text: str) -> str:
    return get_default_parser().strip_comments(text)
