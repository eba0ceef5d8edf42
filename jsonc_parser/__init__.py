"""Comment-tolerant JSON parsing with memoized stripping and parsing."""

from loguru import logger

from jsonc_parser.cache import BoundedCache, CacheResult, CacheStats
from jsonc_parser.detector import has_comments
from jsonc_parser.errors import JsoncSyntaxError
from jsonc_parser.parser import (
    JsoncParser,
    get_default_parser,
    init_default_parser,
    parse,
    strip_comments,
)
from jsonc_parser.stripper import CommentStripper, remove_comments

logger.disable("jsonc_parser")

__all__ = [
    "BoundedCache",
    "CacheResult",
    "CacheStats",
    "CommentStripper",
    "JsoncParser",
    "JsoncSyntaxError",
    "get_default_parser",
    "has_comments",
    "init_default_parser",
    "parse",
    "remove_comments",
    "strip_comments",
]
