from __future__ import annotations

from loguru import logger

from jsonc_parser.cache import BoundedCache
from jsonc_parser.detector import has_comments
from jsonc_parser.scanner import SpanKind, iter_spans
from jsonc_parser.utils.hashing import input_digest

DEFAULT_STRIP_CACHE_SIZE = 100


def _block_comment_replacement(comment: str) -> str:
    line_breaks = "".join(ch for ch in comment if ch in "\r\n")
    return line_breaks or " "


def remove_comments(text: str) -> str:
    """Remove comments from ``text`` without any caching.

    Line comments vanish but keep their line break. Block comments turn into
    one space, or into their own line breaks when they span several lines.
    """
    parts: list[str] = []
    found_comment = False
    for span in iter_spans(text):
        if span.kind is SpanKind.LINE_COMMENT:
            found_comment = True
        elif span.kind is SpanKind.BLOCK_COMMENT:
            found_comment = True
            parts.append(_block_comment_replacement(span.slice(text)))
        else:
            parts.append(span.slice(text))

    if not found_comment:
        return text
    return "".join(parts)


class CommentStripper:
    def __init__(self, cache: BoundedCache[str, str] | None = None, capacity: int = DEFAULT_STRIP_CACHE_SIZE):
        self.cache: BoundedCache[str, str] = cache if cache is not None else BoundedCache(capacity, name="strip")

    def strip(self, text: str) -> str:
        return self.cache.get_or_compute(text, _strip_uncached)


def _strip_uncached(text: str) -> str:
    if not has_comments(text):
        return text
    result = remove_comments(text)
    logger.bind(op="strip", cache="miss", input_hash=input_digest(text)).debug("Stripped comments")
    return result
