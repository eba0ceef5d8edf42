"""Exceptions raised by jsonc-parser."""

from __future__ import annotations

import orjson


class JsoncSyntaxError(orjson.JSONDecodeError):
    """The text left after comment removal is not valid JSON.

    ``doc`` is the text handed to the JSON decoder; since stripping keeps line
    breaks, ``lineno`` refers to the same line of the original input.
    """

    @classmethod
    def from_decode_error(cls, exc: orjson.JSONDecodeError, doc: str) -> "JsoncSyntaxError":
        return cls(exc.msg, doc, exc.pos)
