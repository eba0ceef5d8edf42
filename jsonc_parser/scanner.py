from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple
import re


class SpanKind(str, Enum):
    CODE = "code"
    STRING = "string"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"

    @property
    def is_comment(self) -> bool:
        return self in (SpanKind.LINE_COMMENT, SpanKind.BLOCK_COMMENT)


class Span(NamedTuple):
    kind: SpanKind
    start: int
    end: int

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass
class ScanState:
    in_string: bool = False
    string_delimiter: str | None = None
    escaped: bool = False
    in_line_comment: bool = False
    in_block_comment: bool = False


STRING_DELIMITER = '"'

_CODE_STOP = re.compile(r'["/]')
_STRING_STOP = re.compile(r'["\\]')
_LINE_BREAK = re.compile(r"[\r\n]")


def iter_spans(text: str) -> Iterator[Span]:
    """Classify ``text`` into contiguous spans.

    Spans cover the whole input in order. Comment markers are only
    recognised outside string literals. An unterminated block comment or
    string runs to the end of the input.
    """
    length = len(text)
    state = ScanState()
    span_start = 0
    pos = 0

    while pos < length:
        if state.in_string:
            if state.escaped:
                # The escaped character never closes the string.
                state.escaped = False
                pos += 1
                continue
            match = _STRING_STOP.search(text, pos)
            if match is None:
                pos = length
                break
            pos = match.start()
            if text[pos] == "\\":
                state.escaped = True
                pos += 1
                continue
            pos += 1
            state.in_string = False
            state.string_delimiter = None
            yield Span(SpanKind.STRING, span_start, pos)
            span_start = pos
            continue

        match = _CODE_STOP.search(text, pos)
        if match is None:
            pos = length
            break
        pos = match.start()

        if text[pos] == STRING_DELIMITER:
            if pos > span_start:
                yield Span(SpanKind.CODE, span_start, pos)
            span_start = pos
            state.in_string = True
            state.string_delimiter = STRING_DELIMITER
            pos += 1
            continue

        marker = text[pos + 1 : pos + 2]
        if marker == "/":
            if pos > span_start:
                yield Span(SpanKind.CODE, span_start, pos)
            state.in_line_comment = True
            line_break = _LINE_BREAK.search(text, pos + 2)
            end = line_break.start() if line_break else length
            yield Span(SpanKind.LINE_COMMENT, pos, end)
            state.in_line_comment = False
            span_start = pos = end
        elif marker == "*":
            if pos > span_start:
                yield Span(SpanKind.CODE, span_start, pos)
            state.in_block_comment = True
            close = text.find("*/", pos + 2)
            end = close + 2 if close != -1 else length
            yield Span(SpanKind.BLOCK_COMMENT, pos, end)
            state.in_block_comment = False
            span_start = pos = end
        else:
            pos += 1

    if span_start < length:
        kind = SpanKind.STRING if state.in_string else SpanKind.CODE
        yield Span(kind, span_start, length)
