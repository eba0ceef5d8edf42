from __future__ import annotations

from jsonc_parser.scanner import Span, SpanKind, iter_spans


def _kinds(text: str) -> list[tuple[SpanKind, str]]:
    return [(span.kind, span.slice(text)) for span in iter_spans(text)]


def test_iter_spans_empty_input_yields_nothing() -> None:
    assert list(iter_spans("")) == []


def test_iter_spans_cover_input_contiguously() -> None:
    text = '{"a": "x // y", /* b */ "c": 1 // tail\n}'
    spans = list(iter_spans(text))

    assert spans[0].start == 0
    assert spans[-1].end == len(text)
    for prev, current in zip(spans, spans[1:]):
        assert prev.end == current.start
    assert "".join(span.slice(text) for span in spans) == text


def test_iter_spans_classifies_strings_and_comments() -> None:
    text = '{"url": "http://x"} // note\n/* block */'

    assert _kinds(text) == [
        (SpanKind.CODE, "{"),
        (SpanKind.STRING, '"url"'),
        (SpanKind.CODE, ": "),
        (SpanKind.STRING, '"http://x"'),
        (SpanKind.CODE, "} "),
        (SpanKind.LINE_COMMENT, "// note"),
        (SpanKind.CODE, "\n"),
        (SpanKind.BLOCK_COMMENT, "/* block */"),
    ]


def test_escaped_quote_does_not_close_string() -> None:
    text = r'"a \" /* not a comment */ b" // real'

    assert _kinds(text) == [
        (SpanKind.STRING, r'"a \" /* not a comment */ b"'),
        (SpanKind.CODE, " "),
        (SpanKind.LINE_COMMENT, "// real"),
    ]


def test_escaped_backslash_before_quote_closes_string() -> None:
    text = r'"a\\" // c'

    assert _kinds(text)[0] == (SpanKind.STRING, r'"a\\"')
    assert _kinds(text)[-1] == (SpanKind.LINE_COMMENT, "// c")


def test_line_comment_stops_before_line_break() -> None:
    assert _kinds("1 // a\r\n2") == [
        (SpanKind.CODE, "1 "),
        (SpanKind.LINE_COMMENT, "// a"),
        (SpanKind.CODE, "\r\n2"),
    ]


def test_unterminated_block_comment_runs_to_end() -> None:
    text = '{"a":1 /* unterminated'

    assert list(iter_spans(text))[-1] == Span(SpanKind.BLOCK_COMMENT, 7, len(text))


def test_block_comment_end_marker_is_inclusive() -> None:
    assert _kinds("/* a **/1") == [
        (SpanKind.BLOCK_COMMENT, "/* a **/"),
        (SpanKind.CODE, "1"),
    ]


def test_lone_slash_is_code() -> None:
    assert _kinds("1 /") == [(SpanKind.CODE, "1 /")]
    assert _kinds("1 / 2") == [(SpanKind.CODE, "1 / 2")]


def test_unterminated_string_runs_to_end() -> None:
    assert _kinds('["abc // x') == [
        (SpanKind.CODE, "["),
        (SpanKind.STRING, '"abc // x'),
    ]


def test_trailing_backslash_in_string_does_not_overrun() -> None:
    text = '"abc\\'

    assert _kinds(text) == [(SpanKind.STRING, text)]


def test_span_kind_is_comment() -> None:
    assert SpanKind.LINE_COMMENT.is_comment
    assert SpanKind.BLOCK_COMMENT.is_comment
    assert not SpanKind.CODE.is_comment
    assert not SpanKind.STRING.is_comment
