from __future__ import annotations

import pytest

from jsonc_parser.detector import has_comments


@pytest.mark.parametrize(
    "text",
    [
        '{"a": 1} // c',
        '{/* c */"a": 1}',
        '{"url": "http://example.com"}',
        "/*",
    ],
)
def test_has_comments_true_for_any_marker(text: str) -> None:
    assert has_comments(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "",
        '{"a": 1}',
        '{"path": "a/b/c", "ratio": "1 / 2"}',
        "/",
        "*/",
    ],
)
def test_has_comments_false_only_without_markers(text: str) -> None:
    assert has_comments(text) is False
