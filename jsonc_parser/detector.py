from __future__ import annotations

import re

_COMMENT_MARKER = re.compile(r"/[/*]")


def has_comments(text: str) -> bool:
    """Return False only when ``text`` contains neither ``//`` nor ``/*``.

    String literals are not taken into account, so True may be a false
    positive (``"http://..."``). False is always safe to trust.
    """
    return _COMMENT_MARKER.search(text) is not None
