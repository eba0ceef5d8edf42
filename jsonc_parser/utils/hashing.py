from __future__ import annotations

import hashlib


def sha256_text(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


def input_digest(text: str, length: int = 12) -> str:
    return sha256_text(text)[:length]
