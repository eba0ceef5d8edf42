from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
import random
import time

import orjson

from jsonc_parser.parser import JsoncParser

WARMUP_CALLS = 100

JSON_WITH_COMMENTS = """{
  // This is a comment
  "name": "test",
  /* Block comment */
  "version": "1.0.0",
  "dependencies": {
    // Another comment
    "foo": "1.0.0",
    "bar": "2.0.0"
  }
}"""

JSON_WITHOUT_COMMENTS = """{
  "name": "test",
  "version": "1.0.0",
  "dependencies": {
    "foo": "1.0.0",
    "bar": "2.0.0"
  }
}"""


@dataclass
class BenchResult:
    name: str
    iterations: int
    duration_ms: float
    ops_per_sec: float
    avg_ms: float


def _items_payload(count: int, seed: int) -> dict[str, list[dict[str, object]]]:
    rng = random.Random(seed)
    return {
        "items": [
            {"id": idx, "name": f"Item {idx}", "value": rng.random() * 1000}
            for idx in range(count)
        ]
    }


def large_json_with_comments(count: int = 1000, seed: int = 1) -> str:
    compact = orjson.dumps(_items_payload(count, seed)).decode("utf-8")
    return compact.replace('"id"', '// Comment\n  "id"')


def large_json_without_comments(count: int = 1000, seed: int = 2) -> str:
    return orjson.dumps(_items_payload(count, seed), option=orjson.OPT_INDENT_2).decode("utf-8")


def benchmark(name: str, fn: Callable[[], object], iterations: int = 10_000) -> BenchResult:
    iterations = max(1, iterations)
    for _ in range(WARMUP_CALLS):
        fn()

    start = time.perf_counter_ns()
    for _ in range(iterations):
        fn()
    end = time.perf_counter_ns()

    duration_ms = max((end - start) / 1_000_000, 1e-9)
    return BenchResult(
        name=name,
        iterations=iterations,
        duration_ms=duration_ms,
        ops_per_sec=iterations / duration_ms * 1000,
        avg_ms=duration_ms / iterations,
    )


def run_benchmarks(parser: JsoncParser, scale: float = 1.0) -> list[BenchResult]:
    """Run the standard scenarios against ``parser`` and its caches."""
    small = max(1, int(10_000 * scale))
    large = max(1, int(1_000 * scale))
    large_with = large_json_with_comments()
    large_without = large_json_without_comments()

    scenarios: list[tuple[str, Callable[[], object], int]] = [
        ("Parse JSON without comments (fast path)", lambda: parser.parse(JSON_WITHOUT_COMMENTS), small),
        ("Parse JSON with comments", lambda: parser.parse(JSON_WITH_COMMENTS), small),
        ("Parse large JSON without comments", lambda: parser.parse(large_without), large),
        ("Parse large JSON with comments", lambda: parser.parse(large_with), large),
        ("Strip comments - no comments (fast path)", lambda: parser.strip_comments(JSON_WITHOUT_COMMENTS), small),
        ("Strip comments - with comments", lambda: parser.strip_comments(JSON_WITH_COMMENTS), small),
        ("Parse JSON (cache hit)", lambda: parser.parse(JSON_WITHOUT_COMMENTS), small),
        ("Strip comments (cache hit)", lambda: parser.strip_comments(JSON_WITHOUT_COMMENTS), small),
    ]
    return [benchmark(name, fn, iterations) for name, fn, iterations in scenarios]


def summarize(results: list[BenchResult]) -> dict[str, float]:
    if len(results) != 8:
        raise ValueError("summarize expects the eight results of run_benchmarks")
    parse_fast, _, _, _, strip_fast, strip_with, parse_hit, strip_hit = results
    return {
        "Fast path speedup (no comments)": parse_hit.ops_per_sec / parse_fast.ops_per_sec,
        "Strip comments fast path": strip_fast.ops_per_sec / strip_with.ops_per_sec,
        "Strip comments cache speedup": strip_hit.ops_per_sec / strip_fast.ops_per_sec,
        "Parse cache speedup": parse_hit.ops_per_sec / parse_fast.ops_per_sec,
    }
