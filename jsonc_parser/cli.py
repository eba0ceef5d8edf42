from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import orjson
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from loguru import logger

from jsonc_parser.bench import run_benchmarks, summarize
from jsonc_parser.config import load_config
from jsonc_parser.config.loader import env_snapshot
from jsonc_parser.errors import JsoncSyntaxError
from jsonc_parser.parser import JsoncParser, init_default_parser
from jsonc_parser.utils.logging import setup_logging

console = Console()
err_console = Console(stderr=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jsonc-parser")
    parser.add_argument("--config", type=Path, default=None, help="Path to custom config YAML")
    parser.add_argument("--log-level", type=str, default=None, help="Override log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("config", help="Validate and print effective config")

    strip_parser = subparsers.add_parser("strip", help="Remove comments and print the resulting JSON text")
    strip_parser.add_argument("--input", type=Path, default=None, help="JSONC file (stdin when omitted)")

    parse_parser = subparsers.add_parser("parse", help="Parse JSONC and print normalized JSON")
    parse_parser.add_argument("--input", type=Path, default=None, help="JSONC file (stdin when omitted)")
    parse_parser.add_argument("--compact", action="store_true", help="Print without indentation")

    bench_parser = subparsers.add_parser("bench", help="Measure fast paths and cache speedups")
    bench_parser.add_argument("--scale", type=float, default=1.0, help="Multiplier for iteration counts")

    return parser


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.log_level:
        overrides["app"] = {"log_level": args.log_level}
    return overrides


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _print_config(config) -> None:
    console.print(Panel(Pretty(config.model_dump(mode="json")), title="Effective Config"))
    console.print(Panel(Pretty(env_snapshot()), title="Env Snapshot"))


def _print_bench(parser: JsoncParser, scale: float) -> None:
    results = run_benchmarks(parser, scale=scale)

    table = Table(title="JSONC Benchmark", show_header=True, header_style="bold")
    table.add_column("Scenario")
    table.add_column("Iterations", justify="right")
    table.add_column("Total (ms)", justify="right")
    table.add_column("Ops/sec", justify="right")
    table.add_column("Avg (ms)", justify="right")
    for result in results:
        table.add_row(
            result.name,
            str(result.iterations),
            f"{result.duration_ms:.2f}",
            f"{result.ops_per_sec:.0f}",
            f"{result.avg_ms:.4f}",
        )
    console.print(table)

    summary = Table(title="Performance Summary", show_header=True, header_style="bold")
    summary.add_column("Metric")
    summary.add_column("Ratio", justify="right")
    for name, ratio in summarize(results).items():
        summary.add_row(name, f"{ratio:.2f}x")
    console.print(summary)

    caches = Table(title="Cache Stats", show_header=True, header_style="bold")
    caches.add_column("Cache")
    caches.add_column("Hits/Misses", justify="right")
    caches.add_column("Evictions", justify="right")
    caches.add_column("Size/Capacity", justify="right")
    for stats in parser.cache_stats().values():
        caches.add_row(stats.name, f"{stats.hits}/{stats.misses}", str(stats.evictions), f"{stats.size}/{stats.capacity}")
    console.print(caches)


def run(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = load_config(config_path=args.config, overrides=_build_overrides(args))
    setup_logging(config.app.log_level)
    logger.debug("Loaded configuration")

    if args.command == "config":
        _print_config(config)
        return 0

    jsonc = init_default_parser(config.cache)

    if args.command == "bench":
        _print_bench(jsonc, args.scale)
        return 0

    try:
        text = _read_input(args.input)
    except FileNotFoundError:
        err_console.print(Panel(f"Input not found: {escape(str(args.input))}", title="Error", style="red"))
        return 2
    except (OSError, UnicodeDecodeError) as exc:
        err_console.print(
            Panel(f"Cannot read input {escape(str(args.input))}: {escape(str(exc))}", title="Error", style="red")
        )
        return 2

    if args.command == "strip":
        sys.stdout.write(jsonc.strip_comments(text))
        return 0

    if args.command == "parse":
        try:
            value = jsonc.parse(text)
        except JsoncSyntaxError as exc:
            err_console.print(
                Panel(f"{escape(exc.msg)} (line {exc.lineno}, column {exc.colno})", title="Invalid JSON", style="red")
            )
            return 1
        option = 0 if args.compact else orjson.OPT_INDENT_2
        sys.stdout.write(orjson.dumps(value, option=option).decode("utf-8") + "\n")
        return 0

    raise ValueError(f"Unsupported command: {args.command}")


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
