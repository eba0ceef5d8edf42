from __future__ import annotations

from typing import Iterator

from loguru import logger
import pytest

from jsonc_parser.parser import JsoncParser
from jsonc_parser.utils.hashing import input_digest
from jsonc_parser.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger.remove()
    logger.disable("jsonc_parser")


def test_setup_logging_injects_default_context(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging("DEBUG")

    logger.info("hello")

    err = capsys.readouterr().err
    assert "op=- cache=- cache_name=- hash=-" in err
    assert "hello" in err


def test_library_logs_parse_path_when_enabled() -> None:
    setup_logging("ERROR")
    records: list[dict] = []
    logger.add(lambda message: records.append(message.record), level="DEBUG")

    parser = JsoncParser()
    parser.parse("[1] // a")
    parser.parse('{"a": 1}')

    parse_records = [record for record in records if record["extra"].get("op") == "parse"]
    assert [record["message"].split()[-2] for record in parse_records] == ["strip", "fast"]
    assert all(record["extra"]["cache"] == "miss" for record in parse_records)


def test_library_is_silent_by_default() -> None:
    logger.disable("jsonc_parser")
    records: list[dict] = []
    logger.add(lambda message: records.append(message.record), level="TRACE")

    JsoncParser().parse("[1] // a")

    assert records == []


def test_miss_records_carry_input_hash() -> None:
    setup_logging("ERROR")
    records: list[dict] = []
    logger.add(lambda message: records.append(message.record), level="DEBUG")
    text = "[1] // a"

    JsoncParser().parse(text)

    ops = {
        record["extra"]["op"]: record["extra"]["input_hash"]
        for record in records
        if record["extra"].get("op", "-") != "-"
    }
    assert ops == {"strip": input_digest(text), "parse": input_digest(text)}
