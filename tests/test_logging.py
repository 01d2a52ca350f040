from __future__ import annotations

import logging
from pathlib import Path

from repomirror.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "repomirror"
    assert get_logger("engine").name == "repomirror.engine"


def test_configure_logging_levels() -> None:
    assert configure_logging().level == logging.INFO
    assert configure_logging(quiet=True).level == logging.WARNING
    assert configure_logging(verbose=True, quiet=True).level == logging.DEBUG


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(log_file=tmp_path / "repomirror.log")

    assert len(logger.handlers) == 2
    get_logger("engine").info("hello file")
    for handler in logger.handlers:
        handler.flush()

    assert "hello file" in (tmp_path / "repomirror.log").read_text(encoding="utf-8")
    assert len(configure_logging().handlers) == 1
