"""Tests for logging configuration."""

import logging
from collections.abc import Iterator

import pytest

from carb_analysis.app_logging import configure_logging


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("carb_analysis")
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_configure_logging_idempotent(package_logger: logging.Logger) -> None:
    configure_logging()
    first_count = len(package_logger.handlers)

    configure_logging()
    second_count = len(package_logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert package_logger.propagate is False


def test_configure_logging_sets_level(package_logger: logging.Logger) -> None:
    configure_logging(logging.DEBUG)

    assert package_logger.level == logging.DEBUG


def test_configure_logging_accepts_level_names(package_logger: logging.Logger) -> None:
    configure_logging("warning")
    configure_logging("debug")

    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1


def test_configure_logging_keeps_foreign_handlers(
    package_logger: logging.Logger,
) -> None:
    package_logger.addHandler(logging.NullHandler())

    returned = configure_logging()

    assert returned is package_logger
    assert [h.get_name() for h in package_logger.handlers] == [None, "carb_analysis"]
