from __future__ import annotations

import logging

import pytest

from timeserver.logging_setup import configure_logging

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


@pytest.fixture()
def restore_logging():
    """Put root level and uvicorn logger state back after dictConfig ran."""
    root = logging.getLogger()
    saved_level = root.level
    saved = {
        name: (list(logging.getLogger(name).handlers), logging.getLogger(name).propagate, logging.getLogger(name).level)
        for name in UVICORN_LOGGERS
    }
    yield root
    root.setLevel(saved_level)
    for name, (handlers, propagate, level) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers = handlers
        logger.propagate = propagate
        logger.setLevel(level)


def test_configure_logging_installs_single_console_handler(restore_logging) -> None:
    root = restore_logging
    # pytest attaches its capture handlers for the call phase; swap them out
    # only around the calls under test
    saved_handlers = root.handlers
    root.handlers = []
    try:
        configure_logging()
        configure_logging()
        installed = list(root.handlers)
        level = root.level
    finally:
        root.handlers = saved_handlers

    assert len(installed) == 1
    assert isinstance(installed[0], logging.StreamHandler)
    assert installed[0].formatter._fmt == "%(asctime)s %(levelname)s:%(name)s:%(message)s"
    assert level == logging.INFO
    access = logging.getLogger("uvicorn.access")
    assert access.propagate is False
    assert type(access.handlers[0].formatter).__name__ == "AccessFormatter"


def test_configure_logging_respects_existing_handlers() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    configure_logging("DEBUG")
    assert root.handlers == before
