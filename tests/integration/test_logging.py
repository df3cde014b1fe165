import logging

import pytest

from bookadapt.infrastructure.logging import (
    CorrelationIDFilter,
    configure_logging,
    get_correlation_id,
    new_correlation_id,
)


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)


def test_filter_stamps_current_correlation_id():
    run_id = new_correlation_id()
    record = logging.LogRecord("bookadapt", logging.INFO, __file__, 1, "hello", None, None)

    assert CorrelationIDFilter().filter(record) is True
    assert record.correlation_id == run_id


def test_new_correlation_id_becomes_current():
    first = new_correlation_id()
    second = new_correlation_id()

    assert first != second
    assert get_correlation_id() == second


def test_configure_logging_quiets_http_loggers():
    configure_logging(logging.INFO)

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING


def test_verbose_logging_shows_debug_and_http():
    configure_logging(logging.INFO, verbose=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.INFO


def test_log_lines_carry_correlation_id(capsys):
    configure_logging(logging.INFO)
    run_id = new_correlation_id()

    logging.getLogger("bookadapt.test").info("chunk done")

    out = capsys.readouterr().out
    assert f"correlation_id={run_id}" in out
    assert "chunk done" in out
