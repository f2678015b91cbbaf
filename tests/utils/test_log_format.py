# tests/utils/test_log_format.py
"""
Logging helper tests
"""

import logging

import failchain
from failchain.utils import FullDetailsFormatter, has_details, log_full_details


def test_has_details():
    assert has_details(failchain.news("x")) is True
    assert has_details(ValueError("x")) is False
    assert has_details(None) is False


def test_formatter_renders_full_details():
    err = failchain.new_err_with_reason("saving failed", failchain.news("disk full"))
    formatter = FullDetailsFormatter("%(message)s")

    assert formatter.formatException((type(err), err, None)) == failchain.get_full_details(err)


def test_formatter_keeps_plain_tracebacks():
    formatter = FullDetailsFormatter("%(message)s")
    try:
        raise ValueError("boom")
    except ValueError as e:
        text = formatter.formatException((type(e), e, e.__traceback__))

    assert "Traceback" in text
    assert "ValueError: boom" in text


def test_log_full_details(caplog):
    logger = logging.getLogger("tests.failchain")
    err = failchain.new_err_with_reason("saving failed", failchain.news("disk full"))

    with caplog.at_level(logging.ERROR, logger="tests.failchain"):
        log_full_details(logger, err)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.ERROR
    assert record.failchain_location == failchain.get_location(err)
    assert record.getMessage().startswith("saving failed: disk full\n")
    assert failchain.get_full_details(err) in record.getMessage()


def test_log_full_details_respects_level(caplog):
    logger = logging.getLogger("tests.failchain.quiet")

    with caplog.at_level(logging.ERROR, logger="tests.failchain.quiet"):
        log_full_details(logger, failchain.news("x"), msg="ignored", level=logging.DEBUG)

    assert caplog.records == []
