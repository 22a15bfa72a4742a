"""Tests for the logging scan observer."""

import logging

import pytest

from astouml.core.lexer import scan
from astouml.core.ports.observer import ScanObserver
from astouml.models import Token
from astouml.observers.logging_observer import LoggingScanObserver

_LOGGER = "astouml.observers.logging_observer"


def _scan_with(observer: ScanObserver) -> list[Token]:
    return scan("class Foo", observer)


def test_usable_where_a_scan_observer_is_expected() -> None:
    tokens = _scan_with(LoggingScanObserver())
    assert [token.text for token in tokens] == ["class", "Foo"]


def test_logs_matches_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=_LOGGER)

    scan("class x; @", LoggingScanObserver())

    debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert debug == [
        "Exact match for 'class': ReservedWord",
        "Loose match for 'x;': Semicolon",
        "No match found for '@' (length 1)",
    ]


def test_warns_on_unknown_tokens(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger=_LOGGER)

    scan("class @", LoggingScanObserver())

    assert [r.getMessage() for r in caplog.records] == ["Unknown token '@' at line 1, column 6 (hex: 40)"]


def test_summary_at_info(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=_LOGGER)

    scan("class Foo @", LoggingScanObserver())

    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert messages == [
        "Scanned 3 token(s)",
        "  1 ReservedWord",
        "  1 Identifier",
        "  1 Unrecognized",
        "1 token(s) with unknown type",
    ]


def test_custom_logger(caplog: pytest.LogCaptureFixture) -> None:
    log = logging.getLogger("astouml.test")
    caplog.set_level(logging.WARNING, logger="astouml.test")

    scan("@", LoggingScanObserver(log))

    assert [r.name for r in caplog.records] == ["astouml.test"]
