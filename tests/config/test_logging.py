from __future__ import annotations

import logging
from typing import Any

import pytest

from fedimodel.config import configure_logging
from fedimodel.config.logging import DIAGNOSTIC_LOGGERS


def test_configure_logging_uses_terse_format(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(level=logging.DEBUG, force=True)

    assert calls == [
        {
            "level": logging.DEBUG,
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            "datefmt": "%H:%M:%S",
            "force": True,
        }
    ]


def test_configure_logging_sets_decoder_diagnostics_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    for name in DIAGNOSTIC_LOGGERS:
        monkeypatch.setattr(logging.getLogger(name), "level", logging.NOTSET)

    configure_logging(diagnostics_level=logging.DEBUG)

    assert DIAGNOSTIC_LOGGERS == ("fedimodel.codec", "fedimodel.model.link")
    for name in DIAGNOSTIC_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG
