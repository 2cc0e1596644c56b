"""Logging setup for applications embedding the decoders."""

from __future__ import annotations

import logging

DIAGNOSTIC_LOGGERS = ("fedimodel.codec", "fedimodel.model.link")


def configure_logging(
    *, level: int = logging.INFO, diagnostics_level: int | None = None, force: bool = False
) -> None:
    """Set up root logging for a process that decodes fediverse documents.

    The package never calls this on import. Degraded url references are reported
    at WARNING and rejected documents at DEBUG; ``diagnostics_level`` sets the level
    of those decoder loggers independently of ``level``, e.g. ``logging.DEBUG`` to
    see why documents were rejected without turning on debug output everywhere.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if diagnostics_level is not None:
        for name in DIAGNOSTIC_LOGGERS:
            logging.getLogger(name).setLevel(diagnostics_level)
