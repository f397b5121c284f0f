"""Singleton logging configuration.

setup_logging() configures the root logger once per process. The CLI
calls it before building the model so pipeline ``event=...`` records
share one format. Idempotent (guarded by a module-level flag).
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_setup_done = False


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger.

    Diagnostics go to stdout through the reporter, so the default
    level keeps pipeline records quiet unless ``--verbose`` is given.
    Second call is a no-op.
    """
    global _setup_done  # noqa: PLW0603
    if _setup_done:
        return
    _setup_done = True

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def set_level(level: str) -> None:
    """Adjust the root level after setup (e.g. for ``--verbose``)."""
    logging.getLogger().setLevel(getattr(logging, level.upper()))
