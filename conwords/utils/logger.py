"""Logging setup shared by the package and the CLI."""

from __future__ import annotations

import logging
from typing import IO, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
ROOT_NAMESPACE = "conwords"


def resolve_level(level: Union[int, str]) -> int:
    """Accept ``logging`` constants or their names (``"debug"``, ``"INFO"``)."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Install a single stream handler on the root logger.

    Placement attempts are logged at DEBUG and generation summaries at INFO,
    so INFO is quiet enough for a normal run.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``conwords`` namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    if not name:
        return logging.getLogger(ROOT_NAMESPACE)
    if name != ROOT_NAMESPACE and not name.startswith(ROOT_NAMESPACE + "."):
        name = f"{ROOT_NAMESPACE}.{name}"
    return logging.getLogger(name)
