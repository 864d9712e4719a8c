"""Process-wide logging setup."""

from __future__ import annotations

import logging

from subscriber_registry.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""

    resolved = (level or settings.log_level).upper()
    root = logging.getLogger()
    if root.handlers:
        # Lambda's runtime installs its own handler before our import.
        root.setLevel(resolved)
        return
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
