# soora_api/config/logging_config.py
import logging
import sys
from typing import Optional

from soora_api.config.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None, force: bool = False) -> logging.Logger:
    """
    Install a single stream handler on the root logger and return the
    service logger. Safe to call more than once; later calls are no-ops
    unless ``force`` is set.
    """
    global _configured
    if _configured and not force:
        return logging.getLogger("soora_api")

    level_name = (level or get_settings().log_level or "INFO").upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric_level)

    _configured = True
    return logging.getLogger("soora_api")


__all__ = ["LOG_FORMAT", "configure_logging"]
