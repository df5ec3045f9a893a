"""Process-wide logging setup.

Diagnostics are plain ``logging`` records. Conversions take an optional
``logging.Logger`` so callers (and tests) can route them somewhere specific;
without one, each module's own logger is used.
"""

from __future__ import annotations

import logging

from svgscene.config import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once per process. Later calls are no-ops."""
    global _configured
    if _configured:
        return
    name = (level or settings.svgscene_log_level).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
    _configured = True


def diagnostics_logger(logger: logging.Logger | None, default: logging.Logger) -> logging.Logger:
    return logger if logger is not None else default
