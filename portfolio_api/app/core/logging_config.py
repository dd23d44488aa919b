"""
Logging configuration shared by both services.

Both services usually run in one process (see ``run.py``), which
starts uvicorn with ``log_config=None``.  Uvicorn then installs no
handlers of its own and its ``uvicorn.*`` loggers propagate to the
root logger, so access logs and service logs share one format and one
set of handlers.

``setup_logging`` may be called once per application factory; only
the first call attaches handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that must follow the configured level even when the root
# logger was configured elsewhere (tests, an embedding application).
SERVICE_LOGGERS = ("portfolio_api", "portfolio_client", "uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure service loggers and, on first call, the root handlers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, only
        the console handler is installed.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    for name in SERVICE_LOGGERS:
        service_logger = logging.getLogger(name)
        service_logger.setLevel(numeric_level)
        service_logger.propagate = True

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
