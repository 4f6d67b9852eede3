"""
Logging setup for the service.

``setup_logging`` attaches a console handler (and a file handler when a
log file is configured) to the root logger, using one shared format.
uvicorn's own loggers are set to the same level so that server and
application records read alike.  Calling it again is a no‑op.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"warning"``; unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Also write records to this file, resolved against the current
        working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest, uvicorn or an earlier create_app already configured it
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(numeric_level)
