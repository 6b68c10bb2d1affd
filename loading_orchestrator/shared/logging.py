"""
Logging setup for applications using the loading orchestrator.

- Configure logging once via `setup_logging(...)` at app startup.
- Library modules log through `logging.getLogger(__name__)`, so nothing is
  printed unless the application configures logging.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

# Internal flag to avoid double-configuration
_CONFIGURED = False

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> None:
    """
    Configure root logging with a console handler and an optional rotating file.

    Calling this more than once is harmless; handlers are only added the first time.

    Parameters
    ----------
    level:
        Level name ("DEBUG", "INFO", ...) or logging constant. Unknown names fall back to INFO.
    log_file:
        Optional path of a log file. Parent directories are created.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _CONFIGURED = True
