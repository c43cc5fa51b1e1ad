from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

FALLBACK_LOG_NAME = "create-rx-app.log"


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = False,
) -> Optional[str]:
    """Configure logging.

    Diagnostic logging is separate from the colored progress output the
    generator prints. Nothing is logged unless a file or console handler is
    requested.

    Notes:
    - If the requested log file cannot be opened, we fall back to
      ./create-rx-app.log and keep going.
    - console logging goes to stderr (enabled by --verbose).

    Returns the actual file path being used, or None when logging to a file
    was not requested.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_create_rx_app_configured", False):
        return getattr(logger, "_create_rx_app_log_path", log_path)

    chosen_path: Optional[str] = None
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    if log_path:
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
            chosen_path = log_path
        except OSError:
            # Fall back to a writable location.
            fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
            file_handler = logging.FileHandler(fallback, encoding="utf-8")
            chosen_path = fallback
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        handlers.append(console)

    if not handlers:
        handlers.append(logging.NullHandler())

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_create_rx_app_configured", True)
    setattr(logger, "_create_rx_app_log_path", chosen_path)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
