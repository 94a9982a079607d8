"""Shared logging configuration for the API and the console menu."""

import logging
import logging.handlers
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s  %(levelname)s  %(message)s"

_configured = False


def setup_logging(log_dir: Path, level: int = logging.INFO) -> None:
    """Log to stdout and to log_dir/advising.log (rotating, 5 MB max, 3 backups)."""
    global _configured
    if _configured:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter(LOG_FORMAT)

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(fmt)

    rotating = logging.handlers.RotatingFileHandler(
        log_dir / "advising.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    rotating.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(stream)
    root.addHandler(rotating)
    _configured = True
