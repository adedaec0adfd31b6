"""SiteQuery logging utilities.

One package logger, `SiteQuery`, printed with a short timestamp and a
four-letter level tag. Command runs can mirror the log into a file per action.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_TAGS: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "CRIT",
}

LOG_FORMAT: Final[str] = "%(asctime)s [%(leveltag)s] %(message)s"
DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"


class _LevelTagFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib name
        record.leveltag = _LEVEL_TAGS.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("SiteQuery")


def log_file_path(log_dir: str, action: str, now: datetime | None = None) -> Path:
    """Return `<log_dir>/<action>/<action>_<mmddHHMMSS>.log`."""
    stamp = (now or datetime.now()).strftime("%m%d%H%M%S")
    return Path(log_dir or "log") / action / f"{action}_{stamp}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Configure the SiteQuery logger.

    Uses format: mm-dd HH:MM:SS [<TAG>] <message>
    where TAG is one of: DEBG/INFO/WARN/ERRO/CRIT.

    Args:
        level: Console logging level name (e.g., INFO, DEBUG).
        action: CLI action name; names the log file when `log_to_file`.
        log_to_file: Whether to mirror logs to a file at DEBUG level.
        log_dir: Base directory for log files.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _LevelTagFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(resolved_level)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    if log_to_file and action:
        path = log_file_path(log_dir, action)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for handler in log.handlers:
        handler.close()
    log.handlers.clear()
    for handler in handlers:
        log.addHandler(handler)
    log.setLevel(min(logging.DEBUG, resolved_level) if len(handlers) > 1 else resolved_level)
    log.propagate = False
