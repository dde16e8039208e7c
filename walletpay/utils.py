"""Date helpers and daily log files."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

RFC822 = "%d %b %y %H:%M %Z"

_ERROR_DIR = Path("storage/logs/errors")
_INFO_DIR = Path("storage/logs/informations")


def date_now(format_date=""):
    """Return the current local date, as YYYY-MM-DD unless a strftime format is given."""
    return datetime.now().strftime(format_date or "%Y-%m-%d")


def _append(path: Path, message: str) -> None:
    stamp = datetime.now().astimezone().strftime(RFC822)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"[{stamp}] {message} \n")


def error_logger(error_desc):
    """Append an error to today's error log under storage/logs/errors."""
    _append(_ERROR_DIR / f"err-{date_now('')}.log", str(error_desc))


def info_logger(info_desc):
    """Append a message to today's information log under storage/logs/informations."""
    _append(_INFO_DIR / f"info-{date_now('')}.log", str(info_desc))