"""Request hooks: database injection and access logging."""

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path

from flask import g, request

from walletpay.utils import RFC822, date_now

_ACCESS_DIR = Path("storage/logs")


def db(app, conn):
    """Make ``conn`` available as ``flask.g.db`` during every request."""

    @app.before_request
    def _attach_db():
        g.db = conn


def _trim(value: float, places: int) -> str:
    return f"{value:.{places}f}".rstrip("0").rstrip(".")


def _go_duration(seconds: float) -> str:
    ns = max(round(seconds * 1e9), 0)
    if ns < 1_000:
        return f"{ns}ns"
    if ns < 1_000_000:
        return _trim(ns / 1_000, 3) + "µs"
    if ns < 1_000_000_000:
        return _trim(ns / 1_000_000, 6) + "ms"
    whole_minutes, rest = divmod(ns, 60_000_000_000)
    hours, minutes = divmod(whole_minutes, 60)
    text = _trim(rest / 1e9, 9) + "s"
    if whole_minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return text


def logger(app):
    """Append one line per request to storage/logs/<date>.log."""

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _write_access_line(response):
        started = g.get("request_started", time.perf_counter())
        latency = _go_duration(time.perf_counter() - started)
        stamp = datetime.now().astimezone().strftime(RFC822)
        line = (
            f"{request.remote_addr} - [{stamp}] {request.method} "
            f"{request.path} {response.status_code} {latency} \n"
        )
        with (_ACCESS_DIR / f"{date_now('')}.log").open("a", encoding="utf-8") as handle:
            handle.write(line)
        return response