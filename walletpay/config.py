"""Database and Redis connections configured from the environment."""

from __future__ import annotations

import os
from urllib.parse import quote_plus

import redis
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

load_dotenv()

_DEFAULT_REDIS_HOST = "localhost"
_DEFAULT_REDIS_PORT = 6379

_engines: dict[str, Engine] = {}


def mysql_url(username, password, host, port, database):
    """Build a SQLAlchemy URL for a MySQL database reached over TCP."""
    return (
        f"mysql+pymysql://{quote_plus(username)}:{quote_plus(password)}"
        f"@{host}:{port}/{database}"
    )


def _open(url: str) -> Engine:
    engine = create_engine(url)
    try:
        with engine.connect():
            pass
    except SQLAlchemyError as exc:
        print("Error connecting to DB")
        print(exc)
        engine.dispose()
        raise
    return engine


def _connect(suffix: str, sqlite_path: str, show_cwd: bool) -> Engine:
    def env(name: str) -> str:
        return os.environ.get(name + suffix, "")

    if not env("DB_CONNECTION"):
        if show_cwd:
            print(os.getcwd())
        return _open(f"sqlite:///{sqlite_path}")

    cached = _engines.get(suffix)
    if cached is not None:
        return cached
    engine = _open(
        mysql_url(
            env("DB_USERNAME"),
            env("DB_PASSWORD"),
            env("DB_HOST"),
            env("DB_PORT"),
            env("DB_DATABASE"),
        )
    )
    _engines[suffix] = engine
    return engine


def connect_db():
    """Return the main database engine.

    Without DB_CONNECTION a local SQLite file is opened; otherwise a MySQL
    engine is created once and shared.
    """
    return _connect("", "./../../test.db", show_cwd=False)


def connect_db_sy():
    """Return the secondary database engine, configured by *_SY variables."""
    return _connect("_SY", "./../../testSy.db", show_cwd=True)


def connect_redis():
    """Return a Redis client for the address in REDIS_HOST (host:port)."""
    address = os.environ.get("REDIS_HOST", "")
    host, port = address, _DEFAULT_REDIS_PORT
    if ":" in address:
        host, port_text = address.rsplit(":", 1)
        port = int(port_text)
    return redis.Redis(host=host or _DEFAULT_REDIS_HOST, port=port)