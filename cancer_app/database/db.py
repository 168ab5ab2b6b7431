# cancer_app/database/db.py
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from cancer_app.core.config import Config


def _engine_kwargs(url: str) -> dict:
    """
    MySQL (default): pool biasa + pre_ping.
    SQLite (dev/test): boleh dipakai lintas thread Flask; in-memory pakai 1 koneksi bersama.
    """
    kwargs = {"pool_pre_ping": True, "future": True}
    u = make_url(url)
    if u.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if not u.database or u.database == ":memory:":
            kwargs["poolclass"] = StaticPool
    return kwargs


def make_session_factory(url: str):
    engine = create_engine(url, **_engine_kwargs(url))
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
    )


# Session factory default dari Config
SessionLocal = make_session_factory(Config.database_url())

# Base untuk model ORM
Base = declarative_base()
