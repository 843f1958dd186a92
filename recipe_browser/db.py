from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker

from . import config

Base = declarative_base()


def _register_sqlite_functions(dbapi_conn, _):
    # SQLite has no regexp_replace; the calorie filter needs it
    from .nutrients import sqlite_regexp_replace

    dbapi_conn.create_function(
        "regexp_replace", 4, sqlite_regexp_replace, deterministic=True
    )


def create_db_engine(url, **kwargs):
    """Create an engine; SQLite connections get the extra SQL functions."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_size", config.DB_POOL_SIZE)
        kwargs.setdefault("pool_pre_ping", True)
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _register_sqlite_functions)
    return engine


engine = create_db_engine(config.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    # import models so they register on Base.metadata
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def ping(bind=None):
    with (bind or engine).connect() as conn:
        conn.execute(text("SELECT 1"))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
