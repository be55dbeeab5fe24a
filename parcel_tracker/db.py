# parcel_tracker/db.py
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from .config import settings

Base = declarative_base()


def make_engine(url: str, echo: bool = False) -> Engine:
    u = make_url(url)
    kwargs = {"echo": echo}
    if u.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory sqlite lives inside a single connection
        if u.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(u, **kwargs)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


engine = make_engine(settings.database_url, echo=settings.db_echo)
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine | None = None):
    # import models so classes register to Base
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
