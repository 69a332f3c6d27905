"""
Database Engine & Session Management
SQLAlchemy setup with dependency injection for FastAPI.
"""
import os
from datetime import datetime

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool

from techfest.config import get_settings

settings = get_settings()


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}

    kwargs = {"connect_args": {"check_same_thread": False}}  # Required for SQLite
    path = url.replace("sqlite:///", "", 1) if url.startswith("sqlite:///") else ""
    if not path or path == ":memory:":
        # In-memory database: every session must share the one connection
        kwargs["poolclass"] = StaticPool
    else:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    return kwargs


engine = create_engine(settings.DATABASE_URL, echo=settings.DEBUG, **_engine_kwargs(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


class DocumentMixin:
    """Serialises a row to the camelCase JSON document the front-end reads.

    Subclasses list ``__document_fields__`` as (attribute, json_name) pairs.
    """

    __document_fields__ = ()

    def to_dict(self) -> dict:
        doc = {"id": self.id}
        for attr, key in self.__document_fields__:
            value = getattr(self, attr)
            if isinstance(value, datetime):
                value = value.isoformat()
            doc[key] = value
        return doc


def get_db():
    """FastAPI dependency: yields a database session, auto-closes on finish."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create all tables. Called once at application startup."""
    from techfest.models import forms as _form_models       # noqa: F401
    from techfest.models import payment as _payment_models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_connection() -> bool:
    """Round-trip a trivial query; raises if the database is unreachable."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return True
