"""
Store — Collection-style access over SQLAlchemy tables.

Each mutating call commits on its own; a failed commit is rolled back and
surfaced as PersistenceError (DuplicateKey for unique-constraint hits).
"""
import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from techfest.database import get_db
from techfest.errors import DuplicateKey, PersistenceError

logger = logging.getLogger("techfest.store")


class Store:
    """Thin repository bound to one request's database session."""

    def __init__(self, db: Session):
        self.db = db

    # ─── Writes ──────────────────────────────────────────────────────

    def insert(self, record):
        self.db.add(record)
        self._commit(record.__tablename__)
        self.db.refresh(record)
        return record

    def upsert(self, model, key: str, values: dict):
        """Update the row whose natural ``key`` matches ``values[key]``, else insert it."""
        record = self.find_one(model, **{key: values[key]})
        if record is None:
            record = model(**values)
            self.db.add(record)
        else:
            for attr, value in values.items():
                setattr(record, attr, value)
        self._commit(model.__tablename__)
        self.db.refresh(record)
        return record

    def find_one_and_update(self, model, criteria: dict, updates: dict):
        """Apply ``updates`` to the first row matching ``criteria``; None if no match."""
        record = self.find_one(model, **criteria)
        if record is None:
            return None
        for attr, value in updates.items():
            setattr(record, attr, value)
        self._commit(model.__tablename__)
        self.db.refresh(record)
        return record

    def delete_one(self, model, **criteria) -> bool:
        record = self.find_one(model, **criteria)
        if record is None:
            return False
        self.db.delete(record)
        self._commit(model.__tablename__)
        return True

    # ─── Reads ───────────────────────────────────────────────────────

    def find_one(self, model, **criteria):
        try:
            return self.db.query(model).filter_by(**criteria).first()
        except SQLAlchemyError as exc:
            logger.exception("Query on %s failed", model.__tablename__)
            raise PersistenceError() from exc

    def find_all(self, model, **criteria) -> list:
        try:
            return self._newest_first(model, self.db.query(model).filter_by(**criteria)).all()
        except SQLAlchemyError as exc:
            logger.exception("Query on %s failed", model.__tablename__)
            raise PersistenceError() from exc

    def find_one_matching_any(self, model, value: str, fields: tuple, **criteria) -> Optional[object]:
        """Newest row where any of ``fields`` equals ``value`` exactly and every
        extra ``criteria`` column matches.
        """
        clauses = [getattr(model, field) == value for field in fields]
        try:
            query = self.db.query(model).filter(or_(*clauses)).filter_by(**criteria)
            return self._newest_first(model, query).first()
        except SQLAlchemyError as exc:
            logger.exception("Lookup on %s failed", model.__tablename__)
            raise PersistenceError() from exc

    def exists(self, model, **criteria) -> bool:
        return self.find_one(model, **criteria) is not None

    def list_all(self, model) -> list:
        """All rows, newest first."""
        return self.find_all(model)

    # ─── Internals ───────────────────────────────────────────────────

    @staticmethod
    def _newest_first(model, query):
        return query.order_by(model.created_at.desc(), model.id.desc())

    def _commit(self, table: str):
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Unique constraint rejected write to %s", table)
            raise DuplicateKey() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Write to %s failed", table)
            raise PersistenceError() from exc


def get_store(db: Session = Depends(get_db)) -> Store:
    """FastAPI dependency: a Store over the request's session."""
    return Store(db)
