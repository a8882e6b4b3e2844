"""Persistence boundary.

Handlers talk to a :class:`Store` instead of the ORM so the managed database
binding can be swapped (tests, a hosted backend-as-a-service, ...).
"""

import logging

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from exceptions import DuplicateRecordError, StorageError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class Store:
    """Minimal table-oriented persistence interface."""

    def insert(self, table, record):
        """Insert one record and return the stored row as a dict."""
        raise NotImplementedError

    def query(self, table, filters=None, order_by=None, descending=False, limit=None):
        """Return rows matching every ``filters`` equality as dicts."""
        raise NotImplementedError


def is_unique_violation(error):
    orig = getattr(error, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == UNIQUE_VIOLATION:
        return True
    # SQLite reports no SQLSTATE
    return "unique constraint failed" in str(orig or error).lower()


class SQLAlchemyStore(Store):
    def __init__(self, db, models):
        self.db = db
        self.models = {model.__tablename__: model for model in models}

    def _model(self, table):
        try:
            return self.models[table]
        except KeyError:
            raise StorageError(f"Unknown table: {table}") from None

    def insert(self, table, record):
        model = self._model(table)
        row = model(**record)
        try:
            self.db.session.add(row)
            self.db.session.commit()
        except IntegrityError as e:
            self.db.session.rollback()
            if is_unique_violation(e):
                raise DuplicateRecordError(f"Duplicate {table} record") from e
            raise StorageError(f"Failed to insert into {table}: {e}") from e
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageError(f"Failed to insert into {table}: {e}") from e
        return row.to_dict()

    def query(self, table, filters=None, order_by=None, descending=False, limit=None):
        model = self._model(table)
        try:
            q = model.query.filter_by(**(filters or {}))
            if order_by:
                column = getattr(model, order_by)
                q = q.order_by(column.desc() if descending else column.asc())
            if limit:
                q = q.limit(limit)
            return [row.to_dict() for row in q.all()]
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to query {table}: {e}") from e


def get_store():
    return current_app.extensions["store"]
