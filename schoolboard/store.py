"""Record store over the dashboard tables.

All table access of the services goes through ``RecordStore``. It works on
table names rather than model classes so the services read like calls
against a hosted data service::

    store = RecordStore()
    row = store.select_one('about', school_level='sd')
    rows = store.select_many('achievements', order_by='achievement_date', descending=True)

Write failures are rolled back and raised as ``StoreError``.
"""
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError, MultipleResultsFound
from typing import Any, Dict, List, Optional

from schoolboard import db
from schoolboard.models import Profile, UserRole, About, Achievement


class StoreError(Exception):
    """Raised for any failed store call. ``message`` is safe to show users."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class RecordStore:
    TABLES = {
        'profiles': Profile,
        'user_roles': UserRole,
        'about': About,
        'achievements': Achievement,
    }

    def __init__(self, session=None):
        self.session = session or db.session

    def _model(self, table):
        model = self.TABLES.get(table)
        if model is None:
            raise StoreError(f'Unknown table: {table}')
        return model

    def _column(self, model, name):
        if name not in model.__table__.columns:
            raise StoreError(f'Unknown column {model.__tablename__}.{name}')
        return getattr(model, name)

    def _query(self, table, filters):
        model = self._model(table)
        query = self.session.query(model)
        for name, value in (filters or {}).items():
            query = query.filter(self._column(model, name) == value)
        return model, query

    def get_current_user(self):
        """Return the authenticated user or None."""
        # current_user is None outside a request
        if current_user and current_user.is_authenticated:
            return current_user
        return None

    def select_one(self, table: str, **filters) -> Optional[Any]:
        """Return the single matching row, or None when nothing matches."""
        _, query = self._query(table, filters)
        try:
            return query.one_or_none()
        except MultipleResultsFound:
            raise StoreError(f'More than one row in {table} matches {filters}')
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(str(e))

    def select_many(self, table: str, filters: Optional[Dict] = None,
                    order_by: Optional[str] = None, descending: bool = False) -> List[Any]:
        model, query = self._query(table, filters)
        if order_by:
            column = self._column(model, order_by)
            if descending:
                query = query.order_by(column.desc(), model.id.desc())
            else:
                query = query.order_by(column.asc(), model.id.asc())
        try:
            return query.all()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(str(e))

    def insert(self, table: str, fields: Dict) -> Any:
        model = self._model(table)
        for name in fields:
            self._column(model, name)
        row = model(**fields)
        try:
            self.session.add(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(str(e))
        return row

    def update(self, table: str, id: Any, fields: Dict) -> Any:
        model = self._model(table)
        for name in fields:
            self._column(model, name)
        row = self.session.get(model, id)
        if row is None:
            raise StoreError(f'No row in {table} with id {id}')
        for name, value in fields.items():
            setattr(row, name, value)
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(str(e))
        return row

    def delete(self, table: str, id: Any) -> None:
        model = self._model(table)
        row = self.session.get(model, id)
        if row is None:
            raise StoreError(f'No row in {table} with id {id}')
        try:
            self.session.delete(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(str(e))
