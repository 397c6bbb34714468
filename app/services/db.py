"""
Generic data store — create/get/query/update/delete against the managed tables.

Every call opens its own session, commits or rolls back, and closes it.
Rows come back as plain dicts so callers never hold a detached ORM object.
Failures are logged, rolled back and re-raised as StoreError.
"""
import logging
from datetime import datetime, date, timezone
from typing import Any, Dict, List, Optional

from app.database import get_session
from app.models.project import Project
from app.models.idea_validation import IdeaValidation
from app.models.lead import Lead

logger = logging.getLogger('services.db')


TABLES = {
    'business_projects': Project,
    'idea_validations': IdeaValidation,
    'leads': Lead,
}


class StoreError(Exception):
    """Raised when a persistence call fails."""


def to_dict(row) -> Dict[str, Any]:
    """Serialize an ORM row to a dict of its columns (datetimes as ISO strings)."""
    out = {}
    for col in row.__table__.columns:
        value = getattr(row, col.name)
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        out[col.name] = value
    return out


def create(table: str, values: Dict[str, Any]) -> Dict[str, Any]:
    """INSERT one record and return it as stored (id and defaults filled in)."""
    model = _model(table)
    session = get_session()
    try:
        row = model(**_known_columns(model, values))
        session.add(row)
        session.commit()
        session.refresh(row)
        return to_dict(row)
    except Exception as e:
        session.rollback()
        logger.error("Failed to insert into %s", table, exc_info=True)
        raise StoreError(f"Could not create {table} record") from e
    finally:
        session.close()


def get(table: str, record_id, **filters) -> Optional[Dict[str, Any]]:
    """Fetch one record by id, optionally constrained by extra field filters."""
    rows = query(table, id=record_id, limit=1, **filters)
    return rows[0] if rows else None


def query(table: str, order_by: str = None, descending: bool = False,
          limit: int = None, **filters) -> List[Dict[str, Any]]:
    """
    SELECT records matching every field filter (see _apply_filters).
    """
    model = _model(table)
    session = get_session()
    try:
        q = _apply_filters(session.query(model), model, filters)
        if order_by:
            column = _column(model, order_by)
            if descending:
                q = q.order_by(column.desc(), model.id.desc())
            else:
                q = q.order_by(column.asc(), model.id.asc())
        if limit:
            q = q.limit(limit)
        return [to_dict(row) for row in q.all()]
    except ValueError:
        raise
    except Exception as e:
        logger.error("Failed to query %s", table, exc_info=True)
        raise StoreError(f"Could not query {table}") from e
    finally:
        session.close()


def update(table: str, record_id, values: Dict[str, Any], **filters) -> Optional[Dict[str, Any]]:
    """UPDATE one record by id. Returns the updated record, or None if no match."""
    model = _model(table)
    session = get_session()
    try:
        q = session.query(model).filter(model.id == record_id)
        for name, value in filters.items():
            q = q.filter(_column(model, name) == value)
        row = q.first()
        if row is None:
            return None

        for name, value in _known_columns(model, values).items():
            setattr(row, name, value)
        if 'updated_at' in model.__table__.columns and 'updated_at' not in values:
            row.updated_at = datetime.now(timezone.utc)

        session.commit()
        session.refresh(row)
        return to_dict(row)
    except ValueError:
        raise
    except Exception as e:
        session.rollback()
        logger.error("Failed to update %s id=%s", table, record_id, exc_info=True)
        raise StoreError(f"Could not update {table} record") from e
    finally:
        session.close()


def delete(table: str, **filters) -> int:
    """DELETE every record matching the field filters. Returns the row count."""
    return delete_many([(table, filters)])[0]


def delete_many(deletes) -> List[int]:
    """
    DELETE across tables in a single transaction.

    ``deletes`` is a sequence of (table, filters) pairs applied in order; either
    all of them commit or none do. Returns the row count for each pair.
    """
    steps = []
    for table, filters in deletes:
        if not filters:
            raise ValueError("delete() needs at least one filter")
        steps.append((_model(table), filters))
    tables = ', '.join(model.__tablename__ for model, _ in steps)

    session = get_session()
    try:
        counts = []
        for model, filters in steps:
            q = _apply_filters(session.query(model), model, filters)
            counts.append(q.delete(synchronize_session=False))
        session.commit()
        return counts
    except ValueError:
        session.rollback()
        raise
    except Exception as e:
        session.rollback()
        logger.error("Failed to delete from %s", tables, exc_info=True)
        raise StoreError(f"Could not delete {tables} records") from e
    finally:
        session.close()


# ── Private helpers ──────────────────────────────────────────────────────────

def _apply_filters(q, model, filters):
    """A list/tuple/set value becomes an IN clause; anything else is equality."""
    for name, value in filters.items():
        column = _column(model, name)
        if isinstance(value, (list, tuple, set)):
            q = q.filter(column.in_(list(value)))
        else:
            q = q.filter(column == value)
    return q


def _model(table):
    model = TABLES.get(table)
    if model is None:
        raise ValueError(f"Unknown table '{table}'")
    return model


def _column(model, name):
    if name not in model.__table__.columns:
        raise ValueError(f"Unknown field '{name}' on {model.__tablename__}")
    return getattr(model, name)


def _known_columns(model, values):
    """Drop keys that are not columns on the model."""
    columns = model.__table__.columns
    return {k: v for k, v in values.items() if k in columns}
