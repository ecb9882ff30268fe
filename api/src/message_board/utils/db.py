from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from message_board.utils.config import require_config

_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Return the process-wide engine, creating it from DB_DSN on first use."""
    global _engine
    if _engine is None:
        _engine = create_engine(require_config("DB_DSN"), future=True, pool_pre_ping=True)
    return _engine


class MaterializedResult:
    """A small wrapper for materialized query results.

    Supports `.mappings().first()`, `.mappings().all()`, `.scalar()`, iteration
    and exposes `.rowcount` for callers that check it after DML statements.
    """
    def __init__(self, rows, rowcount=None):
        self._rows = rows
        self.rowcount = rowcount

    def mappings(self):
        return self

    def all(self):
        return self._rows

    def first(self):
        return self._rows[0] if self._rows else None

    def scalar(self):
        row = self.first()
        if row is None:
            return None
        return next(iter(row.values()))

    def __iter__(self):
        return iter(self._rows)


def query(sql: str, params=None, engine: Optional[Engine] = None):
    """Execute a query and fully materialize results before closing the connection.

    If the statement returns rows, materialize them. Otherwise return an
    empty materialized result but preserve `rowcount` so callers can inspect it.
    Each call runs in its own transaction.
    """
    with (engine or get_engine()).begin() as conn:
        result = conn.execute(text(sql), params or {})
        rowcount = result.rowcount
        if getattr(result, "returns_rows", False):
            rows = [dict(row) for row in result.mappings().all()]
        else:
            rows = []

    return MaterializedResult(rows, rowcount=rowcount)


def execute(sql: str, params=None, engine: Optional[Engine] = None):
    """Execute a SQL statement without returning results"""
    with (engine or get_engine()).begin() as conn:
        conn.execute(text(sql), params or {})
