"""Development helper for provisioning the messages table.

The running API never creates or alters tables; this is used by init_db.py
and the test suite.
"""
from sqlalchemy.engine import Engine

from message_board.utils.db import execute

MESSAGES_DDL = {
    "postgresql": """
        CREATE TABLE IF NOT EXISTS messages (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            message TEXT NOT NULL,
            created_at TEXT NOT NULL
        )
    """,
    "sqlite": """
        CREATE TABLE IF NOT EXISTS messages (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            message TEXT NOT NULL,
            created_at TEXT NOT NULL
        )
    """,
}


def init_schema(engine: Engine) -> None:
    ddl = MESSAGES_DDL.get(engine.dialect.name)
    if ddl is None:
        raise RuntimeError(f"Unsupported database dialect: {engine.dialect.name}")
    execute(ddl, engine=engine)
