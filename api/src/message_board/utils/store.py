from typing import Dict, List, Optional

from sqlalchemy.engine import Engine

from message_board.utils.db import query
from message_board.utils.time_helpers import utc_now_iso

RECENT_LIMIT = 20


class MessageStore:
    """Single-statement access to the `messages` table.

    Each method runs one statement in its own transaction. Errors from the
    driver propagate to the caller.
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine

    def list_recent(self, limit: int = RECENT_LIMIT) -> List[Dict]:
        rows = query(
            """
            SELECT id, name, email, message, created_at
            FROM messages
            ORDER BY created_at DESC, id DESC
            LIMIT :limit
            """,
            {"limit": limit},
            engine=self.engine,
        ).mappings().all()
        return list(rows)

    def insert(self, name: str, email: str, message: str, created_at: Optional[str] = None) -> int:
        new_id = query(
            """
            INSERT INTO messages (name, email, message, created_at)
            VALUES (:name, :email, :message, :created_at)
            RETURNING id
            """,
            {
                "name": name,
                "email": email,
                "message": message,
                "created_at": created_at or utc_now_iso(),
            },
            engine=self.engine,
        ).scalar()
        return int(new_id)


def get_store() -> MessageStore:
    """FastAPI dependency providing the store.

    The engine is resolved on first statement so a missing DB_DSN surfaces
    inside the handler as a store error.
    """
    return MessageStore()
