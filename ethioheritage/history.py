"""SQLite-backed archive of chat interactions per user."""

from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .config import config
from .models import ChatInteraction, Reference

if TYPE_CHECKING:
    from .models import ChatResult

logger = config.get_logger(__name__)


class ChatHistoryStore:
    """Stores question/answer pairs so signed-in users can revisit them."""

    def __init__(
        self,
        db_path: Path | None = None,
        archive_limit: int | None = None,
    ) -> None:
        """Initialize the store and ensure the schema exists.

        Args:
            db_path: Path to the SQLite database file. If None, uses
                config.CHAT_HISTORY_DB_PATH.
            archive_limit: Interactions kept per user. If None, uses
                config.CHAT_ARCHIVE_LIMIT.
        """
        self.db_path = Path(db_path or config.CHAT_HISTORY_DB_PATH)
        self.db_path.parent.mkdir(exist_ok=True, parents=True)
        self.archive_limit = archive_limit or config.CHAT_ARCHIVE_LIMIT
        self._create_tables()

    def _create_tables(self) -> None:
        """Create the interactions table and indexes if they don't exist."""
        with sqlite3.connect(str(self.db_path)) as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS chat_interactions (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id TEXT NOT NULL,
                    question TEXT NOT NULL,
                    answer TEXT NOT NULL,
                    source TEXT NOT NULL,
                    confidence REAL,
                    suggestions TEXT NOT NULL DEFAULT '[]',
                    refs TEXT NOT NULL DEFAULT '[]',
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            """)

            cursor.execute(
                (
                    "CREATE INDEX IF NOT EXISTS idx_interactions_user_created "
                    "ON chat_interactions(user_id, id DESC)"
                ),
            )
            conn.commit()

    @staticmethod
    def _encode_references(references: list[Any]) -> str:
        return json.dumps([
            ref.to_dict() if isinstance(ref, Reference) else ref for ref in references
        ])

    def save_interaction(self, user_id: str, question: str, result: ChatResult) -> int:
        """Archive one question and its reply, trimming the oldest rows.

        Raises:
            RuntimeError: If the interaction row cannot be inserted.

        Returns:
            Row id of the archived interaction.
        """
        reply = result.reply
        with sqlite3.connect(str(self.db_path)) as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO chat_interactions (
                    user_id,
                    question,
                    answer,
                    source,
                    confidence,
                    suggestions,
                    refs,
                    created_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, COALESCE(?, CURRENT_TIMESTAMP))
                """,
                (
                    user_id,
                    question,
                    reply.text,
                    result.source,
                    result.confidence,
                    json.dumps(reply.suggestions),
                    self._encode_references(reply.references),
                    result.timestamp,
                ),
            )
            row_id = cursor.lastrowid
            if row_id is None:
                msg = "Failed to insert chat interaction"
                raise RuntimeError(msg)

            cursor.execute(
                """
                DELETE FROM chat_interactions
                WHERE user_id = ? AND id NOT IN (
                    SELECT id FROM chat_interactions
                    WHERE user_id = ?
                    ORDER BY id DESC
                    LIMIT ?
                )
                """,
                (user_id, user_id, self.archive_limit),
            )
            if cursor.rowcount > 0:
                logger.info(
                    "Trimmed %d archived interactions for user %s",
                    cursor.rowcount,
                    user_id,
                )
            conn.commit()

        return int(row_id)

    def recent(self, user_id: str, limit: int | None = None) -> list[ChatInteraction]:
        """Fetch a user's most recent interactions, newest first.

        Returns:
            Up to ``limit`` interactions (config.CHAT_HISTORY_PAGE_SIZE by default).
        """
        if limit is None:
            limit = config.CHAT_HISTORY_PAGE_SIZE

        with sqlite3.connect(str(self.db_path)) as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT
                    id,
                    user_id,
                    question,
                    answer,
                    source,
                    confidence,
                    suggestions,
                    refs,
                    created_at
                FROM chat_interactions
                WHERE user_id = ?
                ORDER BY id DESC
                LIMIT ?
                """,
                (user_id, int(limit)),
            )
            rows = cursor.fetchall()

        return [self._build_interaction(row) for row in rows]

    def count(self, user_id: str) -> int:
        with sqlite3.connect(str(self.db_path)) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT COUNT(*) FROM chat_interactions WHERE user_id = ?",
                (user_id,),
            )
            return int(cursor.fetchone()[0])

    def clear(self, user_id: str) -> int:
        """Delete every archived interaction of a user.

        Returns:
            Number of interactions removed.
        """
        with sqlite3.connect(str(self.db_path)) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "DELETE FROM chat_interactions WHERE user_id = ?",
                (user_id,),
            )
            removed = cursor.rowcount
            conn.commit()

        logger.info("Cleared %d archived interactions for user %s", removed, user_id)
        return removed

    @staticmethod
    def _build_interaction(row: tuple) -> ChatInteraction:
        (
            row_id,
            user_id,
            question,
            answer,
            source,
            confidence,
            suggestions,
            refs,
            created_at,
        ) = row

        return ChatInteraction(
            id=int(row_id),
            user_id=user_id,
            question=question,
            answer=answer,
            source=source,
            confidence=float(confidence or 0.0),
            suggestions=json.loads(suggestions),
            references=json.loads(refs),
            created_at=str(created_at),
        )
