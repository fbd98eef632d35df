from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from src import config

logger = logging.getLogger("FounderPost.BrandVoiceStore")


class BrandVoiceStore:
    """
    Minimal key/value settings store for the saved brand voice.
    - settings: one row per key, plain text value.

    The store is optional: any sqlite or filesystem failure is logged and
    ignored, reads fall back to "" and writes are dropped.
    """

    def __init__(self, db_path: str, key: str = config.BRAND_VOICE_KEY):
        self.db_path = db_path
        self.key = key
        self.available = self._init_schema()

    def _connect(self) -> sqlite3.Connection:
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> bool:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS settings (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL DEFAULT '',
                        updated_at TEXT NOT NULL DEFAULT (datetime('now'))
                    );
                    """
                )
                conn.commit()
            return True
        except (sqlite3.Error, OSError) as e:
            logger.debug(f"Brand voice store unavailable at {self.db_path!r}: {e}")
            return False

    def load(self) -> str:
        if not self.available:
            return ""
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT value FROM settings WHERE key = ? LIMIT 1;",
                    (self.key,),
                ).fetchone()
        except (sqlite3.Error, OSError) as e:
            logger.debug(f"Brand voice load failed: {e}")
            return ""

        if not row:
            return ""
        return row["value"] or ""

    def save(self, voice: str) -> None:
        if not self.available:
            return
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO settings(key, value, updated_at)
                    VALUES(?, ?, datetime('now'))
                    ON CONFLICT(key) DO UPDATE SET
                        value=excluded.value,
                        updated_at=datetime('now');
                    """,
                    (self.key, voice or ""),
                )
                conn.commit()
        except (sqlite3.Error, OSError) as e:
            logger.debug(f"Brand voice save failed: {e}")
