from __future__ import annotations

import json
from typing import Any, Optional

from ..core.exceptions import StorageError
from ..database.mysql_base import db_cursor, fetchone
from .repository import KeyValueStore

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    store_key VARCHAR(64) NOT NULL PRIMARY KEY,
    store_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
)
"""


class MySQLKeyValueStore(KeyValueStore):
    """Key-value store backed by a single MySQL table (values kept as JSON text)."""

    def __init__(self, conn_factory):
        self._conn_factory = conn_factory

    def ensure_schema(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(SCHEMA_SQL)

    def get(self, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT store_value FROM kv_store WHERE store_key=%s", (key,))
            r = fetchone(cur)
        if not r:
            return None
        try:
            return json.loads(r["store_value"])
        except json.JSONDecodeError as e:
            raise StorageError(f"Valor inválido para a chave {key!r}") from e

    def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(store_key, store_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (key, payload),
            )

    def delete(self, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE store_key=%s", (key,))
            return cur.rowcount > 0
