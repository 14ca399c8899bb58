"""
목적: SQLite 기반 DB 엔진을 제공한다.
설명: 커넥션 풀과 세션 생성, SQLite 방언 마이그레이션을 묶는다.
디자인 패턴: 어댑터 패턴
참조: src/chat_service/integrations/db/base/engine.py
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import sqlite3

from chat_service.integrations.db.base.engine import BaseDBEngine
from chat_service.integrations.db.base.models import Migration
from chat_service.integrations.db.engines.sql_common import SQLIdentifierHelper
from chat_service.integrations.db.engines.sqlite.connection import (
    MEMORY_DATABASE,
    SqliteConnectionPool,
)
from chat_service.integrations.db.engines.sqlite.migrations import (
    SCHEMA_MIGRATIONS_DDL,
    SQLITE_MIGRATIONS,
)
from chat_service.integrations.db.engines.sqlite.session import SqliteSession
from chat_service.shared.logging import Logger, create_default_logger
from chat_service.shared.runtime import CancellationToken


class SQLiteEngine(BaseDBEngine):
    """SQLite 엔진 구현체."""

    def __init__(
        self,
        database_path: str = "data/db/chat_service.sqlite",
        logger: Optional[Logger] = None,
        max_connections: int = 5,
        busy_timeout_ms: int = 5000,
        conn_max_idle_seconds: Optional[float] = None,
        conn_max_lifetime_seconds: Optional[float] = None,
    ) -> None:
        self._database_path = database_path
        self._logger = logger or create_default_logger("SQLiteEngine")
        self._max_connections = max_connections
        self._busy_timeout_ms = busy_timeout_ms
        self._conn_max_idle_seconds = conn_max_idle_seconds
        self._conn_max_lifetime_seconds = conn_max_lifetime_seconds
        self._identifier = SQLIdentifierHelper()
        self._pool: Optional[SqliteConnectionPool] = None

    @property
    def name(self) -> str:
        return "sqlite"

    @property
    def database_path(self) -> str:
        return self._database_path

    @property
    def pool(self) -> SqliteConnectionPool:
        if self._pool is None:
            raise RuntimeError("SQLite 연결이 초기화되지 않았습니다.")
        return self._pool

    @property
    def migrations(self) -> Sequence[Migration]:
        return SQLITE_MIGRATIONS

    @property
    def migration_table_ddl(self) -> str:
        return SCHEMA_MIGRATIONS_DDL

    def connect(self) -> None:
        if self._pool is not None:
            return
        if self._database_path != MEMORY_DATABASE:
            Path(self._database_path).parent.mkdir(parents=True, exist_ok=True)
        self._pool = SqliteConnectionPool(
            database_path=self._database_path,
            logger=self._logger,
            max_size=self._max_connections,
            busy_timeout_ms=self._busy_timeout_ms,
            max_idle_seconds=self._conn_max_idle_seconds,
            max_lifetime_seconds=self._conn_max_lifetime_seconds,
        )
        self._logger.info(
            f"SQLite 커넥션 풀이 초기화되었습니다. "
            f"(path={self._database_path}, max_size={self._pool.max_size})"
        )

    def close(self) -> None:
        if self._pool is None:
            return
        self._pool.close()
        self._pool = None

    def create_session(
        self,
        connection: sqlite3.Connection,
        cancellation: Optional[CancellationToken] = None,
    ) -> SqliteSession:
        return SqliteSession(connection, self._identifier, cancellation)
