"""
목적: PostgreSQL 기반 DB 엔진을 제공한다.
설명: psycopg2 커넥션 풀과 세션 생성, PostgreSQL 방언 마이그레이션을 묶는다.
디자인 패턴: 어댑터 패턴
참조: src/chat_service/integrations/db/base/engine.py
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from chat_service.integrations.db.base.engine import BaseDBEngine
from chat_service.integrations.db.base.models import Migration
from chat_service.integrations.db.engines.postgres.connection import PostgresConnectionPool
from chat_service.integrations.db.engines.postgres.migrations import (
    POSTGRES_MIGRATIONS,
    SCHEMA_MIGRATIONS_DDL,
)
from chat_service.integrations.db.engines.postgres.session import PostgresSession
from chat_service.integrations.db.engines.sql_common import SQLIdentifierHelper
from chat_service.shared.logging import Logger, create_default_logger
from chat_service.shared.runtime import CancellationToken


class PostgresEngine(BaseDBEngine):
    """PostgreSQL 엔진 구현체."""

    def __init__(
        self,
        dsn: str,
        logger: Optional[Logger] = None,
        max_connections: int = 20,
        min_connections: int = 0,
        conn_max_idle_seconds: Optional[float] = None,
        conn_max_lifetime_seconds: Optional[float] = None,
    ) -> None:
        self._dsn = dsn
        self._logger = logger or create_default_logger("PostgresEngine")
        self._max_connections = max_connections
        self._min_connections = min_connections
        self._conn_max_idle_seconds = conn_max_idle_seconds
        self._conn_max_lifetime_seconds = conn_max_lifetime_seconds
        self._identifier = SQLIdentifierHelper()
        self._pool: Optional[PostgresConnectionPool] = None

    @property
    def name(self) -> str:
        return "postgres"

    @property
    def pool(self) -> PostgresConnectionPool:
        if self._pool is None:
            raise RuntimeError("PostgreSQL 연결이 초기화되지 않았습니다.")
        return self._pool

    @property
    def migrations(self) -> Sequence[Migration]:
        return POSTGRES_MIGRATIONS

    @property
    def migration_table_ddl(self) -> str:
        return SCHEMA_MIGRATIONS_DDL

    def connect(self) -> None:
        if self._pool is not None:
            return
        self._pool = PostgresConnectionPool(
            dsn=self._dsn,
            logger=self._logger,
            max_size=self._max_connections,
            min_size=self._min_connections,
            max_idle_seconds=self._conn_max_idle_seconds,
            max_lifetime_seconds=self._conn_max_lifetime_seconds,
        )
        self._logger.info(
            f"PostgreSQL 커넥션 풀이 초기화되었습니다. (max_size={self._pool.max_size})"
        )

    def close(self) -> None:
        if self._pool is None:
            return
        self._pool.close()
        self._pool = None

    def create_session(
        self,
        connection: Any,
        cancellation: Optional[CancellationToken] = None,
    ) -> PostgresSession:
        return PostgresSession(connection, self._identifier, cancellation)
