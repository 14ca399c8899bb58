"""
목적: 설정 기반 DB 엔진 생성 함수를 제공한다.
설명: DB_BACKEND 값에 따라 SQLite 또는 PostgreSQL 엔진과 클라이언트를 조립한다.
디자인 패턴: 팩토리 메서드
참조: src/chat_service/shared/config/settings.py, src/chat_service/integrations/db/client.py
"""

from __future__ import annotations

from typing import Optional

from chat_service.integrations.db.base.engine import BaseDBEngine
from chat_service.integrations.db.client import DBClient
from chat_service.integrations.db.engines.postgres import PostgresEngine
from chat_service.integrations.db.engines.sqlite import SQLiteEngine
from chat_service.shared.config import AppSettings, DatabaseBackend
from chat_service.shared.logging import Logger, create_default_logger


def create_engine(settings: AppSettings, logger: Optional[Logger] = None) -> BaseDBEngine:
    """설정에 맞는 DB 엔진을 생성한다."""

    logger = logger or create_default_logger("DBEngine")
    if settings.db_backend == DatabaseBackend.POSTGRES:
        return PostgresEngine(
            dsn=settings.postgres_dsn,
            logger=logger,
            max_connections=settings.db_max_open_conns,
            min_connections=min(settings.db_max_idle_conns, settings.db_max_open_conns),
            conn_max_idle_seconds=settings.db_conn_max_idle_time,
            conn_max_lifetime_seconds=settings.db_conn_max_lifetime,
        )
    return SQLiteEngine(
        database_path=settings.sqlite_path,
        logger=logger,
        max_connections=settings.db_max_open_conns,
        busy_timeout_ms=settings.sqlite_busy_timeout_ms,
        conn_max_idle_seconds=settings.db_conn_max_idle_time,
        conn_max_lifetime_seconds=settings.db_conn_max_lifetime,
    )


def create_db_client(settings: AppSettings, logger: Optional[Logger] = None) -> DBClient:
    """설정에 맞는 엔진으로 DB 클라이언트를 생성한다."""

    logger = logger or create_default_logger("DBClient")
    return DBClient(
        create_engine(settings, logger),
        logger=logger,
        pool_timeout=settings.db_pool_timeout_seconds,
    )
