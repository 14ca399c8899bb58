"""
목적: DB 통합 모듈 공개 API를 제공한다.
설명: 클라이언트, 엔진 팩토리, 저장소 예외를 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/integrations/db/client.py, src/chat_service/integrations/db/factory.py
"""

from chat_service.integrations.db.base import (
    BaseDBEngine,
    BaseSession,
    ConnectionPoolTimeoutError,
    ConstraintKind,
    ConstraintViolationError,
    OperationCancelledError,
    SortField,
    SortOrder,
    StorageError,
)
from chat_service.integrations.db.client import DBClient
from chat_service.integrations.db.factory import create_db_client, create_engine
from chat_service.integrations.db.migrations import MigrationRunner

__all__ = [
    "BaseDBEngine",
    "BaseSession",
    "ConnectionPoolTimeoutError",
    "ConstraintKind",
    "ConstraintViolationError",
    "DBClient",
    "MigrationRunner",
    "OperationCancelledError",
    "SortField",
    "SortOrder",
    "StorageError",
    "create_db_client",
    "create_engine",
]
