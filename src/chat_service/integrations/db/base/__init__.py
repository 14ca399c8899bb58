"""
목적: DB 베이스 모듈 공개 API를 제공한다.
설명: 공통 모델, 예외, 엔진/세션/풀 인터페이스를 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/integrations/db/base/models.py, src/chat_service/integrations/db/base/engine.py
"""

from chat_service.integrations.db.base.engine import BaseDBEngine
from chat_service.integrations.db.base.errors import (
    ConnectionPoolTimeoutError,
    ConstraintKind,
    ConstraintViolationError,
    OperationCancelledError,
    StorageError,
)
from chat_service.integrations.db.base.models import Migration, SortField, SortOrder
from chat_service.integrations.db.base.pool import BaseConnectionPool
from chat_service.integrations.db.base.session import BaseSession, Row

__all__ = [
    "BaseConnectionPool",
    "BaseDBEngine",
    "BaseSession",
    "ConnectionPoolTimeoutError",
    "ConstraintKind",
    "ConstraintViolationError",
    "Migration",
    "OperationCancelledError",
    "Row",
    "SortField",
    "SortOrder",
    "StorageError",
]
