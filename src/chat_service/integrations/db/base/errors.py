"""
목적: 저장소 계층 예외를 정의한다.
설명: 드라이버 예외를 제약 조건 종류 등 구조화된 값으로 분류해 상위 계층이 문자열 검사 없이 분기하도록 한다.
디자인 패턴: 도메인 예외 객체
참조: src/chat_service/shared/exceptions/base.py, src/chat_service/integrations/db/engines/sql_common.py
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from chat_service.shared.exceptions import BaseAppException, ExceptionDetail
from chat_service.shared.runtime import OperationCancelledError


class ConstraintKind(str, Enum):
    """위반된 제약 조건 종류."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    CHECK = "check"
    OTHER = "other"


class StorageError(BaseAppException):
    """저장소 접근 실패 공통 예외."""

    default_code = "DB_ERROR"


class ConstraintViolationError(StorageError):
    """제약 조건 위반 예외.

    Args:
        kind: 위반된 제약 조건 종류.
        constraint: 드라이버가 알려준 제약 조건 이름(알 수 없으면 None).
    """

    default_code = "DB_CONSTRAINT_VIOLATION"

    def __init__(
        self,
        message: str,
        kind: ConstraintKind,
        constraint: Optional[str] = None,
        original: Optional[BaseException] = None,
    ) -> None:
        detail = ExceptionDetail(
            code=self.default_code,
            cause=repr(original) if original is not None else None,
            metadata={"kind": kind.value, "constraint": constraint},
        )
        super().__init__(message, detail=detail, original=original)
        self.kind = kind
        self.constraint = constraint


class ConnectionPoolTimeoutError(StorageError):
    """커넥션 풀에서 제한 시간 안에 커넥션을 얻지 못했을 때 발생한다."""

    default_code = "DB_POOL_TIMEOUT"


__all__ = [
    "ConstraintKind",
    "ConstraintViolationError",
    "ConnectionPoolTimeoutError",
    "OperationCancelledError",
    "StorageError",
]
