"""
목적: PostgreSQL 트랜잭션 세션을 제공한다.
설명: 명시적 BEGIN/COMMIT으로 트랜잭션을 제어하고, 취소 토큰의 남은 시간을
      statement_timeout으로 전달한다. 제약 조건 위반은 SQLSTATE로 분류한다.
디자인 패턴: 어댑터 패턴
참조: src/chat_service/integrations/db/engines/sql_common.py
"""

from __future__ import annotations

from typing import Any, List, Optional

import psycopg2
from psycopg2 import errorcodes, errors

from chat_service.integrations.db.base.errors import (
    ConstraintKind,
    ConstraintViolationError,
    OperationCancelledError,
    StorageError,
)
from chat_service.integrations.db.engines.sql_common import SQLIdentifierHelper, SQLSession
from chat_service.shared.exceptions import BaseAppException
from chat_service.shared.runtime import CancellationToken

_CONSTRAINT_KINDS = {
    errorcodes.UNIQUE_VIOLATION: ConstraintKind.UNIQUE,
    errorcodes.FOREIGN_KEY_VIOLATION: ConstraintKind.FOREIGN_KEY,
    errorcodes.NOT_NULL_VIOLATION: ConstraintKind.NOT_NULL,
    errorcodes.CHECK_VIOLATION: ConstraintKind.CHECK,
}

# SQLSTATE별 psycopg2 예외 클래스
_CONSTRAINT_CLASSES = (
    (errors.UniqueViolation, ConstraintKind.UNIQUE),
    (errors.ForeignKeyViolation, ConstraintKind.FOREIGN_KEY),
    (errors.NotNullViolation, ConstraintKind.NOT_NULL),
    (errors.CheckViolation, ConstraintKind.CHECK),
)

# 마이그레이션 직렬화용 advisory lock 키
MIGRATION_LOCK_KEY = 7_340_021


class PostgresSession(SQLSession):
    """PostgreSQL 세션 구현체."""

    _placeholder = "%s"
    _driver_error = psycopg2.Error

    def __init__(
        self,
        connection: Any,
        identifier: Optional[SQLIdentifierHelper] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        super().__init__(connection, identifier, cancellation)

    def lock_migrations(self) -> None:
        self.fetch_all("SELECT pg_advisory_xact_lock(%s)", (MIGRATION_LOCK_KEY,))

    def _begin_statement(self, write: bool) -> str:
        return "BEGIN ISOLATION LEVEL READ COMMITTED" if write else "BEGIN READ ONLY"

    def _after_begin(self) -> None:
        remaining = self._cancellation.remaining()
        if remaining is None:
            return
        timeout_ms = max(1, int(remaining * 1000))
        self.execute("SET LOCAL statement_timeout = %s", (timeout_ms,))

    def _insert_returning_key(self, statement: str, params: List[Any], primary_key: str) -> Any:
        returning = f"{statement} RETURNING {self._identifier.quote_identifier(primary_key)}"
        cursor = self._run(returning, params)
        try:
            row = cursor.fetchone()
        finally:
            cursor.close()
        return row[0] if row else None

    def _translate_error(self, error: BaseException) -> BaseAppException:
        if isinstance(error, errors.QueryCanceled):
            return OperationCancelledError(
                "PostgreSQL 문장 실행이 취소되었습니다.",
                original=error,
            )
        if isinstance(error, psycopg2.IntegrityError):
            diag = getattr(error, "diag", None)
            return ConstraintViolationError(
                "PostgreSQL 제약 조건 위반이 발생했습니다.",
                kind=classify_integrity_error(error),
                constraint=getattr(diag, "constraint_name", None),
                original=error,
            )
        return StorageError(f"PostgreSQL 실행에 실패했습니다: {error}", original=error)


def classify_integrity_error(error: BaseException) -> ConstraintKind:
    """무결성 예외를 제약 조건 종류로 분류한다. 예외 클래스, SQLSTATE 순으로 확인한다."""

    for error_class, kind in _CONSTRAINT_CLASSES:
        if isinstance(error, error_class):
            return kind
    return _CONSTRAINT_KINDS.get(getattr(error, "pgcode", None), ConstraintKind.OTHER)
