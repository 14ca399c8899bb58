"""
목적: SQLite 트랜잭션 세션을 제공한다.
설명: 쓰기 트랜잭션은 BEGIN IMMEDIATE로 시작해 쓰기 잠금 아래에서 확인/삽입이 이뤄지게 하고,
      진행 핸들러로 취소 신호를 실행 중인 문장에 전달한다.
디자인 패턴: 어댑터 패턴
참조: src/chat_service/integrations/db/engines/sql_common.py
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, List, Optional

from chat_service.integrations.db.base.errors import (
    ConstraintKind,
    ConstraintViolationError,
    OperationCancelledError,
    StorageError,
)
from chat_service.integrations.db.engines.sql_common import SQLIdentifierHelper, SQLSession
from chat_service.shared.exceptions import BaseAppException
from chat_service.shared.runtime import CancellationToken

# SQLite 확장 결과 코드 (https://www.sqlite.org/rescode.html)
SQLITE_CONSTRAINT_CHECK = 275
SQLITE_CONSTRAINT_FOREIGNKEY = 787
SQLITE_CONSTRAINT_NOTNULL = 1299
SQLITE_CONSTRAINT_PRIMARYKEY = 1555
SQLITE_CONSTRAINT_UNIQUE = 2067

_CONSTRAINT_KINDS = {
    SQLITE_CONSTRAINT_CHECK: ConstraintKind.CHECK,
    SQLITE_CONSTRAINT_FOREIGNKEY: ConstraintKind.FOREIGN_KEY,
    SQLITE_CONSTRAINT_NOTNULL: ConstraintKind.NOT_NULL,
    SQLITE_CONSTRAINT_PRIMARYKEY: ConstraintKind.UNIQUE,
    SQLITE_CONSTRAINT_UNIQUE: ConstraintKind.UNIQUE,
}

# 진행 핸들러 호출 간격(가상 머신 명령 수)
_PROGRESS_INTERVAL = 1000

# 문자열 정렬 순서가 시간 순서와 일치하도록 자릿수를 고정한다.
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f+00:00"


def encode_timestamp(value: datetime) -> str:
    """datetime을 UTC 고정 자릿수 문자열로 변환한다."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(_TIMESTAMP_FORMAT)


class SqliteSession(SQLSession):
    """SQLite 세션 구현체."""

    _placeholder = "?"
    _driver_error = sqlite3.Error

    def __init__(
        self,
        connection: sqlite3.Connection,
        identifier: Optional[SQLIdentifierHelper] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        super().__init__(connection, identifier, cancellation)

    def _begin_statement(self, write: bool) -> str:
        return "BEGIN IMMEDIATE" if write else "BEGIN"

    def _on_begin(self) -> None:
        self._connection.set_progress_handler(self._interrupt_if_cancelled, _PROGRESS_INTERVAL)

    def _on_finish(self) -> None:
        self._connection.set_progress_handler(None, 0)

    def _interrupt_if_cancelled(self) -> int:
        return 1 if self._cancellation.cancelled else 0

    def _encode_param(self, value: Any) -> Any:
        if isinstance(value, datetime):
            return encode_timestamp(value)
        return value

    def _insert_returning_key(self, statement: str, params: List[Any], primary_key: str) -> Any:
        cursor = self._run(statement, params)
        try:
            return cursor.lastrowid
        finally:
            cursor.close()

    def _translate_error(self, error: BaseException) -> BaseAppException:
        if isinstance(error, sqlite3.OperationalError) and self._cancellation.cancelled:
            return OperationCancelledError(
                f"SQLite 문장 실행이 취소되었습니다: {self._cancellation.reason}",
                original=error,
            )
        if isinstance(error, sqlite3.IntegrityError):
            code = getattr(error, "sqlite_errorcode", None)
            kind = _CONSTRAINT_KINDS.get(code, ConstraintKind.OTHER)
            return ConstraintViolationError(
                "SQLite 제약 조건 위반이 발생했습니다.",
                kind=kind,
                original=error,
            )
        return StorageError(f"SQLite 실행에 실패했습니다: {error}", original=error)
