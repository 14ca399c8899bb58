"""
목적: SQL 계열 엔진에서 공통으로 사용하는 유틸리티와 세션 골격을 제공한다.
설명: 식별자 검증/인용과 DB-API 커넥션 위의 트랜잭션/행 프리미티브 구현을 통합한다.
디자인 패턴: 템플릿 메서드, 유틸리티 모듈
참조: src/chat_service/integrations/db/base/session.py
"""

from __future__ import annotations

import re
from abc import abstractmethod
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Type

from chat_service.integrations.db.base.models import SortField
from chat_service.integrations.db.base.session import BaseSession, Row
from chat_service.shared.exceptions import BaseAppException
from chat_service.shared.runtime import CancellationToken

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SQLIdentifierHelper:
    """SQL 식별자 검증/인용 도우미."""

    def quote_identifier(self, name: str) -> str:
        """식별자를 검증하고 쌍따옴표로 감싸 반환한다."""

        if not name:
            raise ValueError("식별자 이름이 비어 있습니다.")
        if not _IDENTIFIER_RE.match(name):
            raise ValueError(f"허용되지 않는 식별자: {name}")
        return f'"{name}"'

    def quote_table(self, name: str) -> str:
        """테이블 식별자를 반환한다."""

        return self.quote_identifier(name)


class SQLSession(BaseSession):
    """DB-API 2.0 커넥션 기반 세션 골격.

    하위 클래스는 드라이버 예외 타입, BEGIN 문, 삽입 키 회수, 예외 변환만 구현한다.
    모든 문장 실행 전에 취소 토큰을 확인한다.
    """

    _placeholder = "?"
    _driver_error: Type[BaseException] = Exception

    def __init__(
        self,
        connection: Any,
        identifier: Optional[SQLIdentifierHelper] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        self._connection = connection
        self._identifier = identifier or SQLIdentifierHelper()
        self._cancellation = cancellation or CancellationToken.none()
        self._in_transaction = False

    @property
    def placeholder(self) -> str:
        return self._placeholder

    @property
    def in_transaction(self) -> bool:
        """트랜잭션 진행 여부를 반환한다."""

        return self._in_transaction

    @property
    def cancellation(self) -> CancellationToken:
        return self._cancellation

    def begin(self, write: bool = False) -> None:
        if self._in_transaction:
            raise RuntimeError("이미 트랜잭션이 진행 중입니다.")
        self._cancellation.raise_if_cancelled()
        self._on_begin()
        try:
            self._run(self._begin_statement(write))
        except BaseException:
            self._on_finish()
            raise
        self._in_transaction = True
        self._after_begin()

    def commit(self) -> None:
        if not self._in_transaction:
            raise RuntimeError("진행 중인 트랜잭션이 없습니다.")
        self._run("COMMIT")
        self._in_transaction = False
        self._on_finish()

    def rollback(self) -> None:
        if not self._in_transaction:
            return
        self._in_transaction = False
        self._on_finish()
        cursor = self._connection.cursor()
        try:
            cursor.execute("ROLLBACK")
        except self._driver_error as error:
            raise self._translate_error(error) from error
        finally:
            cursor.close()

    def count(self, table: str, filters: Mapping[str, Any]) -> int:
        where_sql, params = self._where(filters)
        statement = f"SELECT COUNT(*) FROM {self._identifier.quote_table(table)}{where_sql}"
        cursor = self._run(statement, params)
        try:
            row = cursor.fetchone()
        finally:
            cursor.close()
        return int(row[0]) if row else 0

    def get(self, table: str, key: Any, primary_key: str = "id") -> Optional[Row]:
        statement = (
            f"SELECT * FROM {self._identifier.quote_table(table)} "
            f"WHERE {self._identifier.quote_identifier(primary_key)} = {self._placeholder}"
        )
        rows = self._fetch(statement, (key,))
        return rows[0] if rows else None

    def fetch_children(
        self,
        table: str,
        parent_column: str,
        parent_id: Any,
        sort: Sequence[SortField],
        limit: int,
    ) -> List[Row]:
        if limit < 0:
            raise ValueError("limit은 0 이상이어야 합니다.")
        if limit == 0:
            return []
        statement = (
            f"SELECT * FROM {self._identifier.quote_table(table)} "
            f"WHERE {self._identifier.quote_identifier(parent_column)} = {self._placeholder}"
        )
        if sort:
            order_by = ", ".join(
                f"{self._identifier.quote_identifier(item.field)} {item.order.value}"
                for item in sort
            )
            statement += f" ORDER BY {order_by}"
        statement += f" LIMIT {self._placeholder}"
        return self._fetch(statement, (parent_id, limit))

    def insert(self, table: str, row: Mapping[str, Any], primary_key: str = "id") -> Row:
        if not row:
            raise ValueError("삽입할 컬럼이 없습니다.")
        columns = list(row.keys())
        column_sql = ", ".join(self._identifier.quote_identifier(name) for name in columns)
        values_sql = ", ".join([self._placeholder] * len(columns))
        statement = (
            f"INSERT INTO {self._identifier.quote_table(table)} ({column_sql}) VALUES ({values_sql})"
        )
        key = self._insert_returning_key(statement, list(row.values()), primary_key)
        return {**dict(row), primary_key: key}

    def delete(self, table: str, key: Any, primary_key: str = "id") -> int:
        statement = (
            f"DELETE FROM {self._identifier.quote_table(table)} "
            f"WHERE {self._identifier.quote_identifier(primary_key)} = {self._placeholder}"
        )
        return self.execute(statement, (key,))

    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        cursor = self._run(statement, params)
        try:
            return int(cursor.rowcount)
        finally:
            cursor.close()

    def fetch_all(self, statement: str, params: Sequence[Any] = ()) -> List[Row]:
        return self._fetch(statement, params)

    def _where(self, filters: Mapping[str, Any]) -> Tuple[str, List[Any]]:
        if not filters:
            return "", []
        clauses = [
            f"{self._identifier.quote_identifier(column)} = {self._placeholder}"
            for column in filters
        ]
        return " WHERE " + " AND ".join(clauses), list(filters.values())

    def _fetch(self, statement: str, params: Sequence[Any]) -> List[Row]:
        cursor = self._run(statement, params)
        try:
            names = [column[0] for column in cursor.description or ()]
            return [dict(zip(names, values)) for values in cursor.fetchall()]
        finally:
            cursor.close()

    def _run(self, statement: str, params: Sequence[Any] = ()) -> Any:
        self._cancellation.raise_if_cancelled()
        cursor = self._connection.cursor()
        try:
            cursor.execute(statement, tuple(self._encode_param(value) for value in params))
        except self._driver_error as error:
            cursor.close()
            raise self._translate_error(error) from error
        except BaseException:
            cursor.close()
            raise
        return cursor

    def _encode_param(self, value: Any) -> Any:
        return value

    def _on_begin(self) -> None:
        """BEGIN 직전 훅."""

    def _after_begin(self) -> None:
        """BEGIN 직후 훅."""

    def _on_finish(self) -> None:
        """COMMIT/ROLLBACK 시점 훅."""

    @abstractmethod
    def _begin_statement(self, write: bool) -> str:
        """트랜잭션 시작 문장을 반환한다."""

    @abstractmethod
    def _insert_returning_key(self, statement: str, params: List[Any], primary_key: str) -> Any:
        """INSERT를 실행하고 생성된 기본 키를 반환한다."""

    @abstractmethod
    def _translate_error(self, error: BaseException) -> BaseAppException:
        """드라이버 예외를 저장소 예외로 변환한다."""
