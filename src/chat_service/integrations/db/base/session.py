"""
목적: DB 세션/트랜잭션 추상화를 제공한다.
설명: 커넥션 하나에 묶인 트랜잭션 제어와 행 단위 조회/삽입/삭제 프리미티브를 정의한다.
디자인 패턴: 템플릿 메서드, 컨텍스트 매니저
참조: src/chat_service/integrations/db/base/engine.py, src/chat_service/integrations/db/client.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence

from chat_service.integrations.db.base.models import SortField

Row = Dict[str, Any]


class BaseSession(ABC):
    """DB 세션 인터페이스.

    세션은 커넥션 하나와 트랜잭션 하나의 수명을 가진다. 제약 조건 위반은
    ConstraintViolationError로, 취소는 OperationCancelledError로 변환해 발생시킨다.
    """

    @property
    @abstractmethod
    def placeholder(self) -> str:
        """원시 SQL에서 사용할 바인딩 자리표시자를 반환한다."""

    @abstractmethod
    def begin(self, write: bool = False) -> None:
        """트랜잭션을 시작한다. write가 참이면 쓰기 잠금을 먼저 확보한다."""

    @abstractmethod
    def commit(self) -> None:
        """트랜잭션을 커밋한다."""

    @abstractmethod
    def rollback(self) -> None:
        """트랜잭션을 롤백한다. 활성 트랜잭션이 없으면 아무 일도 하지 않는다."""

    @abstractmethod
    def count(self, table: str, filters: Mapping[str, Any]) -> int:
        """동등 조건을 만족하는 행 수를 반환한다."""

    @abstractmethod
    def get(self, table: str, key: Any, primary_key: str = "id") -> Optional[Row]:
        """기본 키로 행 1건을 조회한다."""

    @abstractmethod
    def fetch_children(
        self,
        table: str,
        parent_column: str,
        parent_id: Any,
        sort: Sequence[SortField],
        limit: int,
    ) -> List[Row]:
        """부모 키로 자식 행을 정렬해 최대 limit건 조회한다."""

    @abstractmethod
    def insert(self, table: str, row: Mapping[str, Any], primary_key: str = "id") -> Row:
        """행을 삽입하고 생성된 기본 키를 포함한 행을 반환한다."""

    @abstractmethod
    def delete(self, table: str, key: Any, primary_key: str = "id") -> int:
        """기본 키로 행을 삭제하고 영향받은 행 수를 반환한다."""

    @abstractmethod
    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        """원시 SQL을 실행하고 영향받은 행 수를 반환한다."""

    @abstractmethod
    def fetch_all(self, statement: str, params: Sequence[Any] = ()) -> List[Row]:
        """원시 SELECT를 실행하고 행 목록을 반환한다."""

    def lock_migrations(self) -> None:
        """마이그레이션 동시 실행을 막는 잠금을 건다. 기본 구현은 쓰기 트랜잭션에 맡긴다."""
