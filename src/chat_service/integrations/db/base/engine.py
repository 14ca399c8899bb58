"""
목적: DB 엔진 추상 인터페이스를 정의한다.
설명: 연결 수명주기, 커넥션 풀, 세션 생성, 방언별 마이그레이션 목록을 표준 메서드로 제공한다.
디자인 패턴: 전략 패턴
참조: src/chat_service/integrations/db/base/session.py, src/chat_service/integrations/db/base/pool.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from chat_service.integrations.db.base.models import Migration
from chat_service.integrations.db.base.pool import BaseConnectionPool
from chat_service.integrations.db.base.session import BaseSession
from chat_service.shared.runtime import CancellationToken


class BaseDBEngine(ABC):
    """DB 엔진 인터페이스."""

    @property
    @abstractmethod
    def name(self) -> str:
        """엔진 이름을 반환한다."""

    @property
    @abstractmethod
    def pool(self) -> BaseConnectionPool:
        """커넥션 풀을 반환한다. connect 이전에는 RuntimeError를 발생시킨다."""

    @property
    @abstractmethod
    def migrations(self) -> Sequence[Migration]:
        """방언에 맞는 스키마 마이그레이션 목록을 반환한다."""

    @property
    @abstractmethod
    def migration_table_ddl(self) -> str:
        """마이그레이션 기록 테이블 DDL을 반환한다."""

    @abstractmethod
    def connect(self) -> None:
        """커넥션 풀을 초기화한다."""

    @abstractmethod
    def close(self) -> None:
        """커넥션 풀을 종료한다."""

    @abstractmethod
    def create_session(
        self,
        connection: Any,
        cancellation: Optional[CancellationToken] = None,
    ) -> BaseSession:
        """빌린 커넥션 위에 세션을 만든다."""
