"""
목적: 공통 DB 클라이언트를 제공한다.
설명: 엔진을 주입받아 연결 수명주기, 마이그레이션, 트랜잭션 범위를 하나의 진입점으로 묶는다.
      트랜잭션은 성공 시 커밋, 예외 시 롤백 후 원래 예외를 다시 발생시킨다.
디자인 패턴: 파사드, 컨텍스트 매니저
참조: src/chat_service/integrations/db/base/engine.py, src/chat_service/integrations/db/migrations.py
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from chat_service.integrations.db.base.engine import BaseDBEngine
from chat_service.integrations.db.base.session import BaseSession
from chat_service.integrations.db.migrations import MigrationRunner
from chat_service.shared.logging import Logger, create_default_logger
from chat_service.shared.runtime import CancellationToken


class DBClient:
    """공통 DB 클라이언트.

    Args:
        engine: DB 엔진.
        logger: 로거. 생략하면 기본 로거를 사용한다.
        pool_timeout: 커넥션 획득 대기 시간(초). None이면 무한 대기.
    """

    def __init__(
        self,
        engine: BaseDBEngine,
        logger: Optional[Logger] = None,
        pool_timeout: Optional[float] = 30.0,
    ) -> None:
        self._engine = engine
        self._logger = logger or create_default_logger("DBClient")
        self._pool_timeout = pool_timeout

    @property
    def engine(self) -> BaseDBEngine:
        """내부 엔진을 반환한다."""

        return self._engine

    def connect(self) -> None:
        """엔진 연결을 초기화한다."""

        self._engine.connect()

    def close(self) -> None:
        """엔진 연결을 종료한다."""

        self._engine.close()

    def migrate(self) -> int:
        """미적용 스키마 마이그레이션을 적용하고 적용한 개수를 반환한다."""

        runner = MigrationRunner(
            self._engine,
            lambda: self.transaction(write=True),
            self._logger,
        )
        return runner.run()

    def current_version(self) -> int:
        """적용된 최신 스키마 버전을 반환한다."""

        runner = MigrationRunner(
            self._engine,
            lambda: self.transaction(write=True),
            self._logger,
        )
        return runner.current_version()

    @contextmanager
    def transaction(
        self,
        write: bool = False,
        cancellation: Optional[CancellationToken] = None,
    ) -> Iterator[BaseSession]:
        """트랜잭션 세션을 연다.

        블록이 정상 종료되면 커밋하고, 예외가 발생하면 롤백한 뒤 그 예외를 그대로 전파한다.
        롤백 자체가 실패해도 원래 예외를 전파한다.

        Args:
            write: 쓰기 트랜잭션 여부. 참이면 시작 시점에 쓰기 잠금을 확보한다.
            cancellation: 취소 토큰. 문장 실행과 커밋 직전에 확인한다.
        """

        with self._engine.pool.connection(timeout=self._pool_timeout) as connection:
            session = self._engine.create_session(connection, cancellation)
            session.begin(write=write)
            try:
                yield session
            except BaseException as error:
                self._rollback_quietly(session, error)
                raise
            try:
                session.commit()
            except BaseException as error:
                self._rollback_quietly(session, error)
                raise

    def _rollback_quietly(self, session: BaseSession, cause: BaseException) -> None:
        try:
            session.rollback()
        except Exception as rollback_error:
            self._logger.error(
                f"트랜잭션 롤백에 실패했습니다: {rollback_error}",
                cause=repr(cause),
            )
