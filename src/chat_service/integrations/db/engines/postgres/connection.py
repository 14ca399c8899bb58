"""
목적: PostgreSQL 커넥션 풀을 제공한다.
설명: psycopg2 ThreadedConnectionPool을 세마포어로 감싸 풀이 가득 찼을 때 제한 시간 동안 대기하게 한다.
디자인 패턴: 오브젝트 풀, 매니저 패턴
참조: src/chat_service/integrations/db/engines/postgres/engine.py, src/chat_service/integrations/db/base/pool.py
"""

from __future__ import annotations

import threading
from typing import Any, Optional

import psycopg2
from psycopg2 import extensions
from psycopg2.pool import ThreadedConnectionPool

from chat_service.integrations.db.base.errors import ConnectionPoolTimeoutError, StorageError
from chat_service.integrations.db.base.pool import BaseConnectionPool, ConnectionRecycler
from chat_service.shared.logging import Logger


class PostgresConnectionPool(BaseConnectionPool):
    """PostgreSQL 커넥션 풀.

    커넥션은 autocommit 모드로 열고 세션이 BEGIN/COMMIT을 직접 실행한다.

    Args:
        max_idle_seconds: 유휴 커넥션을 닫기까지의 시간(초). None이면 제한 없음.
        max_lifetime_seconds: 커넥션 최대 수명(초). None이면 제한 없음.
    """

    def __init__(
        self,
        dsn: str,
        logger: Logger,
        max_size: int = 20,
        min_size: int = 0,
        max_idle_seconds: Optional[float] = None,
        max_lifetime_seconds: Optional[float] = None,
    ) -> None:
        self._dsn = dsn
        self._logger = logger
        self._max_size = max(1, max_size)
        self._slots = threading.BoundedSemaphore(self._max_size)
        self._recycler = ConnectionRecycler(max_idle_seconds, max_lifetime_seconds)
        try:
            self._pool = ThreadedConnectionPool(
                max(0, min(min_size, self._max_size)), self._max_size, dsn
            )
        except psycopg2.Error as error:
            raise StorageError("PostgreSQL 커넥션 풀 생성에 실패했습니다.", original=error) from error
        self._closed = False

    @property
    def max_size(self) -> int:
        return self._max_size

    def acquire(self, timeout: Optional[float] = None) -> Any:
        if self._closed:
            raise RuntimeError("PostgreSQL 커넥션 풀이 종료되었습니다.")
        if not self._slots.acquire(timeout=timeout):
            raise ConnectionPoolTimeoutError(
                "PostgreSQL 커넥션을 제한 시간 안에 얻지 못했습니다.",
                timeout=timeout,
                max_size=self._max_size,
            )
        try:
            connection = self._checkout()
            if not connection.autocommit:
                connection.autocommit = True
            return connection
        except psycopg2.Error as error:
            self._slots.release()
            raise StorageError("PostgreSQL 커넥션 획득에 실패했습니다.", original=error) from error
        except BaseException:
            self._slots.release()
            raise

    def release(self, connection: Any, discard: bool = False) -> None:
        try:
            close = discard or bool(connection.closed)
            if not close and self._has_open_transaction(connection):
                close = not self._reset(connection)
            self._recycler.touch(connection)
            close = close or self._recycler.is_expired(connection)
            if close or self._closed:
                self._recycler.forget(connection)
            if not self._closed:
                self._pool.putconn(connection, close=close)
            else:
                connection.close()
        finally:
            self._slots.release()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pool.closeall()
        self._logger.info("PostgreSQL 커넥션 풀이 종료되었습니다.")

    def _checkout(self) -> Any:
        """만료되지 않은 커넥션을 꺼낸다. 만료된 유휴 커넥션은 닫고 다시 꺼낸다."""

        for _ in range(self._max_size + 1):
            connection = self._pool.getconn()
            if connection.closed or self._recycler.is_expired(connection):
                self._recycler.forget(connection)
                self._pool.putconn(connection, close=True)
                continue
            self._recycler.track(connection)
            return connection
        raise StorageError("PostgreSQL 커넥션을 교체하지 못했습니다.")

    def _should_discard(self, connection: Any) -> bool:
        return bool(connection.closed)

    @staticmethod
    def _has_open_transaction(connection: Any) -> bool:
        return connection.info.transaction_status != extensions.TRANSACTION_STATUS_IDLE

    def _reset(self, connection: Any) -> bool:
        try:
            with connection.cursor() as cursor:
                cursor.execute("ROLLBACK")
            return True
        except psycopg2.Error as error:
            self._logger.warning(f"PostgreSQL 커넥션 초기화 실패, 폐기합니다: {error}")
            return False
