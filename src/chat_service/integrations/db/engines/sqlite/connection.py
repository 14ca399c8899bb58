"""
목적: SQLite 커넥션 풀을 제공한다.
설명: 트랜잭션마다 커넥션 하나를 빌려주고, 연결 시 외래 키/WAL/busy_timeout PRAGMA를 적용한다.
디자인 패턴: 오브젝트 풀, 매니저 패턴
참조: src/chat_service/integrations/db/engines/sqlite/engine.py, src/chat_service/integrations/db/base/pool.py
"""

from __future__ import annotations

import queue
import sqlite3
import threading
from typing import Optional

from chat_service.integrations.db.base.errors import ConnectionPoolTimeoutError, StorageError
from chat_service.integrations.db.base.pool import BaseConnectionPool, ConnectionRecycler
from chat_service.shared.logging import Logger

MEMORY_DATABASE = ":memory:"


class SqliteConnectionPool(BaseConnectionPool):
    """SQLite 커넥션 풀.

    ``:memory:`` 데이터베이스는 커넥션마다 별도 DB가 되므로 커넥션 1개로 제한하고 교체하지 않는다.

    Args:
        max_idle_seconds: 유휴 커넥션을 닫기까지의 시간(초). None이면 제한 없음.
        max_lifetime_seconds: 커넥션 최대 수명(초). None이면 제한 없음.
    """

    def __init__(
        self,
        database_path: str,
        logger: Logger,
        max_size: int = 5,
        busy_timeout_ms: int = 5000,
        max_idle_seconds: Optional[float] = None,
        max_lifetime_seconds: Optional[float] = None,
    ) -> None:
        self._database_path = database_path
        self._logger = logger
        self._in_memory = database_path == MEMORY_DATABASE
        self._max_size = 1 if self._in_memory else max(1, max_size)
        self._busy_timeout_ms = max(0, busy_timeout_ms)
        self._slots = threading.BoundedSemaphore(self._max_size)
        self._idle: "queue.LifoQueue[sqlite3.Connection]" = queue.LifoQueue()
        self._recycler = (
            ConnectionRecycler()
            if self._in_memory
            else ConnectionRecycler(max_idle_seconds, max_lifetime_seconds)
        )
        self._closed = False

    @property
    def max_size(self) -> int:
        return self._max_size

    def acquire(self, timeout: Optional[float] = None) -> sqlite3.Connection:
        if self._closed:
            raise RuntimeError("SQLite 커넥션 풀이 종료되었습니다.")
        if not self._slots.acquire(timeout=timeout):
            raise ConnectionPoolTimeoutError(
                "SQLite 커넥션을 제한 시간 안에 얻지 못했습니다.",
                timeout=timeout,
                max_size=self._max_size,
            )
        try:
            while True:
                try:
                    connection = self._idle.get_nowait()
                except queue.Empty:
                    break
                if not self._recycler.is_expired(connection):
                    return connection
                self._discard(connection)
            return self._open_connection()
        except BaseException:
            self._slots.release()
            raise

    def release(self, connection: sqlite3.Connection, discard: bool = False) -> None:
        try:
            if connection.in_transaction:
                connection.rollback()
            self._recycler.touch(connection)
            if self._closed:
                self._discard(connection)
            elif not self._in_memory and (discard or self._recycler.is_expired(connection)):
                self._discard(connection)
            else:
                self._idle.put(connection)
        finally:
            self._slots.release()

    def close(self) -> None:
        self._closed = True
        closed = 0
        while True:
            try:
                connection = self._idle.get_nowait()
            except queue.Empty:
                break
            self._discard(connection)
            closed += 1
        self._logger.info(f"SQLite 커넥션 풀이 종료되었습니다. (closed={closed})")

    def _discard(self, connection: sqlite3.Connection) -> None:
        self._recycler.forget(connection)
        connection.close()

    def _open_connection(self) -> sqlite3.Connection:
        try:
            connection = sqlite3.connect(
                self._database_path,
                timeout=self._busy_timeout_ms / 1000.0,
                check_same_thread=False,
                isolation_level=None,
            )
        except sqlite3.Error as error:
            raise StorageError(
                f"SQLite 연결에 실패했습니다: {self._database_path}",
                original=error,
            ) from error
        self._apply_pragmas(connection)
        self._recycler.track(connection)
        self._logger.debug(f"SQLite 커넥션을 열었습니다: {self._database_path}")
        return connection

    def _apply_pragmas(self, connection: sqlite3.Connection) -> None:
        connection.execute("PRAGMA foreign_keys=ON")
        connection.execute(f"PRAGMA busy_timeout={self._busy_timeout_ms}")
        if self._in_memory:
            return
        try:
            connection.execute("PRAGMA journal_mode=WAL")
            connection.execute("PRAGMA synchronous=NORMAL")
        except sqlite3.DatabaseError as error:
            self._logger.warning(f"SQLite PRAGMA 적용 경고: {error}")
