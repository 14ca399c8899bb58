"""
목적: DB 커넥션 풀 추상화를 제공한다.
설명: 커넥션 획득/반환과 with 문 사용을 위한 인터페이스, 유휴/수명 기준 커넥션 교체 판단을 정의한다.
디자인 패턴: 오브젝트 풀
참조: src/chat_service/integrations/db/base/session.py
"""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, Tuple


class ConnectionRecycler:
    """커넥션별 생성/마지막 사용 시각을 추적해 교체 시점을 판단한다.

    Args:
        max_idle_seconds: 유휴 상태로 둘 수 있는 최대 시간(초). None이면 제한 없음.
        max_lifetime_seconds: 커넥션 최대 수명(초). None이면 제한 없음.
        clock: 단조 시계 함수.
    """

    def __init__(
        self,
        max_idle_seconds: Optional[float] = None,
        max_lifetime_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_idle = max_idle_seconds
        self._max_lifetime = max_lifetime_seconds
        self._clock = clock
        self._stamps: Dict[int, Tuple[float, float]] = {}
        self._lock = threading.Lock()

    def track(self, connection: Any) -> None:
        """처음 보는 커넥션이면 생성 시각을 기록한다."""

        now = self._clock()
        with self._lock:
            self._stamps.setdefault(id(connection), (now, now))

    def touch(self, connection: Any) -> None:
        """마지막 사용 시각을 갱신한다."""

        now = self._clock()
        with self._lock:
            created, _ = self._stamps.get(id(connection), (now, now))
            self._stamps[id(connection)] = (created, now)

    def forget(self, connection: Any) -> None:
        with self._lock:
            self._stamps.pop(id(connection), None)

    def is_expired(self, connection: Any) -> bool:
        """수명 또는 유휴 시간 제한을 넘겼는지 반환한다."""

        with self._lock:
            stamps = self._stamps.get(id(connection))
        if stamps is None:
            return False
        created, last_used = stamps
        now = self._clock()
        if self._max_lifetime is not None and now - created >= self._max_lifetime:
            return True
        return self._max_idle is not None and now - last_used >= self._max_idle


class BaseConnectionPool(ABC):
    """커넥션 풀 인터페이스."""

    @property
    @abstractmethod
    def max_size(self) -> int:
        """동시에 빌려줄 수 있는 최대 커넥션 수를 반환한다."""

    @abstractmethod
    def acquire(self, timeout: Optional[float] = None) -> Any:
        """커넥션을 획득한다. 제한 시간을 넘기면 ConnectionPoolTimeoutError를 발생시킨다."""

    @abstractmethod
    def release(self, connection: Any, discard: bool = False) -> None:
        """커넥션을 반환한다. discard가 참이면 재사용하지 않고 닫는다."""

    @abstractmethod
    def close(self) -> None:
        """유휴 커넥션을 모두 닫는다."""

    @contextmanager
    def connection(self, timeout: Optional[float] = None) -> Iterator[Any]:
        """커넥션 하나를 빌려 블록 종료 시 반환한다."""

        connection = self.acquire(timeout=timeout)
        discard = False
        try:
            yield connection
        except BaseException:
            discard = self._should_discard(connection)
            raise
        finally:
            self.release(connection, discard=discard)

    def _should_discard(self, connection: Any) -> bool:
        return False
