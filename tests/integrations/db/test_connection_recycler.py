"""
목적: 커넥션 교체 판단 규칙을 검증한다.
설명: 가짜 시계로 유휴 시간/최대 수명 경과와 추적 해제를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/chat_service/integrations/db/base/pool.py
"""

from __future__ import annotations

from chat_service.integrations.db.base.pool import ConnectionRecycler


class _FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_idle_limit_counts_from_last_use() -> None:
    clock = _FakeClock()
    recycler = ConnectionRecycler(max_idle_seconds=10, clock=clock)
    connection = object()
    recycler.track(connection)

    clock.now += 8
    recycler.touch(connection)
    clock.now += 8

    assert not recycler.is_expired(connection)

    clock.now += 2
    assert recycler.is_expired(connection)


def test_lifetime_limit_ignores_recent_use() -> None:
    clock = _FakeClock()
    recycler = ConnectionRecycler(max_idle_seconds=10, max_lifetime_seconds=30, clock=clock)
    connection = object()
    recycler.track(connection)

    for _ in range(3):
        clock.now += 9
        recycler.touch(connection)
    assert not recycler.is_expired(connection)

    clock.now += 3
    recycler.touch(connection)
    assert recycler.is_expired(connection)


def test_track_keeps_original_creation_time() -> None:
    clock = _FakeClock()
    recycler = ConnectionRecycler(max_lifetime_seconds=5, clock=clock)
    connection = object()
    recycler.track(connection)

    clock.now += 5
    recycler.track(connection)

    assert recycler.is_expired(connection)


def test_no_limits_or_untracked_connection_never_expires() -> None:
    clock = _FakeClock()
    recycler = ConnectionRecycler(clock=clock)
    tracked = object()
    recycler.track(tracked)
    clock.now += 1_000_000

    assert not recycler.is_expired(tracked)
    assert not ConnectionRecycler(max_idle_seconds=1, clock=clock).is_expired(object())


def test_forget_stops_tracking() -> None:
    clock = _FakeClock()
    recycler = ConnectionRecycler(max_idle_seconds=1, clock=clock)
    connection = object()
    recycler.track(connection)
    clock.now += 2
    assert recycler.is_expired(connection)

    recycler.forget(connection)

    assert not recycler.is_expired(connection)
