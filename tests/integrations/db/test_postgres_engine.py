"""
목적: PostgreSQL 엔진의 예외 분류와 트랜잭션 동작을 검증한다.
설명: 서버 없이 가능한 예외 분류는 항상 실행하고, 실제 서버 통합 테스트는 POSTGRES_DSN이 있을 때만 실행한다.
디자인 패턴: 테스트 케이스
참조: src/chat_service/integrations/db/engines/postgres/session.py
"""

from __future__ import annotations

import logging
import time
import uuid
from types import SimpleNamespace

import pytest
from psycopg2 import errors, extensions

from chat_service.integrations.db import (
    ConstraintKind,
    ConstraintViolationError,
    DBClient,
    OperationCancelledError,
    StorageError,
)
from chat_service.integrations.db.engines.postgres import PostgresEngine, PostgresSession
from chat_service.integrations.db.engines.postgres.connection import PostgresConnectionPool
from chat_service.integrations.db.engines.postgres.session import classify_integrity_error
from chat_service.shared.chat import ChatRepository, MessageRepository
from chat_service.shared.chat.repositories import EntityAlreadyExistsError, ReferenceNotFoundError

_LOGGER = logging.getLogger("tests.db.postgres")


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (errors.UniqueViolation("dup"), ConstraintKind.UNIQUE),
        (errors.ForeignKeyViolation("fk"), ConstraintKind.FOREIGN_KEY),
        (errors.NotNullViolation("nn"), ConstraintKind.NOT_NULL),
        (errors.CheckViolation("check"), ConstraintKind.CHECK),
        (errors.ExclusionViolation("excl"), ConstraintKind.OTHER),
    ],
)
def test_integrity_errors_are_classified_by_type(error, kind) -> None:
    assert classify_integrity_error(error) == kind


def test_translate_error_maps_driver_errors() -> None:
    """드라이버 예외를 저장소 예외로 변환한다."""

    session = PostgresSession(connection=None)

    violation = session._translate_error(errors.UniqueViolation("dup"))
    cancelled = session._translate_error(errors.QueryCanceled("timeout"))
    other = session._translate_error(errors.UndefinedTable("missing"))

    assert isinstance(violation, ConstraintViolationError)
    assert violation.kind == ConstraintKind.UNIQUE
    assert isinstance(cancelled, OperationCancelledError)
    assert isinstance(other, StorageError)
    assert not isinstance(other, ConstraintViolationError)


def test_postgres_session_uses_explicit_transactions() -> None:
    session = PostgresSession(connection=None)

    assert session.placeholder == "%s"
    assert session._begin_statement(write=True) == "BEGIN ISOLATION LEVEL READ COMMITTED"
    assert session._begin_statement(write=False) == "BEGIN READ ONLY"


@pytest.fixture
def postgres_client(postgres_dsn, test_logger):
    engine = PostgresEngine(postgres_dsn, logger=test_logger, max_connections=4)
    client = DBClient(engine, logger=test_logger, pool_timeout=10.0)
    client.connect()
    client.migrate()
    yield client
    client.close()


def test_postgres_migrations_are_idempotent(postgres_client) -> None:
    assert postgres_client.migrate() == 0
    assert postgres_client.current_version() == 2


def test_postgres_repository_round_trip(postgres_client, test_logger) -> None:
    """생성, 중복 거절, 메시지 추가, 삭제 후 참조 실패를 실제 서버에서 확인한다."""

    chats = ChatRepository(postgres_client, logger=test_logger)
    messages = MessageRepository(postgres_client, logger=test_logger)
    title = f"pg-{uuid.uuid4()}"

    _LOGGER.info("채팅 생성 | title=%s", title)
    chat = chats.create_if_not_exists(title)
    with pytest.raises(EntityAlreadyExistsError):
        chats.create_if_not_exists(title)

    message = messages.create_message(chat.id, "hello")
    loaded = chats.get_by_id(chat.id, 10)
    assert [item.id for item in loaded.messages] == [message.id]

    chats.delete_by_id(chat.id)
    with pytest.raises(ReferenceNotFoundError):
        messages.create_message(chat.id, "late")


class _FakeConnection:
    def __init__(self) -> None:
        self.closed = 0
        self.autocommit = False
        self.info = SimpleNamespace(transaction_status=extensions.TRANSACTION_STATUS_IDLE)

    def close(self) -> None:
        self.closed = 1


class _FakeThreadedPool:
    """psycopg2 ThreadedConnectionPool의 getconn/putconn만 흉내 낸다."""

    def __init__(self) -> None:
        self.idle: list[_FakeConnection] = []
        self.opened: list[_FakeConnection] = []

    def getconn(self) -> _FakeConnection:
        if self.idle:
            return self.idle.pop()
        connection = _FakeConnection()
        self.opened.append(connection)
        return connection

    def putconn(self, connection: _FakeConnection, close: bool = False) -> None:
        if close:
            connection.close()
        else:
            self.idle.append(connection)

    def closeall(self) -> None:
        for connection in self.idle:
            connection.close()


def _pool_with_fake_driver(test_logger, **limits) -> tuple[PostgresConnectionPool, _FakeThreadedPool]:
    # min_size=0이면 생성 시 서버에 연결하지 않는다.
    pool = PostgresConnectionPool(
        "postgresql://postgres@localhost:1/unused",
        test_logger,
        max_size=2,
        min_size=0,
        **limits,
    )
    fake = _FakeThreadedPool()
    pool._pool = fake
    return pool, fake


def test_postgres_pool_replaces_idle_expired_connection(test_logger) -> None:
    pool, fake = _pool_with_fake_driver(test_logger, max_idle_seconds=0.01)
    try:
        first = pool.acquire()
        assert first.autocommit is True
        pool.release(first)
        time.sleep(0.05)

        second = pool.acquire()
        pool.release(second)

        assert second is not first
        assert first.closed
        assert len(fake.opened) == 2
    finally:
        pool.close()


def test_postgres_pool_closes_connection_past_lifetime_on_release(test_logger) -> None:
    pool, fake = _pool_with_fake_driver(test_logger, max_lifetime_seconds=0.01)
    try:
        connection = pool.acquire()
        time.sleep(0.05)
        pool.release(connection)

        assert connection.closed
        assert fake.idle == []
    finally:
        pool.close()


def test_postgres_pool_reuses_connection_within_limits(test_logger) -> None:
    pool, fake = _pool_with_fake_driver(
        test_logger,
        max_idle_seconds=300,
        max_lifetime_seconds=3600,
    )
    try:
        first = pool.acquire()
        pool.release(first)
        second = pool.acquire()
        pool.release(second)

        assert second is first
        assert len(fake.opened) == 1
    finally:
        pool.close()
