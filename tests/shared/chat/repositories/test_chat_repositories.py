"""
목적: 채팅/메시지 저장소의 트랜잭션 불변식을 검증한다.
설명: 제목 유일성(동시 생성 포함), 부모 존재 확인, 최신순 조회, 삭제 의미와 연쇄 삭제를 SQLite 파일 DB로 확인한다.
디자인 패턴: 테스트 케이스
참조: src/chat_service/shared/chat/repositories/chat_repository.py, src/chat_service/shared/chat/repositories/message_repository.py
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from chat_service.integrations.db import OperationCancelledError
from chat_service.integrations.db.engines.sqlite import SqliteSession
from chat_service.shared.chat.repositories import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ReferenceNotFoundError,
)
from chat_service.shared.runtime import CancellationToken

_LOGGER = logging.getLogger("tests.repositories")


def _count(db_client, table: str, **filters) -> int:
    with db_client.transaction() as session:
        return session.count(table, filters)


def test_create_chat_then_duplicate_is_rejected(chat_repository) -> None:
    """같은 제목으로 두 번째 생성하면 EntityAlreadyExistsError가 발생한다."""

    chat = chat_repository.create_if_not_exists("Project X")

    assert chat.id == 1
    assert chat.title == "Project X"
    assert chat.messages == []
    assert chat.created_at.tzinfo is not None

    with pytest.raises(EntityAlreadyExistsError):
        chat_repository.create_if_not_exists("Project X")


def test_concurrent_creates_yield_single_winner(chat_repository, db_client) -> None:
    """동시에 같은 제목을 생성하면 정확히 하나만 성공한다."""

    workers = 8
    barrier = threading.Barrier(workers)

    def create() -> str:
        barrier.wait()
        try:
            chat_repository.create_if_not_exists("race")
        except EntityAlreadyExistsError:
            return "exists"
        return "created"

    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(lambda _: create(), range(workers)))

    _LOGGER.info("동시 생성 결과 | %s", results)
    assert results.count("created") == 1
    assert results.count("exists") == workers - 1
    assert _count(db_client, "chats", title="race") == 1


def test_unique_constraint_is_the_final_guard(chat_repository, monkeypatch) -> None:
    """사전 확인을 통과해도 UNIQUE 위반은 EntityAlreadyExistsError로 분류된다."""

    chat_repository.create_if_not_exists("guarded")
    monkeypatch.setattr(SqliteSession, "count", lambda self, table, filters: 0)

    with pytest.raises(EntityAlreadyExistsError) as exc_info:
        chat_repository.create_if_not_exists("guarded")
    assert exc_info.value.original is not None


def test_create_message_for_missing_chat_is_rejected(message_repository, db_client) -> None:
    with pytest.raises(ReferenceNotFoundError):
        message_repository.create_message(999, "hi")
    assert _count(db_client, "messages") == 0


def test_foreign_key_is_the_final_guard(message_repository, monkeypatch, db_client) -> None:
    """부모 확인 이후 부모가 사라진 경쟁도 ReferenceNotFoundError로 분류된다."""

    monkeypatch.setattr(SqliteSession, "count", lambda self, table, filters: 1)

    with pytest.raises(ReferenceNotFoundError) as exc_info:
        message_repository.create_message(999, "late")
    assert exc_info.value.original is not None
    monkeypatch.undo()
    assert _count(db_client, "messages") == 0


def test_get_chat_returns_latest_messages_first(chat_repository, message_repository) -> None:
    chat = chat_repository.create_if_not_exists("history")
    first = message_repository.create_message(chat.id, "t1")
    second = message_repository.create_message(chat.id, "t2")
    third = message_repository.create_message(chat.id, "t3")

    loaded = chat_repository.get_by_id(chat.id, 2)

    assert [item.id for item in loaded.messages] == [third.id, second.id]
    assert first.id not in [item.id for item in loaded.messages]
    assert loaded.messages[0].created_at >= loaded.messages[1].created_at


def test_get_chat_with_zero_limit_returns_empty_list(chat_repository, message_repository) -> None:
    chat = chat_repository.create_if_not_exists("quiet")
    message_repository.create_message(chat.id, "hidden")

    loaded = chat_repository.get_by_id(chat.id, 0)

    assert loaded.messages == []


def test_get_chat_rejects_negative_limit(chat_repository) -> None:
    chat = chat_repository.create_if_not_exists("negative")
    with pytest.raises(ValueError):
        chat_repository.get_by_id(chat.id, -1)


def test_get_missing_chat_raises_not_found(chat_repository) -> None:
    with pytest.raises(EntityNotFoundError):
        chat_repository.get_by_id(42, 20)


def test_delete_then_get_raises_not_found(chat_repository) -> None:
    chat = chat_repository.create_if_not_exists("short-lived")

    chat_repository.delete_by_id(chat.id)

    with pytest.raises(EntityNotFoundError):
        chat_repository.get_by_id(chat.id, 20)


def test_delete_missing_chat_raises_not_found(chat_repository, db_client) -> None:
    keep = chat_repository.create_if_not_exists("keep")

    with pytest.raises(EntityNotFoundError):
        chat_repository.delete_by_id(keep.id + 100)
    assert _count(db_client, "chats") == 1


def test_delete_cascades_messages(chat_repository, message_repository, db_client) -> None:
    chat = chat_repository.create_if_not_exists("with-messages")
    message_repository.create_message(chat.id, "one")
    message_repository.create_message(chat.id, "two")

    chat_repository.delete_by_id(chat.id)

    assert _count(db_client, "messages", chat_id=chat.id) == 0
    with pytest.raises(ReferenceNotFoundError):
        message_repository.create_message(chat.id, "after delete")


def test_cancelled_create_leaves_no_rows(chat_repository, db_client) -> None:
    token = CancellationToken()
    token.cancel()

    with pytest.raises(OperationCancelledError):
        chat_repository.create_if_not_exists("cancelled", cancellation=token)
    assert _count(db_client, "chats") == 0
