"""
목적: Chat HTTP API의 요청 검증, 상태 코드, 오류 응답 형식을 검증한다.
설명: TestClient로 앱 수명주기(연결/마이그레이션/종료)를 실행하고 tmp_path SQLite DB에 요청을 보낸다.
디자인 패턴: 테스트 케이스
참조: src/chat_service/api/main.py, src/chat_service/api/chat/routers/router.py
"""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from chat_service.api.chat.services import CHAT_API_STATE_KEY
from chat_service.api.main import create_app
from chat_service.shared.chat import ChatService
from chat_service.shared.config import AppSettings
from chat_service.integrations.db import StorageError

_LOGGER = logging.getLogger("tests.api")


@pytest.fixture
def client(sqlite_path, test_logger):
    settings = AppSettings(sqlite_path=str(sqlite_path), request_timeout_seconds=5)
    app = create_app(settings=settings, logger=test_logger)
    with TestClient(app) as test_client:
        yield test_client


def _create_chat(client: TestClient, title: str) -> dict:
    response = client.post("/chats", json={"title": title})
    assert response.status_code == 201, response.text
    return response.json()


def test_health_check(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_chat_trims_title_and_returns_empty_messages(client) -> None:
    body = _create_chat(client, "  Project X  ")

    assert body["id"] == 1
    assert body["title"] == "Project X"
    assert body["messages"] == []
    assert body["created_at"]


def test_duplicate_title_returns_conflict(client) -> None:
    _create_chat(client, "Project X")

    response = client.post("/chats", json={"title": "Project X"})

    assert response.status_code == 409
    assert response.json() == {
        "error": "CONFLICT",
        "message": "Chat with title Project X already exists",
    }


@pytest.mark.parametrize(
    "payload",
    [{"title": "   "}, {"title": ""}, {}, {"title": "x" * 201}],
)
def test_invalid_title_length_returns_bad_request(client, payload) -> None:
    response = client.post("/chats", json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "error": "BAD_REQUEST",
        "message": "Title length must be between 1 and 200",
    }


def test_title_of_max_length_is_accepted(client) -> None:
    body = _create_chat(client, "x" * 200)

    assert len(body["title"]) == 200


@pytest.mark.parametrize(
    "content",
    ['{"title": ', '{"title": 5}', "[]", ""],
)
def test_malformed_body_returns_invalid_json(client, content) -> None:
    response = client.post(
        "/chats",
        content=content,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "BAD_REQUEST", "message": "Invalid json"}


@pytest.mark.parametrize(
    ("method", "path"),
    [("get", "/chats/abc"), ("delete", "/chats/abc"), ("post", "/chats/abc/messages")],
)
def test_non_integer_id_returns_bad_request(client, method, path) -> None:
    kwargs = {"json": {"text": "hi"}} if method == "post" else {}

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 400
    assert response.json() == {
        "error": "BAD_REQUEST",
        "message": "ID path param must be integer",
    }


@pytest.mark.parametrize("chat_id", ["9999999999999999999999999", str(2**63), str(-(2**63) - 1)])
@pytest.mark.parametrize("method", ["get", "delete", "post"])
def test_id_beyond_64_bits_returns_bad_request(client, method, chat_id) -> None:
    """64비트 범위를 벗어난 ID는 저장소까지 가지 않고 400으로 거절된다."""

    path = f"/chats/{chat_id}/messages" if method == "post" else f"/chats/{chat_id}"
    kwargs = {"json": {"text": "hi"}} if method == "post" else {}

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 400
    assert response.json() == {
        "error": "BAD_REQUEST",
        "message": "ID path param must be integer",
    }


@pytest.mark.parametrize("chat_id", [2**63 - 1, -(2**63)])
def test_id_at_64_bit_bounds_reaches_storage(client, chat_id) -> None:
    response = client.get(f"/chats/{chat_id}")

    assert response.status_code == 404
    assert response.json() == {"error": "NOT_FOUND", "message": "Chat not found"}


def test_get_chat_returns_latest_messages(client) -> None:
    chat = _create_chat(client, "history")
    ids = []
    for text in ("t1", "t2", "t3"):
        response = client.post(f"/chats/{chat['id']}/messages", json={"text": text})
        assert response.status_code == 201
        ids.append(response.json()["id"])

    response = client.get(f"/chats/{chat['id']}", params={"limit": 2})

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["messages"]] == [ids[2], ids[1]]
    assert [item["text"] for item in body["messages"]] == ["t3", "t2"]


@pytest.mark.parametrize("limit", ["abc", "0", "-1", "101", "2.5"])
def test_out_of_range_limit_falls_back_to_default(client, limit) -> None:
    chat = _create_chat(client, f"limit-{limit}")
    for index in range(25):
        client.post(f"/chats/{chat['id']}/messages", json={"text": f"m{index}"})

    response = client.get(f"/chats/{chat['id']}", params={"limit": limit})

    assert response.status_code == 200
    assert len(response.json()["messages"]) == 20


def test_missing_chat_returns_not_found(client) -> None:
    response = client.get("/chats/999")

    assert response.status_code == 404
    assert response.json() == {"error": "NOT_FOUND", "message": "Chat not found"}


def test_delete_chat_then_get_returns_not_found(client) -> None:
    chat = _create_chat(client, "short-lived")
    client.post(f"/chats/{chat['id']}/messages", json={"text": "bye"})

    response = client.delete(f"/chats/{chat['id']}")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/chats/{chat['id']}").status_code == 404
    assert client.delete(f"/chats/{chat['id']}").status_code == 404


def test_create_message_returns_created_message(client) -> None:
    chat = _create_chat(client, "messages")

    response = client.post(f"/chats/{chat['id']}/messages", json={"text": "  spaced  "})

    assert response.status_code == 201
    body = response.json()
    assert body["chat_id"] == chat["id"]
    assert body["text"] == "  spaced  "
    assert body["created_at"]


def test_create_message_for_missing_chat_returns_not_found(client) -> None:
    response = client.post("/chats/999/messages", json={"text": "hi"})

    assert response.status_code == 404
    assert response.json() == {"error": "NOT_FOUND", "message": "Chat not found"}


@pytest.mark.parametrize("payload", [{"text": ""}, {}, {"text": "x" * 5001}])
def test_invalid_message_length_returns_bad_request(client, payload) -> None:
    chat = _create_chat(client, "validation")

    response = client.post(f"/chats/{chat['id']}/messages", json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "error": "BAD_REQUEST",
        "message": "Message length must be between 1 and 5000",
    }


class _BrokenChatRepository:
    def create_if_not_exists(self, title, cancellation=None):
        raise StorageError("connection reset")

    def get_by_id(self, chat_id, limit, cancellation=None):
        raise StorageError("connection reset")

    def delete_by_id(self, chat_id, cancellation=None):
        raise StorageError("connection reset")


def test_storage_failure_returns_internal_error_without_details(client, test_logger) -> None:
    services = getattr(client.app.state, CHAT_API_STATE_KEY)
    services.chat_service = ChatService(_BrokenChatRepository(), logger=test_logger)

    response = client.post("/chats", json={"title": "boom"})

    _LOGGER.info("내부 오류 응답 | %s", response.text)
    assert response.status_code == 500
    assert response.json() == {
        "error": "INTERNAL_SERVER_ERROR",
        "message": "Internal Server Error",
    }
    assert "connection reset" not in response.text


def test_unknown_route_uses_error_shape(client) -> None:
    response = client.get("/unknown")

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"
