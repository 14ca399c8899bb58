"""
목적: Chat API 서비스 공개 API를 제공한다.
설명: 앱 상태에 보관된 서비스 컨테이너에서 서비스를 꺼내는 FastAPI 의존성 함수를 노출한다.
디자인 패턴: 의존성 주입
참조: src/chat_service/api/chat/services/container.py
"""

from __future__ import annotations

from fastapi import Request

from chat_service.api.chat.services.container import ChatAPIServices, build_chat_api_services
from chat_service.shared.chat import ChatService, MessageService
from chat_service.shared.runtime import CancellationToken

CHAT_API_STATE_KEY = "chat_api"


def get_chat_api_services(request: Request) -> ChatAPIServices:
    """앱 상태의 서비스 컨테이너를 반환한다."""

    services = getattr(request.app.state, CHAT_API_STATE_KEY, None)
    if services is None:
        raise RuntimeError("Chat API 서비스가 초기화되지 않았습니다.")
    return services


def get_chat_service(request: Request) -> ChatService:
    return get_chat_api_services(request).chat_service


def get_message_service(request: Request) -> MessageService:
    return get_chat_api_services(request).message_service


def get_cancellation_token(request: Request) -> CancellationToken:
    """요청 마감 시한을 가진 취소 토큰을 만든다."""

    return CancellationToken(get_chat_api_services(request).request_timeout_seconds)


__all__ = [
    "CHAT_API_STATE_KEY",
    "ChatAPIServices",
    "build_chat_api_services",
    "get_cancellation_token",
    "get_chat_api_services",
    "get_chat_service",
    "get_message_service",
]
