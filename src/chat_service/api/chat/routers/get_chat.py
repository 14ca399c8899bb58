"""
목적: 채팅 조회 라우터를 제공한다.
설명: 채팅과 최신순 메시지 최대 limit건을 함께 반환한다.
디자인 패턴: 라우터 패턴
참조: src/chat_service/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from chat_service.api.chat.models import ChatResponse, ErrorResponse
from chat_service.api.chat.routers.common import (
    ChatIdPath,
    resolve_message_limit,
    to_http_exception,
)
from chat_service.api.chat.services import get_cancellation_token, get_chat_service
from chat_service.api.const import CHAT_API_DETAIL_PATH
from chat_service.shared.chat import ChatService
from chat_service.shared.exceptions import BaseAppException
from chat_service.shared.runtime import CancellationToken

router = APIRouter()


@router.get(
    CHAT_API_DETAIL_PATH,
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="채팅과 최근 메시지를 조회합니다.",
)
def get_chat(
    chat_id: ChatIdPath,
    limit: str | None = Query(default=None, description="메시지 개수(1~100, 기본 20)"),
    service: ChatService = Depends(get_chat_service),
    cancellation: CancellationToken = Depends(get_cancellation_token),
) -> ChatResponse:
    try:
        chat = service.get_chat(chat_id, resolve_message_limit(limit), cancellation=cancellation)
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return ChatResponse.from_entity(chat)
