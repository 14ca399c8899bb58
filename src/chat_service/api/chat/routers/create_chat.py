"""
목적: 채팅 생성 라우터를 제공한다.
설명: 제목을 검증한 뒤 같은 제목이 없을 때만 채팅을 생성한다.
디자인 패턴: 라우터 패턴
참조: src/chat_service/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from chat_service.api.chat.models import ChatResponse, CreateChatRequest, ErrorResponse
from chat_service.api.chat.routers.common import to_http_exception
from chat_service.api.chat.services import get_cancellation_token, get_chat_service
from chat_service.api.const import CHAT_API_CREATE_PATH
from chat_service.shared.chat import ChatService
from chat_service.shared.exceptions import BaseAppException
from chat_service.shared.runtime import CancellationToken

router = APIRouter()


@router.post(
    CHAT_API_CREATE_PATH,
    response_model=ChatResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="채팅을 생성합니다.",
)
def create_chat(
    request: CreateChatRequest,
    service: ChatService = Depends(get_chat_service),
    cancellation: CancellationToken = Depends(get_cancellation_token),
) -> ChatResponse:
    """빈 메시지 목록을 가진 새 채팅을 반환한다."""

    try:
        chat = service.create_chat(request.title, cancellation=cancellation)
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return ChatResponse.from_entity(chat)
