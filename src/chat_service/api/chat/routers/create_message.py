"""
목적: 메시지 생성 라우터를 제공한다.
설명: 본문을 검증한 뒤 부모 채팅이 있을 때만 메시지를 추가한다.
디자인 패턴: 라우터 패턴
참조: src/chat_service/shared/chat/services/message_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from chat_service.api.chat.models import CreateMessageRequest, ErrorResponse, MessageResponse
from chat_service.api.chat.routers.common import ChatIdPath, to_http_exception
from chat_service.api.chat.services import get_cancellation_token, get_message_service
from chat_service.api.const import CHAT_API_MESSAGES_PATH
from chat_service.shared.chat import MessageService
from chat_service.shared.exceptions import BaseAppException
from chat_service.shared.runtime import CancellationToken

router = APIRouter()


@router.post(
    CHAT_API_MESSAGES_PATH,
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="채팅에 메시지를 추가합니다.",
)
def create_message(
    chat_id: ChatIdPath,
    request: CreateMessageRequest,
    service: MessageService = Depends(get_message_service),
    cancellation: CancellationToken = Depends(get_cancellation_token),
) -> MessageResponse:
    try:
        message = service.create_message(chat_id, request.text, cancellation=cancellation)
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return MessageResponse.from_entity(message)
