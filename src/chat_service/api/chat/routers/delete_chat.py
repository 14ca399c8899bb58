"""
목적: 채팅 삭제 라우터를 제공한다.
설명: 채팅과 소속 메시지를 삭제하고 본문 없는 204를 반환한다.
디자인 패턴: 라우터 패턴
참조: src/chat_service/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from chat_service.api.chat.models import ErrorResponse
from chat_service.api.chat.routers.common import ChatIdPath, to_http_exception
from chat_service.api.chat.services import get_cancellation_token, get_chat_service
from chat_service.api.const import CHAT_API_DETAIL_PATH
from chat_service.shared.chat import ChatService
from chat_service.shared.exceptions import BaseAppException
from chat_service.shared.runtime import CancellationToken

router = APIRouter()


@router.delete(
    CHAT_API_DETAIL_PATH,
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="채팅을 삭제합니다.",
)
def delete_chat(
    chat_id: ChatIdPath,
    service: ChatService = Depends(get_chat_service),
    cancellation: CancellationToken = Depends(get_cancellation_token),
) -> Response:
    try:
        service.delete_chat(chat_id, cancellation=cancellation)
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return Response(status_code=status.HTTP_204_NO_CONTENT)
