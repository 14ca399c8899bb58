"""
목적: Chat API 모델 공개 API를 제공한다.
설명: 요청/응답/오류 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/api/chat/models/chat.py, src/chat_service/api/chat/models/message.py
"""

from chat_service.api.chat.models.chat import ChatResponse, CreateChatRequest
from chat_service.api.chat.models.error import ErrorResponse
from chat_service.api.chat.models.message import CreateMessageRequest, MessageResponse

__all__ = [
    "ChatResponse",
    "CreateChatRequest",
    "CreateMessageRequest",
    "ErrorResponse",
    "MessageResponse",
]
