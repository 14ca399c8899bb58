"""
목적: Chat 서비스 모듈 공개 API를 제공한다.
설명: 채팅/메시지 서비스와 서비스 예외를 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/shared/chat/services/chat_service.py
"""

from chat_service.shared.chat.services.chat_service import ChatService
from chat_service.shared.chat.services.errors import (
    ChatAlreadyExistsError,
    ChatNotFoundError,
    InternalServiceError,
    MessageChatNotFoundError,
    ServiceError,
)
from chat_service.shared.chat.services.message_service import MessageService

__all__ = [
    "ChatAlreadyExistsError",
    "ChatNotFoundError",
    "ChatService",
    "InternalServiceError",
    "MessageChatNotFoundError",
    "MessageService",
    "ServiceError",
]
