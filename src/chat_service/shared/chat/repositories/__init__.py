"""
목적: Chat 저장소 모듈 공개 API를 제공한다.
설명: 채팅/메시지 저장소와 저장소 예외를 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/shared/chat/repositories/chat_repository.py
"""

from chat_service.shared.chat.repositories.chat_repository import ChatRepository
from chat_service.shared.chat.repositories.errors import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ReferenceNotFoundError,
    RepositoryError,
)
from chat_service.shared.chat.repositories.message_repository import MessageRepository

__all__ = [
    "ChatRepository",
    "EntityAlreadyExistsError",
    "EntityNotFoundError",
    "MessageRepository",
    "ReferenceNotFoundError",
    "RepositoryError",
]
