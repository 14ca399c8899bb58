"""
목적: Chat 공유 모듈 공개 API를 제공한다.
설명: 저장소 포트, 저장소 구현체, 서비스를 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/shared/chat/services/chat_service.py
"""

from chat_service.shared.chat.interface import ChatRepositoryPort, MessageRepositoryPort
from chat_service.shared.chat.repositories import ChatRepository, MessageRepository
from chat_service.shared.chat.services import ChatService, MessageService

__all__ = [
    "ChatRepository",
    "ChatRepositoryPort",
    "ChatService",
    "MessageRepository",
    "MessageRepositoryPort",
    "MessageService",
]
