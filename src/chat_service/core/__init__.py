"""
목적: 코어 모듈 공개 API를 제공한다.
설명: Chat 도메인 엔티티를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/core/chat/models/entities.py
"""

from chat_service.core.chat import Chat, Message

__all__ = ["Chat", "Message"]
