"""
목적: Chat 인터페이스 공개 API를 제공한다.
설명: 저장소 포트 Protocol을 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/shared/chat/interface/ports.py
"""

from chat_service.shared.chat.interface.ports import ChatRepositoryPort, MessageRepositoryPort

__all__ = ["ChatRepositoryPort", "MessageRepositoryPort"]
