"""
목적: Chat 저장소 계층 공통 추상체를 정의한다.
설명: 채팅/메시지 저장소 인터페이스를 Protocol로 제공해 서비스가 구현체 대신 계약에 의존하게 한다.
디자인 패턴: 포트-어댑터(Port/Protocol)
참조: src/chat_service/shared/chat/repositories/chat_repository.py, src/chat_service/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from typing import Protocol

from chat_service.core.chat.models import Chat, Message
from chat_service.shared.runtime import CancellationToken


class ChatRepositoryPort(Protocol):
    """채팅 저장소 포트."""

    def create_if_not_exists(
        self,
        title: str,
        cancellation: CancellationToken | None = None,
    ) -> Chat:
        """제목이 없을 때만 채팅을 생성한다. 중복이면 EntityAlreadyExistsError."""

    def get_by_id(
        self,
        chat_id: int,
        limit: int,
        cancellation: CancellationToken | None = None,
    ) -> Chat:
        """채팅과 최신 메시지 최대 limit건을 조회한다. 없으면 EntityNotFoundError."""

    def delete_by_id(
        self,
        chat_id: int,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """채팅을 삭제한다. 없으면 EntityNotFoundError."""


class MessageRepositoryPort(Protocol):
    """메시지 저장소 포트."""

    def create_message(
        self,
        chat_id: int,
        text: str,
        cancellation: CancellationToken | None = None,
    ) -> Message:
        """부모 채팅이 있을 때만 메시지를 생성한다. 없으면 ReferenceNotFoundError."""
