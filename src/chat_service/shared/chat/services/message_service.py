"""
목적: 메시지 서비스 계층을 제공한다.
설명: 메시지 저장소 호출 결과를 서비스 예외 집합으로 변환한다.
디자인 패턴: 서비스 레이어, 퍼사드
참조: src/chat_service/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from chat_service.core.chat.models import Message
from chat_service.shared.chat.interface import MessageRepositoryPort
from chat_service.shared.chat.repositories.errors import ReferenceNotFoundError
from chat_service.shared.chat.services.errors import (
    InternalServiceError,
    MessageChatNotFoundError,
)
from chat_service.shared.logging import LogContext, Logger, create_default_logger
from chat_service.shared.runtime import CancellationToken


class MessageService:
    """메시지 서비스."""

    def __init__(self, repository: MessageRepositoryPort, logger: Logger | None = None) -> None:
        self._repository = repository
        self._logger = logger or create_default_logger("MessageService")

    def create_message(
        self,
        chat_id: int,
        text: str,
        cancellation: CancellationToken | None = None,
    ) -> Message:
        context = LogContext(operation="create_message", chat_id=chat_id)
        try:
            message = self._repository.create_message(chat_id, text, cancellation=cancellation)
        except ReferenceNotFoundError as error:
            raise MessageChatNotFoundError(
                "메시지를 추가할 채팅이 없습니다.",
                original=error,
                chat_id=chat_id,
            ) from error
        except Exception as error:
            self._logger.error(
                f"메시지 생성 중 내부 오류가 발생했습니다: {error}",
                context,
                error_type=type(error).__name__,
                error_code=getattr(error, "code", None),
            )
            raise InternalServiceError(
                "메시지 생성 중 내부 오류가 발생했습니다.",
                original=error,
            ) from error
        self._logger.debug("메시지를 생성했습니다.", context, message_id=message.id)
        return message
