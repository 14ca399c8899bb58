"""
목적: 채팅 서비스 계층을 제공한다.
설명: 채팅 저장소 호출 결과를 서비스 예외 집합으로 변환한다. 재시도나 추가 비즈니스 로직은 없다.
디자인 패턴: 서비스 레이어, 퍼사드
참조: src/chat_service/shared/chat/interface/ports.py, src/chat_service/shared/chat/services/errors.py
"""

from __future__ import annotations

from chat_service.core.chat.models import Chat
from chat_service.shared.chat.interface import ChatRepositoryPort
from chat_service.shared.chat.repositories.errors import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from chat_service.shared.chat.services.errors import (
    ChatAlreadyExistsError,
    ChatNotFoundError,
    InternalServiceError,
)
from chat_service.shared.logging import LogContext, Logger, create_default_logger
from chat_service.shared.runtime import CancellationToken


class ChatService:
    """채팅 서비스."""

    def __init__(self, repository: ChatRepositoryPort, logger: Logger | None = None) -> None:
        self._repository = repository
        self._logger = logger or create_default_logger("ChatService")

    def create_chat(self, title: str, cancellation: CancellationToken | None = None) -> Chat:
        try:
            chat = self._repository.create_if_not_exists(title, cancellation=cancellation)
        except EntityAlreadyExistsError as error:
            self._logger.info(
                "같은 제목의 채팅 생성 요청을 거절했습니다.",
                LogContext(operation="create_chat"),
                title=title,
            )
            raise ChatAlreadyExistsError(
                "같은 제목의 채팅이 이미 존재합니다.",
                original=error,
                title=title,
            ) from error
        except Exception as error:
            raise self._internal("create_chat", error) from error
        self._logger.info("채팅을 생성했습니다.", LogContext(operation="create_chat", chat_id=chat.id))
        return chat

    def get_chat(
        self,
        chat_id: int,
        limit: int,
        cancellation: CancellationToken | None = None,
    ) -> Chat:
        try:
            return self._repository.get_by_id(chat_id, limit, cancellation=cancellation)
        except EntityNotFoundError as error:
            raise ChatNotFoundError("채팅을 찾을 수 없습니다.", original=error, chat_id=chat_id) from error
        except Exception as error:
            raise self._internal("get_chat", error, chat_id) from error

    def delete_chat(self, chat_id: int, cancellation: CancellationToken | None = None) -> None:
        try:
            self._repository.delete_by_id(chat_id, cancellation=cancellation)
        except EntityNotFoundError as error:
            raise ChatNotFoundError("채팅을 찾을 수 없습니다.", original=error, chat_id=chat_id) from error
        except Exception as error:
            raise self._internal("delete_chat", error, chat_id) from error
        self._logger.info("채팅을 삭제했습니다.", LogContext(operation="delete_chat", chat_id=chat_id))

    def _internal(
        self,
        operation: str,
        error: Exception,
        chat_id: int | None = None,
    ) -> InternalServiceError:
        self._logger.error(
            f"채팅 처리 중 내부 오류가 발생했습니다: {error}",
            LogContext(operation=operation, chat_id=chat_id),
            error_type=type(error).__name__,
            error_code=getattr(error, "code", None),
        )
        return InternalServiceError("채팅 처리 중 내부 오류가 발생했습니다.", original=error)
