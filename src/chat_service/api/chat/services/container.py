"""
목적: Chat API 서비스 컨테이너를 제공한다.
설명: DBClient 하나로 저장소와 서비스를 조립해 앱 상태에 보관한다. 프로세스 전역 싱글턴은 두지 않는다.
디자인 패턴: 의존성 주입 컨테이너
참조: src/chat_service/api/main.py, src/chat_service/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from chat_service.integrations.db import DBClient
from chat_service.shared.chat import ChatRepository, ChatService, MessageRepository, MessageService
from chat_service.shared.logging import Logger, create_default_logger


class ChatAPIServices:
    """Chat API가 사용하는 서비스 묶음."""

    def __init__(
        self,
        db_client: DBClient,
        chat_service: ChatService,
        message_service: MessageService,
        request_timeout_seconds: float | None = None,
    ) -> None:
        self.db_client = db_client
        self.chat_service = chat_service
        self.message_service = message_service
        self.request_timeout_seconds = request_timeout_seconds


def build_chat_api_services(
    db_client: DBClient,
    logger: Logger | None = None,
    request_timeout_seconds: float | None = None,
) -> ChatAPIServices:
    """DBClient를 공유하는 저장소/서비스를 조립한다."""

    logger = logger or create_default_logger("ChatAPI")
    return ChatAPIServices(
        db_client=db_client,
        chat_service=ChatService(
            ChatRepository(db_client, logger=logger),
            logger=logger,
        ),
        message_service=MessageService(
            MessageRepository(db_client, logger=logger),
            logger=logger,
        ),
        request_timeout_seconds=request_timeout_seconds,
    )
