"""
목적: 메시지 저장소를 제공한다.
설명: 부모 채팅 존재를 확인한 뒤 같은 쓰기 트랜잭션 안에서 메시지를 삽입한다.
      확인 이후 부모가 삭제되는 경쟁은 외래 키 위반으로 감지한다.
디자인 패턴: 저장소 패턴
참조: src/chat_service/shared/chat/repositories/chat_repository.py
"""

from __future__ import annotations

from chat_service.core.chat.const import CHAT_TABLE, MESSAGE_TABLE
from chat_service.core.chat.models import Message, utc_now
from chat_service.integrations.db import ConstraintKind, ConstraintViolationError, DBClient
from chat_service.shared.chat.repositories.errors import ReferenceNotFoundError
from chat_service.shared.logging import Logger, create_default_logger
from chat_service.shared.runtime import CancellationToken


class MessageRepository:
    """메시지 저장소 구현체."""

    def __init__(self, db_client: DBClient, logger: Logger | None = None) -> None:
        self._client = db_client
        self._logger = logger or create_default_logger("MessageRepository")

    def create_message(
        self,
        chat_id: int,
        text: str,
        cancellation: CancellationToken | None = None,
    ) -> Message:
        """채팅에 메시지를 추가한다.

        Raises:
            ReferenceNotFoundError: 부모 채팅이 없거나 삽입 직전에 삭제된 경우.
        """

        try:
            with self._client.transaction(write=True, cancellation=cancellation) as session:
                if session.count(CHAT_TABLE, {"id": chat_id}) == 0:
                    raise ReferenceNotFoundError("부모 채팅이 존재하지 않습니다.", chat_id=chat_id)
                row = session.insert(
                    MESSAGE_TABLE,
                    {"chat_id": chat_id, "text": text, "created_at": utc_now()},
                )
        except ConstraintViolationError as error:
            if error.kind != ConstraintKind.FOREIGN_KEY:
                raise
            raise ReferenceNotFoundError(
                "부모 채팅이 존재하지 않습니다.",
                original=error,
                chat_id=chat_id,
            ) from error
        self._logger.debug(f"메시지를 생성했습니다: id={row['id']}, chat_id={chat_id}")
        return Message(**row)
