"""
목적: 채팅 저장소를 제공한다.
설명: DBClient 트랜잭션 위에서 제목 기준 생성, 최신 메시지 포함 조회, 존재 확인 삭제를 수행한다.
      제목 유일성은 저장소의 UNIQUE 제약이 최종 보장하며, 사전 확인은 일반 경로를 빠르게 거절한다.
디자인 패턴: 저장소 패턴
참조: src/chat_service/integrations/db/client.py, src/chat_service/shared/chat/interface/ports.py
"""

from __future__ import annotations

from chat_service.core.chat.const import CHAT_TABLE, MESSAGE_TABLE
from chat_service.core.chat.models import Chat, Message, utc_now
from chat_service.integrations.db import (
    ConstraintKind,
    ConstraintViolationError,
    DBClient,
    SortField,
    SortOrder,
)
from chat_service.shared.chat.repositories.errors import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from chat_service.shared.logging import Logger, create_default_logger
from chat_service.shared.runtime import CancellationToken

_NEWEST_FIRST = (
    SortField(field="created_at", order=SortOrder.DESC),
    SortField(field="id", order=SortOrder.DESC),
)


class ChatRepository:
    """채팅 저장소 구현체."""

    def __init__(self, db_client: DBClient, logger: Logger | None = None) -> None:
        self._client = db_client
        self._logger = logger or create_default_logger("ChatRepository")

    def create_if_not_exists(
        self,
        title: str,
        cancellation: CancellationToken | None = None,
    ) -> Chat:
        """같은 제목의 채팅이 없을 때만 생성한다.

        Raises:
            EntityAlreadyExistsError: 같은 제목이 이미 있거나 동시 생성 경쟁에서 진 경우.
        """

        try:
            with self._client.transaction(write=True, cancellation=cancellation) as session:
                if session.count(CHAT_TABLE, {"title": title}) > 0:
                    raise EntityAlreadyExistsError(
                        "같은 제목의 채팅이 이미 존재합니다.",
                        title=title,
                    )
                row = session.insert(CHAT_TABLE, {"title": title, "created_at": utc_now()})
        except ConstraintViolationError as error:
            if error.kind != ConstraintKind.UNIQUE:
                raise
            raise EntityAlreadyExistsError(
                "같은 제목의 채팅이 이미 존재합니다.",
                original=error,
                title=title,
            ) from error
        self._logger.debug(f"채팅을 생성했습니다: id={row['id']}")
        return Chat(id=row["id"], title=row["title"], created_at=row["created_at"], messages=[])

    def get_by_id(
        self,
        chat_id: int,
        limit: int,
        cancellation: CancellationToken | None = None,
    ) -> Chat:
        """채팅과 최신순 메시지 최대 limit건을 조회한다.

        limit이 0이면 메시지를 조회하지 않고 빈 목록을 채운다.

        Raises:
            ValueError: limit이 음수인 경우.
            EntityNotFoundError: 채팅이 없는 경우.
        """

        if limit < 0:
            raise ValueError("limit은 0 이상이어야 합니다.")
        with self._client.transaction(write=False, cancellation=cancellation) as session:
            row = session.get(CHAT_TABLE, chat_id)
            if row is None:
                raise EntityNotFoundError("채팅을 찾을 수 없습니다.", chat_id=chat_id)
            message_rows = (
                session.fetch_children(MESSAGE_TABLE, "chat_id", chat_id, _NEWEST_FIRST, limit)
                if limit > 0
                else []
            )
        return Chat(
            id=row["id"],
            title=row["title"],
            created_at=row["created_at"],
            messages=[Message(**message_row) for message_row in message_rows],
        )

    def delete_by_id(
        self,
        chat_id: int,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """채팅을 삭제한다. 메시지는 외래 키 연쇄 삭제로 함께 제거된다."""

        with self._client.transaction(write=True, cancellation=cancellation) as session:
            affected = session.delete(CHAT_TABLE, chat_id)
            if affected == 0:
                raise EntityNotFoundError("채팅을 찾을 수 없습니다.", chat_id=chat_id)
        self._logger.debug(f"채팅을 삭제했습니다: id={chat_id}")
