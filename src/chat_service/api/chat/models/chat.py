"""
목적: Chat API 요청/응답 모델을 정의한다.
설명: 채팅 생성 요청 검증(제목 공백 제거, 길이 제한)과 채팅 응답 구조를 제공한다.
디자인 패턴: DTO
참조: src/chat_service/api/chat/routers/create_chat.py, src/chat_service/api/chat/routers/get_chat.py
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from chat_service.api.chat.models.message import MessageResponse
from chat_service.api.const import ERROR_TITLE_LENGTH
from chat_service.core.chat.const import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH
from chat_service.core.chat.models import Chat


class CreateChatRequest(BaseModel):
    """채팅 생성 요청 모델.

    title 필드가 빠지면 빈 문자열로 보고 길이 검증에서 거절한다.
    """

    title: str = Field(default="", validate_default=True)

    @field_validator("title")
    @classmethod
    def _validate_title(cls, value: str) -> str:
        title = value.strip()
        if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
            raise ValueError(ERROR_TITLE_LENGTH)
        return title


class ChatResponse(BaseModel):
    """채팅 응답 모델."""

    id: int
    title: str
    created_at: datetime
    messages: list[MessageResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, chat: Chat) -> "ChatResponse":
        return cls(
            id=chat.id,
            title=chat.title,
            created_at=chat.created_at,
            messages=[MessageResponse.from_entity(item) for item in chat.messages],
        )
