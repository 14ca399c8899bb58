"""
목적: Message API 요청/응답 모델을 정의한다.
설명: 메시지 생성 요청 검증(길이 제한)과 메시지 응답 구조를 제공한다.
디자인 패턴: DTO
참조: src/chat_service/api/chat/routers/create_message.py
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from chat_service.api.const import ERROR_MESSAGE_LENGTH
from chat_service.core.chat.const import MESSAGE_TEXT_MAX_LENGTH, MESSAGE_TEXT_MIN_LENGTH
from chat_service.core.chat.models import Message


class CreateMessageRequest(BaseModel):
    """메시지 생성 요청 모델. 본문은 공백을 제거하지 않는다."""

    text: str = Field(default="", validate_default=True)

    @field_validator("text")
    @classmethod
    def _validate_text(cls, value: str) -> str:
        if not MESSAGE_TEXT_MIN_LENGTH <= len(value) <= MESSAGE_TEXT_MAX_LENGTH:
            raise ValueError(ERROR_MESSAGE_LENGTH)
        return value


class MessageResponse(BaseModel):
    """메시지 응답 모델."""

    id: int
    chat_id: int
    text: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id,
            chat_id=message.chat_id,
            text=message.text,
            created_at=message.created_at,
        )
