"""
목적: Chat 도메인 엔티티 모델을 정의한다.
설명: 채팅/메시지 엔티티와 공통 시간 유틸을 Pydantic 기반으로 제공한다.
디자인 패턴: 엔티티 패턴
참조: src/chat_service/shared/chat/repositories/chat_repository.py
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


def utc_now() -> datetime:
    """UTC 기준 timezone-aware 현재 시각을 반환한다."""

    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Message(BaseModel):
    """채팅 메시지 엔티티."""

    id: int
    chat_id: int
    text: str
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at")
    @classmethod
    def _normalize_created_at(cls, value: datetime) -> datetime:
        return _as_utc(value)


class Chat(BaseModel):
    """채팅 엔티티.

    messages는 저장 행에 포함되지 않으며 조회 시에만 최신순으로 채워진다.
    """

    id: int
    title: str
    created_at: datetime = Field(default_factory=utc_now)
    messages: list[Message] = Field(default_factory=list)

    @field_validator("created_at")
    @classmethod
    def _normalize_created_at(cls, value: datetime) -> datetime:
        return _as_utc(value)
