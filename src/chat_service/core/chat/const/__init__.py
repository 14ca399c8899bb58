"""
목적: Chat 상수 모듈 공개 API를 제공한다.
설명: 테이블 이름, 식별자 범위와 길이/개수 제한 상수를 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/core/chat/const/settings.py
"""

from chat_service.core.chat.const.settings import (
    CHAT_ID_MAX,
    CHAT_ID_MIN,
    CHAT_TABLE,
    DEFAULT_MESSAGE_LIMIT,
    MAX_MESSAGE_LIMIT,
    MESSAGE_TABLE,
    MESSAGE_TEXT_MAX_LENGTH,
    MESSAGE_TEXT_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)

__all__ = [
    "CHAT_ID_MAX",
    "CHAT_ID_MIN",
    "CHAT_TABLE",
    "DEFAULT_MESSAGE_LIMIT",
    "MAX_MESSAGE_LIMIT",
    "MESSAGE_TABLE",
    "MESSAGE_TEXT_MAX_LENGTH",
    "MESSAGE_TEXT_MIN_LENGTH",
    "TITLE_MAX_LENGTH",
    "TITLE_MIN_LENGTH",
]
