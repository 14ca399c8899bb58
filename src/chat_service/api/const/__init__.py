"""
목적: API 상수 공개 API를 제공한다.
설명: Chat/헬스체크 라우팅 상수와 오류 메시지를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/api/const/chat.py
"""

from chat_service.api.const.chat import (
    CHAT_API_CREATE_PATH,
    CHAT_API_DETAIL_PATH,
    CHAT_API_MESSAGES_PATH,
    CHAT_API_PREFIX,
    CHAT_API_TAG,
    ERROR_CHAT_ALREADY_EXISTS,
    ERROR_CHAT_NOT_FOUND,
    ERROR_INTERNAL,
    ERROR_INVALID_ID,
    ERROR_INVALID_JSON,
    ERROR_MESSAGE_LENGTH,
    ERROR_TITLE_LENGTH,
    HEALTH_API_PATH,
    HEALTH_API_TAG,
)

__all__ = [
    "CHAT_API_CREATE_PATH",
    "CHAT_API_DETAIL_PATH",
    "CHAT_API_MESSAGES_PATH",
    "CHAT_API_PREFIX",
    "CHAT_API_TAG",
    "ERROR_CHAT_ALREADY_EXISTS",
    "ERROR_CHAT_NOT_FOUND",
    "ERROR_INTERNAL",
    "ERROR_INVALID_ID",
    "ERROR_INVALID_JSON",
    "ERROR_MESSAGE_LENGTH",
    "ERROR_TITLE_LENGTH",
    "HEALTH_API_PATH",
    "HEALTH_API_TAG",
]
