"""
목적: 서비스 계층 도메인 예외를 정의한다.
설명: 요청 계층이 분기할 수 있는 닫힌 예외 집합(채팅 없음/중복/메시지 부모 없음/내부 오류)을 제공한다.
디자인 패턴: 도메인 예외 객체
참조: src/chat_service/shared/chat/repositories/errors.py
"""

from __future__ import annotations

from chat_service.shared.exceptions import BaseAppException


class ServiceError(BaseAppException):
    """서비스 계층 공통 예외."""

    default_code = "SERVICE_ERROR"


class ChatNotFoundError(ServiceError):
    default_code = "CHAT_NOT_FOUND"


class ChatAlreadyExistsError(ServiceError):
    default_code = "CHAT_ALREADY_EXISTS"


class MessageChatNotFoundError(ServiceError):
    default_code = "MESSAGE_CHAT_NOT_FOUND"


class InternalServiceError(ServiceError):
    """분류되지 않은 저장소/런타임 실패. 원인은 original에 보관한다."""

    default_code = "INTERNAL_ERROR"
