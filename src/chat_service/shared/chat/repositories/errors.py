"""
목적: 저장소 계층 도메인 예외를 정의한다.
설명: 저장소 예외를 엔티티 관점(없음/중복/참조 없음)으로 분류한다.
디자인 패턴: 도메인 예외 객체
참조: src/chat_service/shared/exceptions/base.py
"""

from __future__ import annotations

from chat_service.shared.exceptions import BaseAppException


class RepositoryError(BaseAppException):
    """저장소 계층 공통 예외."""

    default_code = "REPOSITORY_ERROR"


class EntityNotFoundError(RepositoryError):
    """대상 엔티티가 없을 때 발생한다."""

    default_code = "ENTITY_NOT_FOUND"


class EntityAlreadyExistsError(RepositoryError):
    """유일해야 하는 엔티티가 이미 있을 때 발생한다."""

    default_code = "ENTITY_ALREADY_EXISTS"


class ReferenceNotFoundError(RepositoryError):
    """참조하는 부모 엔티티가 없을 때 발생한다."""

    default_code = "REFERENCE_NOT_FOUND"
