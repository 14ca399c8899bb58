"""
목적: 공통 예외 베이스 클래스를 제공한다.
설명: 에러 코드를 가진 상세 모델과 원본 예외를 함께 보관해 계층 간 구조적 분류를 가능하게 한다.
디자인 패턴: 도메인 예외 객체
참조: src/chat_service/shared/exceptions/models.py
"""

from __future__ import annotations

from typing import Any, Optional

from chat_service.shared.exceptions.models import ExceptionDetail


class BaseAppException(Exception):
    """애플리케이션 공통 예외 클래스이다.

    하위 클래스는 ``default_code``만 지정하면 상세 모델 없이도 생성할 수 있다.

    Args:
        message: 사용자 또는 시스템에 전달할 메시지.
        detail: 예외 상세 정보 모델. 생략하면 ``default_code``로 생성한다.
        original: 원본 예외 객체.
    """

    default_code = "APP_ERROR"

    def __init__(
        self,
        message: str,
        detail: Optional[ExceptionDetail] = None,
        original: Optional[BaseException] = None,
        **metadata: Any,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._detail = detail or ExceptionDetail(
            code=self.default_code,
            cause=repr(original) if original is not None else None,
            metadata=metadata,
        )
        self._original = original

    @property
    def message(self) -> str:
        """주입된 메시지를 반환한다."""

        return self._message

    @property
    def code(self) -> str:
        """상세 모델의 에러 코드를 반환한다."""

        return self._detail.code

    @property
    def detail(self) -> ExceptionDetail:
        """예외 상세 모델을 반환한다."""

        return self._detail

    @property
    def original(self) -> Optional[BaseException]:
        """원본 예외를 반환한다."""

        return self._original

    def to_dict(self) -> dict:
        """예외 정보를 사전으로 변환한다."""

        return {
            "message": self._message,
            "detail": self._detail.model_dump(),
            "original": repr(self._original) if self._original else None,
        }
