"""
목적: 로깅에 필요한 공통 모델을 정의한다.
설명: 로그 레벨, 요청/작업 단위 컨텍스트, 레코드 구조를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/chat_service/shared/logging/logger.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """로그 레벨 열거형."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def severity(self) -> int:
        """레벨 비교에 사용하는 심각도 값을 반환한다."""

        return _SEVERITY[self]

    @classmethod
    def parse(cls, raw: Optional[str], default: "LogLevel") -> "LogLevel":
        """문자열을 로그 레벨로 변환한다. 알 수 없는 값이면 기본값을 반환한다."""

        if not raw:
            return default
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return default


_SEVERITY = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARNING: 30,
    LogLevel.ERROR: 40,
    LogLevel.CRITICAL: 50,
}


class LogContext(BaseModel):
    """로그 컨텍스트 모델이다.

    Args:
        request_id: HTTP 요청 식별자.
        operation: 서비스 작업 이름(create_chat 등).
        chat_id: 대상 채팅 식별자.
        tags: 자유형 태그.
    """

    request_id: Optional[str] = None
    operation: Optional[str] = None
    chat_id: Optional[int] = None
    tags: Dict[str, str] = Field(default_factory=dict)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LogRecord(BaseModel):
    """로그 레코드 모델이다."""

    level: LogLevel
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)
    logger_name: str
    context: Optional[LogContext] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
