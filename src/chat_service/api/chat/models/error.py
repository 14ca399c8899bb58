"""
목적: API 오류 응답 모델을 정의한다.
설명: 모든 오류 응답이 공유하는 {"error", "message"} 구조를 제공한다.
디자인 패턴: DTO
참조: src/chat_service/api/main.py
"""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """오류 응답 모델.

    Args:
        error: HTTP 상태 이름(BAD_REQUEST, NOT_FOUND 등).
        message: 사람이 읽는 오류 메시지.
    """

    error: str
    message: str
