"""
목적: Chat 라우터 공통 유틸을 제공한다.
설명: 서비스 예외를 HTTP 예외로 변환하고, 경로 ID 범위와 메시지 조회 개수 쿼리 값을 해석한다.
디자인 패턴: 유틸리티 모듈
참조: src/chat_service/api/chat/routers/router.py
"""

from __future__ import annotations

from typing import Annotated

from fastapi import HTTPException, Path, status

from chat_service.api.const import (
    ERROR_CHAT_ALREADY_EXISTS,
    ERROR_CHAT_NOT_FOUND,
    ERROR_INTERNAL,
)
from chat_service.core.chat.const import (
    CHAT_ID_MAX,
    CHAT_ID_MIN,
    DEFAULT_MESSAGE_LIMIT,
    MAX_MESSAGE_LIMIT,
)
from chat_service.shared.exceptions import BaseAppException

# 64비트 범위를 벗어난 ID는 드라이버까지 가지 않고 경로 검증 오류(400)가 된다.
ChatIdPath = Annotated[
    int,
    Path(ge=CHAT_ID_MIN, le=CHAT_ID_MAX, description="채팅 ID(64비트 정수)"),
]


def to_http_exception(error: BaseAppException) -> HTTPException:
    """서비스 예외를 HTTP 예외로 변환한다. 내부 오류 상세는 응답에 싣지 않는다."""

    code = error.detail.code
    if code in {"CHAT_NOT_FOUND", "MESSAGE_CHAT_NOT_FOUND"}:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_CHAT_NOT_FOUND)
    if code == "CHAT_ALREADY_EXISTS":
        title = error.detail.metadata.get("title", "")
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=ERROR_CHAT_ALREADY_EXISTS.format(title=title),
        )
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_INTERNAL)


def resolve_message_limit(raw: str | None) -> int:
    """limit 쿼리 값을 해석한다. 1..MAX 범위의 정수가 아니면 기본값을 사용한다."""

    if raw is None or raw == "":
        return DEFAULT_MESSAGE_LIMIT
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_MESSAGE_LIMIT
    if 1 <= value <= MAX_MESSAGE_LIMIT:
        return value
    return DEFAULT_MESSAGE_LIMIT
