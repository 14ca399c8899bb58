"""
목적: Chat API 라우팅/응답 상수를 정의한다.
설명: 라우터 prefix, tag, 경로와 클라이언트에 노출하는 오류 메시지를 중앙에서 관리한다.
디자인 패턴: 상수 객체 패턴
참조: src/chat_service/api/chat/routers/router.py, src/chat_service/api/main.py
"""

from __future__ import annotations

# Chat API 공통 상수
CHAT_API_PREFIX = "/chats"
CHAT_API_TAG = "chat"
CHAT_API_CREATE_PATH = ""
CHAT_API_DETAIL_PATH = "/{chat_id}"
CHAT_API_MESSAGES_PATH = "/{chat_id}/messages"

HEALTH_API_PATH = "/health"
HEALTH_API_TAG = "health"

# 클라이언트 노출 오류 메시지
ERROR_INVALID_JSON = "Invalid json"
ERROR_INVALID_ID = "ID path param must be integer"
ERROR_TITLE_LENGTH = "Title length must be between 1 and 200"
ERROR_MESSAGE_LENGTH = "Message length must be between 1 and 5000"
ERROR_CHAT_NOT_FOUND = "Chat not found"
ERROR_CHAT_ALREADY_EXISTS = "Chat with title {title} already exists"
ERROR_INTERNAL = "Internal Server Error"
