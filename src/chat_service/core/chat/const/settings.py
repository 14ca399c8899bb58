"""
목적: Chat 코어의 설정 상수를 정의한다.
설명: 테이블 이름, 식별자 범위, 메시지 조회 기본/최대 개수, 제목/본문 길이 제한을 제공한다.
디자인 패턴: 상수 객체 패턴
참조: src/chat_service/shared/chat/repositories/chat_repository.py
"""

from __future__ import annotations

CHAT_TABLE = "chats"
MESSAGE_TABLE = "messages"

# 저장소 기본 키는 부호 있는 64비트 정수다.
CHAT_ID_MIN = -(2**63)
CHAT_ID_MAX = 2**63 - 1

DEFAULT_MESSAGE_LIMIT = 20
MAX_MESSAGE_LIMIT = 100

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 200
MESSAGE_TEXT_MIN_LENGTH = 1
MESSAGE_TEXT_MAX_LENGTH = 5000
