"""
목적: chat_service 패키지 루트를 정의한다.
설명: 채팅/메시지 영속화 서비스(HTTP API, 서비스, 저장소, DB 엔진)를 포함한다.
디자인 패턴: 패키지 모듈
참조: src/chat_service/api/main.py
"""

__version__ = "0.1.0"
