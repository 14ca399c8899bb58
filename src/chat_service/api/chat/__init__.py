"""
목적: Chat API 패키지를 정의한다.
설명: 채팅/메시지 HTTP 라우터, 요청/응답 모델, 서비스 의존성을 포함한다.
디자인 패턴: 패키지 모듈
참조: src/chat_service/api/chat/routers/router.py
"""
