"""
목적: HTTP API 패키지를 정의한다.
설명: FastAPI 앱 팩토리, Chat/헬스체크 라우터, 서버 엔트리 포인트를 포함한다.
디자인 패턴: 패키지 모듈
참조: src/chat_service/api/main.py
"""
