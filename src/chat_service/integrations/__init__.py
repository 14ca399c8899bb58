"""
목적: 외부 시스템 연동 패키지를 정의한다.
설명: 저장소(DB) 연동 모듈을 포함한다.
디자인 패턴: 패키지 모듈
참조: src/chat_service/integrations/db/__init__.py
"""
