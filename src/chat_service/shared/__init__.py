"""
목적: 공유 모듈 패키지를 정의한다.
설명: 설정, 예외, 로깅, 런타임 유틸과 Chat 저장소/서비스 계층을 포함한다.
디자인 패턴: 패키지 모듈
참조: src/chat_service/shared/chat/__init__.py
"""
