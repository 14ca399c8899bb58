"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 병합 로더와 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/shared/config/loader.py, src/chat_service/shared/config/settings.py
"""

from chat_service.shared.config.loader import ConfigLoader, load_settings
from chat_service.shared.config.settings import AppSettings, DatabaseBackend

__all__ = ["AppSettings", "ConfigLoader", "DatabaseBackend", "load_settings"]
