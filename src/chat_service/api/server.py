"""
목적: Chat API 서버 실행 엔트리 포인트를 제공한다.
설명: 설정을 읽어 uvicorn으로 앱을 서빙한다. 종료 신호 처리는 uvicorn의 graceful shutdown을 따른다.
디자인 패턴: 엔트리 포인트
참조: src/chat_service/api/main.py
"""

from __future__ import annotations

import uvicorn

from chat_service.api.main import create_app
from chat_service.shared.config import load_settings


def run() -> None:
    """설정된 HOST:PORT로 서버를 실행한다."""

    settings = load_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    run()
