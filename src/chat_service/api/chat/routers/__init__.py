"""
목적: Chat 라우터 공개 API를 제공한다.
설명: 집계된 Chat 라우터를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/api/chat/routers/router.py
"""

from chat_service.api.chat.routers.router import router

__all__ = ["router"]
