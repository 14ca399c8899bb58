"""
목적: 런타임 모듈 공개 API를 제공한다.
설명: 작업 취소 토큰과 취소 예외를 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/shared/runtime/cancellation.py
"""

from chat_service.shared.runtime.cancellation import CancellationToken, OperationCancelledError

__all__ = ["CancellationToken", "OperationCancelledError"]
