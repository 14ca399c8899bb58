"""
목적: 작업 취소/마감 시한 신호를 제공한다.
설명: 호출자가 명시적으로 취소하거나 마감 시한이 지나면 진행 중인 트랜잭션이 중단되도록 한다.
디자인 패턴: 취소 토큰 패턴
참조: src/chat_service/integrations/db/client.py, src/chat_service/integrations/db/engines/sql_common.py
"""

from __future__ import annotations

import threading
import time
from typing import Optional

from chat_service.shared.exceptions import BaseAppException


class OperationCancelledError(BaseAppException):
    """작업이 취소되었거나 마감 시한을 넘겼을 때 발생한다."""

    default_code = "OPERATION_CANCELLED"


class CancellationToken:
    """스레드 안전한 취소 토큰이다.

    Args:
        timeout_seconds: 생성 시점부터의 마감 시한(초). None이면 시한이 없다.
    """

    def __init__(self, timeout_seconds: Optional[float] = None) -> None:
        self._event = threading.Event()
        self._deadline = (
            time.monotonic() + timeout_seconds if timeout_seconds is not None else None
        )
        self._reason: Optional[str] = None

    @classmethod
    def none(cls) -> "CancellationToken":
        """취소되지 않는 토큰을 반환한다."""

        return cls()

    @property
    def cancelled(self) -> bool:
        """명시적 취소 또는 마감 시한 경과 여부를 반환한다."""

        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def reason(self) -> str:
        if self._reason:
            return self._reason
        return "deadline exceeded" if self.cancelled else ""

    def cancel(self, reason: str = "cancelled by caller") -> None:
        """토큰을 취소 상태로 바꾼다."""

        self._reason = reason
        self._event.set()

    def remaining(self) -> Optional[float]:
        """남은 시간(초)을 반환한다. 시한이 없으면 None."""

        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_cancelled(self) -> None:
        """취소 상태이면 OperationCancelledError를 발생시킨다."""

        if self.cancelled:
            raise OperationCancelledError(
                f"작업이 취소되었습니다: {self.reason}",
                reason=self.reason,
            )
