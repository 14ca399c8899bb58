"""
목적: 로거 인터페이스와 기본 구현체를 제공한다.
설명: 최소 레벨 필터, 크기 제한 인메모리 저장소, JSON 라인 stdout 출력을 지원한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/chat_service/shared/logging/models.py
"""

from __future__ import annotations

import json
import os
import sys
import threading
from abc import ABC, abstractmethod
from collections import deque
from datetime import timezone
from typing import List, Optional, TextIO

from chat_service.shared.logging.models import LogContext, LogLevel, LogRecord

_DEFAULT_MAX_RECORDS = 1000


class LogRepository(ABC):
    """로그 저장소 인터페이스."""

    @abstractmethod
    def add(self, record: LogRecord) -> None:
        """로그 레코드를 저장한다."""

    @abstractmethod
    def list(self) -> List[LogRecord]:
        """저장된 로그를 반환한다."""


class InMemoryLogRepository(LogRepository):
    """최근 레코드만 유지하는 인메모리 로그 저장소."""

    def __init__(self, max_records: int = _DEFAULT_MAX_RECORDS) -> None:
        self._records: deque[LogRecord] = deque(maxlen=max_records)
        self._lock = threading.Lock()

    def add(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)

    def list(self) -> List[LogRecord]:
        with self._lock:
            return list(self._records)


class Logger(ABC):
    """로거 인터페이스."""

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        """로그를 기록한다."""

    @abstractmethod
    def with_context(self, context: LogContext) -> "Logger":
        """컨텍스트가 합쳐진 새 로거를 반환한다."""

    @abstractmethod
    def child(self, name: str) -> "Logger":
        """출력 설정을 공유하는 하위 이름 로거를 반환한다."""

    def debug(self, message: str, context: Optional[LogContext] = None, **metadata) -> None:
        self.log(LogLevel.DEBUG, message, context, metadata)

    def info(self, message: str, context: Optional[LogContext] = None, **metadata) -> None:
        self.log(LogLevel.INFO, message, context, metadata)

    def warning(self, message: str, context: Optional[LogContext] = None, **metadata) -> None:
        self.log(LogLevel.WARNING, message, context, metadata)

    def error(self, message: str, context: Optional[LogContext] = None, **metadata) -> None:
        self.log(LogLevel.ERROR, message, context, metadata)

    def critical(self, message: str, context: Optional[LogContext] = None, **metadata) -> None:
        self.log(LogLevel.CRITICAL, message, context, metadata)


class InMemoryLogger(Logger):
    """인메모리 로거 구현체.

    ``emit_stdout``가 켜져 있으면 레코드마다 JSON 한 줄을 출력한다.
    """

    def __init__(
        self,
        name: str,
        repository: Optional[LogRepository] = None,
        base_context: Optional[LogContext] = None,
        emit_stdout: Optional[bool] = None,
        min_level: Optional[LogLevel] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._name = name
        self._repository = repository or InMemoryLogRepository()
        self._base_context = base_context
        self._emit_stdout = _read_emit_stdout_env() if emit_stdout is None else emit_stdout
        self._min_level = min_level or LogLevel.parse(os.getenv("LOG_LEVEL"), LogLevel.DEBUG)
        self._stream = stream

    @property
    def name(self) -> str:
        return self._name

    @property
    def repository(self) -> LogRepository:
        """저장소를 반환한다."""

        return self._repository

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        if level.severity < self._min_level.severity:
            return
        record = LogRecord(
            level=level,
            message=message,
            logger_name=self._name,
            context=self._merge_context(context),
            metadata=metadata or {},
        )
        self._repository.add(record)
        if self._emit_stdout:
            self._write_line(record)

    def with_context(self, context: LogContext) -> "Logger":
        return InMemoryLogger(
            name=self._name,
            repository=self._repository,
            base_context=self._merge_context(context),
            emit_stdout=self._emit_stdout,
            min_level=self._min_level,
            stream=self._stream,
        )

    def child(self, name: str) -> "InMemoryLogger":
        """저장소와 출력 설정을 공유하는 하위 이름 로거를 반환한다."""

        return InMemoryLogger(
            name=name,
            repository=self._repository,
            base_context=self._base_context,
            emit_stdout=self._emit_stdout,
            min_level=self._min_level,
            stream=self._stream,
        )

    def _merge_context(self, context: Optional[LogContext]) -> Optional[LogContext]:
        if self._base_context is None:
            return context
        if context is None:
            return self._base_context
        return LogContext(
            request_id=context.request_id or self._base_context.request_id,
            operation=context.operation or self._base_context.operation,
            chat_id=context.chat_id if context.chat_id is not None else self._base_context.chat_id,
            tags={**self._base_context.tags, **context.tags},
        )

    def _write_line(self, record: LogRecord) -> None:
        payload: dict[str, object] = {
            "timestamp": record.timestamp.astimezone(timezone.utc).isoformat(),
            "level": record.level.value,
            "logger": record.logger_name,
            "message": record.message,
        }
        if record.context is not None:
            payload["context"] = record.context.model_dump(exclude_none=True)
        if record.metadata:
            payload["metadata"] = record.metadata
        stream = self._stream or sys.stdout
        print(json.dumps(payload, ensure_ascii=False, default=str), file=stream, flush=True)


def _read_emit_stdout_env() -> bool:
    raw = os.getenv("LOG_STDOUT")
    if raw is None:
        return False
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def create_default_logger(
    name: str,
    min_level: Optional[LogLevel] = None,
    emit_stdout: Optional[bool] = None,
) -> InMemoryLogger:
    """기본 인메모리 로거를 생성한다."""

    return InMemoryLogger(name=name, min_level=min_level, emit_stdout=emit_stdout)
