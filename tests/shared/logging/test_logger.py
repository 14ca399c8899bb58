"""
목적: 인메모리 로거와 로그 모델 동작을 검증한다.
설명: 로그 기록, 최소 레벨 필터, 컨텍스트 병합, 저장소 공유, JSON 라인 출력을 확인한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/chat_service/shared/logging/logger.py, src/chat_service/shared/logging/models.py
"""

from __future__ import annotations

import io
import json

from chat_service.shared.logging import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    LogLevel,
    create_default_logger,
)


def test_inmemory_logger_records_log() -> None:
    """기본 로거가 로그를 기록하는지 확인한다."""

    logger = create_default_logger("unit-test", min_level=LogLevel.DEBUG, emit_stdout=False)
    logger.info("시작 로그")

    records = logger.repository.list()

    assert len(records) == 1
    assert records[0].level == LogLevel.INFO
    assert records[0].message == "시작 로그"
    assert records[0].logger_name == "unit-test"


def test_min_level_filters_lower_records() -> None:
    logger = InMemoryLogger(name="filter", min_level=LogLevel.WARNING, emit_stdout=False)

    logger.debug("무시")
    logger.info("무시")
    logger.warning("기록")
    logger.error("기록")

    assert [record.level for record in logger.repository.list()] == [
        LogLevel.WARNING,
        LogLevel.ERROR,
    ]


def test_logger_with_context_merges_fields() -> None:
    """컨텍스트 병합 규칙이 올바른지 확인한다."""

    base_context = LogContext(request_id="req-1", tags={"service": "api", "env": "dev"})
    logger = InMemoryLogger(name="ctx-test", base_context=base_context, emit_stdout=False)

    logger.info("기본 컨텍스트 로그")
    child_logger = logger.with_context(
        LogContext(operation="create_chat", chat_id=3, tags={"env": "prod"})
    )
    child_logger.error("확장 컨텍스트 로그")

    records = logger.repository.list()

    assert len(records) == 2
    assert records[0].context.request_id == "req-1"
    assert records[1].context.request_id == "req-1"
    assert records[1].context.operation == "create_chat"
    assert records[1].context.chat_id == 3
    assert records[1].context.tags == {"service": "api", "env": "prod"}


def test_child_logger_shares_repository() -> None:
    logger = InMemoryLogger(name="parent", emit_stdout=False)

    logger.child("child").info("하위 로그")

    records = logger.repository.list()
    assert records[0].logger_name == "child"


def test_repository_keeps_only_recent_records() -> None:
    repository = InMemoryLogRepository(max_records=2)
    logger = InMemoryLogger(name="bounded", repository=repository, emit_stdout=False)

    for index in range(3):
        logger.info(f"로그 {index}")

    assert [record.message for record in repository.list()] == ["로그 1", "로그 2"]


def test_stdout_emission_writes_json_line() -> None:
    stream = io.StringIO()
    logger = InMemoryLogger(name="json", emit_stdout=True, stream=stream)

    logger.info("채팅 생성", LogContext(chat_id=1), title="hello")

    payload = json.loads(stream.getvalue().strip())
    assert payload["level"] == "INFO"
    assert payload["logger"] == "json"
    assert payload["message"] == "채팅 생성"
    assert payload["context"]["chat_id"] == 1
    assert payload["metadata"] == {"title": "hello"}
