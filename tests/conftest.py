"""
목적: pytest 공통 로깅 훅과 DB 픽스처를 제공한다.
설명: 테스트 시작/종료와 결과를 로깅하고, tmp_path 기반 SQLite 클라이언트와 저장소를 준비한다.
디자인 패턴: 테스트 훅, 픽스처
참조: pyproject.toml, src/chat_service/integrations/db/client.py
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from chat_service.integrations.db import DBClient
from chat_service.integrations.db.engines.sqlite import SQLiteEngine
from chat_service.shared.chat import ChatRepository, MessageRepository
from chat_service.shared.logging import InMemoryLogger, LogLevel

_LOGGER = logging.getLogger("tests")


def _load_env_files() -> None:
    """프로젝트 루트의 .env가 있으면 로딩한다. 이미 설정된 값은 덮어쓰지 않는다."""

    root = Path(__file__).resolve().parents[1]
    env_path = root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


_load_env_files()


@pytest.fixture
def test_logger() -> InMemoryLogger:
    """stdout 출력 없이 레코드만 보관하는 로거를 반환한다."""

    return InMemoryLogger(name="tests", emit_stdout=False, min_level=LogLevel.DEBUG)


@pytest.fixture
def sqlite_path(tmp_path) -> Path:
    return tmp_path / "chat_service.sqlite"


@pytest.fixture
def db_client(sqlite_path, test_logger):
    """마이그레이션까지 적용된 SQLite DBClient를 반환한다."""

    engine = SQLiteEngine(
        database_path=str(sqlite_path),
        logger=test_logger,
        max_connections=8,
        busy_timeout_ms=5000,
    )
    client = DBClient(engine, logger=test_logger, pool_timeout=10.0)
    client.connect()
    client.migrate()
    yield client
    client.close()


@pytest.fixture
def chat_repository(db_client, test_logger) -> ChatRepository:
    return ChatRepository(db_client, logger=test_logger)


@pytest.fixture
def message_repository(db_client, test_logger) -> MessageRepository:
    return MessageRepository(db_client, logger=test_logger)


@pytest.fixture
def postgres_dsn() -> str:
    """PostgreSQL 통합 테스트용 DSN을 반환한다. 없으면 테스트를 건너뛴다."""

    dsn = os.getenv("POSTGRES_DSN")
    if not dsn:
        pytest.skip("POSTGRES_DSN이 설정되지 않아 PostgreSQL 통합 테스트를 건너뜁니다.")
    return dsn


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
