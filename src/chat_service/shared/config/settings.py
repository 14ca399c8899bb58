"""
목적: 애플리케이션 설정 모델을 정의한다.
설명: HTTP 서버, 저장소 백엔드, 커넥션 풀, 로깅 설정을 Pydantic으로 검증한다.
디자인 패턴: 설정 객체 패턴
참조: src/chat_service/shared/config/loader.py
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chat_service.shared.logging import LogLevel


class DatabaseBackend(str, Enum):
    """저장소 백엔드 종류."""

    SQLITE = "sqlite"
    POSTGRES = "postgres"


# 0 이하 값이면 기본값으로 대체하는 정수 설정
_POSITIVE_INT_DEFAULTS = {
    "port": 8080,
    "db_port": 5432,
    "db_max_open_conns": 20,
    "db_max_idle_conns": 5,
    "sqlite_busy_timeout_ms": 5000,
    "db_conn_max_idle_time": 300,
    "db_conn_max_lifetime": 3600,
}
_POSITIVE_FLOAT_DEFAULTS = {
    "db_pool_timeout_seconds": 30.0,
    "request_timeout_seconds": 20.0,
}


class AppSettings(BaseModel):
    """애플리케이션 설정 모델이다.

    환경 변수 이름을 소문자로 바꾼 키를 그대로 필드 이름으로 사용한다(예: ``DB_HOST`` -> ``db_host``).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    app_name: str = "chat-service"
    app_version: str = "0.1.0"

    host: str = "0.0.0.0"
    port: int = 8080
    request_timeout_seconds: float = 20.0

    db_backend: DatabaseBackend = DatabaseBackend.SQLITE
    sqlite_path: str = "data/db/chat_service.sqlite"
    sqlite_busy_timeout_ms: int = 5000

    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "chats"
    db_ssl_mode: str = "disable"
    db_max_open_conns: int = 20
    db_max_idle_conns: int = 5
    db_pool_timeout_seconds: float = 30.0
    db_conn_max_idle_time: int = Field(default=300, description="유휴 커넥션을 닫기까지의 시간(초)")
    db_conn_max_lifetime: int = Field(default=3600, description="커넥션 최대 수명(초)")

    log_level: LogLevel = LogLevel.INFO
    log_stdout: bool = False

    migrate_on_startup: bool = Field(default=True, description="기동 시 마이그레이션 적용 여부")

    @field_validator("db_backend", mode="before")
    @classmethod
    def _normalize_backend(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip().lower()
            return "postgres" if normalized in {"postgresql", "pg"} else normalized
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return LogLevel.parse(value, LogLevel.INFO)
        return value

    @field_validator(*_POSITIVE_INT_DEFAULTS, mode="before")
    @classmethod
    def _positive_int(cls, value: object, info) -> int:
        default = _POSITIVE_INT_DEFAULTS[info.field_name]
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return default
        return parsed if parsed > 0 else default

    @field_validator(*_POSITIVE_FLOAT_DEFAULTS, mode="before")
    @classmethod
    def _positive_float(cls, value: object, info) -> float:
        default = _POSITIVE_FLOAT_DEFAULTS[info.field_name]
        try:
            parsed = float(value)
        except (TypeError, ValueError):
            return default
        return parsed if parsed > 0 else default

    @property
    def postgres_dsn(self) -> str:
        """PostgreSQL 접속 DSN을 조합한다. 비밀번호는 URL 인코딩한다."""

        return (
            f"postgresql://{self.db_user}:{quote(self.db_password, safe='')}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?sslmode={self.db_ssl_mode}"
        )
