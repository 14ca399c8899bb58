"""
목적: 설정 로더와 설정 모델 동작을 검증한다.
설명: 소스 병합 우선순위, .env 로딩, 잘못된 값의 기본값 대체, DSN 조합을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/chat_service/shared/config/loader.py, src/chat_service/shared/config/settings.py
"""

from __future__ import annotations

import json

import pytest

from chat_service.shared.config import AppSettings, ConfigLoader, DatabaseBackend, load_settings
from chat_service.shared.logging import LogLevel


def test_defaults_match_documented_values() -> None:
    settings = AppSettings()

    assert settings.port == 8080
    assert settings.db_backend == DatabaseBackend.SQLITE
    assert settings.sqlite_path == "data/db/chat_service.sqlite"
    assert settings.db_max_open_conns == 20
    assert settings.db_max_idle_conns == 5
    assert settings.db_pool_timeout_seconds == 30.0
    assert settings.request_timeout_seconds == 20.0
    assert settings.log_level == LogLevel.INFO


def test_later_sources_override_earlier_ones(tmp_path) -> None:
    """dict < JSON 파일 < overrides 순서로 덮어쓴다."""

    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"port": 9000, "app_name": "from-file"}), encoding="utf-8")

    settings = (
        ConfigLoader()
        .add_dict({"port": 8000, "db_name": "from-dict"})
        .add_json_file(config_path)
        .build_settings({"app_name": "from-override"})
    )

    assert settings.port == 9000
    assert settings.db_name == "from-dict"
    assert settings.app_name == "from-override"


def test_missing_required_json_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        ConfigLoader().add_json_file(tmp_path / "missing.json", required=True)


def test_environment_overrides_dotenv(tmp_path, monkeypatch) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("DB_BACKEND=postgresql\nDB_HOST=from-dotenv\nPORT=7000\n", encoding="utf-8")
    monkeypatch.delenv("DB_BACKEND", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("DB_HOST", "from-env")

    settings = load_settings(env_file=env_path)

    assert settings.db_backend == DatabaseBackend.POSTGRES
    assert settings.db_host == "from-env"
    assert settings.port == 7000


@pytest.mark.parametrize("raw", ["0", "-5", "abc", ""])
def test_non_positive_pool_settings_fall_back_to_defaults(raw) -> None:
    settings = AppSettings.model_validate(
        {
            "db_max_open_conns": raw,
            "db_max_idle_conns": raw,
            "db_pool_timeout_seconds": raw,
            "request_timeout_seconds": raw,
        }
    )

    assert settings.db_max_open_conns == 20
    assert settings.db_max_idle_conns == 5
    assert settings.db_pool_timeout_seconds == 30.0
    assert settings.request_timeout_seconds == 20.0


def test_environment_keys_are_lowercased_and_empty_values_skipped(monkeypatch) -> None:
    monkeypatch.setenv("DB_NAME", "from-env")
    monkeypatch.setenv("DB_USER", "")

    merged = ConfigLoader().add_dict({"db_user": "from-dict"}).add_env().build()

    assert merged["db_name"] == "from-env"
    assert merged["db_user"] == "from-dict"


@pytest.mark.parametrize("raw", ["0", "-1", "not-a-port", ""])
def test_malformed_db_port_falls_back_to_default(raw) -> None:
    assert AppSettings(db_port=raw).db_port == 5432


def test_connection_recycling_settings() -> None:
    assert AppSettings().db_conn_max_idle_time == 300
    assert AppSettings().db_conn_max_lifetime == 3600

    settings = AppSettings.model_validate(
        {"db_conn_max_idle_time": "60", "db_conn_max_lifetime": "-5"}
    )

    assert settings.db_conn_max_idle_time == 60
    assert settings.db_conn_max_lifetime == 3600


def test_unknown_log_level_falls_back_to_info() -> None:
    assert AppSettings(log_level="verbose").log_level == LogLevel.INFO
    assert AppSettings(log_level="debug").log_level == LogLevel.DEBUG


def test_postgres_dsn_escapes_password() -> None:
    settings = AppSettings(
        db_user="chat",
        db_password="p@ss:word/1",
        db_host="db",
        db_port=5433,
        db_name="chats",
        db_ssl_mode="require",
    )

    assert settings.postgres_dsn == "postgresql://chat:p%40ss%3Aword%2F1@db:5433/chats?sslmode=require"
