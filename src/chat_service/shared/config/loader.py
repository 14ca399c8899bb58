"""
목적: 애플리케이션 설정 로더를 제공한다.
설명: dict/JSON 파일/.env 파일/환경 변수를 순서대로 병합해 AppSettings를 생성한다.
디자인 패턴: 빌더 패턴
참조: src/chat_service/shared/config/settings.py, src/chat_service/shared/logging/logger.py
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from chat_service.shared.config.settings import AppSettings
from chat_service.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    뒤에 추가한 소스가 앞선 소스를 덮어쓴다.

    Args:
        logger: 주입 가능한 로거.
    """

    _DEFAULT_ENCODING = "utf-8"

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: list[Dict[str, Any]] = []

    def add_dict(self, data: Optional[Mapping[str, Any]]) -> "ConfigLoader":
        """딕셔너리 설정을 추가한다."""

        if not data:
            return self
        self._sources.append(dict(data))
        return self

    def add_json_file(
        self,
        path: Union[str, Path],
        required: bool = False,
        encoding: Optional[str] = None,
    ) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다."""

        if not path:
            raise ValueError("path는 비어 있을 수 없습니다.")
        if not os.path.exists(path):
            if required:
                raise FileNotFoundError(str(path))
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        with open(path, "r", encoding=encoding or self._DEFAULT_ENCODING) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError("JSON 설정 파일 파싱에 실패했습니다.") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append(payload)
        return self

    def add_dotenv(self, path: Union[str, Path] = ".env") -> "ConfigLoader":
        """`.env` 파일 값을 프로세스 환경을 건드리지 않고 추가한다."""

        if not os.path.exists(path):
            self._logger.debug(f".env 파일이 없어 건너뜁니다: {path}")
            return self
        values = {
            key.lower(): value
            for key, value in dotenv_values(path).items()
            if value is not None
        }
        if values:
            self._sources.append(values)
        return self

    def add_env(self) -> "ConfigLoader":
        """환경 변수 설정을 추가한다.

        키는 소문자로 바꾸고, 값은 문자열 그대로 두어 타입 변환은 설정 모델에 맡긴다.
        빈 값은 설정되지 않은 것으로 본다.
        """

        env_data = {key.lower(): value for key, value in os.environ.items() if value != ""}
        if env_data:
            self._sources.append(env_data)
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for source in self._sources:
            merged.update(source)
        if overrides:
            merged.update(overrides)
        return merged

    def build_settings(self, overrides: Optional[Mapping[str, Any]] = None) -> AppSettings:
        """병합된 설정으로 AppSettings를 생성한다."""

        return AppSettings.model_validate(self.build(overrides))


def load_settings(
    env_file: Union[str, Path, None] = ".env",
    overrides: Optional[Mapping[str, Any]] = None,
) -> AppSettings:
    """기본 우선순위(.env < 환경 변수 < overrides)로 설정을 로드한다."""

    loader = ConfigLoader()
    if env_file:
        loader.add_dotenv(env_file)
    return loader.add_env().build_settings(overrides)
