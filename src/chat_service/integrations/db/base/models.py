"""
목적: DB 계층 공통 모델을 정의한다.
설명: 정렬 조건과 버전 마이그레이션 모델을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/chat_service/integrations/db/base/session.py, src/chat_service/integrations/db/migrations.py
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class SortOrder(str, Enum):
    """정렬 방향."""

    ASC = "ASC"
    DESC = "DESC"


class SortField(BaseModel):
    """정렬 필드 모델."""

    model_config = ConfigDict(frozen=True)

    field: str
    order: SortOrder = SortOrder.ASC


class Migration(BaseModel):
    """버전 단위 스키마 마이그레이션.

    Args:
        version: 1부터 증가하는 버전 번호.
        name: 사람이 읽는 이름.
        statements: 순서대로 실행할 DDL 문장.
    """

    model_config = ConfigDict(frozen=True)

    version: int = Field(ge=1)
    name: str
    statements: Tuple[str, ...]
