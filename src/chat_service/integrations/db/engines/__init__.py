"""
목적: DB 엔진 구현 모음을 노출한다.
설명: SQLite와 PostgreSQL 엔진을 제공한다.
디자인 패턴: 퍼사드
참조: src/chat_service/integrations/db/engines/sqlite/engine.py, src/chat_service/integrations/db/engines/postgres/engine.py
"""

from chat_service.integrations.db.engines.postgres import PostgresEngine
from chat_service.integrations.db.engines.sqlite import SQLiteEngine

__all__ = ["PostgresEngine", "SQLiteEngine"]
