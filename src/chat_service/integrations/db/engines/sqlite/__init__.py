"""
목적: SQLite 엔진 공개 API를 제공한다.
설명: 엔진, 세션, 커넥션 풀 구현을 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/integrations/db/engines/sqlite/engine.py
"""

from chat_service.integrations.db.engines.sqlite.connection import SqliteConnectionPool
from chat_service.integrations.db.engines.sqlite.engine import SQLiteEngine
from chat_service.integrations.db.engines.sqlite.session import SqliteSession

__all__ = ["SQLiteEngine", "SqliteConnectionPool", "SqliteSession"]
