"""
목적: PostgreSQL 엔진 공개 API를 제공한다.
설명: 엔진, 세션, 커넥션 풀 구현을 노출한다.
디자인 패턴: 퍼사드
참조: src/chat_service/integrations/db/engines/postgres/engine.py
"""

from chat_service.integrations.db.engines.postgres.connection import PostgresConnectionPool
from chat_service.integrations.db.engines.postgres.engine import PostgresEngine
from chat_service.integrations.db.engines.postgres.session import PostgresSession

__all__ = ["PostgresEngine", "PostgresConnectionPool", "PostgresSession"]
