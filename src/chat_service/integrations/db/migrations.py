"""
목적: 버전 기반 스키마 마이그레이션 실행기를 제공한다.
설명: schema_migrations 기록 테이블을 기준으로 미적용 버전만 순서대로 적용한다.
      버전마다 쓰기 트랜잭션 하나를 사용하므로 실패한 버전은 기록되지 않는다.
디자인 패턴: 커맨드 패턴
참조: src/chat_service/integrations/db/client.py, src/chat_service/integrations/db/engines/sqlite/migrations.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, ContextManager

from chat_service.integrations.db.base.engine import BaseDBEngine
from chat_service.integrations.db.base.session import BaseSession
from chat_service.shared.logging import Logger

MIGRATION_TABLE = "schema_migrations"

TransactionFactory = Callable[[], ContextManager[BaseSession]]


class MigrationRunner:
    """스키마 마이그레이션 실행기.

    Args:
        engine: 마이그레이션 목록과 기록 테이블 DDL을 제공하는 엔진.
        transaction: 쓰기 트랜잭션 세션을 여는 팩토리.
        logger: 로거.
    """

    def __init__(
        self,
        engine: BaseDBEngine,
        transaction: TransactionFactory,
        logger: Logger,
    ) -> None:
        self._engine = engine
        self._transaction = transaction
        self._logger = logger

    def current_version(self) -> int:
        """적용된 최신 버전을 반환한다. 적용 이력이 없으면 0."""

        self._ensure_table()
        with self._transaction() as session:
            return self._read_version(session)

    def run(self) -> int:
        """미적용 마이그레이션을 적용하고 적용한 개수를 반환한다."""

        self._ensure_table()
        applied = 0
        for migration in sorted(self._engine.migrations, key=lambda item: item.version):
            with self._transaction() as session:
                session.lock_migrations()
                if self._is_applied(session, migration.version):
                    continue
                for statement in migration.statements:
                    session.execute(statement)
                session.insert(
                    MIGRATION_TABLE,
                    {
                        "version": migration.version,
                        "name": migration.name,
                        "applied_at": datetime.now(timezone.utc),
                    },
                    primary_key="version",
                )
            applied += 1
            self._logger.info(
                f"마이그레이션을 적용했습니다: {migration.version} ({migration.name})"
            )
        if applied == 0:
            self._logger.debug("적용할 마이그레이션이 없습니다.")
        return applied

    def _ensure_table(self) -> None:
        with self._transaction() as session:
            session.lock_migrations()
            session.execute(self._engine.migration_table_ddl)

    def _is_applied(self, session: BaseSession, version: int) -> bool:
        return session.count(MIGRATION_TABLE, {"version": version}) > 0

    @staticmethod
    def _read_version(session: BaseSession) -> int:
        rows = session.fetch_all(f'SELECT MAX("version") AS "version" FROM "{MIGRATION_TABLE}"')
        if not rows or rows[0]["version"] is None:
            return 0
        return int(rows[0]["version"])
