"""
목적: PostgreSQL 스키마 마이그레이션 목록을 제공한다.
설명: SQLite와 같은 논리 스키마를 PostgreSQL 타입(BIGSERIAL, TIMESTAMPTZ)으로 정의한다.
디자인 패턴: 선언적 스키마 정의
참조: src/chat_service/integrations/db/engines/sqlite/migrations.py
"""

from __future__ import annotations

from chat_service.integrations.db.base.models import Migration

SCHEMA_MIGRATIONS_DDL = (
    'CREATE TABLE IF NOT EXISTS "schema_migrations" ('
    '"version" INTEGER PRIMARY KEY, '
    '"name" TEXT NOT NULL, '
    '"applied_at" TIMESTAMPTZ NOT NULL)'
)

POSTGRES_MIGRATIONS = (
    Migration(
        version=1,
        name="create_chats",
        statements=(
            'CREATE TABLE IF NOT EXISTS "chats" ('
            '"id" BIGSERIAL PRIMARY KEY, '
            '"title" VARCHAR(200) NOT NULL, '
            '"created_at" TIMESTAMPTZ NOT NULL, '
            'CONSTRAINT "uq_chats_title" UNIQUE ("title"))',
        ),
    ),
    Migration(
        version=2,
        name="create_messages",
        statements=(
            'CREATE TABLE IF NOT EXISTS "messages" ('
            '"id" BIGSERIAL PRIMARY KEY, '
            '"chat_id" BIGINT NOT NULL, '
            '"text" VARCHAR(5000) NOT NULL, '
            '"created_at" TIMESTAMPTZ NOT NULL, '
            'CONSTRAINT "fk_messages_chat" FOREIGN KEY ("chat_id") '
            'REFERENCES "chats" ("id") ON DELETE CASCADE)',
            'CREATE INDEX IF NOT EXISTS "idx_messages_chat_created" '
            'ON "messages" ("chat_id", "created_at" DESC, "id" DESC)',
        ),
    ),
)
