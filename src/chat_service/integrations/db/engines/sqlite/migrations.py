"""
목적: SQLite 스키마 마이그레이션 목록을 제공한다.
설명: chats/messages 테이블과 제목 유일 제약, 연쇄 삭제 외래 키, 최신순 조회 인덱스를 정의한다.
디자인 패턴: 선언적 스키마 정의
참조: src/chat_service/integrations/db/migrations.py
"""

from __future__ import annotations

from chat_service.integrations.db.base.models import Migration

SCHEMA_MIGRATIONS_DDL = (
    'CREATE TABLE IF NOT EXISTS "schema_migrations" ('
    '"version" INTEGER PRIMARY KEY, '
    '"name" TEXT NOT NULL, '
    '"applied_at" TEXT NOT NULL)'
)

SQLITE_MIGRATIONS = (
    Migration(
        version=1,
        name="create_chats",
        statements=(
            'CREATE TABLE IF NOT EXISTS "chats" ('
            '"id" INTEGER PRIMARY KEY AUTOINCREMENT, '
            '"title" TEXT NOT NULL, '
            '"created_at" TEXT NOT NULL, '
            'CONSTRAINT "uq_chats_title" UNIQUE ("title"))',
        ),
    ),
    Migration(
        version=2,
        name="create_messages",
        statements=(
            'CREATE TABLE IF NOT EXISTS "messages" ('
            '"id" INTEGER PRIMARY KEY AUTOINCREMENT, '
            '"chat_id" INTEGER NOT NULL, '
            '"text" TEXT NOT NULL, '
            '"created_at" TEXT NOT NULL, '
            'CONSTRAINT "fk_messages_chat" FOREIGN KEY ("chat_id") '
            'REFERENCES "chats" ("id") ON DELETE CASCADE)',
            'CREATE INDEX IF NOT EXISTS "idx_messages_chat_created" '
            'ON "messages" ("chat_id", "created_at" DESC, "id" DESC)',
        ),
    ),
)
