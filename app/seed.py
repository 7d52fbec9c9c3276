"""초기 데이터 시드 스크립트 — 테이블 및 초기 관리자 계정 생성.

Seed script — Creates tables and the initial administrator account.
Run this script once to bootstrap a fresh database.

Usage:
    python -m app.seed

Creates:
    - 1개 관리자 계정: INITIAL_ADMIN_LOGIN_ID / INITIAL_ADMIN_PASSWORD
      (One admin from settings, default admin / admin1234!)
"""

import asyncio
import logging

from app.config import settings
from app.database import Base, async_session, engine
from app.models import Admin
from app.repositories.admin_repository import admin_repository
from app.utils.password import hash_password

logger = logging.getLogger("app.seed")


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Idempotent: 같은 아이디의 관리자가 있으면 건너뜁니다
    (Skips when the initial admin already exists).
    """
    # 테이블 생성: DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        existing = await admin_repository.get_by_login_id(db, settings.INITIAL_ADMIN_LOGIN_ID)
        if existing is not None:
            logger.info("Admin %s already exists. Skipping.", settings.INITIAL_ADMIN_LOGIN_ID)
            return

        admin: Admin = await admin_repository.create(db, {
            "login_id": settings.INITIAL_ADMIN_LOGIN_ID,
            "password_hash": hash_password(settings.INITIAL_ADMIN_PASSWORD),
            "name": settings.INITIAL_ADMIN_NAME,
            "is_active": True,
        })
        await db.commit()
        logger.info("Seed completed: admin %s (%s)", admin.login_id, admin.id)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
    asyncio.run(seed())
