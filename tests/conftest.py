"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite (aiosqlite) DB, session, and httpx
client fixtures. Every test gets a fresh schema; no external database needed.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 (register all models with metadata)
from app.models.admin import Admin
from app.models.business_profile import MemberBusinessProfile
from app.models.member import Member, MemberStatus, NotificationSetting
from app.utils.jwt import ROLE_ADMIN, ROLE_MEMBER, create_access_token
from app.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN_PASSWORD = "admin1234!"
MEMBER_PASSWORD = "partner1234!"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 테스트마다 새 인메모리 스키마."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def create_member(
    db: AsyncSession,
    login_id: str = "partner01",
    business_number: str = "1234567890",
    status: MemberStatus = MemberStatus.PENDING,
    with_profile: bool = True,
) -> Member:
    """회원(+사업자 프로필, 알림 설정)을 생성합니다."""
    member = Member(
        login_id=login_id,
        password_hash=hash_password(MEMBER_PASSWORD),
        name="신사꽃집",
        nickname="신사",
        mobile="01012345678",
        status=status,
    )
    db.add(member)
    await db.flush()
    if with_profile:
        db.add(MemberBusinessProfile(
            member_id=member.id,
            business_number=business_number,
            corp_name="신사플라워",
            ceo_name="홍길동",
        ))
    db.add(NotificationSetting(member_id=member.id))
    await db.flush()
    return member


@pytest_asyncio.fixture
async def admin(db: AsyncSession) -> Admin:
    """관리자를 생성합니다."""
    a = Admin(
        login_id="admin",
        password_hash=hash_password(ADMIN_PASSWORD),
        name="테스트 관리자",
        is_active=True,
    )
    db.add(a)
    await db.flush()
    return a


@pytest_asyncio.fixture
async def pending_member(db: AsyncSession) -> Member:
    """승인 대기 회원을 생성합니다."""
    return await create_member(db)


@pytest_asyncio.fixture
async def active_member(db: AsyncSession) -> Member:
    """활성 회원을 생성합니다."""
    return await create_member(db, login_id="active01", business_number="2223334444", status=MemberStatus.ACTIVE)


def make_token(subject_id, role: str, login_id: str) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": str(subject_id), "role": role, "login_id": login_id})


@pytest.fixture
def admin_token(admin: Admin) -> str:
    return make_token(admin.id, ROLE_ADMIN, admin.login_id)


@pytest.fixture
def member_token(active_member: Member) -> str:
    return make_token(active_member.id, ROLE_MEMBER, active_member.login_id)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
