"""회원 레포지토리 — 회원 조회, 상태별 조회, 행 잠금 쿼리.

Member Repository — Lookup, status filtering and row-locking queries for members.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.member import Member, MemberStatus
from app.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the members table.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    async def get_by_login_id(
        self,
        db: AsyncSession,
        login_id: str,
    ) -> Member | None:
        """로그인 아이디로 회원을 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            login_id: 로그인 아이디 (Login id)

        Returns:
            Member | None: 조회된 회원 또는 None (Found member or None)
        """
        result = await db.execute(select(Member).where(Member.login_id == login_id))
        return result.scalar_one_or_none()

    async def get_with_profile(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> Member | None:
        """사업자 프로필을 함께 로드하여 회원을 조회합니다.

        Retrieve a member with its business profile eagerly loaded.
        """
        query: Select = (
            select(Member)
            .options(selectinload(Member.business_profile))
            .where(Member.id == member_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_for_update(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> Member | None:
        """회원 행을 잠그고 조회합니다 (SELECT ... FOR UPDATE).

        Lock the member row for the rest of the transaction so concurrent
        region/price syncs for the same member run one after another.
        """
        result = await db.execute(
            select(Member).where(Member.id == member_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def get_by_status(
        self,
        db: AsyncSession,
        status: MemberStatus,
    ) -> list[Member]:
        """상태별 회원 목록을 가입순으로 조회합니다 (사업자 프로필 포함).

        Retrieve members in the given status, oldest signup first,
        with business profiles loaded.
        """
        query: Select = (
            select(Member)
            .options(selectinload(Member.business_profile))
            .where(Member.status == status)
            .order_by(Member.created_at)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스: Singleton instance
member_repository: MemberRepository = MemberRepository()
