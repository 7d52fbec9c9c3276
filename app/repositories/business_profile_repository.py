"""사업자 프로필 레포지토리.

Business Profile Repository — Lookup of a member's business profile.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.business_profile import MemberBusinessProfile
from app.repositories.base import BaseRepository


class BusinessProfileRepository(BaseRepository[MemberBusinessProfile]):

    def __init__(self) -> None:
        super().__init__(MemberBusinessProfile)

    async def get_by_member_id(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> MemberBusinessProfile | None:
        """회원 ID로 사업자 프로필을 조회합니다 (1:1)."""
        result = await db.execute(
            select(MemberBusinessProfile).where(MemberBusinessProfile.member_id == member_id)
        )
        return result.scalar_one_or_none()


business_profile_repository: BusinessProfileRepository = BusinessProfileRepository()
