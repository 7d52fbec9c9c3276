"""활동 지역 레포지토리.

Activity Region Repository — Per-member service region queries.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.region_price import MemberActivityRegion
from app.repositories.base import BaseRepository


class ActivityRegionRepository(BaseRepository[MemberActivityRegion]):

    def __init__(self) -> None:
        super().__init__(MemberActivityRegion)

    async def get_by_member(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> list[MemberActivityRegion]:
        """회원의 모든 활동 지역 (비활성 포함)."""
        result = await db.execute(
            select(MemberActivityRegion).where(MemberActivityRegion.member_id == member_id)
        )
        return list(result.scalars().all())

    async def get_active_by_member(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> list[MemberActivityRegion]:
        """회원의 활성 지역을 요청 순서(display_order)대로 조회합니다.

        Active regions of a member in the order of the last sync request.
        """
        result = await db.execute(
            select(MemberActivityRegion)
            .where(
                MemberActivityRegion.member_id == member_id,
                MemberActivityRegion.is_active.is_(True),
            )
            .order_by(MemberActivityRegion.display_order, MemberActivityRegion.created_at)
        )
        return list(result.scalars().all())


activity_region_repository: ActivityRegionRepository = ActivityRegionRepository()
