"""지역별 상품 가격 레포지토리.

Product Price Repository — Per-member regional price queries.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.region_price import MemberProductPrice
from app.repositories.base import BaseRepository


class ProductPriceRepository(BaseRepository[MemberProductPrice]):

    def __init__(self) -> None:
        super().__init__(MemberProductPrice)

    async def get_by_member(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> list[MemberProductPrice]:
        """회원의 모든 가격 행을 지역 내 순서대로 조회합니다.

        All price rows of a member, ordered by their position within a region.
        """
        result = await db.execute(
            select(MemberProductPrice)
            .where(MemberProductPrice.member_id == member_id)
            .order_by(MemberProductPrice.display_order, MemberProductPrice.category_name)
        )
        return list(result.scalars().all())


product_price_repository: ProductPriceRepository = ProductPriceRepository()
