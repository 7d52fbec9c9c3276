"""배송 지역/가격 동기화 서비스.

Region/Price Service — Replaces a partner's delivery regions and regional
category prices with the set submitted in one request, and reads them back.

Sync algorithm (single transaction, owned by the caller):
    1. 회원 행 잠금 (Lock the member row so syncs for one member serialize)
    2. 기존 지역 전체 비활성화, 기존 가격 전체 취급불가 처리
       (Deactivate every region and mark every price unavailable)
    3. 요청 순서대로 지역/가격 upsert — 자연키 기준
       (Upsert regions by (sido, sigungu) and prices by
       (sido, sigungu, category_name) in request order)

Rows are never deleted; superseded entries stay as inactive history.
"""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.region_price import MemberActivityRegion, MemberProductPrice
from app.repositories.activity_region_repository import activity_region_repository
from app.repositories.member_repository import member_repository
from app.repositories.product_price_repository import product_price_repository
from app.schemas.region_price import (
    ProductPriceResponse,
    RegionPriceRequest,
    RegionPriceResponse,
)
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)

RegionKey = tuple[str, str]
PriceKey = tuple[str, str, str]


class RegionPriceService:
    """지역/가격 매트릭스 동기화 비즈니스 로직."""

    async def save_regions_and_prices(
        self,
        db: AsyncSession,
        member_id: UUID,
        requests: list[RegionPriceRequest],
    ) -> None:
        """회원의 배송 지역과 지역별 가격을 요청 내용으로 교체합니다.

        Replace the member's declared regions and prices with ``requests``.
        An empty list deactivates everything. When the same region or price
        key appears twice in one request, the later entry wins.

        Price availability is ``handled AND price.is_available``: a region the
        partner does not handle never exposes an available price.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 UUID (Member identifier)
            requests: 지역별 설정 목록 (Per-region settings, in display order)

        Raises:
            NotFoundError: 회원이 존재하지 않을 때 (Member does not exist)
        """
        member = await member_repository.get_for_update(db, member_id)
        if member is None:
            raise NotFoundError("회원을 찾을 수 없습니다. (Member not found)")

        regions: list[MemberActivityRegion] = await activity_region_repository.get_by_member(db, member_id)
        prices: list[MemberProductPrice] = await product_price_repository.get_by_member(db, member_id)

        # 1단계: 전체 비활성화 (deactivate phase)
        for region in regions:
            region.is_active = False
        for price in prices:
            price.is_available = False

        region_map: dict[RegionKey, MemberActivityRegion] = {r.region_key: r for r in regions}
        price_map: dict[PriceKey, MemberProductPrice] = {p.natural_key: p for p in prices}

        # 2단계: upsert, 요청 순서가 display_order
        price_count: int = 0
        for region_index, req in enumerate(requests):
            region_key: RegionKey = (req.sido, req.sigungu)
            region = region_map.get(region_key)
            if region is None:
                region = MemberActivityRegion(member_id=member_id, sido=req.sido, sigungu=req.sigungu)
                db.add(region)
                region_map[region_key] = region
            region.is_active = req.handled
            region.display_order = region_index

            for price_index, price_req in enumerate(req.prices):
                price_key: PriceKey = (req.sido, req.sigungu, price_req.category_name)
                price = price_map.get(price_key)
                if price is None:
                    price = MemberProductPrice(
                        member_id=member_id,
                        sido=req.sido,
                        sigungu=req.sigungu,
                        category_name=price_req.category_name,
                        price=Decimal(price_req.price),
                    )
                    db.add(price)
                    price_map[price_key] = price
                price.price = Decimal(price_req.price)
                price.is_available = req.handled and price_req.is_available
                price.display_order = price_index
                price_count += 1

        # 같은 지역이 반복되면 마지막 handled 가 이김: 비취급 지역의 가격은 취급불가
        for price_key, price in price_map.items():
            owner = region_map.get(price_key[:2])
            if owner is None or not owner.is_active:
                price.is_available = False

        await db.flush()
        logger.info(
            "Synced delivery settings for member %s: %d regions, %d prices",
            member_id, len(requests), price_count,
        )

    async def get_regions_and_prices(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> list[RegionPriceResponse]:
        """활성 지역과 지역별 가격 목록을 조회합니다.

        Return the member's active regions in display order, each with every
        price row stored for that (sido, sigungu), including unavailable ones.

        Raises:
            NotFoundError: 회원이 존재하지 않을 때 (Member does not exist)
        """
        member = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("회원을 찾을 수 없습니다. (Member not found)")

        regions = await activity_region_repository.get_active_by_member(db, member_id)
        prices = await product_price_repository.get_by_member(db, member_id)

        # 지역 키로 가격 묶기: repository 정렬(display_order) 유지
        prices_by_region: dict[RegionKey, list[ProductPriceResponse]] = {}
        for price in prices:
            prices_by_region.setdefault((price.sido, price.sigungu), []).append(
                ProductPriceResponse(
                    category_name=price.category_name,
                    price=int(price.price),
                    price_in_won=price.price_in_won,
                    is_available=price.is_available,
                )
            )

        return [
            RegionPriceResponse(
                sido=region.sido,
                sigungu=region.sigungu,
                handled=region.is_active,
                prices=prices_by_region.get(region.region_key, []),
            )
            for region in regions
        ]


region_price_service: RegionPriceService = RegionPriceService()
