"""활동 지역 및 지역별 상품 가격 SQLAlchemy ORM 모델 정의.

Activity region and regional product price SQLAlchemy ORM model definitions.
Both tables are owned by a member and correlated with each other only by the
(sido, sigungu) value pair — there is no foreign key between them.

Tables:
    - member_activity_regions: 회원이 선언한 배송 지역 (Declared service regions)
    - member_product_prices: 회원×지역×카테고리 가격 (Price per member/region/category)

Constraints:
    uq_member_activity_region: (member_id, sido, sigungu) 고유
    uq_member_region_category: (member_id, sido, sigungu, category_name) 고유
"""

import uuid
from decimal import Decimal
from typing import Any

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, TimestampMixin

# 가격 단위: 천원 (47 = 47,000원)
PRICE_UNIT_WON: int = 1000


class MemberActivityRegion(TimestampMixin, Base):
    """활동 지역 모델 — 회원이 배송 가능한 시/도, 시/군/구.

    One row per (member, sido, sigungu). Superseded regions are marked
    inactive by the region/price sync rather than deleted.

    Attributes:
        sido: 시/도 (Province tier, e.g. "서울")
        sigungu: 시/군/구 (District tier, e.g. "강남구")
        is_active: 취급 여부 (Whether the partner currently handles the region)
        display_order: 마지막 동기화 요청 내 순서 (Position in the last sync request)
    """

    __tablename__ = "member_activity_regions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sido: Mapped[str] = mapped_column(String(50), nullable=False)
    sigungu: Mapped[str] = mapped_column(String(50), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("member_id", "sido", "sigungu", name="uq_member_activity_region"),
    )

    # 관계: Relationships
    member = relationship("Member", back_populates="activity_regions")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("is_active", True)
        kwargs.setdefault("display_order", 0)
        super().__init__(**kwargs)

    @property
    def region_key(self) -> tuple[str, str]:
        return self.sido, self.sigungu


class MemberProductPrice(TimestampMixin, Base):
    """지역별 상품 가격 모델.

    Natural key (member_id, sido, sigungu, category_name) is unique; writers
    must find-or-create by that key.

    Attributes:
        category_name: 상품 카테고리 (축하, 근조, 동양, 서양, 꽃, 관엽, 쌀, 기타, 과일)
        price: 가격, 천원 단위 (Price in thousands of won)
        is_available: 취급 가능 여부 (False = declared but not handled)
        display_order: 지역 내 카테고리 순서 (Order within the region's price list)
    """

    __tablename__ = "member_product_prices"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    )
    sido: Mapped[str] = mapped_column(String(50), nullable=False)
    sigungu: Mapped[str] = mapped_column(String(50), nullable=False)
    category_name: Mapped[str] = mapped_column(String(50), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 0), nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("member_id", "sido", "sigungu", "category_name", name="uq_member_region_category"),
        Index("ix_member_product_prices_region", "sido", "sigungu", "category_name"),
    )

    # 관계: Relationships
    member = relationship("Member", back_populates="product_prices")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("is_available", True)
        kwargs.setdefault("display_order", 0)
        super().__init__(**kwargs)

    @property
    def natural_key(self) -> tuple[str, str, str]:
        return self.sido, self.sigungu, self.category_name

    @property
    def price_in_won(self) -> int:
        """천원 단위 가격을 원 단위로 변환 (47 → 47000)."""
        return int(self.price) * PRICE_UNIT_WON

    @property
    def region_full_name(self) -> str:
        return f"{self.sido} {self.sigungu}"
