"""활동 지역 및 지역별 가격 Pydantic 스키마.

Delivery region / regional price request and response schemas.
Prices are expressed in thousands of won (47 = 47,000 won).
"""

from pydantic import BaseModel, Field


class ProductPriceRequest(BaseModel):
    """카테고리별 가격 요청.

    Attributes:
        category_name: 상품 카테고리 (축하, 근조, 동양, 서양, 꽃, 관엽, 쌀, 기타, 과일)
        price: 가격, 천원 단위 (Price in thousands of won, non-negative)
        is_available: 취급 여부 (Whether the category is offered in the region)
    """

    category_name: str = Field(..., min_length=1, max_length=50)
    price: int = Field(..., ge=0)
    is_available: bool = True


class RegionPriceRequest(BaseModel):
    """지역 단위 배송 설정 요청 — 지역 취급 여부와 카테고리 가격 목록.

    Attributes:
        sido: 시/도 (e.g. "서울")
        sigungu: 시/군/구 (e.g. "강남구")
        handled: 지역 취급 여부 (False stores the region as inactive)
        prices: 카테고리별 가격 목록 (Category prices for the region)
    """

    sido: str = Field(..., min_length=1, max_length=50)
    sigungu: str = Field(..., min_length=1, max_length=50)
    handled: bool = True
    prices: list[ProductPriceRequest] = []


class ProductPriceResponse(BaseModel):
    category_name: str
    price: int  # 천원 단위
    price_in_won: int  # 원 단위 (price × 1000)
    is_available: bool


class RegionPriceResponse(BaseModel):
    """활성 지역과 그 지역의 가격 목록 응답."""

    sido: str
    sigungu: str
    handled: bool  # 지역 활성 여부 (region.is_active)
    prices: list[ProductPriceResponse] = []
