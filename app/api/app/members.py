"""파트너 회원 라우터 — 회원가입, 내 정보, 배송 지역/가격 설정.

App Member Router — Partner signup, self profile and delivery settings.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_member
from app.database import get_db
from app.models.member import Member
from app.schemas.common import MessageResponse
from app.schemas.member import (
    BusinessNumberCheckResponse,
    LoginIdCheckResponse,
    MemberResponse,
    SignupRequest,
)
from app.schemas.region_price import RegionPriceRequest, RegionPriceResponse
from app.services.member_service import member_service
from app.services.region_price_service import region_price_service

router: APIRouter = APIRouter()

DELIVERY_SETTINGS_SAVED: str = "배송설정이 저장되었습니다."


@router.post("/signup", response_model=MemberResponse, status_code=201)
async def signup(
    data: SignupRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """파트너 회원가입 — 승인 대기(PENDING) 상태로 생성."""
    result = await member_service.signup(db, data)
    await db.commit()
    return result


@router.get("/check-login-id", response_model=LoginIdCheckResponse)
async def check_login_id(
    db: Annotated[AsyncSession, Depends(get_db)],
    login_id: str = Query(..., min_length=4, max_length=20),
) -> LoginIdCheckResponse:
    taken = await member_service.is_login_id_taken(db, login_id)
    return LoginIdCheckResponse(login_id=login_id, available=not taken)


@router.get("/check-business-number", response_model=BusinessNumberCheckResponse)
async def check_business_number(
    db: Annotated[AsyncSession, Depends(get_db)],
    business_number: str = Query(..., pattern=r"^\d{10}$"),
) -> BusinessNumberCheckResponse:
    """사업자등록번호 중복 확인 (숫자 10자리)."""
    taken = await member_service.is_business_number_taken(db, business_number)
    return BusinessNumberCheckResponse(business_number=business_number, available=not taken)


@router.get("/me", response_model=MemberResponse)
async def get_me(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> MemberResponse:
    return await member_service.get_me(db, current_member)


@router.put("/me/regions-prices", response_model=MessageResponse)
async def save_regions_and_prices(
    data: list[RegionPriceRequest],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> MessageResponse:
    """배송 지역/가격 일괄 저장 — 기존 설정은 요청 내용으로 교체."""
    await region_price_service.save_regions_and_prices(db, current_member.id, data)
    await db.commit()
    return MessageResponse(message=DELIVERY_SETTINGS_SAVED)


@router.get("/me/regions-prices", response_model=list[RegionPriceResponse])
async def get_regions_and_prices(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> list[RegionPriceResponse]:
    return await region_price_service.get_regions_and_prices(db, current_member.id)
