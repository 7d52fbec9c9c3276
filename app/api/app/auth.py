"""파트너 앱 인증 라우터 — 로그인, 토큰 갱신.

App Auth Router — Partner login and token refresh.
Only ACTIVE partners can log in; others receive 403 with the reason.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.auth import LoginRequest, RefreshRequest, TokenResponse
from app.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def member_login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """파트너 로그인 — 승인 대기/정지 회원은 403."""
    result: TokenResponse = await auth_service.member_login(db, data)
    await db.commit()
    return result


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    data: RefreshRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """토큰 갱신 — 리프레시 토큰으로 새 토큰 쌍 발급."""
    return await auth_service.refresh_tokens(db, data)
