"""FastAPI 의존성 주입 모듈 — 관리자/파트너 인증.

FastAPI dependency injection module — Authentication for both audiences.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 서명/만료를 검증 (Signature and expiry verified)
    3. "type" 이 access 인지, "role" 이 라우터 대상과 일치하는지 확인
       (Token must be an access token for the router's audience)
    4. "sub" 로 관리자 또는 회원을 조회하고 사용 가능 상태인지 확인
       (Subject loaded and checked for active/login-able status)
"""

from typing import Annotated, Any
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.admin import Admin
from app.models.member import Member
from app.repositories.admin_repository import admin_repository
from app.repositories.member_repository import member_repository
from app.utils.exceptions import ForbiddenError, UnauthorizedError
from app.utils.jwt import ROLE_ADMIN, ROLE_MEMBER, decode_token

# HTTP Bearer 토큰 추출기 (Extracts the token from Authorization: Bearer <token>)
security: HTTPBearer = HTTPBearer()


def _decode_access_token(token: str, expected_role: str) -> UUID:
    """액세스 토큰을 검증하고 subject UUID 를 반환합니다.

    Raises:
        UnauthorizedError: 유효하지 않거나 만료된 토큰, 리프레시 토큰 사용
        ForbiddenError: 다른 대상(role)의 토큰 (Token issued for the other audience)
    """
    try:
        payload: dict[str, Any] = decode_token(token)
        # 토큰 타입 검증: Reject refresh tokens used as access tokens
        if payload.get("type") != "access":
            raise UnauthorizedError("Invalid token type")
        subject_id = UUID(payload["sub"])
    except UnauthorizedError:
        raise
    except (jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        raise UnauthorizedError("Invalid or expired token")

    if payload.get("role") != expected_role:
        raise ForbiddenError("Insufficient permissions")
    return subject_id


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Admin:
    """관리자 토큰에서 현재 관리자를 조회합니다.

    Raises:
        UnauthorizedError(401): 토큰 오류, 관리자 없음 또는 비활성
        ForbiddenError(403): 회원 토큰으로 관리자 API 접근
    """
    admin_id: UUID = _decode_access_token(credentials.credentials, ROLE_ADMIN)
    admin: Admin | None = await admin_repository.get_by_id(db, admin_id)
    if admin is None or not admin.is_active:
        raise UnauthorizedError("Admin not found or inactive")
    return admin


async def get_current_member(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Member:
    """파트너 토큰에서 현재 회원을 조회합니다 — 로그인 가능 상태만 허용.

    A member suspended or deleted after the token was issued is rejected
    on the next request.

    Raises:
        UnauthorizedError(401): 토큰 오류, 회원 없음 또는 로그인 불가 상태
        ForbiddenError(403): 관리자 토큰으로 파트너 API 접근
    """
    member_id: UUID = _decode_access_token(credentials.credentials, ROLE_MEMBER)
    member: Member | None = await member_repository.get_by_id(db, member_id)
    if member is None or not member.can_login():
        raise UnauthorizedError("Member not found or inactive")
    return member
