"""인증 서비스 — 관리자/파트너 로그인, 토큰 갱신 비즈니스 로직.

Auth Service — Admin and partner login plus token refresh.
Tokens carry a ``role`` claim ("admin" / "member") telling which table
``sub`` refers to; the two audiences never share a token.
"""

import logging
from uuid import UUID

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.admin import Admin
from app.models.member import Member, MemberStatus
from app.repositories.admin_repository import admin_repository
from app.repositories.member_repository import member_repository
from app.schemas.auth import LoginRequest, RefreshRequest, TokenResponse
from app.utils.exceptions import ForbiddenError, UnauthorizedError
from app.utils.jwt import ROLE_ADMIN, ROLE_MEMBER, create_token_pair, decode_token
from app.utils.password import verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS: str = "로그인 ID 또는 비밀번호가 올바르지 않습니다."

# 로그인 불가 상태별 안내 메시지: Message per status that blocks login
_LOGIN_BLOCKED_MESSAGES: dict[MemberStatus, str] = {
    MemberStatus.PENDING: "승인되지 않은 계정입니다. 관리자 승인 후 이용 가능합니다.",
    MemberStatus.SUSPENDED: "정지된 계정입니다. 관리자에게 문의해 주세요.",
    MemberStatus.DELETED: "탈퇴 처리된 계정입니다.",
}


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스."""

    def _issue(self, subject_id: UUID, role: str, login_id: str) -> TokenResponse:
        access_token, refresh_token = create_token_pair(str(subject_id), role, login_id)
        return TokenResponse(access_token=access_token, refresh_token=refresh_token)

    def _check_member_can_login(self, member: Member) -> None:
        """로그인 가능 여부 확인 — ACTIVE 이고 삭제되지 않은 회원만.

        Raises:
            ForbiddenError: 상태별 안내 메시지와 함께 (With a status-specific message)
        """
        if not member.can_login():
            status = MemberStatus.DELETED if member.is_deleted else member.status
            raise ForbiddenError(_LOGIN_BLOCKED_MESSAGES.get(status, "사용할 수 없는 계정입니다."))

    async def admin_login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """관리자 로그인을 처리합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 데이터 (Login request data)

        Returns:
            TokenResponse: role="admin" 토큰 쌍 (Admin token pair)

        Raises:
            UnauthorizedError: 존재하지 않거나 비활성 관리자, 비밀번호 불일치
                (Unknown or inactive admin, wrong password)
        """
        admin: Admin | None = await admin_repository.get_by_login_id(db, data.login_id)
        if admin is None or not verify_password(data.password, admin.password_hash):
            logger.warning("Admin login failed: %s", data.login_id)
            raise UnauthorizedError(INVALID_CREDENTIALS)
        if not admin.is_active:
            logger.warning("Inactive admin login attempt: %s", data.login_id)
            raise UnauthorizedError("비활성화된 관리자 계정입니다.")

        admin.update_last_login()
        await db.flush()
        logger.info("Admin logged in: %s", admin.login_id)
        return self._issue(admin.id, ROLE_ADMIN, admin.login_id)

    async def member_login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """파트너 로그인을 처리합니다 — ACTIVE 회원만 허용.

        Partner login. Credentials are checked first; a PENDING, SUSPENDED
        or DELETED member with the right password gets 403 with a message
        explaining why.

        Raises:
            UnauthorizedError: 존재하지 않는 아이디, 비밀번호 불일치
            ForbiddenError: 로그인 불가 상태 (Status does not allow login)
        """
        member: Member | None = await member_repository.get_by_login_id(db, data.login_id)
        if member is None or not verify_password(data.password, member.password_hash):
            logger.warning("Member login failed: %s", data.login_id)
            raise UnauthorizedError(INVALID_CREDENTIALS)
        if not member.can_login():
            logger.warning("Blocked member login: %s (%s)", member.login_id, member.status.value)
        self._check_member_can_login(member)

        member.update_last_login()
        await db.flush()
        logger.info("Member logged in: %s", member.login_id)
        return self._issue(member.id, ROLE_MEMBER, member.login_id)

    async def refresh_tokens(
        self,
        db: AsyncSession,
        data: RefreshRequest,
    ) -> TokenResponse:
        """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

        The token subject is re-checked so a member suspended after login
        cannot keep refreshing.

        Raises:
            UnauthorizedError: 유효하지 않거나 만료된 리프레시 토큰, 주체 없음
        """
        try:
            payload: dict = decode_token(data.refresh_token)
        except jwt.InvalidTokenError:
            raise UnauthorizedError("유효하지 않은 리프레시 토큰입니다. (Invalid refresh token)")
        if payload.get("type") != "refresh" or payload.get("sub") is None:
            raise UnauthorizedError("유효하지 않은 리프레시 토큰입니다. (Invalid refresh token)")

        try:
            subject_id = UUID(payload["sub"])
        except ValueError:
            raise UnauthorizedError("유효하지 않은 리프레시 토큰입니다. (Invalid refresh token)")

        role = payload.get("role")
        if role == ROLE_ADMIN:
            admin = await admin_repository.get_by_id(db, subject_id)
            if admin is None or not admin.is_active:
                raise UnauthorizedError("관리자를 찾을 수 없습니다. (Admin not found or inactive)")
            return self._issue(admin.id, ROLE_ADMIN, admin.login_id)
        if role == ROLE_MEMBER:
            member = await member_repository.get_by_id(db, subject_id)
            if member is None or not member.can_login():
                raise UnauthorizedError("회원을 찾을 수 없습니다. (Member not found or inactive)")
            return self._issue(member.id, ROLE_MEMBER, member.login_id)
        raise UnauthorizedError("유효하지 않은 리프레시 토큰입니다. (Invalid refresh token)")


# 싱글턴 인스턴스: Singleton instance
auth_service: AuthService = AuthService()
