"""회원 서비스 — 파트너 회원가입, 내 정보 조회, 중복 확인.

Member Service — Partner signup, self profile lookup and duplicate checks.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.business_profile import MemberBusinessProfile
from app.models.member import Member, NotificationSetting
from app.repositories.business_profile_repository import business_profile_repository
from app.repositories.member_repository import member_repository
from app.schemas.member import BusinessProfileResponse, MemberResponse, SignupRequest
from app.services.region_price_service import region_price_service
from app.utils.exceptions import DuplicateError
from app.utils.password import hash_password

logger = logging.getLogger(__name__)


class MemberService:

    def to_response(
        self,
        member: Member,
        profile: MemberBusinessProfile | None,
    ) -> MemberResponse:
        """회원 + 사업자 프로필을 응답 스키마로 변환합니다.

        The profile is passed explicitly so callers control how it was loaded.
        """
        profile_response: BusinessProfileResponse | None = None
        if profile is not None:
            profile_response = BusinessProfileResponse(
                id=str(profile.id),
                business_number=profile.business_number,
                corp_name=profile.corp_name,
                ceo_name=profile.ceo_name,
                business_type=profile.business_type,
                business_item=profile.business_item,
                company_address=profile.company_address,
                fax=profile.fax,
                approval_status=profile.approval_status,
                approved_at=profile.approved_at,
                approved_by=profile.approved_by,
                rejection_reason=profile.rejection_reason,
            )
        return MemberResponse(
            id=str(member.id),
            login_id=member.login_id,
            name=member.name,
            nickname=member.nickname,
            mobile=member.mobile,
            status=member.status,
            status_description=member.status.description,
            last_login_at=member.last_login_at,
            created_at=member.created_at,
            business_profile=profile_response,
        )

    async def is_login_id_taken(self, db: AsyncSession, login_id: str) -> bool:
        return await member_repository.exists(db, {"login_id": login_id})

    async def is_business_number_taken(self, db: AsyncSession, business_number: str) -> bool:
        return await business_profile_repository.exists(db, {"business_number": business_number})

    async def signup(
        self,
        db: AsyncSession,
        data: SignupRequest,
    ) -> MemberResponse:
        """파트너 회원가입을 처리합니다.

        Create a PENDING member with a PENDING business profile and default
        notification settings. Initial delivery settings, when present, go
        through the regular region/price sync in the same transaction.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Signup request)

        Returns:
            MemberResponse: 생성된 회원 (Created member, status PENDING)

        Raises:
            DuplicateError: 로그인 아이디 또는 사업자등록번호 중복 시
                (Login id or business number already registered)
        """
        if await self.is_login_id_taken(db, data.login_id):
            raise DuplicateError("이미 사용 중인 로그인 ID입니다.")
        if await self.is_business_number_taken(db, data.business_profile.business_number):
            raise DuplicateError("이미 등록된 사업자등록번호입니다.")

        member: Member = await member_repository.create(db, {
            "login_id": data.login_id,
            "password_hash": hash_password(data.password),
            "name": data.name,
            "nickname": data.nickname,
            "mobile": data.mobile,
        })
        profile: MemberBusinessProfile = await business_profile_repository.create(db, {
            "member_id": member.id,
            **data.business_profile.model_dump(),
        })
        db.add(NotificationSetting(member_id=member.id))
        await db.flush()

        if data.regions:
            await region_price_service.save_regions_and_prices(db, member.id, data.regions)

        logger.info("Member signed up: %s (%s)", member.login_id, member.id)
        return self.to_response(member, profile)

    async def get_me(self, db: AsyncSession, member: Member) -> MemberResponse:
        profile = await business_profile_repository.get_by_member_id(db, member.id)
        return self.to_response(member, profile)


member_service: MemberService = MemberService()
