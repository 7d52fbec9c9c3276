"""관리자 회원 관리 서비스 — 가입 승인/거절, 정지, 삭제, 통계.

Member Admin Service — Business logic behind the admin member endpoints.

Approval couples two state machines: the member's account status and the
business profile's approval sub-state. Approving moves both (member to
ACTIVE, profile to APPROVED); rejecting only moves the profile to REJECTED
and leaves the member's status as it was.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.business_profile import MemberBusinessProfile
from app.models.member import Member, MemberStatus
from app.repositories.business_profile_repository import business_profile_repository
from app.repositories.member_repository import member_repository
from app.schemas.member import MemberResponse, MemberStatisticsResponse
from app.services.member_service import member_service
from app.utils.exceptions import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class MemberAdminService:
    """관리자용 회원 라이프사이클 비즈니스 로직."""

    async def _get_member(self, db: AsyncSession, member_id: UUID) -> Member:
        member = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("회원을 찾을 수 없습니다. (Member not found)")
        return member

    async def _get_live_member(self, db: AsyncSession, member_id: UUID) -> Member:
        """소프트 삭제되지 않은 회원만 조회 — 삭제된 회원은 404."""
        member = await self._get_member(db, member_id)
        if member.is_deleted:
            raise NotFoundError("회원을 찾을 수 없습니다. (Member not found)")
        return member

    async def _get_profile(self, db: AsyncSession, member_id: UUID) -> MemberBusinessProfile:
        profile = await business_profile_repository.get_by_member_id(db, member_id)
        if profile is None:
            raise NotFoundError("사업자 정보를 찾을 수 없습니다. (Business profile not found)")
        return profile

    async def approve_member(
        self,
        db: AsyncSession,
        member_id: UUID,
        approved_by: str,
    ) -> MemberResponse:
        """파트너 가입을 승인합니다.

        Activate the member and approve its business profile. A member that
        is already ACTIVE stays ACTIVE (re-approval refreshes the approval
        stamp); any other status goes through the transition table, so a
        DELETED member fails before the profile is changed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 UUID (Member identifier)
            approved_by: 승인 관리자 로그인 아이디 (Approving admin's login id)

        Returns:
            MemberResponse: 승인된 회원 (Approved member)

        Raises:
            NotFoundError: 회원 또는 사업자 정보가 없을 때
            InvalidStatusTransitionError: 회원 상태가 ACTIVE 로 갈 수 없을 때
        """
        member = await self._get_member(db, member_id)
        profile = await self._get_profile(db, member_id)

        member.ensure_active()
        profile.approve(approved_by)
        await db.flush()

        logger.info("Member %s approved by %s", member_id, approved_by)
        return member_service.to_response(member, profile)

    async def reject_member(
        self,
        db: AsyncSession,
        member_id: UUID,
        reason: str,
    ) -> MemberResponse:
        """파트너 가입을 거절합니다 — 회원 상태는 변경하지 않음.

        Record the rejection on the business profile. The member's own status
        is not touched, so a PENDING member stays PENDING.

        Raises:
            BadRequestError: 사유가 비어 있거나 공백뿐일 때 (Blank reason)
            NotFoundError: 회원 또는 사업자 정보가 없을 때
        """
        if not reason or not reason.strip():
            raise BadRequestError("거부 사유는 필수입니다.")

        member = await self._get_member(db, member_id)
        profile = await self._get_profile(db, member_id)

        profile.reject(reason.strip())
        await db.flush()

        logger.info("Member %s rejected: %s", member_id, reason.strip())
        return member_service.to_response(member, profile)

    async def list_pending_members(self, db: AsyncSession) -> list[MemberResponse]:
        """승인 대기 회원 목록 — 가입순."""
        members = await member_repository.get_by_status(db, MemberStatus.PENDING)
        return [member_service.to_response(m, m.business_profile) for m in members]

    async def get_member(self, db: AsyncSession, member_id: UUID) -> MemberResponse:
        member = await member_repository.get_with_profile(db, member_id)
        if member is None:
            raise NotFoundError("회원을 찾을 수 없습니다. (Member not found)")
        return member_service.to_response(member, member.business_profile)

    async def suspend_member(self, db: AsyncSession, member_id: UUID) -> MemberResponse:
        member = await self._get_live_member(db, member_id)
        member.suspend()
        await db.flush()
        logger.info("Member %s suspended", member_id)
        return await self._respond(db, member)

    async def unsuspend_member(self, db: AsyncSession, member_id: UUID) -> MemberResponse:
        member = await self._get_live_member(db, member_id)
        member.unsuspend()
        await db.flush()
        logger.info("Member %s unsuspended", member_id)
        return await self._respond(db, member)

    async def update_member_status(
        self,
        db: AsyncSession,
        member_id: UUID,
        new_status: MemberStatus,
        changed_by: str,
    ) -> MemberResponse:
        """회원 상태를 임의 상태로 변경합니다 (전이 테이블 검증).

        Generic status change through ``Member.update_status``. DELETED goes
        through ``Member.soft_delete`` so the tombstone is written the same
        way as ``delete_member``.

        Args:
            changed_by: 변경 관리자 로그인 아이디 (Acting admin, recorded on delete)
        """
        member = await self._get_member(db, member_id)
        previous: MemberStatus = member.status
        if new_status == MemberStatus.DELETED:
            member.soft_delete(changed_by)
        else:
            member.update_status(new_status)
        await db.flush()
        logger.info("Member %s status %s -> %s", member_id, previous.value, new_status.value)
        return await self._respond(db, member)

    async def delete_member(
        self,
        db: AsyncSession,
        member_id: UUID,
        deleted_by: str,
    ) -> None:
        """회원을 소프트 삭제합니다 (행은 유지, DELETED + 삭제 표식).

        Raises:
            NotFoundError: 회원이 없을 때
            InvalidStatusTransitionError: 이미 삭제된 회원일 때
        """
        member = await self._get_member(db, member_id)
        member.soft_delete(deleted_by)
        await db.flush()
        logger.info("Member %s deleted by %s", member_id, deleted_by)

    async def get_member_statistics(self, db: AsyncSession) -> MemberStatisticsResponse:
        """상태별 회원 수 — total 은 삭제 회원 제외."""
        pending = await member_repository.count(db, {"status": MemberStatus.PENDING})
        active = await member_repository.count(db, {"status": MemberStatus.ACTIVE})
        suspended = await member_repository.count(db, {"status": MemberStatus.SUSPENDED})
        deleted = await member_repository.count(db, {"status": MemberStatus.DELETED})
        total = await member_repository.count(db) - deleted
        return MemberStatisticsResponse(pending=pending, active=active, suspended=suspended, total=total)

    async def _respond(self, db: AsyncSession, member: Member) -> MemberResponse:
        profile = await business_profile_repository.get_by_member_id(db, member.id)
        return member_service.to_response(member, profile)


member_admin_service: MemberAdminService = MemberAdminService()
