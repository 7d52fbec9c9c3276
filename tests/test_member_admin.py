"""관리자 회원 관리 테스트 — 승인/거절, 정지, 삭제, 통계.

Admin member management tests — service-level approval semantics plus the
admin HTTP endpoints (authorization, status codes, response shape).
"""

import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.business_profile import ApprovalStatus
from app.models.member import MemberStatus
from app.repositories.business_profile_repository import business_profile_repository
from app.services.member_admin_service import member_admin_service
from app.utils.exceptions import BadRequestError, InvalidStatusTransitionError, NotFoundError
from tests.conftest import auth_header, create_member

URL = "/api/v1/admin/members"


class TestApproveMemberService:
    """승인 오케스트레이션 테스트."""

    async def test_approve_pending_member(self, db: AsyncSession, pending_member):
        """승인 시 회원 ACTIVE + 프로필 APPROVED."""
        result = await member_admin_service.approve_member(db, pending_member.id, "admin")
        assert result.status == MemberStatus.ACTIVE
        assert result.business_profile.approval_status == ApprovalStatus.APPROVED
        assert result.business_profile.approved_by == "admin"
        assert pending_member.status == MemberStatus.ACTIVE

    async def test_approve_active_member_is_idempotent(self, db: AsyncSession, active_member):
        result = await member_admin_service.approve_member(db, active_member.id, "admin")
        assert result.status == MemberStatus.ACTIVE
        assert result.business_profile.approval_status == ApprovalStatus.APPROVED

    async def test_approve_suspended_member_reactivates(self, db: AsyncSession):
        member = await create_member(db, status=MemberStatus.SUSPENDED)
        result = await member_admin_service.approve_member(db, member.id, "admin")
        assert result.status == MemberStatus.ACTIVE

    async def test_approve_deleted_member_fails_without_touching_profile(self, db: AsyncSession, pending_member):
        pending_member.soft_delete("admin")
        await db.flush()

        with pytest.raises(InvalidStatusTransitionError):
            await member_admin_service.approve_member(db, pending_member.id, "admin")

        profile = await business_profile_repository.get_by_member_id(db, pending_member.id)
        assert profile.approval_status == ApprovalStatus.PENDING
        assert profile.approved_by is None

    async def test_approve_unknown_member(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await member_admin_service.approve_member(db, uuid.uuid4(), "admin")

    async def test_approve_member_without_profile(self, db: AsyncSession):
        member = await create_member(db, with_profile=False)
        with pytest.raises(NotFoundError):
            await member_admin_service.approve_member(db, member.id, "admin")
        assert member.status == MemberStatus.PENDING


class TestRejectMemberService:
    """거절 테스트."""

    async def test_reject_keeps_member_status(self, db: AsyncSession, pending_member):
        """거절은 프로필만 REJECTED, 회원 상태는 PENDING 유지."""
        result = await member_admin_service.reject_member(db, pending_member.id, "  서류 미비  ")
        assert result.status == MemberStatus.PENDING
        assert result.business_profile.approval_status == ApprovalStatus.REJECTED
        assert result.business_profile.rejection_reason == "서류 미비"

    async def test_reject_active_member_stays_active(self, db: AsyncSession, active_member):
        """활성 회원 거절 시 프로필만 REJECTED, 회원은 ACTIVE 유지."""
        result = await member_admin_service.reject_member(db, active_member.id, "서류 재검토")
        assert result.status == MemberStatus.ACTIVE
        assert active_member.status == MemberStatus.ACTIVE
        assert active_member.can_login() is True
        assert result.business_profile.approval_status == ApprovalStatus.REJECTED
        assert result.business_profile.rejection_reason == "서류 재검토"

    @pytest.mark.parametrize("reason", ["", "   "])
    async def test_blank_reason_rejected(self, db: AsyncSession, pending_member, reason):
        with pytest.raises(BadRequestError, match="거부 사유는 필수입니다."):
            await member_admin_service.reject_member(db, pending_member.id, reason)

        profile = await business_profile_repository.get_by_member_id(db, pending_member.id)
        assert profile.approval_status == ApprovalStatus.PENDING
        assert profile.rejection_reason is None
        assert pending_member.status == MemberStatus.PENDING

    async def test_blank_reason_checked_before_lookup(self, db: AsyncSession):
        with pytest.raises(BadRequestError):
            await member_admin_service.reject_member(db, uuid.uuid4(), " ")

    async def test_approve_after_reject(self, db: AsyncSession, pending_member):
        await member_admin_service.reject_member(db, pending_member.id, "서류 미비")
        result = await member_admin_service.approve_member(db, pending_member.id, "admin")
        assert result.status == MemberStatus.ACTIVE
        assert result.business_profile.rejection_reason is None


class TestLifecycleService:
    """정지/해제/삭제/통계 테스트."""

    async def test_suspend_and_unsuspend(self, db: AsyncSession, active_member):
        result = await member_admin_service.suspend_member(db, active_member.id)
        assert result.status == MemberStatus.SUSPENDED
        result = await member_admin_service.unsuspend_member(db, active_member.id)
        assert result.status == MemberStatus.ACTIVE

    async def test_suspend_pending_rejected(self, db: AsyncSession, pending_member):
        with pytest.raises(InvalidStatusTransitionError):
            await member_admin_service.suspend_member(db, pending_member.id)

    async def test_suspend_deleted_member_not_found(self, db: AsyncSession, active_member):
        await member_admin_service.delete_member(db, active_member.id, "admin")
        with pytest.raises(NotFoundError):
            await member_admin_service.suspend_member(db, active_member.id)

    async def test_delete_member_writes_tombstone(self, db: AsyncSession, active_member):
        await member_admin_service.delete_member(db, active_member.id, "admin")
        assert active_member.status == MemberStatus.DELETED
        assert active_member.is_deleted is True
        assert active_member.deleted_by == "admin"
        with pytest.raises(InvalidStatusTransitionError):
            await member_admin_service.delete_member(db, active_member.id, "admin")

    async def test_update_member_status(self, db: AsyncSession, active_member):
        result = await member_admin_service.update_member_status(db, active_member.id, MemberStatus.SUSPENDED, "admin")
        assert result.status == MemberStatus.SUSPENDED
        with pytest.raises(InvalidStatusTransitionError):
            await member_admin_service.update_member_status(db, active_member.id, MemberStatus.SUSPENDED, "admin")

    async def test_update_status_to_deleted_writes_tombstone(self, db: AsyncSession, active_member):
        """상태 변경으로 DELETED 전이 시에도 삭제 표식 기록."""
        result = await member_admin_service.update_member_status(db, active_member.id, MemberStatus.DELETED, "admin")
        assert result.status == MemberStatus.DELETED
        assert active_member.is_deleted is True
        assert active_member.deleted_at is not None
        assert active_member.deleted_by == "admin"
        with pytest.raises(InvalidStatusTransitionError):
            await member_admin_service.delete_member(db, active_member.id, "admin")

    async def test_statistics(self, db: AsyncSession):
        await create_member(db, login_id="p1", business_number="1000000001")
        await create_member(db, login_id="p2", business_number="1000000002")
        await create_member(db, login_id="a1", business_number="1000000003", status=MemberStatus.ACTIVE)
        await create_member(db, login_id="s1", business_number="1000000004", status=MemberStatus.SUSPENDED)
        deleted = await create_member(db, login_id="d1", business_number="1000000005", status=MemberStatus.ACTIVE)
        await member_admin_service.delete_member(db, deleted.id, "admin")

        stats = await member_admin_service.get_member_statistics(db)
        assert stats.pending == 2
        assert stats.active == 1
        assert stats.suspended == 1
        assert stats.total == 4

    async def test_list_pending_members(self, db: AsyncSession, pending_member, active_member):
        result = await member_admin_service.list_pending_members(db)
        assert [m.login_id for m in result] == [pending_member.login_id]
        assert result[0].business_profile is not None


class TestAdminMemberApi:
    """관리자 회원 API 테스트."""

    async def test_approve_endpoint(self, client: AsyncClient, admin_token, pending_member):
        res = await client.post(f"{URL}/{pending_member.id}/approve", headers=auth_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "ACTIVE"
        assert data["status_description"] == "활성"
        assert data["business_profile"]["approval_status"] == "APPROVED"
        assert data["business_profile"]["approved_by"] == "admin"

    async def test_reject_endpoint(self, client: AsyncClient, admin_token, pending_member):
        res = await client.post(
            f"{URL}/{pending_member.id}/reject",
            json={"reason": "사업자등록증 불일치"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "PENDING"
        assert data["business_profile"]["approval_status"] == "REJECTED"
        assert data["business_profile"]["rejection_reason"] == "사업자등록증 불일치"

    async def test_reject_blank_reason_400(self, client: AsyncClient, admin_token, pending_member):
        res = await client.post(
            f"{URL}/{pending_member.id}/reject",
            json={"reason": "   "},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 400
        assert res.json()["detail"] == "거부 사유는 필수입니다."

    async def test_approve_unknown_member_404(self, client: AsyncClient, admin_token):
        res = await client.post(f"{URL}/{uuid.uuid4()}/approve", headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_suspend_pending_member_400(self, client: AsyncClient, admin_token, pending_member):
        res = await client.post(f"{URL}/{pending_member.id}/suspend", headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_status_patch(self, client: AsyncClient, admin_token, active_member):
        res = await client.patch(
            f"{URL}/{active_member.id}/status",
            json={"status": "SUSPENDED"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 200
        assert res.json()["status"] == "SUSPENDED"

    async def test_status_patch_to_deleted(self, client: AsyncClient, admin_token, active_member):
        res = await client.patch(
            f"{URL}/{active_member.id}/status",
            json={"status": "DELETED"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 200
        assert res.json()["status"] == "DELETED"
        assert active_member.deleted_by == "admin"

    async def test_delete_endpoint(self, client: AsyncClient, admin_token, active_member):
        res = await client.delete(f"{URL}/{active_member.id}", headers=auth_header(admin_token))
        assert res.status_code == 204
        assert active_member.deleted_by == "admin"

    async def test_pending_list_and_statistics(self, client: AsyncClient, admin_token, pending_member):
        res = await client.get(f"{URL}/pending", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert [m["login_id"] for m in res.json()] == ["partner01"]

        res = await client.get(f"{URL}/statistics", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"pending": 1, "active": 0, "suspended": 0, "total": 1}

    async def test_get_member(self, client: AsyncClient, admin_token, pending_member):
        res = await client.get(f"{URL}/{pending_member.id}", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["business_profile"]["business_number"] == "1234567890"

    async def test_member_token_forbidden(self, client: AsyncClient, member_token, pending_member):
        res = await client.post(f"{URL}/{pending_member.id}/approve", headers=auth_header(member_token))
        assert res.status_code == 403

    async def test_no_token(self, client: AsyncClient, pending_member):
        res = await client.get(f"{URL}/pending")
        assert res.status_code in (401, 403)
