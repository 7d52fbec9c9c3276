"""회원 상태 머신 테스트 — 전이 테이블, 가드 메서드, 소프트 삭제.

Member lifecycle tests — Transition table conformance, guarded transitions,
soft delete and login/modify predicates. Pure model tests, no database.
"""

import itertools

import pytest

from app.models.member import Member, MemberStatus, allowed_transitions, is_valid_transition
from app.utils.exceptions import InvalidStatusTransitionError

ALLOWED = {
    (MemberStatus.PENDING, MemberStatus.ACTIVE),
    (MemberStatus.PENDING, MemberStatus.DELETED),
    (MemberStatus.ACTIVE, MemberStatus.SUSPENDED),
    (MemberStatus.ACTIVE, MemberStatus.DELETED),
    (MemberStatus.SUSPENDED, MemberStatus.ACTIVE),
    (MemberStatus.SUSPENDED, MemberStatus.DELETED),
}


def make_member(status: MemberStatus = MemberStatus.PENDING) -> Member:
    return Member(
        login_id="partner01",
        password_hash="x",
        name="신사꽃집",
        nickname="신사",
        mobile="01012345678",
        status=status,
    )


class TestTransitionTable:
    """전이 테이블 준수 테스트."""

    @pytest.mark.parametrize(
        "current,new_status",
        list(itertools.product(MemberStatus, MemberStatus)),
    )
    def test_update_status_follows_table(self, current, new_status):
        """16개 (현재, 목표) 조합 모두 테이블대로 허용/거부."""
        member = make_member(current)
        if (current, new_status) in ALLOWED:
            member.update_status(new_status)
            assert member.status == new_status
        else:
            with pytest.raises(InvalidStatusTransitionError):
                member.update_status(new_status)
            assert member.status == current

    @pytest.mark.parametrize("status", list(MemberStatus))
    def test_self_transition_rejected(self, status):
        """동일 상태로의 전이는 항상 거부."""
        member = make_member(status)
        with pytest.raises(InvalidStatusTransitionError):
            member.update_status(status)
        assert not is_valid_transition(status, status)

    def test_deleted_is_terminal(self):
        assert allowed_transitions(MemberStatus.DELETED) == frozenset()

    def test_invalid_transition_is_400(self):
        member = make_member(MemberStatus.DELETED)
        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            member.update_status(MemberStatus.ACTIVE)
        assert exc_info.value.status_code == 400


class TestGuardedTransitions:
    """approve / suspend / unsuspend 가드 테스트."""

    def test_new_member_is_pending(self):
        member = make_member()
        assert member.is_pending()
        assert member.is_deleted is False

    def test_approve_pending(self):
        member = make_member()
        member.approve()
        assert member.is_active()

    @pytest.mark.parametrize("status", [MemberStatus.ACTIVE, MemberStatus.SUSPENDED, MemberStatus.DELETED])
    def test_approve_requires_pending(self, status):
        member = make_member(status)
        with pytest.raises(InvalidStatusTransitionError, match="승인 대기"):
            member.approve()
        assert member.status == status

    def test_suspend_and_unsuspend(self):
        member = make_member(MemberStatus.ACTIVE)
        member.suspend()
        assert member.is_suspended()
        member.unsuspend()
        assert member.is_active()

    @pytest.mark.parametrize("status", [MemberStatus.PENDING, MemberStatus.SUSPENDED, MemberStatus.DELETED])
    def test_suspend_requires_active(self, status):
        member = make_member(status)
        with pytest.raises(InvalidStatusTransitionError):
            member.suspend()
        assert member.status == status

    @pytest.mark.parametrize("status", [MemberStatus.PENDING, MemberStatus.ACTIVE, MemberStatus.DELETED])
    def test_unsuspend_requires_suspended(self, status):
        member = make_member(status)
        with pytest.raises(InvalidStatusTransitionError):
            member.unsuspend()
        assert member.status == status

    def test_ensure_active_keeps_active(self):
        member = make_member(MemberStatus.ACTIVE)
        member.ensure_active()
        assert member.is_active()

    def test_ensure_active_rejects_deleted(self):
        member = make_member(MemberStatus.DELETED)
        with pytest.raises(InvalidStatusTransitionError):
            member.ensure_active()


class TestSoftDelete:
    """소프트 삭제 테스트."""

    @pytest.mark.parametrize("status", [MemberStatus.PENDING, MemberStatus.ACTIVE, MemberStatus.SUSPENDED])
    def test_soft_delete_from_any_live_status(self, status):
        member = make_member(status)
        member.soft_delete("admin")
        assert member.status == MemberStatus.DELETED
        assert member.is_deleted is True
        assert member.deleted_at is not None
        assert member.deleted_by == "admin"

    def test_soft_delete_twice_rejected(self):
        member = make_member(MemberStatus.ACTIVE)
        member.soft_delete("admin")
        with pytest.raises(InvalidStatusTransitionError):
            member.soft_delete("admin")


class TestPredicates:
    """로그인/수정 가능 여부 테스트."""

    @pytest.mark.parametrize("status,expected", [
        (MemberStatus.PENDING, False),
        (MemberStatus.ACTIVE, True),
        (MemberStatus.SUSPENDED, False),
        (MemberStatus.DELETED, False),
    ])
    def test_can_login(self, status, expected):
        assert make_member(status).can_login() is expected

    @pytest.mark.parametrize("status,expected", [
        (MemberStatus.PENDING, True),
        (MemberStatus.ACTIVE, True),
        (MemberStatus.SUSPENDED, False),
        (MemberStatus.DELETED, False),
    ])
    def test_can_be_modified(self, status, expected):
        assert make_member(status).can_be_modified() is expected

    def test_tombstoned_member_cannot_login(self):
        member = make_member(MemberStatus.ACTIVE)
        member.is_deleted = True
        assert member.can_login() is False

    def test_status_description(self):
        assert MemberStatus.PENDING.description == "승인대기"
        assert MemberStatus.SUSPENDED.description == "정지"
