"""회원(파트너) 및 알림 설정 SQLAlchemy ORM 모델 정의.

Member (partner) and NotificationSetting SQLAlchemy ORM model definitions.
The Member model carries the account lifecycle state machine:

    PENDING   → ACTIVE, DELETED
    ACTIVE    → SUSPENDED, DELETED
    SUSPENDED → ACTIVE, DELETED
    DELETED   → (terminal)

Every status mutation goes through ``Member.update_status``, which enforces
the table above and rejects self-transitions.

Tables:
    - members: 파트너 계정 (Partner accounts with lifecycle status)
    - notification_settings: 회원별 알림 수신 설정 (Per-member notification preferences)
"""

import enum
import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, TimestampMixin, utc_now
from app.utils.exceptions import InvalidStatusTransitionError


class MemberStatus(str, enum.Enum):
    """회원 상태 (Member account status)."""

    PENDING = "PENDING"  # 승인대기
    ACTIVE = "ACTIVE"  # 활성
    SUSPENDED = "SUSPENDED"  # 정지
    DELETED = "DELETED"  # 삭제

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]


_STATUS_DESCRIPTIONS: dict[MemberStatus, str] = {
    MemberStatus.PENDING: "승인대기",
    MemberStatus.ACTIVE: "활성",
    MemberStatus.SUSPENDED: "정지",
    MemberStatus.DELETED: "삭제",
}

# 상태 전이 테이블: DELETED 는 나가는 간선이 없음 (terminal)
_ALLOWED_TRANSITIONS: dict[MemberStatus, frozenset[MemberStatus]] = {
    MemberStatus.PENDING: frozenset({MemberStatus.ACTIVE, MemberStatus.DELETED}),
    MemberStatus.ACTIVE: frozenset({MemberStatus.SUSPENDED, MemberStatus.DELETED}),
    MemberStatus.SUSPENDED: frozenset({MemberStatus.ACTIVE, MemberStatus.DELETED}),
    MemberStatus.DELETED: frozenset(),
}


def allowed_transitions(current: MemberStatus) -> frozenset[MemberStatus]:
    """현재 상태에서 이동 가능한 상태 집합을 반환합니다.

    Return the set of statuses reachable from ``current`` in one step.
    """
    return _ALLOWED_TRANSITIONS[current]


def is_valid_transition(current: MemberStatus, new_status: MemberStatus) -> bool:
    """상태 전이 가능 여부 — 동일 상태로의 전이는 항상 불가.

    Whether ``current → new_status`` is an edge of the transition table.
    Self-transitions are never valid.
    """
    if current == new_status:
        return False
    return new_status in allowed_transitions(current)


class Member(TimestampMixin, Base):
    """회원 모델 — 화환 파트너 계정.

    Member model — A partner (flower shop) account.
    New members start PENDING and become ACTIVE once an administrator
    approves their business profile.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        login_id: 로그인 아이디 (Login id, globally unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        name: 화환명/상호 (Shop name)
        nickname: 닉네임 (Display nickname)
        mobile: 휴대전화번호 (Mobile number, 11 digits)
        status: 회원 상태 (Lifecycle status)
        last_login_at: 마지막 로그인 일시 (Last successful login)
        is_deleted / deleted_at / deleted_by: 소프트 삭제 표식 (Soft-delete tombstone)

    Relationships:
        business_profile: 사업자 프로필 1:1 (Business profile, cascade delete)
        notification_setting: 알림 설정 1:1 (Notification setting, cascade delete)
        activity_regions: 활동 지역 목록 (Declared service regions)
        product_prices: 지역별 상품 가격 (Per-region category prices)
    """

    __tablename__ = "members"

    # 회원 고유 식별자: Member unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 로그인 아이디: Login id (전역 고유, globally unique)
    login_id: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    # 비밀번호 해시: bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 화환명: Shop display name
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # 닉네임: Nickname
    nickname: Mapped[str] = mapped_column(String(50), nullable=False)
    # 휴대전화번호: Mobile phone ("01012345678")
    mobile: Mapped[str] = mapped_column(String(20), nullable=False)
    # 회원 상태: Lifecycle status (PENDING 으로 시작)
    status: Mapped[MemberStatus] = mapped_column(
        Enum(MemberStatus, native_enum=False, length=20),
        nullable=False,
        default=MemberStatus.PENDING,
        index=True,
    )
    # 마지막 로그인 일시: Last login timestamp
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    # 소프트 삭제: Soft-delete tombstone
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_by: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # 관계: Relationships
    business_profile = relationship(
        "MemberBusinessProfile", back_populates="member", uselist=False, cascade="all, delete-orphan"
    )
    notification_setting = relationship(
        "NotificationSetting", back_populates="member", uselist=False, cascade="all, delete-orphan"
    )
    activity_regions = relationship("MemberActivityRegion", back_populates="member", cascade="all, delete-orphan")
    product_prices = relationship("MemberProductPrice", back_populates="member", cascade="all, delete-orphan")

    def __init__(self, **kwargs: Any) -> None:
        # INSERT 전에도 상태 머신이 동작하도록 기본값을 즉시 채움
        kwargs.setdefault("status", MemberStatus.PENDING)
        kwargs.setdefault("is_deleted", False)
        super().__init__(**kwargs)

    # ------------------------------------------------------------------
    # 상태 조회: Status queries
    # ------------------------------------------------------------------

    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE

    def is_pending(self) -> bool:
        return self.status == MemberStatus.PENDING

    def is_suspended(self) -> bool:
        return self.status == MemberStatus.SUSPENDED

    def can_login(self) -> bool:
        """로그인 가능 여부 — ACTIVE 이고 삭제되지 않은 회원만."""
        return self.is_active() and not self.is_deleted

    def can_be_modified(self) -> bool:
        """수정 가능 여부 — ACTIVE/PENDING 이고 삭제되지 않은 회원만."""
        return (self.is_active() or self.is_pending()) and not self.is_deleted

    # ------------------------------------------------------------------
    # 상태 전이: Status transitions
    # ------------------------------------------------------------------

    def update_status(self, new_status: MemberStatus) -> None:
        """회원 상태를 변경합니다 (전이 테이블 검증 포함).

        Single transition-checked entry point for every status change.

        Raises:
            InvalidStatusTransitionError: 동일 상태이거나 허용되지 않은 전이일 때
                (Self-transition or edge not in the table)
        """
        if new_status == self.status:
            raise InvalidStatusTransitionError(
                f"이미 {self.status.description} 상태입니다. (Member is already {self.status.value})"
            )
        if not is_valid_transition(self.status, new_status):
            raise InvalidStatusTransitionError(
                f"유효하지 않은 상태 변경입니다: {self.status.value} → {new_status.value}"
            )
        self.status = new_status

    def approve(self) -> None:
        """회원 승인 — PENDING 회원만 ACTIVE 로 전이."""
        if self.status != MemberStatus.PENDING:
            raise InvalidStatusTransitionError("승인 대기 상태의 회원만 승인할 수 있습니다.")
        self.update_status(MemberStatus.ACTIVE)

    def suspend(self) -> None:
        """회원 정지 — ACTIVE 회원만 SUSPENDED 로 전이."""
        if self.status != MemberStatus.ACTIVE:
            raise InvalidStatusTransitionError("활성 상태의 회원만 정지할 수 있습니다.")
        self.update_status(MemberStatus.SUSPENDED)

    def unsuspend(self) -> None:
        """회원 정지 해제 — SUSPENDED 회원만 ACTIVE 로 전이."""
        if self.status != MemberStatus.SUSPENDED:
            raise InvalidStatusTransitionError("정지 상태의 회원만 정지 해제할 수 있습니다.")
        self.update_status(MemberStatus.ACTIVE)

    def ensure_active(self) -> None:
        """회원을 ACTIVE 로 맞춥니다 — 이미 ACTIVE 이면 변경 없음.

        Drive the member to ACTIVE for business-profile approval. Any status
        other than ACTIVE goes through ``update_status`` so DELETED stays
        terminal.
        """
        if self.status == MemberStatus.ACTIVE:
            return
        self.update_status(MemberStatus.ACTIVE)

    def soft_delete(self, deleted_by: str) -> None:
        """소프트 삭제 — 어떤 상태에서든 DELETED 로 전이하고 삭제 표식을 남김.

        Args:
            deleted_by: 삭제 처리자 식별자 (Actor performing the delete)

        Raises:
            InvalidStatusTransitionError: 이미 삭제된 회원일 때 (Already deleted)
        """
        if self.status == MemberStatus.DELETED or self.is_deleted:
            raise InvalidStatusTransitionError("이미 삭제된 회원입니다.")
        self.update_status(MemberStatus.DELETED)
        self.is_deleted = True
        self.deleted_at = utc_now()
        self.deleted_by = deleted_by

    def update_last_login(self) -> None:
        self.last_login_at = utc_now()


class NotificationSetting(TimestampMixin, Base):
    """알림 설정 모델 — 회원별 SMS/전화/이메일/푸시 수신 여부.

    NotificationSetting model — Per-member notification channel preferences.
    Created with defaults at signup.
    """

    __tablename__ = "notification_settings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 회원 FK: 1:1 (CASCADE: 회원 삭제 시 함께 삭제)
    member_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, unique=True
    )

    # SMS 알림
    sms_order_created: Mapped[bool] = mapped_column(Boolean, default=True)
    sms_order_canceled: Mapped[bool] = mapped_column(Boolean, default=True)
    sms_delivery_started: Mapped[bool] = mapped_column(Boolean, default=True)
    sms_delivery_completed: Mapped[bool] = mapped_column(Boolean, default=True)
    sms_payment_completed: Mapped[bool] = mapped_column(Boolean, default=True)
    # 전화 알림
    call_order_created: Mapped[bool] = mapped_column(Boolean, default=False)
    call_delivery_started: Mapped[bool] = mapped_column(Boolean, default=False)
    call_emergency_only: Mapped[bool] = mapped_column(Boolean, default=True)
    # 이메일 알림
    email_order_created: Mapped[bool] = mapped_column(Boolean, default=False)
    email_order_canceled: Mapped[bool] = mapped_column(Boolean, default=False)
    email_weekly_report: Mapped[bool] = mapped_column(Boolean, default=True)
    email_monthly_report: Mapped[bool] = mapped_column(Boolean, default=True)
    # 푸시 알림
    push_order_created: Mapped[bool] = mapped_column(Boolean, default=True)
    push_delivery_started: Mapped[bool] = mapped_column(Boolean, default=True)
    push_system_notice: Mapped[bool] = mapped_column(Boolean, default=True)
    # 알림 허용 시간대: "HH:MM"
    notification_start_time: Mapped[str] = mapped_column(String(5), default="09:00")
    notification_end_time: Mapped[str] = mapped_column(String(5), default="21:00")
    night_time_notification: Mapped[bool] = mapped_column(Boolean, default=False)

    # 관계: Relationships
    member = relationship("Member", back_populates="notification_setting")
