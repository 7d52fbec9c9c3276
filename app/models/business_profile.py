"""사업자 프로필 SQLAlchemy ORM 모델 정의.

MemberBusinessProfile SQLAlchemy ORM model definition.
Holds the partner's business registration data and the approval sub-state
(PENDING / APPROVED / REJECTED). Approval and rejection are both
re-enterable; the owning Member's status is driven by the approval service,
not by this model.

Tables:
    - member_business_profiles: 회원별 사업자 정보 및 승인 상태 (Business info + approval state)
"""

import enum
import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Enum, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, TimestampMixin, utc_now


class ApprovalStatus(str, enum.Enum):
    """사업자 승인 상태 (Business profile approval status)."""

    PENDING = "PENDING"  # 승인대기
    APPROVED = "APPROVED"  # 승인완료
    REJECTED = "REJECTED"  # 승인거부


class MemberBusinessProfile(TimestampMixin, Base):
    """사업자 프로필 모델.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        member_id: 소속 회원 FK, 1:1 (Owning member, unique)
        business_number: 사업자등록번호 (Business registration number, unique)
        corp_name: 법인명 (Corporate name)
        ceo_name: 대표자명 (Representative name)
        approval_status: 승인 상태 (Approval state)
        approved_at / approved_by: 승인 일시/승인자 (Set on approval, cleared on rejection)
        rejection_reason: 거절 사유 (Only present while REJECTED)
    """

    __tablename__ = "member_business_profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 회원 FK: 1:1 (CASCADE: 회원 삭제 시 함께 삭제)
    member_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, unique=True
    )

    # 사업자 정보: Business registration
    business_number: Mapped[str] = mapped_column(String(12), nullable=False, unique=True, index=True)
    corp_name: Mapped[str] = mapped_column(String(100), nullable=False)
    ceo_name: Mapped[str] = mapped_column(String(50), nullable=False)
    business_type: Mapped[str | None] = mapped_column(String(100), nullable=True)  # 업태
    business_item: Mapped[str | None] = mapped_column(String(100), nullable=True)  # 종목
    company_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    fax: Mapped[str | None] = mapped_column(String(20), nullable=True)
    memo: Mapped[str | None] = mapped_column(String(2000), nullable=True)

    # 승인 정보: Approval sub-state
    approval_status: Mapped[ApprovalStatus] = mapped_column(
        Enum(ApprovalStatus, native_enum=False, length=20),
        nullable=False,
        default=ApprovalStatus.PENDING,
    )
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_by: Mapped[str | None] = mapped_column(String(50), nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # 관계: Relationships
    member = relationship("Member", back_populates="business_profile")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("approval_status", ApprovalStatus.PENDING)
        super().__init__(**kwargs)

    def approve(self, approver: str) -> None:
        """승인 처리 — 승인 일시/승인자 기록, 거절 사유 제거."""
        self.approval_status = ApprovalStatus.APPROVED
        self.approved_at = utc_now()
        self.approved_by = approver
        self.rejection_reason = None

    def reject(self, reason: str) -> None:
        """거절 처리 — 사유 기록, 승인 일시/승인자 제거."""
        self.approval_status = ApprovalStatus.REJECTED
        self.rejection_reason = reason
        self.approved_at = None
        self.approved_by = None

    def is_approved(self) -> bool:
        return self.approval_status == ApprovalStatus.APPROVED
