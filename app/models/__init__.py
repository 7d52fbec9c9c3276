"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    member: 회원, 회원 상태, 알림 설정 (Member, MemberStatus, NotificationSetting)
    business_profile: 사업자 프로필, 승인 상태 (MemberBusinessProfile, ApprovalStatus)
    region_price: 활동 지역, 지역별 상품 가격 (MemberActivityRegion, MemberProductPrice)
    admin: 관리자 (Admin)
"""

from app.models.admin import Admin
from app.models.business_profile import ApprovalStatus, MemberBusinessProfile
from app.models.member import Member, MemberStatus, NotificationSetting
from app.models.region_price import MemberActivityRegion, MemberProductPrice

__all__ = [
    "Admin",
    "ApprovalStatus", "MemberBusinessProfile",
    "Member", "MemberStatus", "NotificationSetting",
    "MemberActivityRegion", "MemberProductPrice",
]
