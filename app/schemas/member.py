"""회원 및 사업자 프로필 Pydantic 요청/응답 스키마 정의.

Member and business profile request/response schemas.
Covers partner signup, member read models and the admin lifecycle actions.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.business_profile import ApprovalStatus
from app.models.member import MemberStatus
from app.schemas.region_price import RegionPriceRequest


# === 회원가입 (Signup) 스키마 ===

class BusinessProfileRequest(BaseModel):
    """가입 시 제출하는 사업자 정보.

    Attributes:
        business_number: 사업자등록번호 10자리 (Registration number, digits only)
        corp_name: 법인명/상호 (Corporate name)
        ceo_name: 대표자명 (Representative name)
    """

    business_number: str = Field(..., pattern=r"^\d{10}$")
    corp_name: str = Field(..., min_length=1, max_length=100)
    ceo_name: str = Field(..., min_length=1, max_length=50)
    business_type: str | None = None  # 업태
    business_item: str | None = None  # 종목
    company_address: str | None = None
    fax: str | None = None
    memo: str | None = Field(None, max_length=2000)


class SignupRequest(BaseModel):
    """파트너 회원가입 요청 스키마.

    Partner signup request. The new member starts PENDING and cannot log in
    until an administrator approves the business profile.

    Attributes:
        login_id: 로그인 아이디, 4-20자 (Login id, 4-20 characters)
        password: 비밀번호, 8-20자 (Password, 8-20 characters)
        name: 화환명 (Shop name)
        nickname: 닉네임 (Nickname)
        mobile: 휴대전화번호 11자리 (Mobile, "01012345678")
        business_profile: 사업자 정보 (Business registration data)
        regions: 초기 배송 지역/가격 설정 (Optional initial delivery settings)
    """

    login_id: str = Field(..., min_length=4, max_length=20)
    password: str = Field(..., min_length=8, max_length=20)
    name: str = Field(..., min_length=1, max_length=100)
    nickname: str = Field(..., min_length=1, max_length=50)
    mobile: str = Field(..., pattern=r"^01\d{9}$")
    business_profile: BusinessProfileRequest
    regions: list[RegionPriceRequest] | None = None


# === 관리자 액션 (Admin actions) 스키마 ===

class RejectRequest(BaseModel):
    # 공백 검증은 서비스에서 수행: blank check happens in the service
    reason: str = Field("", max_length=500)


class StatusUpdateRequest(BaseModel):
    status: MemberStatus


# === 응답 (Response) 스키마 ===

class BusinessProfileResponse(BaseModel):
    """사업자 프로필 응답 스키마."""

    id: str
    business_number: str
    corp_name: str
    ceo_name: str
    business_type: str | None
    business_item: str | None
    company_address: str | None
    fax: str | None
    approval_status: ApprovalStatus
    approved_at: datetime | None
    approved_by: str | None
    rejection_reason: str | None


class MemberResponse(BaseModel):
    """회원 응답 스키마 — 사업자 프로필 포함.

    Member read model returned by signup, /me and the admin endpoints.

    Attributes:
        id: 회원 UUID 문자열 (Member UUID as string)
        status: 회원 상태 (Lifecycle status)
        status_description: 상태 한글명 (Korean status label)
        business_profile: 사업자 프로필 (None when not submitted)
    """

    id: str
    login_id: str
    name: str
    nickname: str
    mobile: str
    status: MemberStatus
    status_description: str
    last_login_at: datetime | None
    created_at: datetime
    business_profile: BusinessProfileResponse | None = None


class MemberStatisticsResponse(BaseModel):
    """회원 통계 응답 — 삭제 회원은 total 에서 제외."""

    pending: int
    active: int
    suspended: int
    total: int


class LoginIdCheckResponse(BaseModel):
    login_id: str
    available: bool


class BusinessNumberCheckResponse(BaseModel):
    business_number: str
    available: bool
