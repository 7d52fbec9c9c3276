"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication request/response schemas shared by the admin and partner
login endpoints.
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """로그인 요청 스키마 — 관리자/파트너 공통.

    Attributes:
        login_id: 로그인 아이디 (Login id)
        password: 비밀번호 (Plain text, verified against the bcrypt hash)
    """

    login_id: str
    password: str


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Returned after a successful login or token refresh.
    """

    access_token: str  # 만료: 60분 기본 (Default TTL 60 min)
    refresh_token: str  # 만료: 14일 기본 (Default TTL 14 days)
    token_type: str = "bearer"


class RefreshRequest(BaseModel):
    refresh_token: str
