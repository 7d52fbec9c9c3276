"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT helpers for admin and partner sessions.

Payload:
    {
        "sub": "<admin or member uuid>",
        "role": "admin" | "member",   # 토큰 주체 구분 (Which table "sub" refers to)
        "login_id": "<login id>",
        "exp": 1234567890,
        "type": "access" | "refresh"
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.config import settings

ROLE_ADMIN: str = "admin"
ROLE_MEMBER: str = "member"


def _encode(data: dict[str, Any], expires_delta: timedelta, token_type: str) -> str:
    to_encode: dict[str, Any] = data.copy()
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta, "type": token_type})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(data: dict[str, Any]) -> str:
    """액세스 토큰 생성 — 만료: JWT_ACCESS_TOKEN_EXPIRE_MINUTES.

    Args:
        data: {"sub", "role", "login_id"} 페이로드 (Token claims)

    Returns:
        str: 인코딩된 JWT (Encoded token)
    """
    return _encode(data, timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES), "access")


def create_refresh_token(data: dict[str, Any]) -> str:
    """리프레시 토큰 생성 — 만료: JWT_REFRESH_TOKEN_EXPIRE_DAYS."""
    return _encode(data, timedelta(days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS), "refresh")


def create_token_pair(subject_id: str, role: str, login_id: str) -> tuple[str, str]:
    """같은 클레임으로 액세스/리프레시 토큰 쌍을 발급합니다.

    Issue an (access, refresh) pair sharing the same claims.
    """
    claims: dict[str, Any] = {"sub": subject_id, "role": role, "login_id": login_id}
    return create_access_token(claims), create_refresh_token(claims)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 를 디코딩하고 서명/만료를 검증합니다.

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 (Token expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (Any other validation failure)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
