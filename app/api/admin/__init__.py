"""관리자 API 라우터 패키지 — 모든 관리자 엔드포인트 통합.

Admin API Router package — Aggregates all admin-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - auth: 관리자 인증 (Admin login, token refresh)
    - members: 파트너 회원 관리 (Partner approval, suspension, deletion, statistics)
"""

from fastapi import APIRouter

from app.api.admin.auth import router as auth_router
from app.api.admin.members import router as members_router

admin_router: APIRouter = APIRouter()

admin_router.include_router(auth_router, prefix="/auth", tags=["Admin Auth"])
admin_router.include_router(members_router, prefix="/members", tags=["Admin Members"])
