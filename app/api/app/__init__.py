"""파트너 앱 API 라우터 패키지 — 모든 파트너용 엔드포인트 통합.

App API Router package — Aggregates all partner-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - auth: 파트너 인증 (Partner login, token refresh)
    - members: 회원가입, 내 정보, 배송 설정 (Signup, profile, delivery settings)
"""

from fastapi import APIRouter

from app.api.app.auth import router as auth_router
from app.api.app.members import router as members_router

app_router: APIRouter = APIRouter()

app_router.include_router(auth_router, prefix="/auth", tags=["App Auth"])
app_router.include_router(members_router, prefix="/members", tags=["App Members"])
