"""관리자 회원 관리 라우터 — 가입 승인/거절, 정지, 상태 변경, 삭제, 통계.

Admin Member Router — Partner lifecycle management endpoints.
The authenticated admin's login id is recorded as the actor on approvals
and deletes.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.member import (
    MemberResponse,
    MemberStatisticsResponse,
    RejectRequest,
    StatusUpdateRequest,
)
from app.services.member_admin_service import member_admin_service

router: APIRouter = APIRouter()


@router.get("/pending", response_model=list[MemberResponse])
async def list_pending_members(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> list[MemberResponse]:
    """승인 대기 회원 목록 — 가입순."""
    return await member_admin_service.list_pending_members(db)


@router.get("/statistics", response_model=MemberStatisticsResponse)
async def get_member_statistics(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> MemberStatisticsResponse:
    return await member_admin_service.get_member_statistics(db)


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> MemberResponse:
    return await member_admin_service.get_member(db, member_id)


@router.post("/{member_id}/approve", response_model=MemberResponse)
async def approve_member(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> MemberResponse:
    """가입 승인 — 회원 ACTIVE, 사업자 프로필 APPROVED."""
    result = await member_admin_service.approve_member(db, member_id, current_admin.login_id)
    await db.commit()
    return result


@router.post("/{member_id}/reject", response_model=MemberResponse)
async def reject_member(
    member_id: UUID,
    data: RejectRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> MemberResponse:
    """가입 거절 — 사업자 프로필 REJECTED, 회원 상태 유지."""
    result = await member_admin_service.reject_member(db, member_id, data.reason)
    await db.commit()
    return result


@router.post("/{member_id}/suspend", response_model=MemberResponse)
async def suspend_member(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> MemberResponse:
    result = await member_admin_service.suspend_member(db, member_id)
    await db.commit()
    return result


@router.post("/{member_id}/unsuspend", response_model=MemberResponse)
async def unsuspend_member(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> MemberResponse:
    result = await member_admin_service.unsuspend_member(db, member_id)
    await db.commit()
    return result


@router.patch("/{member_id}/status", response_model=MemberResponse)
async def update_member_status(
    member_id: UUID,
    data: StatusUpdateRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> MemberResponse:
    result = await member_admin_service.update_member_status(db, member_id, data.status, current_admin.login_id)
    await db.commit()
    return result


@router.delete("/{member_id}", status_code=204)
async def delete_member(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(get_current_admin)],
) -> None:
    """회원 소프트 삭제 — 행은 유지."""
    await member_admin_service.delete_member(db, member_id, current_admin.login_id)
    await db.commit()
