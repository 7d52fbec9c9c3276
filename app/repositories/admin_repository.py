"""관리자 레포지토리.

Admin Repository — Admin lookup by login id.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.admin import Admin
from app.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):

    def __init__(self) -> None:
        super().__init__(Admin)

    async def get_by_login_id(self, db: AsyncSession, login_id: str) -> Admin | None:
        result = await db.execute(select(Admin).where(Admin.login_id == login_id))
        return result.scalar_one_or_none()


admin_repository: AdminRepository = AdminRepository()
