"""관리자 SQLAlchemy ORM 모델 정의.

Admin SQLAlchemy ORM model definition.
Administrators approve or reject partners; their login id is recorded as the
actor on approvals and soft deletes.

Tables:
    - admins: 관리자 계정 (Administrator accounts)
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, TimestampMixin, utc_now


class Admin(TimestampMixin, Base):
    """관리자 모델.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        login_id: 로그인 아이디 (Login id, unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        name: 관리자 이름 (Display name)
        is_active: 활성 상태 (Inactive admins cannot log in)
        last_login_at: 마지막 로그인 일시 (Last successful login)
    """

    __tablename__ = "admins"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    login_id: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def update_last_login(self) -> None:
        self.last_login_at = utc_now()
