"""공통 Pydantic 응답 스키마 정의.

Common response schemas used across API domains.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic confirmation message, e.g. after saving delivery settings.

    Attributes:
        message: 응답 메시지 (Human-readable message)
    """

    message: str
