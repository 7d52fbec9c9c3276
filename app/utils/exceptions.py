"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error classes of
the partner backend. Services and model state machines raise these
directly; FastAPI renders them as ``{"detail": ...}`` responses.

Usage:
    from app.utils.exceptions import NotFoundError, InvalidStatusTransitionError
    raise NotFoundError("회원을 찾을 수 없습니다 (Member not found)")
    raise InvalidStatusTransitionError("유효하지 않은 상태 변경입니다.")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a member, business profile or admin does not exist
    (or has been soft-deleted where the operation excludes deleted rows).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    Raised on signup with a login id or business number already in use.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 권한 부족 또는 로그인 불가 상태일 때 사용.

    Raised when a token of the wrong kind is used (member token on an admin
    route) or when a partner whose status does not allow login tries to log in.

    Args:
        detail: 오류 메시지 (Error message, default: "Insufficient permissions")
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    Raised for business validation failures beyond what Pydantic catches
    (e.g. a blank rejection reason).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidStatusTransitionError(BadRequestError):
    """허용되지 않은 회원 상태 전이 예외 (400).

    Raised by the member state machine for an edge outside the transition
    table, a self-transition, or any change out of DELETED.
    """

    def __init__(self, detail: str = "유효하지 않은 상태 변경입니다. (Invalid status transition)") -> None:
        super().__init__(detail=detail)
