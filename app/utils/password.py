"""비밀번호 해싱 유틸리티 — 회원/관리자 공통.

Password hashing helpers shared by member signup, member login and admin login.
Only bcrypt hashes are persisted in ``password_hash`` columns.
"""

import bcrypt


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시 문자열로 변환합니다 (salt 포함).

    Args:
        password: 평문 비밀번호 (Plain text password)

    Returns:
        str: ``$2b$...`` 형식의 해시 (bcrypt hash string)
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """평문 비밀번호가 저장된 해시와 일치하는지 확인합니다."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
