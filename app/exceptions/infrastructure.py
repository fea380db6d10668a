"""
인프라 예외 - 데이터베이스 등 외부 의존성 오류

Repository/Service에서 DB 작업 실패 시 사용
전역 핸들러에서 5xx envelope 응답으로 변환
"""
from typing import Any, Optional
from app.exceptions.base import AppError


class InfrastructureError(AppError):
    """인프라 예외 베이스"""


class DatabaseError(InfrastructureError):
    """
    데이터베이스 오류 (StorageFailure)

    사용처: Repository에서 DB 작업 실패
    HTTP: 500 Internal Server Error

    예시:
    - 연결 실패
    - 쿼리/제약 조건 오류
    - 저장된 행을 디바이스로 변환할 수 없음
    """

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        detail: Optional[Any] = None
    ):
        super().__init__(
            f"데이터베이스 오류: {message}",
            error_code="DATABASE_ERROR",
            status_code=500,
            detail=detail or {
                "operation": operation,
                "original_error": type(original_error).__name__ if original_error else None
            }
        )
        self.operation = operation
        self.original_error = original_error
