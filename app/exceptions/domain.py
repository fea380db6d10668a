"""
도메인 예외 - 클라이언트 입력 오류 / 존재하지 않는 리소스

Service, Repository, Entity에서 사용
전역 핸들러에서 4xx envelope 응답으로 변환
"""
from typing import Any, Optional
from app.exceptions.base import AppError


class DomainError(AppError):
    """도메인 예외 베이스"""


class ValidationError(DomainError):
    """
    유효성 검증 실패 (InvalidInput)

    사용처:
    - 디바이스 ID 형식 오류
    - 등록되지 않은 device_type 문자열
    - 비어 있는 디바이스 이름

    HTTP: 422 Unprocessable Entity
    """

    def __init__(self, message: str, *, field: Optional[str] = None, detail: Optional[Any] = None):
        super().__init__(
            message,
            error_code="VALIDATION_ERROR",
            status_code=422,
            detail=detail or ({"field": field} if field else None)
        )
        self.field = field


class NotFoundError(DomainError):
    """
    리소스를 찾을 수 없음 (NotFound)

    사용처: Repository 조회/수정 대상이 없을 때 Service에서 변환
    HTTP: 404 Not Found
    """

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            f"{resource}을(를) 찾을 수 없습니다: {identifier}",
            error_code="NOT_FOUND",
            status_code=404,
            detail={"resource": resource, "identifier": str(identifier)}
        )
        self.resource = resource
        self.identifier = identifier
