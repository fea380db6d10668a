"""
예외 계층 테스트 - error_code / status_code 메타데이터
"""
import uuid

import pytest

from app.exceptions import (
    AppError,
    DatabaseError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.unit
class TestExceptionHierarchy:

    def test_validation_error(self):
        error = ValidationError("잘못된 디바이스 ID", field="id")

        assert isinstance(error, DomainError)
        assert error.status_code == 422
        assert error.error_code == "VALIDATION_ERROR"
        assert error.detail == {"field": "id"}
        assert not error.is_server_error

    def test_not_found_error(self):
        device_id = uuid.uuid4()

        error = NotFoundError("Device", device_id)

        assert isinstance(error, DomainError)
        assert error.status_code == 404
        assert error.error_code == "NOT_FOUND"
        assert error.detail == {"resource": "Device", "identifier": str(device_id)}

    def test_database_error(self):
        cause = RuntimeError("connection refused")

        error = DatabaseError("조회 실패", operation="find_all", original_error=cause)

        assert isinstance(error, InfrastructureError)
        assert isinstance(error, AppError)
        assert error.status_code == 500
        assert error.is_server_error
        assert error.detail == {"operation": "find_all", "original_error": "RuntimeError"}
        assert str(error) == "[DATABASE_ERROR] 데이터베이스 오류: 조회 실패"
