"""
표준 응답 모델 및 헬퍼 함수

모든 엔드포인트는 {success, data, error} 형태의 envelope으로 응답한다.
"""
from pydantic import BaseModel
from typing import TypeVar, Generic, Optional, Any

T = TypeVar('T')


class ApiResponse(BaseModel, Generic[T]):
    """표준 API 응답 모델"""
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None


def success_response(data: Any = None) -> dict:
    """성공 응답 생성 헬퍼"""
    return {
        "success": True,
        "data": data,
        "error": None
    }


def error_response(error: str) -> dict:
    """에러 응답 생성 헬퍼"""
    return {
        "success": False,
        "data": None,
        "error": error
    }
