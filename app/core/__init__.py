"""
핵심 설정 모듈
- config: 환경 설정
- response: 표준 응답 envelope
"""
from app.core.config import Settings, get_settings
from app.core.response import ApiResponse, success_response, error_response

__all__ = [
    "Settings",
    "get_settings",
    "ApiResponse",
    "success_response",
    "error_response",
]
