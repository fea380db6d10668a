"""
전역 예외 핸들러

create_app()에서 등록:
    from app.exceptions.handlers import register_exception_handlers
    register_exception_handlers(app)
"""
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.response import error_response
from app.exceptions.base import AppError

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    """pydantic 검증 오류를 한 줄 메시지로 변환"""
    parts = []
    for err in exc.errors():
        location = ".".join(str(loc) for loc in err.get("loc", ()) if loc != "body")
        message = err.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "잘못된 요청입니다: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI):
    """
    전역 예외 핸들러 등록

    모든 오류를 {success: false, data: null, error: "..."} envelope으로 변환
    - 도메인 예외 → 4xx (404, 422)
    - 인프라 → 500
    - 요청 본문/경로 검증 실패 → 422
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """
        AppError 계열 통합 처리

        예외의 status_code를 HTTP 상태 코드로 사용
        """
        # 에러 로깅 (5xx는 ERROR, 4xx는 WARNING)
        log_method = logger.error if exc.is_server_error else logger.warning
        log_method(
            f"[{exc.error_code}] {exc.message}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.status_code,
                "error_code": exc.error_code,
                "detail": exc.detail
            },
            exc_info=exc.is_server_error  # 5xx만 스택 트레이스 출력
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message)
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """잘못된 JSON 본문, 필수 필드 누락 등"""
        message = _format_validation_errors(exc)
        logger.warning(f"[VALIDATION_ERROR] {request.method} {request.url.path} - {message}")
        return JSONResponse(
            status_code=422,
            content=error_response(message)
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """존재하지 않는 경로, 허용되지 않은 메서드 등"""
        logger.debug(f"HTTP {exc.status_code}: {request.method} {request.url.path}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(str(exc.detail)),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """
        예상하지 못한 예외 처리 (폴백)

        AppError로 변환되지 않은 모든 예외를 500으로 처리
        """
        logger.error(
            "Unhandled exception",
            exc_info=exc,
            extra={
                "path": request.url.path,
                "method": request.method,
                "exception_type": type(exc).__name__
            }
        )

        return JSONResponse(
            status_code=500,
            content=error_response("서버 내부 오류가 발생했습니다")
        )
