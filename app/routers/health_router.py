from fastapi import APIRouter

from app.core.response import ApiResponse, success_response

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=ApiResponse[str])
async def health_check():
    """liveness: 프로세스가 요청을 처리 가능한지만 확인"""
    return success_response("OK")
