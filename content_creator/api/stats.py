"""
User Stats API
사용자 콘텐츠 통계 엔드포인트
"""

from fastapi import APIRouter, Depends, Request
import logging

from content_creator.api.dependencies import get_stats_handler
from content_creator.api.responses import (
    cors_headers,
    error_response,
    preflight_response,
    success_response,
)
from content_creator.core.errors import ContentCreatorError
from content_creator.features.stats.handler import StatsHandler

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_CODE = "STATS_FETCH_FAILED"
CORS_HEADERS = cors_headers("GET")


@router.options("/get-user-stats", include_in_schema=False)
async def user_stats_preflight():
    """CORS preflight"""
    return preflight_response(CORS_HEADERS)


@router.get("/get-user-stats")
async def get_user_stats(
    request: Request,
    handler: StatsHandler = Depends(get_stats_handler),
):
    """
    사용자 통계 조회

    Returns:
        전체 개수, 타입별 개수, 최근 7일 개수
    """
    try:
        result = await handler.handle(request.headers.get("authorization"))
        return success_response(result, CORS_HEADERS)

    except ContentCreatorError as e:
        logger.error(f"Stats error: {e.to_dict()}")
        return error_response(ERROR_CODE, e.message, CORS_HEADERS)
    except Exception as e:
        logger.error(f"Stats fetch failed: {e}", exc_info=True)
        return error_response(ERROR_CODE, str(e), CORS_HEADERS)
