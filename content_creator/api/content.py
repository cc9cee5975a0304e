"""
Content Generation API
콘텐츠 생성 엔드포인트
"""

from fastapi import APIRouter, Depends, Request
import logging

from content_creator.api.dependencies import get_generation_handler
from content_creator.api.responses import (
    cors_headers,
    error_response,
    preflight_response,
    success_response,
)
from content_creator.core.errors import ContentCreatorError, InvalidInput
from content_creator.features.content_generation.catalog import get_content_options
from content_creator.features.content_generation.handler import GenerationHandler

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_CODE = "CONTENT_GENERATION_FAILED"
CORS_HEADERS = cors_headers("POST")


# ============================================================
# API Endpoints
# ============================================================

@router.options("/generate-content", include_in_schema=False)
async def generate_content_preflight():
    """CORS preflight"""
    return preflight_response(CORS_HEADERS)


@router.post("/generate-content")
async def generate_content(
    request: Request,
    handler: GenerationHandler = Depends(get_generation_handler),
):
    """
    콘텐츠 생성

    Authorization 헤더가 있고 유효하면 결과를 사용자 콘텐츠로 저장합니다.
    """
    try:
        try:
            payload = await request.json()
        except ValueError:
            raise InvalidInput("Invalid JSON body")

        result = await handler.handle(payload, request.headers.get("authorization"))
        return success_response(result, CORS_HEADERS)

    except ContentCreatorError as e:
        logger.error(f"Content generation error: {e.to_dict()}")
        return error_response(ERROR_CODE, e.message, CORS_HEADERS)
    except Exception as e:
        logger.error(f"Content generation failed: {e}", exc_info=True)
        return error_response(ERROR_CODE, str(e), CORS_HEADERS)


@router.get("/content-options")
async def content_options():
    """콘텐츠 brief 선택지 (타입, 플랫폼, 톤, 보이스, 산업, 글자수 제한)"""
    return success_response(get_content_options(), cors_headers("GET"))
