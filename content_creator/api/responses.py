"""
Response Helpers
CORS 헤더 + envelope JSON 응답
"""

from typing import Any, Dict, Optional

from fastapi import Response
from fastapi.responses import JSONResponse

from content_creator.models.envelope import ErrorEnvelope, data_envelope

ALLOWED_HEADERS = "authorization, x-client-info, apikey, content-type"


def cors_headers(method: str) -> Dict[str, str]:
    """엔드포인트별 CORS 헤더 (모든 origin 허용, credentials 미허용)"""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Allow-Methods": f"{method}, OPTIONS",
        "Access-Control-Max-Age": "86400",
        "Access-Control-Allow-Credentials": "false",
    }


def preflight_response(headers: Dict[str, str]) -> Response:
    """OPTIONS 응답 (빈 본문 200)"""
    return Response(status_code=200, headers=headers)


def success_response(payload: Any, headers: Dict[str, str]) -> JSONResponse:
    return JSONResponse(content=data_envelope(payload), status_code=200, headers=headers)


def error_response(code: str, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        content=ErrorEnvelope.of(code, message).model_dump(),
        status_code=500,
        headers=headers,
    )
