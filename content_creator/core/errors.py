"""
Error Taxonomy
서비스 공통 예외 계층
"""

from typing import Any, Dict, Optional


class ContentCreatorError(Exception):
    """서비스 에러 베이스"""

    code = "CONTENT_CREATOR_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code,
            'message': self.message,
            'details': self.details,
        }


class InvalidInput(ContentCreatorError):
    """필수 필드 누락 / 지원하지 않는 콘텐츠 타입"""
    code = "INVALID_INPUT"


class UpstreamGenerationFailed(ContentCreatorError):
    """LLM 제공자 에러 또는 빈 응답"""
    code = "UPSTREAM_GENERATION_FAILED"


class InvalidToken(ContentCreatorError):
    """토큰 검증 실패"""
    code = "INVALID_TOKEN"


class Unauthorized(ContentCreatorError):
    """Authorization 헤더 없음"""
    code = "UNAUTHORIZED"


class PersistenceFailed(ContentCreatorError):
    """콘텐츠 저장 실패"""
    code = "PERSISTENCE_FAILED"


class RowStoreQueryFailed(ContentCreatorError):
    """통계 조회 실패"""
    code = "ROW_STORE_QUERY_FAILED"


class ConfigurationMissing(ContentCreatorError):
    """필수 환경변수 누락"""
    code = "CONFIGURATION_MISSING"
