"""
데이터 모델 패키지
"""
from content_creator.models.base import BaseModel
from content_creator.models.content import (
    ContentType,
    GenerationRequest,
    GenerationResult,
    ContentRecord,
    DEFAULT_PLATFORM,
    DEFAULT_TONE,
)
from content_creator.models.stats import ContentByType, StatsResult
from content_creator.models.envelope import ErrorBody, ErrorEnvelope, data_envelope

__all__ = [
    'BaseModel',
    'ContentType',
    'GenerationRequest',
    'GenerationResult',
    'ContentRecord',
    'DEFAULT_PLATFORM',
    'DEFAULT_TONE',
    'ContentByType',
    'StatsResult',
    'ErrorBody',
    'ErrorEnvelope',
    'data_envelope',
]
