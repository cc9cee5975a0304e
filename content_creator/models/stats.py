"""
통계 모델
"""

from pydantic import BaseModel as BucketModel, Field

from content_creator.models.base import BaseModel


class ContentByType(BucketModel):
    """콘텐츠 타입별 개수 (두 타입 키는 항상 포함)"""
    social_post: int = Field(0, ge=0)
    ad_copy: int = Field(0, ge=0)


class StatsResult(BaseModel):
    """사용자 통계"""
    total_content: int = Field(..., ge=0)
    content_by_type: ContentByType
    recent_content: int = Field(..., ge=0)
    user_id: str
