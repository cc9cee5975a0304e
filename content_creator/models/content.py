"""
콘텐츠 모델
생성 요청/결과 + 저장 레코드
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel as RowModel, ConfigDict, Field, field_validator

from content_creator.models.base import BaseModel


class ContentType(str, Enum):
    """콘텐츠 타입"""
    SOCIAL_POST = "social_post"
    AD_COPY = "ad_copy"

    @classmethod
    def values(cls) -> list:
        return [t.value for t in cls]


DEFAULT_PLATFORM = "general"
DEFAULT_TONE = "neutral"


class GenerationRequest(BaseModel):
    """콘텐츠 생성 요청 (content brief)"""

    content_type: ContentType = Field(..., description="콘텐츠 타입")
    topic: str = Field(..., min_length=1, description="주제")
    platform: Optional[str] = Field(None, description="타겟 플랫폼")
    tone: Optional[str] = Field(None, description="톤앤매너")
    brand_voice: Optional[str] = Field(None, description="브랜드 보이스")
    target_audience: Optional[str] = Field(None, description="타겟 오디언스")
    industry: Optional[str] = Field(None, description="산업군")

    @field_validator("platform", "tone", "brand_voice", "target_audience", "industry", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Any) -> Any:
        # 빈 문자열은 미입력과 동일하게 처리
        if isinstance(value, str) and not value.strip():
            return None
        return value

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "contentType": "social_post",
                "platform": "Instagram",
                "topic": "Launch of our spring collection",
                "tone": "Excited",
                "brandVoice": "Friendly",
                "targetAudience": "Young professionals",
                "industry": "Fashion & Beauty",
            }
        }
    )


class GenerationResult(BaseModel):
    """콘텐츠 생성 결과"""
    content: str
    content_type: ContentType
    platform: Optional[str] = None
    topic: str
    user_id: Optional[str] = None


class ContentRecord(RowModel):
    """
    저장 레코드 (`contents` 테이블 row)

    생성 시점에는 original_text == edited_text.
    """
    id: Optional[str] = None
    user_id: str
    content_type: str
    platform: str = DEFAULT_PLATFORM
    original_text: str
    edited_text: str
    topic: str
    tone: str = DEFAULT_TONE
    created_at: Optional[datetime] = None

    @classmethod
    def from_generation(
        cls,
        request: GenerationRequest,
        content: str,
        user_id: str,
    ) -> "ContentRecord":
        """생성 결과로부터 신규 레코드 구성"""
        return cls(
            user_id=user_id,
            content_type=request.content_type.value,
            platform=request.platform or DEFAULT_PLATFORM,
            original_text=content,
            edited_text=content,
            topic=request.topic,
            tone=request.tone or DEFAULT_TONE,
        )

    def to_row(self) -> Dict[str, Any]:
        """insert용 dict (id/created_at은 저장소에서 채움)"""
        return self.model_dump(mode="json", exclude_none=True)
