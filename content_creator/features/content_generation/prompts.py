"""
Prompt Builder
콘텐츠 타입별 system / user 프롬프트 구성

선택 필드는 (조건, 문장) 목록으로 관리하고, 조건을 만족하는 문장만
공백 하나로 연결합니다. 빈 문자열과 미입력은 동일하게 취급합니다.
"""

from typing import Iterable, NamedTuple, Optional, Tuple, Union

from content_creator.core.errors import InvalidInput
from content_creator.models.content import ContentType

Clause = Tuple[bool, str]


class PromptPair(NamedTuple):
    """system / user 프롬프트 쌍"""
    system_prompt: str
    user_prompt: str


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def render_clauses(clauses: Iterable[Clause]) -> str:
    """조건이 참인 문장만 순서대로 연결"""
    return " ".join(text for condition, text in clauses if condition)


def _brand_clauses(
    brand_voice: Optional[str],
    target_audience: Optional[str],
    industry: Optional[str],
) -> list:
    return [
        (_present(brand_voice), f"Write in a {brand_voice} tone."),
        (_present(target_audience), f"Target audience: {target_audience}."),
        (_present(industry), f"Industry: {industry}."),
    ]


def _social_post(platform, topic, tone, brand_voice, target_audience, industry) -> PromptPair:
    channel = platform if _present(platform) else "social media"
    system_prompt = render_clauses([
        (True, "You are an expert social media content creator."),
        (True, f"Generate engaging {channel} posts that capture attention and drive engagement."),
        *_brand_clauses(brand_voice, target_audience, industry),
    ])
    user_prompt = render_clauses([
        (True, f"Create a compelling social media post about: {topic}."),
        (_present(tone), f"Tone: {tone}."),
        (True, "Include relevant hashtags and call-to-action."),
        (True, "Keep it concise and engaging."),
    ])
    return PromptPair(system_prompt, user_prompt)


def _ad_copy(platform, topic, tone, brand_voice, target_audience, industry) -> PromptPair:
    channel = platform if _present(platform) else "digital"
    system_prompt = render_clauses([
        (True, "You are an expert advertising copywriter."),
        (True, "Create persuasive ad copy that converts."),
        *_brand_clauses(brand_voice, target_audience, industry),
    ])
    user_prompt = render_clauses([
        (True, f"Write compelling {channel} ad copy for: {topic}."),
        (_present(tone), f"Tone: {tone}."),
        (True, "Focus on benefits, create urgency, and include a clear call-to-action."),
    ])
    return PromptPair(system_prompt, user_prompt)


_BUILDERS = {
    ContentType.SOCIAL_POST: _social_post,
    ContentType.AD_COPY: _ad_copy,
}


def build_prompts(
    content_type: Union[ContentType, str],
    platform: Optional[str],
    topic: str,
    tone: Optional[str] = None,
    brand_voice: Optional[str] = None,
    target_audience: Optional[str] = None,
    industry: Optional[str] = None,
) -> PromptPair:
    """
    프롬프트 생성

    Args:
        content_type: social_post | ad_copy
        platform: 타겟 플랫폼 (없으면 타입별 기본 표현)
        topic: 주제
        tone, brand_voice, target_audience, industry: 선택 항목

    Returns:
        PromptPair

    Raises:
        InvalidInput: 지원하지 않는 콘텐츠 타입
    """
    try:
        content_type = ContentType(content_type)
    except ValueError:
        raise InvalidInput("Invalid content type. Must be social_post or ad_copy") from None

    builder = _BUILDERS[content_type]
    return builder(platform, topic, tone, brand_voice, target_audience, industry)
