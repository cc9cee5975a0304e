"""
Content Brief Options
클라이언트 폼에서 사용하는 선택지 (참고용 데이터, 생성 요청을 제한하지 않음)
"""

from typing import Any, Dict

from content_creator.models.content import ContentType


CONTENT_TYPES = [
    {"value": ContentType.SOCIAL_POST.value, "label": "Social Media Post"},
    {"value": ContentType.AD_COPY.value, "label": "Ad Copy"},
]

PLATFORMS = {
    ContentType.SOCIAL_POST.value: ["Instagram", "Facebook", "Twitter", "LinkedIn", "TikTok"],
    ContentType.AD_COPY.value: ["Google Ads", "Facebook Ads", "Instagram Ads", "LinkedIn Ads"],
}

# 플랫폼별 최대 글자수
CHARACTER_LIMITS = {
    "Instagram": 2200,
    "Facebook": 63206,
    "Twitter": 280,
    "LinkedIn": 3000,
    "TikTok": 2200,
    "Google Ads": 90,
    "Facebook Ads": 125,
    "Instagram Ads": 125,
    "LinkedIn Ads": 600,
}

TONES = [
    "Neutral", "Excited", "Confident", "Urgent",
    "Friendly", "Professional", "Playful", "Informative",
]

BRAND_VOICES = [
    "Professional", "Casual", "Friendly", "Humorous", "Inspirational",
    "Authoritative", "Conversational", "Educational", "Luxury", "Bold",
]

INDUSTRIES = [
    "Technology", "Healthcare", "Finance", "E-commerce", "Education",
    "Real Estate", "Food & Beverage", "Travel & Tourism", "Fashion & Beauty",
    "Sports & Fitness", "Entertainment", "Automotive", "Construction",
    "Legal Services", "Marketing & Advertising", "Non-Profit", "Retail",
    "Manufacturing", "Consulting", "Other",
]


def get_content_options() -> Dict[str, Any]:
    """선택지 전체"""
    return {
        "contentTypes": CONTENT_TYPES,
        "platforms": PLATFORMS,
        "tones": TONES,
        "brandVoices": BRAND_VOICES,
        "industries": INDUSTRIES,
        "characterLimits": CHARACTER_LIMITS,
    }
