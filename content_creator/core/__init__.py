"""
Core 패키지
설정, 에러, 호출 결과 정책
"""

from content_creator.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
