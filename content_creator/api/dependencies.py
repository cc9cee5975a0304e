"""
FastAPI Dependencies
요청마다 설정 기반 핸들러 생성 (테스트에서는 dependency_overrides로 교체)
"""

from fastapi import Depends

from content_creator.core.config import Settings, get_settings
from content_creator.features.content_generation.handler import GenerationHandler
from content_creator.features.stats.handler import StatsHandler


def get_generation_handler(settings: Settings = Depends(get_settings)) -> GenerationHandler:
    return GenerationHandler.from_settings(settings)


def get_stats_handler(settings: Settings = Depends(get_settings)) -> StatsHandler:
    return StatsHandler.from_settings(settings)
