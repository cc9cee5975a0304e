"""
전역 설정 관리
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """애플리케이션 전역 설정"""

    # ============================================
    # Application Settings
    # ============================================
    APP_NAME: str = "AI Content Creator"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ============================================
    # Server Settings
    # ============================================
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    APP_RELOAD: bool = True

    # ============================================
    # OpenAI API
    # ============================================
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_TEMPERATURE: float = 0.7
    OPENAI_MAX_TOKENS: int = 500
    OPENAI_REQUEST_TIMEOUT: int = 60

    # ============================================
    # Supabase (Auth + PostgREST)
    # ============================================
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    CONTENTS_TABLE: str = "contents"
    HTTP_TIMEOUT: float = 10.0

    # ============================================
    # Stats
    # ============================================
    RECENT_WINDOW_DAYS: int = 7

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"  # 추가 환경변수 허용

    @property
    def llm_configured(self) -> bool:
        """LLM 호출 가능 여부"""
        return bool(self.OPENAI_API_KEY)

    @property
    def supabase_configured(self) -> bool:
        """인증/저장소 사용 가능 여부 (URL + 서비스 키 모두 필요)"""
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)


@lru_cache()
def get_settings() -> Settings:
    """싱글톤 설정 (FastAPI 의존성으로 주입)"""
    return Settings()
