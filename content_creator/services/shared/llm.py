"""
LLM Service
OpenAI Chat Completions 클라이언트 (LangChain)

Features:
    - system/user 메시지 쌍 호출
    - 고정 temperature / max_tokens
    - 재시도 없음 (실패는 1회만 전파)
    - 토큰 사용량 / 레이턴시 기록
"""

from langchain_openai import ChatOpenAI
from langchain_core.messages import HumanMessage, SystemMessage
from dataclasses import dataclass
from typing import Optional
import time
import logging

from content_creator.core.config import Settings
from content_creator.core.errors import ConfigurationMissing, UpstreamGenerationFailed

logger = logging.getLogger(__name__)


# ============================================================
# Config & Types
# ============================================================

@dataclass
class LLMConfig:
    """LLM 클라이언트 설정"""
    api_key: str
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.7
    max_tokens: int = 500
    request_timeout: int = 60

    @classmethod
    def from_settings(cls, settings: Settings) -> 'LLMConfig':
        """설정에서 로드"""
        if not settings.OPENAI_API_KEY:
            raise ConfigurationMissing("OpenAI API key not configured")

        return cls(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            temperature=settings.OPENAI_TEMPERATURE,
            max_tokens=settings.OPENAI_MAX_TOKENS,
            request_timeout=settings.OPENAI_REQUEST_TIMEOUT,
        )


@dataclass
class LLMResponse:
    """LLM 응답"""
    content: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: float = 0.0
    finish_reason: str = "stop"

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


# ============================================================
# LLM Client
# ============================================================

class LLMClient:
    """
    LLM 클라이언트

    요청마다 생성되며 상태를 공유하지 않습니다.
    """

    def __init__(self, config: LLMConfig):
        self.config = config
        self.model = ChatOpenAI(
            api_key=config.api_key,
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            timeout=config.request_timeout,
            max_retries=0,
        )

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        LLM 호출

        Args:
            system_prompt: 시스템 프롬프트
            user_prompt: 사용자 프롬프트
            temperature: 온도 (오버라이드)
            max_tokens: 최대 토큰 (오버라이드)

        Returns:
            LLMResponse

        Raises:
            UpstreamGenerationFailed: 제공자 에러 또는 빈 응답
        """
        start_time = time.time()

        llm = self.model
        if temperature is not None:
            llm = llm.bind(temperature=temperature)
        if max_tokens is not None:
            llm = llm.bind(max_tokens=max_tokens)

        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt),
        ]

        try:
            response = await llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"LLM error: {e}")
            raise UpstreamGenerationFailed(f"OpenAI API error: {e}") from e

        content = response.content if isinstance(response.content, str) else ""
        if not content.strip():
            raise UpstreamGenerationFailed("No content generated from OpenAI")

        usage = getattr(response, "usage_metadata", None) or {}
        metadata = getattr(response, "response_metadata", None) or {}
        latency_ms = (time.time() - start_time) * 1000

        logger.debug(
            f"LLM: {self.config.model} | "
            f"Tokens: {usage.get('input_tokens', 0)}+{usage.get('output_tokens', 0)} | "
            f"Time: {latency_ms:.0f}ms"
        )

        return LLMResponse(
            content=content,
            model=self.config.model,
            input_tokens=usage.get('input_tokens', 0),
            output_tokens=usage.get('output_tokens', 0),
            latency_ms=latency_ms,
            finish_reason=metadata.get('finish_reason', 'stop'),
        )


# ============================================================
# Factory
# ============================================================

def create_llm_client(settings: Settings) -> Optional[LLMClient]:
    """설정 기반 LLM 클라이언트 (API 키 없으면 None)"""
    if not settings.llm_configured:
        return None
    return LLMClient(LLMConfig.from_settings(settings))
