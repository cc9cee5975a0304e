"""
Content Generation Handler
입력 검증 → 프롬프트 → LLM → (선택) 사용자 확인 → (선택) 저장
"""

from typing import Any, Optional
import logging

from pydantic import ValidationError

from content_creator.core.config import Settings
from content_creator.core.errors import ConfigurationMissing, InvalidInput
from content_creator.core.result import FailurePolicy, attempt, settle
from content_creator.features.content_generation.prompts import build_prompts
from content_creator.models.content import (
    ContentRecord,
    ContentType,
    GenerationRequest,
    GenerationResult,
)
from content_creator.services.shared.identity import (
    IdentityClient,
    create_identity_client,
    extract_bearer_token,
)
from content_creator.services.shared.llm import LLMClient, create_llm_client
from content_creator.services.shared.row_store import RowStoreClient, create_row_store

logger = logging.getLogger(__name__)


class GenerationHandler:
    """
    콘텐츠 생성 핸들러

    외부 호출은 모두 순차 실행되며 재시도하지 않습니다.
    사용자 확인/저장 실패는 응답에 영향을 주지 않습니다.
    """

    FAILURE_POLICY = {
        "generate": FailurePolicy.FATAL,
        "resolve_identity": FailurePolicy.ABSORB,
        "persist": FailurePolicy.ABSORB,
    }

    def __init__(
        self,
        llm: Optional[LLMClient],
        identity: Optional[IdentityClient] = None,
        row_store: Optional[RowStoreClient] = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
    ):
        self.llm = llm
        self.identity = identity
        self.row_store = row_store
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationHandler":
        return cls(
            llm=create_llm_client(settings),
            identity=create_identity_client(settings),
            row_store=create_row_store(settings),
            temperature=settings.OPENAI_TEMPERATURE,
            max_tokens=settings.OPENAI_MAX_TOKENS,
        )

    @staticmethod
    def parse_request(payload: Any) -> GenerationRequest:
        """
        요청 본문 검증

        Raises:
            InvalidInput: 필수 필드 누락, 지원하지 않는 타입, 형식 오류
        """
        if not isinstance(payload, dict):
            raise InvalidInput("Request body must be a JSON object")

        content_type = payload.get("contentType")
        topic = payload.get("topic")

        if not content_type or not topic or (isinstance(topic, str) and not topic.strip()):
            raise InvalidInput("Content type and topic are required")

        if content_type not in ContentType.values():
            raise InvalidInput("Invalid content type. Must be social_post or ad_copy")

        try:
            return GenerationRequest.model_validate(payload)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise InvalidInput(f"Invalid request fields: {fields}") from e

    async def handle(self, payload: Any, authorization: Optional[str] = None) -> GenerationResult:
        """
        콘텐츠 생성

        Args:
            payload: JSON 요청 본문
            authorization: Authorization 헤더 (선택)

        Returns:
            GenerationResult (사용자 미확인시 user_id=None)
        """
        request = self.parse_request(payload)

        if self.llm is None:
            raise ConfigurationMissing("OpenAI API key not configured")

        prompts = build_prompts(
            request.content_type,
            request.platform,
            request.topic,
            request.tone,
            request.brand_voice,
            request.target_audience,
            request.industry,
        )

        generated = settle(
            "generate",
            await attempt(self.llm.generate(
                prompts.system_prompt,
                prompts.user_prompt,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )),
            self.FAILURE_POLICY,
        )
        content = generated.content

        logger.info(
            f"Generated {request.content_type.value}: {len(content)} chars "
            f"({generated.total_tokens} tokens)"
        )

        user_id = await self._resolve_user(authorization)
        if user_id:
            await self._persist(request, content, user_id)

        return GenerationResult(
            content=content,
            content_type=request.content_type,
            platform=request.platform,
            topic=request.topic,
            user_id=user_id,
        )

    async def _resolve_user(self, authorization: Optional[str]) -> Optional[str]:
        """토큰이 있으면 사용자 확인 (실패시 익명 처리)"""
        token = extract_bearer_token(authorization)
        if not token:
            return None

        if self.identity is None:
            logger.info("Identity not configured; generating anonymously")
            return None

        return settle("resolve_identity", await attempt(self.identity.resolve(token)), self.FAILURE_POLICY)

    async def _persist(self, request: GenerationRequest, content: str, user_id: str) -> None:
        """생성 결과 저장 (실패는 로그만)"""
        if self.row_store is None:
            logger.info("Row-store not configured; skipping persistence")
            return

        record = ContentRecord.from_generation(request, content, user_id)
        saved = settle("persist", await attempt(self.row_store.insert_content(record)), self.FAILURE_POLICY)
        if saved is not None:
            logger.info(f"Saved content for user {user_id}: id={saved.id}")
