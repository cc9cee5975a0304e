"""
User Stats Handler
사용자 확인(필수) → 집계 쿼리 3개 동시 실행 → 통계 응답
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Optional
import asyncio
import logging

from content_creator.core.config import Settings
from content_creator.core.errors import ConfigurationMissing, Unauthorized
from content_creator.core.result import FailurePolicy, attempt, settle
from content_creator.models.content import ContentType
from content_creator.models.stats import ContentByType, StatsResult
from content_creator.services.shared.identity import (
    IdentityClient,
    create_identity_client,
    extract_bearer_token,
)
from content_creator.services.shared.row_store import RowStoreClient, create_row_store

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def tally_content_types(content_types: Iterable[Optional[str]]) -> ContentByType:
    """
    타입별 개수 집계

    social_post / ad_copy 외의 타입은 어느 버킷에도 포함하지 않습니다.
    """
    counts = {t.value: 0 for t in ContentType}
    for content_type in content_types:
        if content_type in counts:
            counts[content_type] += 1
    return ContentByType(**counts)


class StatsHandler:
    """
    사용자 통계 핸들러

    모든 실패는 치명적입니다 (부분 통계를 반환하지 않음).
    """

    FAILURE_POLICY = {
        "resolve_identity": FailurePolicy.FATAL,
        "count_total": FailurePolicy.FATAL,
        "list_types": FailurePolicy.FATAL,
        "count_recent": FailurePolicy.FATAL,
    }

    def __init__(
        self,
        identity: Optional[IdentityClient],
        row_store: Optional[RowStoreClient],
        recent_window_days: int = 7,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.identity = identity
        self.row_store = row_store
        self.recent_window = timedelta(days=recent_window_days)
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "StatsHandler":
        return cls(
            identity=create_identity_client(settings),
            row_store=create_row_store(settings),
            recent_window_days=settings.RECENT_WINDOW_DAYS,
        )

    async def handle(self, authorization: Optional[str]) -> StatsResult:
        """
        사용자 통계 조회

        Args:
            authorization: Authorization 헤더 (필수)

        Raises:
            Unauthorized: 헤더 없음
            ConfigurationMissing: Supabase 미설정
            InvalidToken: 토큰 검증 실패
            RowStoreQueryFailed: 집계 쿼리 실패
        """
        token = extract_bearer_token(authorization)
        if not token:
            raise Unauthorized("No authorization header")

        if self.identity is None or self.row_store is None:
            raise ConfigurationMissing("Supabase configuration missing")

        user_id = settle("resolve_identity", await attempt(self.identity.resolve(token)), self.FAILURE_POLICY)

        since = self.clock() - self.recent_window

        total, types, recent = await asyncio.gather(
            attempt(self.row_store.count_contents(user_id)),
            attempt(self.row_store.list_content_types(user_id)),
            attempt(self.row_store.count_contents(user_id, created_since=since)),
        )

        total_content = settle("count_total", total, self.FAILURE_POLICY)
        content_by_type = tally_content_types(settle("list_types", types, self.FAILURE_POLICY))
        recent_content = settle("count_recent", recent, self.FAILURE_POLICY)

        logger.info(
            f"Stats for {user_id}: total={total_content}, "
            f"recent={recent_content}, by_type={content_by_type.model_dump()}"
        )

        return StatsResult(
            total_content=total_content,
            content_by_type=content_by_type,
            recent_content=recent_content,
            user_id=user_id,
        )
