"""
Row-Store Client
Supabase PostgREST `contents` 테이블 클라이언트

- insert: POST /rest/v1/{table}
- count:  HEAD /rest/v1/{table} + Prefer: count=exact (Content-Range 헤더)
- types:  GET  /rest/v1/{table}?select=content_type
"""

from datetime import datetime
from typing import List, Optional
import logging

import httpx
from pydantic import ValidationError

from content_creator.core.config import Settings
from content_creator.core.errors import PersistenceFailed, RowStoreQueryFailed
from content_creator.models.content import ContentRecord
from content_creator.services.shared.supabase import SupabaseConfig, SupabaseHTTPClient

logger = logging.getLogger(__name__)


def parse_content_range(header: Optional[str]) -> int:
    """
    Content-Range 헤더에서 전체 개수 파싱

    "0-4/5" -> 5, "*/0" -> 0
    """
    if not header or "/" not in header:
        raise RowStoreQueryFailed(f"Missing count in Content-Range: {header!r}")

    total = header.rsplit("/", 1)[1].strip()
    if not total.isdigit():
        raise RowStoreQueryFailed(f"Unknown total in Content-Range: {header!r}")
    return int(total)


class RowStoreClient(SupabaseHTTPClient):
    """PostgREST 클라이언트"""

    @property
    def _path(self) -> str:
        return f"/rest/v1/{self.config.table}"

    async def insert_content(self, record: ContentRecord) -> ContentRecord:
        """
        콘텐츠 레코드 저장

        Raises:
            PersistenceFailed: 저장 실패
        """
        headers = {**self.config.service_headers(), "Prefer": "return=representation"}

        try:
            async with self._client() as client:
                response = await client.post(self._path, json=record.to_row(), headers=headers)
        except httpx.HTTPError as e:
            raise PersistenceFailed(f"Database insert failed: {e}") from e

        if not response.is_success:
            raise PersistenceFailed(
                f"Database insert failed: {response.text}",
                details={"status": response.status_code},
            )

        try:
            rows = response.json()
        except ValueError:
            rows = None
        if not isinstance(rows, list) or not rows:
            return record

        # 응답 row 형식 오류 → 로컬 레코드
        try:
            return ContentRecord.model_validate(rows[0])
        except ValidationError as e:
            logger.warning(f"Unexpected insert representation: {e.error_count()} invalid field(s)")
            return record

    async def count_contents(
        self,
        user_id: str,
        created_since: Optional[datetime] = None,
    ) -> int:
        """
        사용자 콘텐츠 개수

        Args:
            user_id: 사용자 ID
            created_since: 지정시 created_at >= created_since 만 집계

        Raises:
            RowStoreQueryFailed: 조회 실패
        """
        params = {"user_id": f"eq.{user_id}", "select": "id"}
        if created_since is not None:
            params["created_at"] = f"gte.{created_since.isoformat()}"

        headers = {**self.config.service_headers(), "Prefer": "count=exact"}

        try:
            async with self._client() as client:
                response = await client.head(self._path, params=params, headers=headers)
        except httpx.HTTPError as e:
            raise RowStoreQueryFailed(f"Count query failed: {e}") from e

        if not response.is_success:
            raise RowStoreQueryFailed(
                "Count query failed",
                details={"status": response.status_code},
            )

        return parse_content_range(response.headers.get("content-range"))

    async def list_content_types(self, user_id: str) -> List[str]:
        """
        사용자 레코드별 content_type 목록

        Raises:
            RowStoreQueryFailed: 조회 실패
        """
        params = {"user_id": f"eq.{user_id}", "select": "content_type"}

        try:
            async with self._client() as client:
                response = await client.get(
                    self._path, params=params, headers=self.config.service_headers()
                )
        except httpx.HTTPError as e:
            raise RowStoreQueryFailed(f"Content type query failed: {e}") from e

        if not response.is_success:
            raise RowStoreQueryFailed(
                f"Content type query failed: {response.text}",
                details={"status": response.status_code},
            )

        try:
            rows = response.json()
        except ValueError as e:
            raise RowStoreQueryFailed("Invalid content type response") from e

        if not isinstance(rows, list):
            raise RowStoreQueryFailed("Invalid content type response")

        return [row.get("content_type") for row in rows if isinstance(row, dict)]


def create_row_store(settings: Settings) -> Optional[RowStoreClient]:
    """설정 기반 Row-Store 클라이언트 (Supabase 미설정시 None)"""
    if not settings.supabase_configured:
        return None
    return RowStoreClient(SupabaseConfig.from_settings(settings))
