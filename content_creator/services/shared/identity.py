"""
Identity Resolver
Bearer 토큰 → 사용자 ID (Supabase Auth)
"""

from typing import Optional
import logging

import httpx

from content_creator.core.config import Settings
from content_creator.core.errors import InvalidToken
from content_creator.services.shared.supabase import SupabaseConfig, SupabaseHTTPClient

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Authorization 헤더에서 토큰 추출

    "Bearer <token>" 형식이 아니면 헤더 값 전체를 토큰으로 취급합니다.
    """
    if not authorization or not authorization.strip():
        return None

    value = authorization.strip()
    if value.lower() == BEARER_PREFIX.strip():
        return None
    if value.lower().startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):].strip()
    return value or None


class IdentityClient(SupabaseHTTPClient):
    """Supabase Auth 클라이언트"""

    async def resolve(self, token: str) -> str:
        """
        현재 사용자 ID 조회

        Args:
            token: 사용자 access token

        Returns:
            사용자 ID

        Raises:
            InvalidToken: 비정상 응답, 네트워크 에러, id 누락
        """
        headers = {
            "Authorization": f"Bearer {token}",
            "apikey": self.config.service_key,
        }

        try:
            async with self._client() as client:
                response = await client.get("/auth/v1/user", headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"Identity lookup failed: {e}")
            raise InvalidToken(f"Identity provider unreachable: {e}") from e

        if not response.is_success:
            logger.info(f"Identity rejected token: HTTP {response.status_code}")
            raise InvalidToken("Invalid token", details={"status": response.status_code})

        try:
            body = response.json()
        except ValueError as e:
            raise InvalidToken("Invalid identity response") from e

        user_id = body.get("id") if isinstance(body, dict) else None

        if not user_id:
            raise InvalidToken("Identity response missing user id")

        return str(user_id)


def create_identity_client(settings: Settings) -> Optional[IdentityClient]:
    """설정 기반 Identity 클라이언트 (Supabase 미설정시 None)"""
    if not settings.supabase_configured:
        return None
    return IdentityClient(SupabaseConfig.from_settings(settings))
