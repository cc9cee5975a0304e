"""
Supabase Connection Config
Auth / PostgREST 공통 설정
"""

from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from content_creator.core.config import Settings
from content_creator.core.errors import ConfigurationMissing


@dataclass
class SupabaseConfig:
    """Supabase 접속 설정"""
    url: str
    service_key: str
    table: str = "contents"
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> 'SupabaseConfig':
        if not settings.supabase_configured:
            raise ConfigurationMissing("Supabase configuration missing")

        return cls(
            url=settings.SUPABASE_URL.rstrip("/"),
            service_key=settings.SUPABASE_SERVICE_ROLE_KEY,
            table=settings.CONTENTS_TABLE,
            timeout=settings.HTTP_TIMEOUT,
        )

    def service_headers(self) -> Dict[str, str]:
        """서비스 키 인증 헤더"""
        return {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
            "Content-Type": "application/json",
        }


class SupabaseHTTPClient:
    """httpx 기반 클라이언트 베이스 (호출마다 AsyncClient 생성)"""

    def __init__(
        self,
        config: SupabaseConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.url,
            timeout=self.config.timeout,
            transport=self._transport,
        )
