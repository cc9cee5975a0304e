"""
Pytest Configuration and Fixtures
content_creator 테스트 공통 설정

Features:
- 공통 fixture 정의
- 협력 서비스 Mock / In-memory Fake 제공
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest


# ============================================================
# Brief Fixtures
# ============================================================

@pytest.fixture
def sample_brief() -> Dict[str, Any]:
    """테스트용 콘텐츠 brief (전체 필드)"""
    return {
        'contentType': 'social_post',
        'platform': 'Instagram',
        'topic': 'Spring collection launch',
        'tone': 'Excited',
        'brandVoice': 'Friendly',
        'targetAudience': 'Young professionals',
        'industry': 'Fashion & Beauty',
    }


@pytest.fixture
def minimal_brief() -> Dict[str, Any]:
    """필수 필드만 있는 brief"""
    return {
        'contentType': 'ad_copy',
        'topic': 'Noise-cancelling headphones',
    }


@pytest.fixture
def settings():
    """모든 협력 서비스가 설정된 Settings"""
    from content_creator.core.config import Settings
    return Settings(
        _env_file=None,
        OPENAI_API_KEY='sk-test',
        SUPABASE_URL='https://project.supabase.co',
        SUPABASE_SERVICE_ROLE_KEY='service-role-key',
    )


@pytest.fixture
def bare_settings():
    """협력 서비스 설정이 없는 Settings"""
    from content_creator.core.config import Settings
    return Settings(
        _env_file=None,
        OPENAI_API_KEY=None,
        SUPABASE_URL=None,
        SUPABASE_SERVICE_ROLE_KEY=None,
    )


# ============================================================
# Mock Fixtures
# ============================================================

GENERATED_TEXT = "Spring is here! Shop the new collection today. #SpringDrop #NewIn"


@pytest.fixture
def mock_llm():
    """LLMClient Mock"""
    from content_creator.services.shared.llm import LLMResponse

    llm = MagicMock()
    llm.generate = AsyncMock(return_value=LLMResponse(
        content=GENERATED_TEXT,
        model='gpt-3.5-turbo',
        input_tokens=80,
        output_tokens=40,
    ))
    return llm


@pytest.fixture
def mock_identity():
    """IdentityClient Mock (항상 user-123 반환)"""
    identity = MagicMock()
    identity.resolve = AsyncMock(return_value='user-123')
    return identity


class FakeRowStore:
    """In-memory `contents` 테이블"""

    def __init__(self, records: Optional[List[Any]] = None):
        self.records = list(records or [])
        self.insert_calls = 0

    async def insert_content(self, record):
        self.insert_calls += 1
        saved = record.model_copy(update={
            'id': uuid.uuid4().hex,
            'created_at': datetime.now(timezone.utc),
        })
        self.records.append(saved)
        return saved

    async def count_contents(self, user_id, created_since=None):
        return sum(
            1 for r in self.records
            if r.user_id == user_id
            and (created_since is None or r.created_at >= created_since)
        )

    async def list_content_types(self, user_id):
        return [r.content_type for r in self.records if r.user_id == user_id]


def make_record(user_id: str, content_type: str, created_at: datetime):
    """테스트용 저장 레코드"""
    from content_creator.models.content import ContentRecord
    return ContentRecord(
        id=uuid.uuid4().hex,
        user_id=user_id,
        content_type=content_type,
        original_text='text',
        edited_text='text',
        topic='topic',
        created_at=created_at,
    )


@pytest.fixture
def fake_row_store():
    """빈 FakeRowStore"""
    return FakeRowStore()


@pytest.fixture
def record_factory():
    """레코드 생성 함수"""
    return make_record


@pytest.fixture
def row_store_factory():
    """레코드를 미리 채운 FakeRowStore 생성 함수"""
    return FakeRowStore
