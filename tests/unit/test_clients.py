"""
Unit Tests for Collaborator Clients
LLM / Identity / Row-Store 클라이언트 테스트 (httpx.MockTransport)

Run: pytest tests/unit/test_clients.py -v
"""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest


@pytest.fixture
def supabase_config():
    from content_creator.services.shared.supabase import SupabaseConfig
    return SupabaseConfig(url='https://project.supabase.co', service_key='service-role-key')


def recording_transport(handler):
    """요청을 기록하는 MockTransport"""
    seen = []

    def _handle(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return httpx.MockTransport(_handle), seen


# ============================================================
# Bearer Token
# ============================================================

class TestExtractBearerToken:
    """Authorization 헤더 파싱"""

    @pytest.mark.parametrize('header,expected', [
        ('Bearer abc.def', 'abc.def'),
        ('bearer abc', 'abc'),
        ('BEARER   abc  ', 'abc'),
        ('abc', 'abc'),
        ('Bearer', None),
        ('', None),
        (None, None),
    ])
    def test_extract(self, header, expected):
        from content_creator.services.shared.identity import extract_bearer_token

        assert extract_bearer_token(header) == expected


# ============================================================
# Identity
# ============================================================

class TestIdentityClient:
    """Supabase Auth 조회"""

    @pytest.mark.asyncio
    async def test_resolve_user(self, supabase_config):
        from content_creator.services.shared.identity import IdentityClient

        transport, seen = recording_transport(
            lambda request: httpx.Response(200, json={'id': 'user-42', 'email': 'a@b.c'})
        )
        client = IdentityClient(supabase_config, transport=transport)

        assert await client.resolve('user-token') == 'user-42'

        request = seen[0]
        assert request.method == 'GET'
        assert request.url.path == '/auth/v1/user'
        assert request.headers['authorization'] == 'Bearer user-token'
        assert request.headers['apikey'] == 'service-role-key'

    @pytest.mark.asyncio
    @pytest.mark.parametrize('response', [
        httpx.Response(401, json={'msg': 'invalid JWT'}),
        httpx.Response(200, json={'email': 'no-id@b.c'}),
        httpx.Response(200, text='not json'),
        httpx.Response(200, json=['user-42']),
    ])
    async def test_rejected(self, supabase_config, response):
        from content_creator.core.errors import InvalidToken
        from content_creator.services.shared.identity import IdentityClient

        client = IdentityClient(supabase_config, transport=httpx.MockTransport(lambda request: response))

        with pytest.raises(InvalidToken):
            await client.resolve('user-token')

    @pytest.mark.asyncio
    async def test_network_error(self, supabase_config):
        from content_creator.core.errors import InvalidToken
        from content_creator.services.shared.identity import IdentityClient

        def unreachable(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = IdentityClient(supabase_config, transport=httpx.MockTransport(unreachable))

        with pytest.raises(InvalidToken, match="unreachable"):
            await client.resolve('user-token')

    def test_factory_unconfigured(self, bare_settings):
        from content_creator.services.shared.identity import create_identity_client

        assert create_identity_client(bare_settings) is None


# ============================================================
# Row-Store
# ============================================================

class TestParseContentRange:
    """Content-Range 파싱"""

    @pytest.mark.parametrize('header,expected', [
        ('0-4/5', 5),
        ('*/0', 0),
        ('0-99/1234', 1234),
    ])
    def test_parse(self, header, expected):
        from content_creator.services.shared.row_store import parse_content_range

        assert parse_content_range(header) == expected

    @pytest.mark.parametrize('header', [None, '', '0-4/*', '0-4'])
    def test_missing_total(self, header):
        from content_creator.core.errors import RowStoreQueryFailed
        from content_creator.services.shared.row_store import parse_content_range

        with pytest.raises(RowStoreQueryFailed):
            parse_content_range(header)


class TestRowStoreClient:
    """PostgREST 호출"""

    @pytest.fixture
    def record(self):
        from content_creator.models.content import ContentRecord
        return ContentRecord(
            user_id='user-123',
            content_type='social_post',
            original_text='Hello',
            edited_text='Hello',
            topic='Launch',
        )

    @pytest.mark.asyncio
    async def test_insert(self, supabase_config, record):
        from content_creator.services.shared.row_store import RowStoreClient

        def handler(request):
            row = json.loads(request.content)
            return httpx.Response(201, json=[{**row, 'id': 'row-1', 'created_at': '2026-03-15T12:00:00+00:00'}])

        transport, seen = recording_transport(handler)
        client = RowStoreClient(supabase_config, transport=transport)

        saved = await client.insert_content(record)

        request = seen[0]
        assert request.method == 'POST'
        assert request.url.path == '/rest/v1/contents'
        assert request.headers['prefer'] == 'return=representation'
        assert json.loads(request.content) == {
            'user_id': 'user-123',
            'content_type': 'social_post',
            'platform': 'general',
            'original_text': 'Hello',
            'edited_text': 'Hello',
            'topic': 'Launch',
            'tone': 'neutral',
        }
        assert saved.id == 'row-1'
        assert saved.created_at is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize('rows', [
        [{'id': 42, 'user_id': 'user-123'}],
        [{'edited_text': None}],
        ['row-1'],
        [],
    ])
    async def test_insert_unexpected_representation(self, supabase_config, record, rows):
        """저장 성공 + 응답 row 형식 오류 → 로컬 레코드 반환"""
        from content_creator.services.shared.row_store import RowStoreClient

        client = RowStoreClient(
            supabase_config,
            transport=httpx.MockTransport(lambda request: httpx.Response(201, json=rows)),
        )

        saved = await client.insert_content(record)

        assert saved is record

    @pytest.mark.asyncio
    async def test_insert_failure(self, supabase_config, record):
        from content_creator.core.errors import PersistenceFailed
        from content_creator.services.shared.row_store import RowStoreClient

        client = RowStoreClient(
            supabase_config,
            transport=httpx.MockTransport(lambda request: httpx.Response(409, text='duplicate')),
        )

        with pytest.raises(PersistenceFailed):
            await client.insert_content(record)

    @pytest.mark.asyncio
    async def test_count(self, supabase_config):
        from content_creator.services.shared.row_store import RowStoreClient

        transport, seen = recording_transport(
            lambda request: httpx.Response(200, headers={'Content-Range': '0-4/5'})
        )
        client = RowStoreClient(supabase_config, transport=transport)

        assert await client.count_contents('user-123') == 5

        request = seen[0]
        assert request.method == 'HEAD'
        assert request.headers['prefer'] == 'count=exact'
        assert request.url.params['user_id'] == 'eq.user-123'
        assert 'created_at' not in request.url.params

    @pytest.mark.asyncio
    async def test_count_since(self, supabase_config):
        from content_creator.services.shared.row_store import RowStoreClient

        transport, seen = recording_transport(
            lambda request: httpx.Response(200, headers={'Content-Range': '*/0'})
        )
        client = RowStoreClient(supabase_config, transport=transport)
        since = datetime(2026, 3, 8, 12, 0, tzinfo=timezone.utc)

        assert await client.count_contents('user-123', created_since=since) == 0
        assert seen[0].url.params['created_at'] == 'gte.2026-03-08T12:00:00+00:00'

    @pytest.mark.asyncio
    async def test_count_failure(self, supabase_config):
        from content_creator.core.errors import RowStoreQueryFailed
        from content_creator.services.shared.row_store import RowStoreClient

        client = RowStoreClient(
            supabase_config,
            transport=httpx.MockTransport(lambda request: httpx.Response(500)),
        )

        with pytest.raises(RowStoreQueryFailed):
            await client.count_contents('user-123')

    @pytest.mark.asyncio
    async def test_list_content_types(self, supabase_config):
        from content_creator.services.shared.row_store import RowStoreClient

        transport, seen = recording_transport(lambda request: httpx.Response(200, json=[
            {'content_type': 'social_post'},
            {'content_type': 'ad_copy'},
            {'content_type': 'social_post'},
        ]))
        client = RowStoreClient(supabase_config, transport=transport)

        types = await client.list_content_types('user-123')

        assert types == ['social_post', 'ad_copy', 'social_post']
        assert seen[0].method == 'GET'
        assert seen[0].url.params['select'] == 'content_type'

    @pytest.mark.asyncio
    async def test_list_content_types_network_error(self, supabase_config):
        from content_creator.core.errors import RowStoreQueryFailed
        from content_creator.services.shared.row_store import RowStoreClient

        def unreachable(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = RowStoreClient(supabase_config, transport=httpx.MockTransport(unreachable))

        with pytest.raises(RowStoreQueryFailed):
            await client.list_content_types('user-123')


# ============================================================
# LLM
# ============================================================

class TestLLMClient:
    """ChatOpenAI 래퍼"""

    @pytest.fixture
    def chat_model(self):
        with patch('content_creator.services.shared.llm.ChatOpenAI') as chat_cls:
            model = MagicMock()
            model.bind.return_value = model
            chat_cls.return_value = model
            yield chat_cls, model

    @pytest.fixture
    def llm_config(self):
        from content_creator.services.shared.llm import LLMConfig
        return LLMConfig(api_key='sk-test')

    @pytest.mark.asyncio
    async def test_generate(self, chat_model, llm_config):
        from content_creator.services.shared.llm import LLMClient

        chat_cls, model = chat_model
        model.ainvoke = AsyncMock(return_value=MagicMock(
            content='Buy now!',
            usage_metadata={'input_tokens': 12, 'output_tokens': 3},
            response_metadata={'finish_reason': 'stop'},
        ))

        client = LLMClient(llm_config)
        response = await client.generate('system', 'user', temperature=0.7, max_tokens=500)

        assert response.content == 'Buy now!'
        assert response.input_tokens == 12
        assert response.output_tokens == 3
        assert chat_cls.call_args.kwargs['max_retries'] == 0
        model.bind.assert_any_call(temperature=0.7)
        model.bind.assert_any_call(max_tokens=500)

        messages = model.ainvoke.call_args.args[0]
        assert [m.content for m in messages] == ['system', 'user']

    @pytest.mark.asyncio
    async def test_empty_content(self, chat_model, llm_config):
        from content_creator.core.errors import UpstreamGenerationFailed
        from content_creator.services.shared.llm import LLMClient

        _, model = chat_model
        model.ainvoke = AsyncMock(return_value=MagicMock(content='  ', usage_metadata=None, response_metadata=None))

        with pytest.raises(UpstreamGenerationFailed, match="No content generated"):
            await LLMClient(llm_config).generate('system', 'user')

    @pytest.mark.asyncio
    async def test_provider_error(self, chat_model, llm_config):
        from content_creator.core.errors import UpstreamGenerationFailed
        from content_creator.services.shared.llm import LLMClient

        _, model = chat_model
        model.ainvoke = AsyncMock(side_effect=RuntimeError("rate limited"))

        with pytest.raises(UpstreamGenerationFailed, match="rate limited"):
            await LLMClient(llm_config).generate('system', 'user')

    def test_factory_without_key(self, bare_settings):
        from content_creator.services.shared.llm import create_llm_client

        assert create_llm_client(bare_settings) is None

    def test_config_without_key(self, bare_settings):
        from content_creator.core.errors import ConfigurationMissing
        from content_creator.services.shared.llm import LLMConfig

        with pytest.raises(ConfigurationMissing):
            LLMConfig.from_settings(bare_settings)
