"""
공통 서비스 패키지
- 외부 협력 서비스 클라이언트 (LLM, Identity, Row-Store)
"""

# LLM Service
from content_creator.services.shared.llm import (
    LLMClient,
    LLMConfig,
    LLMResponse,
    create_llm_client,
)

# Supabase
from content_creator.services.shared.supabase import SupabaseConfig

# Identity Service
from content_creator.services.shared.identity import (
    IdentityClient,
    extract_bearer_token,
    create_identity_client,
)

# Row-Store Service
from content_creator.services.shared.row_store import (
    RowStoreClient,
    parse_content_range,
    create_row_store,
)

__all__ = [
    # LLM
    "LLMClient",
    "LLMConfig",
    "LLMResponse",
    "create_llm_client",
    # Supabase
    "SupabaseConfig",
    # Identity
    "IdentityClient",
    "extract_bearer_token",
    "create_identity_client",
    # Row-Store
    "RowStoreClient",
    "parse_content_range",
    "create_row_store",
]
