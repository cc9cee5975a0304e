"""
Collaborator Call Results
외부 호출 결과 래핑 + 호출 지점별 실패 정책
"""

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Dict, Generic, Optional, TypeVar
import logging

from content_creator.core.errors import ContentCreatorError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailurePolicy(str, Enum):
    """실패 처리 정책"""
    FATAL = "fatal"         # 요청 실패로 전파
    ABSORB = "absorb"       # 로그만 남기고 계속 진행


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """외부 호출 결과 (성공 값 또는 에러)"""
    value: Optional[T] = None
    error: Optional[ContentCreatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "CallResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ContentCreatorError) -> "CallResult[T]":
        return cls(error=error)


async def attempt(call: Awaitable[T]) -> CallResult[T]:
    """
    외부 호출 실행

    서비스 에러(ContentCreatorError)만 CallResult로 변환합니다.
    그 외 예외는 프로그래밍 오류로 보고 그대로 전파합니다.
    """
    try:
        return CallResult.success(await call)
    except ContentCreatorError as e:
        return CallResult.failure(e)


def settle(
    step: str,
    result: CallResult[T],
    policies: Dict[str, FailurePolicy],
) -> Optional[T]:
    """
    정책 테이블에 따라 결과 확정

    Returns:
        성공 값, 흡수된 실패인 경우 None

    Raises:
        ContentCreatorError: FATAL 정책의 실패
    """
    if result.ok:
        return result.value

    policy = policies.get(step, FailurePolicy.FATAL)
    if policy is FailurePolicy.ABSORB:
        logger.warning(f"[{step}] non-fatal failure: {result.error.message}")
        return None

    raise result.error
