"""
응답 Envelope
모든 응답은 {data: ...} 또는 {error: {code, message}} 형태
"""

from typing import Any, Dict

from pydantic import BaseModel


class ErrorBody(BaseModel):
    """에러 본문"""
    code: str
    message: str


class ErrorEnvelope(BaseModel):
    """에러 응답"""
    error: ErrorBody

    @classmethod
    def of(cls, code: str, message: str) -> "ErrorEnvelope":
        return cls(error=ErrorBody(code=code, message=message))


def data_envelope(payload: Any) -> Dict[str, Any]:
    """성공 응답 {data: ...}"""
    if hasattr(payload, "to_wire"):
        payload = payload.to_wire()
    return {"data": payload}
