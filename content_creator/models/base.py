"""
기본 모델
"""

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseModel(PydanticBaseModel):
    """
    기본 모델 클래스
    API 요청/응답 모델의 베이스 (wire 포맷은 camelCase)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self) -> dict:
        """camelCase JSON 직렬화용 dict"""
        return self.model_dump(mode="json", by_alias=True)
