from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """요청/응답 스키마의 기본 클래스

    Python 코드에서는 snake_case 필드명을 사용하고,
    JSON 본문에서는 camelCase 키(personalColor, handCream 등)를 사용합니다.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )

    def to_payload(self) -> dict:
        """API 본문과 같은 모양(camelCase, None 제외)의 dict로 변환"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
