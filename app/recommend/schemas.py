"""
Recommend 모듈 스키마 정의
- UserPreference / OutfitInput: 추천 요청 본문
- AIRecommendation: AI 추천 응답
- *Validation: 검증 함수 반환 타입 (검증 결과 + 전처리된 사본)
"""

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from app.common.schemas import BaseSchema


# ============================================================
# 공통 Enum 정의
# ============================================================

class Gender(str, Enum):
    """성별"""
    MALE = "male"
    FEMALE = "female"


class PersonalColorMain(str, Enum):
    """퍼스널 컬러 메인 타입"""
    WINTER_COOL = "winter_cool"
    SUMMER_COOL = "summer_cool"
    AUTUMN_WARM = "autumn_warm"
    SPRING_WARM = "spring_warm"


class OutfitPart(str, Enum):
    """의상 부위 (고정 7개)"""
    OUTER = "outer"
    TOP_OUTER = "top_outer"
    TOP_MID = "top_mid"
    TOP_INNER = "top_inner"
    BOTTOM = "bottom"
    SOCKS = "socks"
    SHOES = "shoes"


# ============================================================
# 요청 모델
# ============================================================

class PersonalColor(BaseSchema):
    main: PersonalColorMain = Field(..., description="퍼스널 컬러 메인 타입")
    detail: str | None = Field(
        default=None, description="세부 타입 (예: 겨울 딥, 여름 뮤트)"
    )


class UserPreference(BaseSchema):
    gender: Gender = Field(..., description="성별")
    personal_color: PersonalColor = Field(..., description="퍼스널 컬러 정보")


class OutfitItem(BaseSchema):
    type: str | None = Field(default=None, description="의상 종류 (예: 데님 트러커 재킷)")
    color: str | None = Field(default=None, description="색상 (예: 애쉬 다크 그레이)")


class OutfitInput(BaseModel):
    """부위별 의상 입력

    JSON 키가 부위 이름(top_outer 등) 그대로이므로 camelCase 변환을 적용하지 않습니다.
    정의되지 않은 부위 키는 거부합니다.
    """
    model_config = ConfigDict(extra="forbid")

    outer: OutfitItem | None = None
    top_outer: OutfitItem | None = None
    top_mid: OutfitItem | None = None
    top_inner: OutfitItem | None = None
    bottom: OutfitItem | None = None
    socks: OutfitItem | None = None
    shoes: OutfitItem | None = None

    def filled_parts(self: "OutfitInput") -> Iterator[tuple[OutfitPart, OutfitItem]]:
        """type 또는 color가 채워진 부위만 OutfitPart 순서대로 반환"""
        for part in OutfitPart:
            item = getattr(self, part.value)
            if item is not None and (item.type or item.color):
                yield part, item


# ============================================================
# 응답 모델
# ============================================================

class HandCreamRecommendation(BaseSchema):
    brand: str = Field(..., description="브랜드 이름 (PLEUVOIR)")
    product_name: str = Field(..., description="제품명")
    scent_description: str = Field(..., description="향 설명")


class AIRecommendation(BaseSchema):
    outfit: OutfitInput = Field(..., description="완성된 전체 의상 조합")
    hand_cream: HandCreamRecommendation = Field(..., description="핸드크림 추천")
    accessories: list[str] = Field(default_factory=list, description="추가 액세서리 제안")
    weather_insight: str = Field(..., description="날씨 고려 인사이트")
    style_message: str = Field(..., description="코디가 전달하는 메시지")


class ErrorResponse(BaseSchema):
    error: str = Field(..., description="사용자용 에러 메시지")
    details: str | list[str] | None = Field(default=None, description="상세 정보")


class FieldCheckRequest(BaseSchema):
    value: str | None = Field(default=None, description="입력 중인 값")
    label: str = Field(..., min_length=1, description="필드 라벨 (에러 메시지에 사용)")


class FieldCheckResponse(BaseSchema):
    value: str | None = Field(default=None, description="실시간 전처리된 값")
    valid: bool
    error: str | None = None


# ============================================================
# 검증 결과
# ============================================================

class FieldValidation(BaseModel):
    valid: bool
    error: str | None = None


class OutfitValidation(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    processed: OutfitInput = Field(default_factory=OutfitInput)


class PersonalColorValidation(BaseModel):
    valid: bool
    error: str | None = None
    processed: PersonalColor | None = None


class UserPreferenceValidation(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    processed: UserPreference | None = None
