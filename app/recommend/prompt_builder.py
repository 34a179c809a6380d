import logging
from datetime import date
from typing import Any

from app.recommend.constants import (
    FRAGRANCE_CATALOG,
    GENDER_LABELS,
    HAND_CREAM_BRAND,
    IMPORTANT_NOTES,
    INSTRUCTIONS,
    OUTFIT_PART_LABELS,
    PERSONAL_COLOR_LABELS,
    UNSPECIFIED,
)
from app.recommend.schemas import OutfitInput, OutfitPart, UserPreference

logger = logging.getLogger(__name__)

NO_INPUT_TEXT = "없음 (전체 추천 필요)"


def _item_schema(part_label: str) -> dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {
            "type": {"type": "STRING", "description": f"{part_label} 종류"},
            "color": {"type": "STRING", "description": f"{part_label} 색상"},
        },
        "required": ["type", "color"],
    }


# Gemini responseSchema (OpenAPI 3.0 subset)
RECOMMENDATION_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "outfit": {
            "type": "OBJECT",
            "properties": {
                part.value: _item_schema(OUTFIT_PART_LABELS[part]) for part in OutfitPart
            },
            "propertyOrdering": [part.value for part in OutfitPart],
        },
        "handCream": {
            "type": "OBJECT",
            "properties": {
                "brand": {
                    "type": "STRING",
                    "description": f"브랜드 이름 ({HAND_CREAM_BRAND})",
                },
                "productName": {
                    "type": "STRING",
                    "description": "제품명 ("
                    + ", ".join(fragrance.name for fragrance in FRAGRANCE_CATALOG)
                    + " 중 하나)",
                },
                "scentDescription": {"type": "STRING", "description": "향 설명"},
            },
            "required": ["brand", "productName", "scentDescription"],
        },
        "accessories": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "추천 액세서리 목록",
        },
        "weatherInsight": {
            "type": "STRING",
            "description": "날씨를 고려한 스타일 인사이트",
        },
        "styleMessage": {"type": "STRING", "description": "이 코디가 전달하는 메시지"},
    },
    "required": ["outfit", "handCream", "accessories", "weatherInsight", "styleMessage"],
}


def format_user_profile(user_preference: UserPreference) -> str:
    personal_color = user_preference.personal_color
    detail_text = f" (세부: {personal_color.detail})" if personal_color.detail else ""
    return (
        f"- 성별: {GENDER_LABELS[user_preference.gender]}\n"
        f"- 퍼스널 컬러: {PERSONAL_COLOR_LABELS[personal_color.main]}{detail_text}"
    )


def format_outfit_input(outfit_input: OutfitInput) -> str:
    """입력된 부위만 '부위: 종류 / 색상' 형식으로 나열"""
    lines = [
        f"{OUTFIT_PART_LABELS[part]}: {item.type or UNSPECIFIED} / {item.color or UNSPECIFIED}"
        for part, item in outfit_input.filled_parts()
    ]
    return "\n".join(lines) or NO_INPUT_TEXT


def format_fragrance_catalog() -> str:
    blocks = [
        f"{index}. {fragrance.name}\n"
        f"- 특징: {fragrance.feature}\n"
        f"- 노트: {fragrance.notes}\n"
        f"- 무드: {fragrance.mood}"
        for index, fragrance in enumerate(FRAGRANCE_CATALOG, start=1)
    ]
    return "\n\n".join(blocks)


def build_prompt(
    user_preference: UserPreference,
    outfit_input: OutfitInput,
    today: date | None = None,
) -> str:
    """검증된 입력으로 추천 프롬프트 생성"""
    month = (today or date.today()).month

    instructions = "\n".join(
        f"{index}. {instruction.format(month=month)}"
        for index, instruction in enumerate(INSTRUCTIONS, start=1)
    )
    notes = "\n".join(f"- {note}" for note in IMPORTANT_NOTES)

    prompt = f"""당신은 퍼스널 컬러 전문가이자 패션 스타일리스트입니다.

사용자 정보:
{format_user_profile(user_preference)}

사용자가 입력한 의상:
{format_outfit_input(outfit_input)}

{HAND_CREAM_BRAND}(플르부아) 핸드크림 제품 라인업:

{format_fragrance_catalog()}

요청사항:
{instructions}

중요:
{notes}"""

    logger.debug("Built recommendation prompt (%d chars)", len(prompt))
    return prompt
