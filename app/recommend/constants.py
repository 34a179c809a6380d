"""
추천 모듈 정적 데이터

- 입력 검증 상수 (길이 제한, 제거 대상 문자)
- 한글 라벨 (성별, 퍼스널 컬러, 의상 부위)
- PLEUVOIR 핸드크림 카탈로그
- 프롬프트 요청사항
- 상태 코드별 사용자 메시지
"""

import re
from dataclasses import dataclass

from app.recommend.schemas import Gender, OutfitPart, PersonalColorMain

# ============================================================
# 입력 검증
# ============================================================

MIN_LENGTH = 2
MAX_LENGTH = 50

SPECIAL_CHAR_PATTERN = re.compile(r"[<>{}\[\]\\/|`]")
EMOJI_PATTERN = re.compile("[\U0001F300-\U0001F9FF\u2600-\u27BF]")


# ============================================================
# 한글 라벨
# ============================================================

GENDER_LABELS: dict[Gender, str] = {
    Gender.MALE: "남성",
    Gender.FEMALE: "여성",
}

PERSONAL_COLOR_LABELS: dict[PersonalColorMain, str] = {
    PersonalColorMain.WINTER_COOL: "겨울 쿨톤",
    PersonalColorMain.SUMMER_COOL: "여름 쿨톤",
    PersonalColorMain.AUTUMN_WARM: "가을 웜톤",
    PersonalColorMain.SPRING_WARM: "봄 웜톤",
}

OUTFIT_PART_LABELS: dict[OutfitPart, str] = {
    OutfitPart.OUTER: "아우터",
    OutfitPart.TOP_OUTER: "상의 탑",
    OutfitPart.TOP_MID: "상의 미드",
    OutfitPart.TOP_INNER: "상의 이너",
    OutfitPart.BOTTOM: "하의",
    OutfitPart.SOCKS: "양말",
    OutfitPart.SHOES: "신발",
}

PERSONAL_COLOR_DETAIL_LABEL = "퍼스널 컬러 세부 타입"
UNSPECIFIED = "미정"


# ============================================================
# PLEUVOIR 핸드크림 카탈로그
# ============================================================

HAND_CREAM_BRAND = "PLEUVOIR"


@dataclass(frozen=True)
class Fragrance:
    name: str
    feature: str
    notes: str
    mood: str


FRAGRANCE_CATALOG: tuple[Fragrance, ...] = (
    Fragrance(
        name="HINOKI LEATHER",
        feature="히노끼와 가죽의 관능, 유니크한 우디",
        notes=(
            "Top(Warm spicy, Hinoki Pine, Cypress), "
            "Middle(Atlas cedar, Leather, Styrax), "
            "Base(Tobacco, Gaiac wood, Musk, Sandalwood, Amber)"
        ),
        mood=(
            "햇빛과 바람이 좋은 히노끼 숲에 둘러 싸인 듯, 신비롭고 따뜻하며 매혹적인 느낌. "
            "편백나무 숲속 온천의 편안함과 가죽의 강렬함"
        ),
    ),
    Fragrance(
        name="ROSE WOOD",
        feature="싱그러운 생화로즈향과 스모키한 우디 향",
        notes=(
            "Top(Bergamot, Pink Rose), "
            "Middle(Fresh spicy, Vetiver), "
            "Base(Gaiac wood, Musk, Sandalwood, Olibanum)"
        ),
        mood=(
            "햇빛이 좋은 오후, 장미가 피어난 정원을 거닐며 느껴지는 숲의 향기. "
            "부드러운 로즈향과 스모키한 우디향의 조화"
        ),
    ),
    Fragrance(
        name="MORNING SOIL",
        feature="비 온 뒤의 자연의 향",
        notes=(
            "Top(Ozonic, Rosemary), "
            "Middle(Fresh spicy, Patchouli, Aromatic Muguet, Jasmine), "
            "Base(Amber, Musk)"
        ),
        mood="가뭄 후에 내린 소나기로 상쾌해진 땅의 공기. 비와 대지의 조화 속에 피어오르는 편안함",
    ),
    Fragrance(
        name="FLORAL MUSK",
        feature="부담스럽지 않은 은은한 꽃향기와 크리미한 머스크",
        notes=(
            "Top(African orange flower, Iris, Rose, Jasmine), "
            "Middle(Tuberose, Orris, Peony, Amber), "
            "Base(Musk, Benzoin)"
        ),
        mood="따스한 햇살 속 들판에 피어난 야생화와 강인한 머스크. 순백의 중성적 무드",
    ),
    Fragrance(
        name="TOKYO CLOUD",
        feature="청량한 도쿄의 하늘 구름처럼 가볍고 투명한 향",
        notes=(
            "Top(Bergamot, Pine Needles), "
            "Middle(Rose, Neroli), "
            "Base(Sandalwood, Patchouli, Cedarwood, Moss, Amber, White Musk)"
        ),
        mood="투명한 시트러스와 은은한 머스크. 청량하고 여유로운 향",
    ),
)


# ============================================================
# 프롬프트 요청사항
# ============================================================

MIN_ACCESSORIES = 3
MAX_ACCESSORIES = 5
MAX_STYLE_MESSAGE_SENTENCES = 3

# {month} 는 프롬프트 생성 시 현재 월로 채워짐
INSTRUCTIONS: tuple[str, ...] = (
    "사용자의 퍼스널 컬러에 맞는 색상으로 전체 의상을 완성해주세요.",
    "입력되지 않은 부위는 자동으로 추천해주세요.",
    "입력된 부위가 있다면 그것을 기반으로 전체 조화를 맞춰주세요.",
    f"위 {len(FRAGRANCE_CATALOG)}가지 {HAND_CREAM_BRAND} 핸드크림 제품 중 이 코디와 가장 어울리는 향을 "
    "1개 추천해주세요. 제품명과 향의 특징을 자세히 설명해주세요.",
    f"추가 액세서리 {MIN_ACCESSORIES}-{MAX_ACCESSORIES}개를 제안해주세요 "
    "(예: 시계, 가방, 모자, 선글라스, 스카프 등).",
    "오늘의 날씨를 고려한 스타일 조언을 해주세요 (현재 계절: {month}월).",
    "**스타일링 메시지**: 추천한 의상과 향기가 함께 어우러졌을 때 형성되는 "
    "시각적, 후각적 이미지를 감각적으로 표현해주세요.\n"
    "   - 의상의 색감과 실루엣이 주는 시각적 인상\n"
    "   - 핸드크림 향이 더해졌을 때 완성되는 분위기\n"
    "   - 이 조합이 전달하는 전체적인 느낌과 감성\n"
    f"   - 반드시 {MAX_STYLE_MESSAGE_SENTENCES}문장 이내로 작성해주세요.",
)

IMPORTANT_NOTES: tuple[str, ...] = (
    "모든 색상은 퍼스널 컬러에 적합해야 합니다.",
    "의상 종류와 색상은 구체적으로 명시해주세요.",
    f"핸드크림은 반드시 위 {len(FRAGRANCE_CATALOG)}가지 제품 중에서 선택해주세요.",
    "스타일링 메시지는 구체적이고 감각적으로 작성하되, "
    f"{MAX_STYLE_MESSAGE_SENTENCES}문장을 초과하지 마세요.",
    "전문적이고 실용적인 조언을 제공해주세요.",
)


# ============================================================
# 사용자 메시지
# ============================================================

ERROR_MESSAGES: dict[int, str] = {
    400: "입력하신 정보가 올바르지 않습니다. 다시 확인해주세요.",
    429: "요청이 너무 많습니다. 잠시 후 다시 시도해주세요.",
    500: "AI 처리 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요.",
    503: "서비스를 일시적으로 사용할 수 없습니다. 잠시 후 다시 시도해주세요.",
}
UNKNOWN_ERROR_MESSAGE = "알 수 없는 오류가 발생했습니다."

MALFORMED_REQUEST_MESSAGE = "잘못된 요청 형식입니다."
USER_PREFERENCE_ERROR_MESSAGE = "입력 정보를 확인해주세요."
OUTFIT_INPUT_ERROR_MESSAGE = "의상 입력 정보를 확인해주세요."
