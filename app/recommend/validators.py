"""
입력 검증 및 전처리

프롬프트에 들어가는 모든 자유 입력(의상 종류/색상, 퍼스널 컬러 세부 타입)은
이 모듈을 거칩니다. 모든 함수는 순수 함수이며 예외를 던지지 않고 결과로 보고합니다.

검증 함수는 항상 (검증 결과, 전처리된 사본)을 함께 반환하며,
호출자는 원본이 아닌 processed 값을 사용해야 합니다.
"""

from collections.abc import Mapping

from app.recommend.constants import (
    EMOJI_PATTERN,
    ERROR_MESSAGES,
    MAX_LENGTH,
    MIN_LENGTH,
    OUTFIT_PART_LABELS,
    PERSONAL_COLOR_DETAIL_LABEL,
    SPECIAL_CHAR_PATTERN,
    UNKNOWN_ERROR_MESSAGE,
)
from app.recommend.schemas import (
    FieldValidation,
    Gender,
    OutfitInput,
    OutfitItem,
    OutfitPart,
    OutfitValidation,
    PersonalColor,
    PersonalColorMain,
    PersonalColorValidation,
    UserPreference,
    UserPreferenceValidation,
)

VALID_GENDERS = frozenset(gender.value for gender in Gender)
VALID_PERSONAL_COLORS = frozenset(main.value for main in PersonalColorMain)
VALID_PARTS = frozenset(part.value for part in OutfitPart)
ITEM_FIELDS = (("type", "종류"), ("color", "색상"))


# ============================================================
# 문자열 전처리
# ============================================================


def _strip_disallowed(text: str) -> str:
    text = SPECIAL_CHAR_PATTERN.sub("", text)
    return EMOJI_PATTERN.sub("", text)


def sanitize_final(text: str | None) -> str | None:
    """최종 제출용 전처리: 특수문자/이모지 제거 후 앞뒤 공백 제거"""
    if not text:
        return None
    return _strip_disallowed(text).strip() or None


def sanitize_live(text: str | None) -> str | None:
    """실시간 입력용 전처리 (공백 유지)"""
    if not text:
        return None
    return _strip_disallowed(text) or None


# ============================================================
# 필드 검증
# ============================================================


def validate_field(text: object, field_label: str) -> FieldValidation:
    """단일 문자열 필드 검증. 비어 있으면 선택사항이므로 유효합니다."""
    if text is None:
        return FieldValidation(valid=True)
    if not isinstance(text, str):
        return FieldValidation(
            valid=False, error=f"{field_label}은(는) 문자열이어야 합니다."
        )
    if not text.strip():
        return FieldValidation(valid=True)

    processed = sanitize_final(text)

    if not processed:
        return FieldValidation(
            valid=False, error=f"{field_label}에 유효한 문자가 없습니다."
        )
    if len(processed) < MIN_LENGTH:
        return FieldValidation(
            valid=False,
            error=f"{field_label}은(는) 최소 {MIN_LENGTH}자 이상이어야 합니다.",
        )
    if len(processed) > MAX_LENGTH:
        return FieldValidation(
            valid=False,
            error=f"{field_label}은(는) 최대 {MAX_LENGTH}자까지 입력 가능합니다.",
        )

    return FieldValidation(valid=True)


def check_live_input(text: str | None, field_label: str) -> tuple[str | None, FieldValidation]:
    """입력 중인 값을 실시간 전처리하고, 제출 기준으로 검증"""
    live = sanitize_live(text)
    return live, validate_field(live, field_label)


# ============================================================
# 의상 입력 검증
# ============================================================


def validate_outfit_input(outfit_input: Mapping[str, object]) -> OutfitValidation:
    """부위별 의상 입력 검증 (모든 에러를 수집)"""
    errors: list[str] = []
    processed: dict[str, OutfitItem] = {}

    for key in outfit_input:
        if key not in VALID_PARTS:
            errors.append(f"알 수 없는 의상 부위입니다: {key}")

    for part in OutfitPart:
        item = outfit_input.get(part.value)
        if item is None or item == {}:
            continue

        part_label = OUTFIT_PART_LABELS[part]
        if not isinstance(item, Mapping):
            errors.append(f"{part_label} 입력 형식이 올바르지 않습니다.")
            continue

        processed_item: dict[str, str] = {}
        for field, suffix in ITEM_FIELDS:
            value = item.get(field)
            if not value:
                continue

            result = validate_field(value, f"{part_label} {suffix}")
            if not result.valid:
                errors.append(result.error)
                continue

            cleaned = sanitize_final(value)
            if cleaned:
                processed_item[field] = cleaned

        if processed_item:
            processed[part.value] = OutfitItem(**processed_item)

    return OutfitValidation(
        valid=not errors,
        errors=errors,
        processed=OutfitInput(**processed),
    )


# ============================================================
# 사용자 선호도 검증
# ============================================================


def validate_personal_color(personal_color: object) -> PersonalColorValidation:
    invalid_type = PersonalColorValidation(
        valid=False, error="유효하지 않은 퍼스널 컬러 타입입니다."
    )
    if not isinstance(personal_color, Mapping):
        return invalid_type

    main = personal_color.get("main")
    if not isinstance(main, str) or main not in VALID_PERSONAL_COLORS:
        return invalid_type

    processed = PersonalColor(main=PersonalColorMain(main))

    detail = personal_color.get("detail")
    if detail:
        result = validate_field(detail, PERSONAL_COLOR_DETAIL_LABEL)
        if not result.valid:
            return PersonalColorValidation(
                valid=False, error=result.error, processed=processed
            )
        processed.detail = sanitize_final(detail)

    return PersonalColorValidation(valid=True, processed=processed)


def validate_user_preference(user_preference: Mapping[str, object]) -> UserPreferenceValidation:
    """성별 + 퍼스널 컬러 검증. 유효할 때만 processed가 채워집니다."""
    errors: list[str] = []

    gender = user_preference.get("gender")
    if not isinstance(gender, str) or gender not in VALID_GENDERS:
        errors.append("유효하지 않은 성별입니다.")

    color_validation = validate_personal_color(user_preference.get("personalColor"))
    if not color_validation.valid:
        errors.append(color_validation.error)

    if errors:
        return UserPreferenceValidation(valid=False, errors=errors)

    return UserPreferenceValidation(
        valid=True,
        processed=UserPreference(
            gender=Gender(gender),
            personal_color=color_validation.processed,
        ),
    )


def get_error_message(status_code: int, default: str | None = None) -> str:
    """상태 코드별 사용자 안내 메시지"""
    return ERROR_MESSAGES.get(status_code) or default or UNKNOWN_ERROR_MESSAGE
