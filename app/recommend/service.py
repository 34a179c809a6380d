import json
import logging
from collections.abc import Mapping
from datetime import date

from app.config import Settings, get_settings
from app.recommend.constants import (
    OUTFIT_INPUT_ERROR_MESSAGE,
    USER_PREFERENCE_ERROR_MESSAGE,
)
from app.recommend.exceptions import (
    ConfigurationError,
    MalformedRequestError,
    RequestValidationFailed,
    classify_llm_error,
)
from app.recommend.llm_client import GeminiClient, LLMClient
from app.recommend.prompt_builder import RECOMMENDATION_SCHEMA, build_prompt
from app.recommend.schemas import AIRecommendation
from app.recommend.validators import validate_outfit_input, validate_user_preference

logger = logging.getLogger(__name__)


def parse_request(body: bytes) -> tuple[Mapping[str, object], Mapping[str, object]]:
    """요청 본문에서 (userPreference, outfitInput) 추출. outfitInput 누락은 빈 입력으로 처리."""
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise MalformedRequestError("JSON 형식이 올바르지 않습니다.") from e

    if not isinstance(payload, Mapping):
        raise MalformedRequestError("요청 본문은 JSON 객체여야 합니다.")

    user_preference = payload.get("userPreference")
    if not isinstance(user_preference, Mapping):
        raise MalformedRequestError("userPreference 형식이 올바르지 않습니다.")

    outfit_input = payload.get("outfitInput")
    if outfit_input is None:
        outfit_input = {}
    if not isinstance(outfit_input, Mapping):
        raise MalformedRequestError("outfitInput 형식이 올바르지 않습니다.")

    return user_preference, outfit_input


class RecommendService:
    def __init__(
        self,
        llm_client: LLMClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._llm_client = llm_client
        self.settings = settings or get_settings()

    def _get_llm_client(self) -> LLMClient:
        if self._llm_client is None:
            self._llm_client = GeminiClient(settings=self.settings)
        return self._llm_client

    async def recommend(
        self,
        user_preference: Mapping[str, object],
        outfit_input: Mapping[str, object],
        today: date | None = None,
    ) -> AIRecommendation:
        if not self.settings.google_generative_ai_api_key:
            logger.error("GOOGLE_GENERATIVE_AI_API_KEY is not set")
            raise ConfigurationError()

        user_validation = validate_user_preference(user_preference)
        if not user_validation.valid:
            logger.warning("Invalid user preference: %s", user_validation.errors)
            raise RequestValidationFailed(USER_PREFERENCE_ERROR_MESSAGE, user_validation.errors)

        outfit_validation = validate_outfit_input(outfit_input)
        if not outfit_validation.valid:
            logger.warning("Invalid outfit input: %s", outfit_validation.errors)
            raise RequestValidationFailed(OUTFIT_INPUT_ERROR_MESSAGE, outfit_validation.errors)

        preference = user_validation.processed
        prompt = build_prompt(preference, outfit_validation.processed, today)
        logger.info(
            "Requesting recommendation: userPreference=%s, inputParts=%d",
            preference.to_payload(),
            len(list(outfit_validation.processed.filled_parts())),
        )

        try:
            result = await self._get_llm_client().generate_object(prompt, RECOMMENDATION_SCHEMA)
            recommendation = AIRecommendation.model_validate(result)
        except Exception as e:
            logger.error("AI 추천 에러: %s", e)
            error_class = classify_llm_error(e)
            details = str(e) if self.settings.is_development else None
            raise error_class(details=details) from e

        logger.info(
            "Generated recommendation: handCream=%s, accessories=%d",
            recommendation.hand_cream.product_name,
            len(recommendation.accessories),
        )
        return recommendation


def get_recommend_service() -> RecommendService:
    return RecommendService(settings=get_settings())
