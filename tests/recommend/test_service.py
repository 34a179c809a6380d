import logging
from datetime import date
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from app.config import Settings
from app.recommend.exceptions import (
    ConfigurationError,
    LLMError,
    MalformedRequestError,
    RateLimitedError,
    RequestValidationFailed,
    UnknownUpstreamError,
    UpstreamUnavailableError,
)
from app.recommend.llm_client import GeminiClient
from app.recommend.prompt_builder import RECOMMENDATION_SCHEMA
from app.recommend.schemas import AIRecommendation
from app.recommend.service import RecommendService, get_recommend_service, parse_request

USER_PREFERENCE = {"gender": "male", "personalColor": {"main": "winter_cool"}}


class TestParseRequest:

    def test_valid_body(self) -> None:
        user_preference, outfit_input = parse_request(
            b'{"userPreference": {"gender": "male"}, "outfitInput": {"outer": {}}}'
        )

        assert user_preference == {"gender": "male"}
        assert outfit_input == {"outer": {}}

    def test_missing_outfit_input_is_empty(self) -> None:
        _, outfit_input = parse_request(b'{"userPreference": {"gender": "male"}}')

        assert outfit_input == {}

    @pytest.mark.parametrize(
        ("body", "details"),
        [
            (b"{not json", "JSON 형식이 올바르지 않습니다."),
            (b"", "JSON 형식이 올바르지 않습니다."),
            (b"[1, 2]", "요청 본문은 JSON 객체여야 합니다."),
            (b'{"outfitInput": {}}', "userPreference 형식이 올바르지 않습니다."),
            (b'{"userPreference": "male"}', "userPreference 형식이 올바르지 않습니다."),
            (
                b'{"userPreference": {}, "outfitInput": []}',
                "outfitInput 형식이 올바르지 않습니다.",
            ),
            (b"[" * 100000 + b"]" * 100000, "JSON 형식이 올바르지 않습니다."),
        ],
    )
    def test_malformed_body(self, body: bytes, details: str) -> None:
        with pytest.raises(MalformedRequestError) as exc_info:
            parse_request(body)

        assert exc_info.value.details == details


class TestRecommend:

    @pytest.fixture
    def service(
        self, mock_llm_client: AsyncMock, production_settings: Settings
    ) -> RecommendService:
        return RecommendService(llm_client=mock_llm_client, settings=production_settings)

    @pytest.mark.asyncio
    async def test_success(
        self,
        service: RecommendService,
        mock_llm_client: AsyncMock,
        full_recommendation: dict[str, Any],
    ) -> None:
        # Given
        mock_llm_client.generate_object.return_value = full_recommendation

        # When
        result = await service.recommend(USER_PREFERENCE, {}, today=date(2025, 12, 1))

        # Then
        assert isinstance(result, AIRecommendation)
        assert result.hand_cream.product_name == "TOKYO CLOUD"
        assert result.outfit.shoes.type == "더비 슈즈"

        mock_llm_client.generate_object.assert_awaited_once()
        prompt, schema = mock_llm_client.generate_object.call_args.args
        assert "겨울 쿨톤" in prompt
        assert "현재 계절: 12월" in prompt
        assert schema is RECOMMENDATION_SCHEMA

    @pytest.mark.asyncio
    async def test_prompt_uses_processed_input(
        self,
        service: RecommendService,
        mock_llm_client: AsyncMock,
        full_recommendation: dict[str, Any],
    ) -> None:
        # Given
        mock_llm_client.generate_object.return_value = full_recommendation
        outfit_input = {"outer": {"type": " <트렌치> 코트 "}, "socks": {}}

        # When
        await service.recommend(USER_PREFERENCE, outfit_input)

        # Then
        prompt = mock_llm_client.generate_object.call_args.args[0]
        assert "아우터: 트렌치 코트 / 미정" in prompt
        assert "<트렌치>" not in prompt
        assert "양말:" not in prompt

    @pytest.mark.asyncio
    async def test_missing_credential_checked_first(self, mock_llm_client: AsyncMock) -> None:
        # Given
        service = RecommendService(
            llm_client=mock_llm_client,
            settings=Settings(APP_ENV="production", GOOGLE_GENERATIVE_AI_API_KEY=""),
        )

        # When / Then
        with pytest.raises(ConfigurationError):
            await service.recommend({"gender": "unknown"}, {})

        mock_llm_client.generate_object.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_user_preference(
        self, service: RecommendService, mock_llm_client: AsyncMock
    ) -> None:
        with pytest.raises(RequestValidationFailed) as exc_info:
            await service.recommend(
                {"gender": "unknown", "personalColor": {"main": "winter_cool"}},
                {"outer": {"type": "a"}},
            )

        assert exc_info.value.message == "입력 정보를 확인해주세요."
        assert exc_info.value.errors == ["유효하지 않은 성별입니다."]
        mock_llm_client.generate_object.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_outfit_input(
        self, service: RecommendService, mock_llm_client: AsyncMock
    ) -> None:
        with pytest.raises(RequestValidationFailed) as exc_info:
            await service.recommend(
                USER_PREFERENCE,
                {"outer": {"type": "a"}, "bottom": {"color": "b"}},
            )

        assert exc_info.value.message == "의상 입력 정보를 확인해주세요."
        assert len(exc_info.value.errors) == 2
        mock_llm_client.generate_object.assert_not_called()


class TestUpstreamFailure:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (LLMError("Quota exceeded for metric"), RateLimitedError),
            (LLMError("too many requests", status_code=429), RateLimitedError),
            (LLMError("Service unavailable: connection refused"), UpstreamUnavailableError),
            (LLMError("Request timeout: read timed out"), UpstreamUnavailableError),
            (LLMError("Invalid request", status_code=400), UnknownUpstreamError),
        ],
    )
    async def test_classified(
        self,
        mock_llm_client: AsyncMock,
        production_settings: Settings,
        error: Exception,
        expected: type,
    ) -> None:
        # Given
        mock_llm_client.generate_object.side_effect = error
        service = RecommendService(llm_client=mock_llm_client, settings=production_settings)

        # When / Then
        with pytest.raises(expected) as exc_info:
            await service.recommend(USER_PREFERENCE, {})

        assert exc_info.value.details is None

    @pytest.mark.asyncio
    async def test_non_conforming_result(
        self, mock_llm_client: AsyncMock, production_settings: Settings
    ) -> None:
        mock_llm_client.generate_object.return_value = {"outfit": {}}
        service = RecommendService(llm_client=mock_llm_client, settings=production_settings)

        with pytest.raises(UnknownUpstreamError):
            await service.recommend(USER_PREFERENCE, {})

    @pytest.mark.asyncio
    async def test_details_in_development(self, mock_llm_client: AsyncMock) -> None:
        # Given
        mock_llm_client.generate_object.side_effect = LLMError("rate limit reached")
        service = RecommendService(
            llm_client=mock_llm_client,
            settings=Settings(APP_ENV="development", GOOGLE_GENERATIVE_AI_API_KEY="key"),
        )

        # When / Then
        with pytest.raises(RateLimitedError) as exc_info:
            await service.recommend(USER_PREFERENCE, {})

        assert exc_info.value.details == "rate limit reached"


class TestServiceWiring:

    def test_default_client_is_gemini(self, production_settings: Settings) -> None:
        service = RecommendService(settings=production_settings)

        client = service._get_llm_client()

        assert isinstance(client, GeminiClient)
        assert client.api_key == "test_gemini_key"
        assert service._get_llm_client() is client

    def test_dependency_uses_environment(self) -> None:
        service = get_recommend_service()

        assert service.settings.google_generative_ai_api_key


class TestFailureLogging:

    @pytest.mark.asyncio
    async def test_upstream_failure_logged_once(
        self, production_settings: Settings, mocker, caplog
    ) -> None:
        # Given
        mocker.patch(
            "httpx.AsyncClient.post",
            new_callable=AsyncMock,
            side_effect=httpx.TimeoutException("read timed out"),
        )
        service = RecommendService(settings=production_settings)

        # When
        with caplog.at_level(logging.DEBUG, logger="app"):
            with pytest.raises(UpstreamUnavailableError):
                await service.recommend(USER_PREFERENCE, {})

        # Then
        error_records = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(error_records) == 1
        assert "read timed out" in error_records[0].getMessage()
