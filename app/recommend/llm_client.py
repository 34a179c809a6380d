import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from app.config import Settings, get_settings
from app.recommend.exceptions import LLMError

logger = logging.getLogger(__name__)


def _extract_error_message(response: httpx.Response) -> str:
    """Google API 에러 본문({"error": {"message", "status"}})에서 메시지 추출"""
    try:
        body = response.json()
    except ValueError:
        return response.text

    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        return response.text

    message = error.get("message") or response.text
    status = error.get("status")
    return f"{status}: {message}" if status else message


class LLMClient(ABC):
    @abstractmethod
    async def generate_object(
        self: "LLMClient",
        prompt: str,
        schema: dict[str, Any],
        temperature: float = 0.7,
    ) -> dict[str, Any]:
        ...


class GeminiClient(LLMClient):
    def __init__(self: "GeminiClient", settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.api_key = self.settings.google_generative_ai_api_key
        self.model = self.settings.gemini_model
        self.base_url = self.settings.gemini_base_url

    def _get_headers(self: "GeminiClient") -> dict[str, str]:
        if not self.api_key:
            raise LLMError("GOOGLE_GENERATIVE_AI_API_KEY is not configured")
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    def _build_payload(
        self: "GeminiClient",
        prompt: str,
        schema: dict[str, Any],
        temperature: float,
    ) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }

    async def _request(self: "GeminiClient", payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        headers = self._get_headers()

        async with httpx.AsyncClient(timeout=self.settings.llm_timeout) as client:
            response = await client.post(url, headers=headers, json=payload)
            response.raise_for_status()
            return response.json()

    def _parse_response(self: "GeminiClient", response: dict[str, Any]) -> dict[str, Any]:
        candidates = response.get("candidates") or []
        if not candidates:
            block_reason = response.get("promptFeedback", {}).get("blockReason")
            raise LLMError(f"Gemini returned no candidates (blockReason={block_reason})")

        parts = candidates[0].get("content", {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        if not text:
            finish_reason = candidates[0].get("finishReason")
            raise LLMError(f"Gemini returned empty content (finishReason={finish_reason})")

        result = json.loads(text)
        if not isinstance(result, dict):
            raise LLMError("Gemini response is not a JSON object")
        return result

    async def generate_object(
        self: "GeminiClient",
        prompt: str,
        schema: dict[str, Any],
        temperature: float = 0.7,
    ) -> dict[str, Any]:
        payload = self._build_payload(prompt, schema, temperature)

        try:
            response = await self._request(payload)
            return self._parse_response(response)

        except LLMError:
            raise

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = _extract_error_message(e.response)
            logger.debug("Gemini API Error [%s]: %s", status, message)
            raise LLMError(message, status_code=status) from e

        except httpx.TimeoutException as e:
            logger.debug("Gemini request timeout: %s", e)
            raise LLMError(f"Request timeout: {e}") from e

        except httpx.ConnectError as e:
            logger.debug("Gemini network error: %s", e)
            raise LLMError(f"Service unavailable: {e}") from e

        except json.JSONDecodeError as e:
            logger.debug("Gemini returned invalid JSON: %s", e)
            raise LLMError(f"Invalid JSON in model response: {e}") from e

        except Exception as e:
            logger.debug("Unexpected error during Gemini call", exc_info=True)
            raise LLMError(f"Unexpected error: {e}") from e
