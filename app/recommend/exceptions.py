from app.recommend.constants import (
    ERROR_MESSAGES,
    MALFORMED_REQUEST_MESSAGE,
)

RATE_LIMIT_KEYWORDS = ("quota", "rate limit")
UNAVAILABLE_KEYWORDS = ("unavailable", "timeout")
UNAVAILABLE_STATUS_CODES = (503, 504)


class RecommendError(Exception):
    """API 응답으로 변환되는 에러의 기본 클래스"""

    status_code: int = 500

    def __init__(
        self: "RecommendError",
        message: str | None = None,
        details: str | list[str] | None = None,
    ) -> None:
        self.message = message or ERROR_MESSAGES[self.status_code]
        self.details = details
        super().__init__(self.message)


class MalformedRequestError(RecommendError):
    status_code = 400

    def __init__(self: "MalformedRequestError", details: str) -> None:
        super().__init__(MALFORMED_REQUEST_MESSAGE, details)


class RequestValidationFailed(RecommendError):
    status_code = 400

    def __init__(self: "RequestValidationFailed", message: str, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(message, errors)


class ConfigurationError(RecommendError):
    status_code = 500


class RateLimitedError(RecommendError):
    status_code = 429


class UpstreamUnavailableError(RecommendError):
    status_code = 503


class UnknownUpstreamError(RecommendError):
    status_code = 500


class LLMError(Exception):
    """AI 제공자 호출 실패 (원문 메시지 + 가능하면 HTTP 상태 코드)"""

    def __init__(self: "LLMError", message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def classify_llm_error(error: Exception) -> type[RecommendError]:
    """AI 호출 에러를 응답 에러 타입으로 분류

    제공자 HTTP 상태 코드가 있으면 우선 사용하고, 없으면 메시지 키워드로 판단합니다.
    """
    status_code = getattr(error, "status_code", None)
    if status_code == 429:
        return RateLimitedError
    if status_code in UNAVAILABLE_STATUS_CODES:
        return UpstreamUnavailableError

    text = str(error).lower()
    if any(keyword in text for keyword in RATE_LIMIT_KEYWORDS):
        return RateLimitedError
    if any(keyword in text for keyword in UNAVAILABLE_KEYWORDS):
        return UpstreamUnavailableError
    return UnknownUpstreamError
