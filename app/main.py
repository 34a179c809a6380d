import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.recommend.exceptions import RecommendError
from app.recommend.router import router as recommend_router
from app.recommend.validators import get_error_message

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logger.info("start server")
    if not get_settings().google_generative_ai_api_key:
        logger.warning("GOOGLE_GENERATIVE_AI_API_KEY is not set; recommendations will fail")

    yield

    logger.info("shut down server")


app = FastAPI(
    title="PersonalColorStylist",
    lifespan=lifespan,
)

app.include_router(recommend_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "running"}


@app.get("/health")
async def health_check() -> JSONResponse:
    credential = "configured" if get_settings().google_generative_ai_api_key else "missing"
    healthy = credential == "configured"

    response_data = {
        "status": "healthy" if healthy else "degraded",
        "services": {"gemini": credential},
    }
    status_code = 200 if healthy else 503

    return JSONResponse(content=response_data, status_code=status_code)


# ============================================================
# 커스텀 에러 핸들러
# ============================================================


@app.exception_handler(RecommendError)
async def recommend_exception_handler(
    request: Request, exc: RecommendError
) -> JSONResponse:
    """추천 에러 → {"error": ..., "details": ...} 응답"""
    content: dict[str, object] = {"error": exc.message}
    if exc.details:
        content["details"] = exc.details

    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Pydantic 검증 에러 핸들러

    필수 필드 누락, 타입 오류 모두 400으로 응답하고
    필드별 메시지를 details에 담습니다.
    """
    details = [_format_error(error) for error in exc.errors()]

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": get_error_message(400), "details": details},
    )


def _format_error(error: dict) -> str:
    """에러 타입과 필드명에 따른 한글 메시지 반환"""
    loc = error.get("loc", [])
    field_name = loc[-1] if loc else ""
    error_type = error.get("type", "")

    if "missing" in error_type:
        return f"{field_name}가 누락됐습니다"
    if "too_short" in error_type or "too_long" in error_type:
        return f"{field_name}의 길이가 올바르지 않습니다"
    if "type" in error_type or "_parsing" in error_type:
        return f"{field_name}의 타입이 올바르지 않습니다"
    return "요청 데이터가 올바르지 않습니다"
