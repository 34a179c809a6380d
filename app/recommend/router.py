"""
Recommend 모듈 라우터

API:
- POST /api/recommend: 퍼스널 컬러 기반 코디/향/액세서리 추천
- POST /api/validate/field: 입력 중인 필드 실시간 검증
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from app.recommend.schemas import (
    AIRecommendation,
    ErrorResponse,
    FieldCheckRequest,
    FieldCheckResponse,
)
from app.recommend.service import RecommendService, get_recommend_service, parse_request
from app.recommend.validators import check_live_input

router = APIRouter(prefix="/api", tags=["recommend"])
logger = logging.getLogger(__name__)


@router.post(
    "/recommend",
    response_model=AIRecommendation,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "잘못된 JSON 또는 입력 검증 실패"},
        429: {"model": ErrorResponse, "description": "AI 호출 한도 초과"},
        500: {"model": ErrorResponse, "description": "AI 처리 오류"},
        503: {"model": ErrorResponse, "description": "AI 서비스 일시 불가"},
    },
    summary="코디 추천",
    description="""
    퍼스널 컬러와 (선택) 부위별 의상을 받아 전체 코디를 추천합니다.

    응답 내용:
    - outfit: 7개 부위 의상 (종류/색상)
    - handCream: PLEUVOIR 핸드크림 1종
    - accessories: 액세서리 3~5개
    - weatherInsight / styleMessage
    """,
)
async def recommend(
    request: Request,
    service: Annotated[RecommendService, Depends(get_recommend_service)],
) -> AIRecommendation:
    user_preference, outfit_input = parse_request(await request.body())
    logger.info("Received recommendation request")
    return await service.recommend(user_preference, outfit_input)


@router.post("/validate/field", response_model=FieldCheckResponse)
async def validate_field_input(request: FieldCheckRequest) -> FieldCheckResponse:
    """입력 중인 값을 실시간 전처리(공백 유지)하고 제출 기준으로 검증합니다."""
    value, validation = check_live_input(request.value, request.label)
    return FieldCheckResponse(value=value, valid=validation.valid, error=validation.error)
