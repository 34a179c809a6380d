from __future__ import annotations

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import app
from app.recommend.llm_client import LLMClient
from app.recommend.service import RecommendService, get_recommend_service


# ============================================================
# 환경변수 설정 (가장 먼저 실행)
# ============================================================
@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """
    테스트 환경변수 설정
    - CI: GitHub Actions의 env 사용
    - 로컬: 테스트용 기본값 사용
    """
    test_env = {
        "APP_ENV": os.getenv("APP_ENV", "ci"),
        "GOOGLE_GENERATIVE_AI_API_KEY": os.getenv(
            "GOOGLE_GENERATIVE_AI_API_KEY", "test_gemini_key"
        ),
    }

    os.environ.update(test_env)

    # Settings 캐시 클리어 (중요!)
    from app.config import get_settings

    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


# ============================================================
# Recommend 테스트용 Fixtures
# ============================================================


@pytest.fixture
def production_settings() -> Settings:
    return Settings(
        APP_ENV="production",
        GOOGLE_GENERATIVE_AI_API_KEY="test_gemini_key",
    )


@pytest.fixture
def mock_llm_client() -> AsyncMock:
    return AsyncMock(spec=LLMClient)


@pytest.fixture
def override_service(
    mock_llm_client: AsyncMock,
) -> Generator[Any, None, None]:
    """설정을 받아 RecommendService를 주입하는 함수 반환"""

    def _override(settings: Settings) -> RecommendService:
        service = RecommendService(llm_client=mock_llm_client, settings=settings)
        app.dependency_overrides[get_recommend_service] = lambda: service
        return service

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def full_recommendation() -> dict[str, Any]:
    """7개 부위가 모두 채워진 AI 응답"""
    return {
        "outfit": {
            "outer": {"type": "울 체스터 코트", "color": "차콜 그레이"},
            "top_outer": {"type": "캐시미어 가디건", "color": "네이비"},
            "top_mid": {"type": "옥스포드 셔츠", "color": "아이시 블루"},
            "top_inner": {"type": "크루넥 티셔츠", "color": "퓨어 화이트"},
            "bottom": {"type": "울 슬랙스", "color": "블랙"},
            "socks": {"type": "리브 삭스", "color": "다크 그레이"},
            "shoes": {"type": "더비 슈즈", "color": "블랙"},
        },
        "handCream": {
            "brand": "PLEUVOIR",
            "productName": "TOKYO CLOUD",
            "scentDescription": "베르가못과 파인 니들의 청량함 위로 화이트 머스크가 남습니다.",
        },
        "accessories": ["실버 메탈 시계", "블랙 레더 토트백", "그레이 캐시미어 머플러"],
        "weatherInsight": "쌀쌀한 날씨에는 울 코트와 머플러로 보온을 챙기세요.",
        "styleMessage": "차가운 모노톤이 또렷한 인상을 줍니다. 투명한 머스크가 여유를 더합니다.",
    }
