from functools import lru_cache

from fastapi import Depends

from app.clients.soco_client import SocoClient, get_soco_client
from app.clients.openai_client import OpenAIClient, get_openai_client
from app.services.attribute_matcher import AttributeMatcher
from app.services.ratings_fallback import RatingsFallbackCalculator
from app.services.review_service import ReviewService
from app.services.summary_service import ReviewSummaryService


@lru_cache()
def get_attribute_matcher() -> AttributeMatcher:
    return AttributeMatcher()

@lru_cache()
def get_ratings_calculator() -> RatingsFallbackCalculator:
    return RatingsFallbackCalculator()

def get_review_service(
    soco_client: SocoClient = Depends(get_soco_client)
) -> ReviewService:
    """리뷰/매칭 서비스 의존성 주입"""
    return ReviewService(
        soco_client=soco_client,
        matcher=get_attribute_matcher(),
        ratings_calculator=get_ratings_calculator()
    )

def get_summary_service(
    llm_client: OpenAIClient = Depends(get_openai_client)
) -> ReviewSummaryService:
    """리뷰 요약 서비스 의존성 주입"""
    return ReviewSummaryService(llm_client)
