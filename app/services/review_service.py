import asyncio
import logging
import math
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from app.clients.soco_client import SocoClient
from app.models.matching import MatchingRequest, MatchResult, RatingsMatchResult
from app.models.review import Product, Review
from app.models.user import BeautyProfile
from app.services.attribute_matcher import AttributeMatcher
from app.services.beauty_adapter import extract_reported_attributes, profile_from_payload
from app.services.ratings_fallback import RatingsFallbackCalculator, OVERALL_ASPECT
from app.core.config import settings

logger = logging.getLogger(__name__)


def _as_rating(value: Any) -> Optional[float]:
    """유한한 숫자 별점만 허용 (NaN, Infinity 제외), 0~5 범위로 보정"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return max(0.0, min(float(settings.RATING_SCALE_MAX), float(value)))


def _as_text(value: Any, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def normalize_review(raw: Dict[str, Any], index: int) -> Review:
    """외부 리뷰 원본을 Review 로 변환 (누락 필드는 기본값)"""
    if not isinstance(raw, dict):
        raw = {}
    user = raw.get("user") if isinstance(raw.get("user"), dict) else {}

    star_ratings = {}
    for aspect, field_name in settings.STAR_RATING_FIELDS.items():
        if aspect == OVERALL_ASPECT:
            continue
        value = _as_rating(raw.get(field_name))
        if value is not None:
            star_ratings[aspect] = value

    return Review(
        id=index + 1,
        user=_as_text(user.get("name"), "Anonymous"),
        rating=_as_rating(raw.get(settings.STAR_RATING_FIELDS[OVERALL_ASPECT])) or 0,
        comment=_as_text(raw.get("details"), "No comment provided"),
        date=_as_text(raw.get("created_at"), datetime.now().isoformat()),
        reported_attributes=extract_reported_attributes(raw),
        star_ratings=star_ratings
    )


def normalize_product(raw: Dict[str, Any], index: int) -> Product:
    """외부 상품 원본을 Product 로 변환"""
    if not isinstance(raw, dict):
        raw = {}
    brand = raw.get("brand")
    if isinstance(brand, dict):
        brand = brand.get("name")

    product_id = raw.get("id")
    if isinstance(product_id, bool) or not isinstance(product_id, (int, str)) or product_id == "":
        product_id = index + 1

    return Product(
        id=product_id,
        brand=_as_text(brand, "Unknown"),
        updated_at=_as_text(raw.get("updated_at"), datetime.now().isoformat())
    )


class ReviewService:
    """리뷰 조회 및 매칭률 계산 서비스"""

    def __init__(
        self,
        soco_client: SocoClient,
        matcher: Optional[AttributeMatcher] = None,
        ratings_calculator: Optional[RatingsFallbackCalculator] = None
    ):
        self.soco_client = soco_client
        self.matcher = matcher or AttributeMatcher()
        self.ratings_calculator = ratings_calculator or RatingsFallbackCalculator()

    async def get_reviews(self, product_id: Union[int, str]) -> List[Review]:
        raw_reviews = await self.soco_client.fetch_reviews(product_id)
        reviews = [normalize_review(raw, index) for index, raw in enumerate(raw_reviews)]
        logger.info(f"📝 상품 {product_id} 리뷰 {len(reviews)}개 조회")
        return reviews

    async def get_products(self) -> List[Product]:
        raw_products = await self.soco_client.fetch_products()
        products = [normalize_product(raw, index) for index, raw in enumerate(raw_products)]
        logger.info(f"🛍️ 상품 {len(products)}개 조회")
        return products

    async def get_beauty_profile(self, request: MatchingRequest) -> Optional[BeautyProfile]:
        """요청에 직접 담긴 프로필 우선, 없으면 user_id 로 조회"""
        if request.beauty_profile is not None:
            return profile_from_payload(request.beauty_profile)
        if request.user_id is None:
            return None
        raw_profile = await self.soco_client.fetch_beauty_profile(request.user_id)
        return profile_from_payload(raw_profile)

    async def calculate_matching(
        self,
        request: MatchingRequest
    ) -> Union[MatchResult, RatingsMatchResult]:
        """매칭률 계산 - 프로필 소스가 없으면 별점 기반 fallback"""
        reviews, profile = await asyncio.gather(
            self.get_reviews(request.product_id),
            self.get_beauty_profile(request)
        )

        if not request.has_profile_source:
            logger.info(f"⚠️ 프로필 정보 없음 - 별점 기반 매칭 (상품 {request.product_id})")
            return self.ratings_calculator.calculate(reviews)

        result = self.matcher.match(reviews, profile)
        logger.info(f"🎯 상품 {request.product_id} 매칭률: {result.matching_percentage}%")
        return result
