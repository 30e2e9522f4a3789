import logging
from typing import Dict, List, Optional, Sequence

from app.models.matching import RatingsMatchResult
from app.models.review import Review
from app.services.attribute_matcher import to_percentage, NO_REVIEWS_MESSAGE
from app.core.config import settings

logger = logging.getLogger(__name__)

OVERALL_ASPECT = "overall"


class RatingsFallbackCalculator:
    """뷰티 프로필이 전혀 없을 때 사용하는 별점 기반 매칭률

    항목별 평균 별점을 0~5 -> 0~100 으로 선형 환산하고,
    최종 매칭률은 전체(overall) 평균 별점 기준.
    """

    def __init__(self, scale_max: Optional[float] = None, default_percentage: Optional[int] = None):
        self.scale_max = settings.RATING_SCALE_MAX if scale_max is None else scale_max
        self.default_percentage = (
            settings.RATINGS_FALLBACK_DEFAULT if default_percentage is None else default_percentage
        )

    def calculate(self, reviews: Sequence[Review]) -> RatingsMatchResult:
        if not reviews:
            logger.info(f"리뷰 없음 - 기본 매칭률 {self.default_percentage}% 사용")
            return RatingsMatchResult(
                matching_percentage=self.default_percentage,
                message=NO_REVIEWS_MESSAGE
            )

        averages = self.average_ratings(reviews)
        rating_percentages = {
            aspect: to_percentage(average, self.scale_max)
            for aspect, average in averages.items()
        }

        overall = rating_percentages.get(OVERALL_ASPECT, 0)
        logger.debug(f"별점 기반 매칭률: {overall}% (리뷰 {len(reviews)}개)")

        return RatingsMatchResult(
            matching_percentage=overall,
            rating_percentages=rating_percentages,
            review_count=len(reviews)
        )

    @staticmethod
    def average_ratings(reviews: Sequence[Review]) -> Dict[str, float]:
        """항목별 평균 별점 (해당 항목을 가진 리뷰만 평균)"""
        collected: Dict[str, List[float]] = {OVERALL_ASPECT: []}
        for review in reviews:
            collected[OVERALL_ASPECT].append(review.rating)
            for aspect, value in review.star_ratings.items():
                if aspect == OVERALL_ASPECT:
                    continue
                collected.setdefault(aspect, []).append(value)

        return {
            aspect: sum(values) / len(values)
            for aspect, values in collected.items()
            if values
        }
