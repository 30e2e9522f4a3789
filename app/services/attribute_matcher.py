import logging
import math
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from app.models.matching import MatchResult, SignificantAttribute
from app.models.review import Review
from app.models.user import BeautyProfile
from app.services.beauty_adapter import normalize_attribute_name
from app.core.config import settings

logger = logging.getLogger(__name__)

NO_REVIEWS_MESSAGE = "no reviews"
NO_PROFILE_MESSAGE = "no beauty profile"


def to_percentage(numerator: float, denominator: float) -> int:
    """0~100 정수 백분율 (반올림은 half-up, 분모 0 이면 0)"""
    if denominator <= 0:
        return 0
    value = math.floor(100 * numerator / denominator + 0.5)
    return max(0, min(100, int(value)))


class AttributeMatcher:
    """고평점 리뷰 작성자 속성과 사용자 뷰티 프로필의 매칭률 계산

    1. 평점 4 이상 리뷰만 사용
    2. 작성자 속성 빈도 집계 (소문자 기준)
    3. 빈도 2 이상 속성만 유의미한 속성으로 간주
    4. 사용자 속성별 정확 일치 -> 공백 제거 후 일치 순으로 매칭
    5. 가중 일치율 우선, 0 이면 단순 일치율 사용
    """

    def __init__(
        self,
        high_rating_threshold: Optional[float] = None,
        frequency_threshold: Optional[int] = None
    ):
        self.high_rating_threshold = (
            settings.HIGH_RATING_THRESHOLD if high_rating_threshold is None else high_rating_threshold
        )
        self.frequency_threshold = (
            settings.SIGNIFICANT_FREQUENCY_THRESHOLD if frequency_threshold is None else frequency_threshold
        )

    def match(self, reviews: Sequence[Review], profile: Optional[BeautyProfile]) -> MatchResult:
        if not reviews:
            logger.info("리뷰 없음 - 매칭률 0")
            return MatchResult(message=NO_REVIEWS_MESSAGE)

        if profile is None or profile.is_empty():
            logger.info("뷰티 프로필 없음 - 매칭률 0")
            return MatchResult(message=NO_PROFILE_MESSAGE)

        frequencies = self.count_attribute_frequencies(reviews)
        significant = self.significant_attributes(frequencies)
        total_frequency = sum(frequency for _, frequency in significant)
        user_attributes = profile.flatten()

        matched_count = 0
        matched_weight = 0
        attribute_percentages: Dict[str, int] = {}

        for user_attribute in user_attributes:
            match_key = self._find_match(user_attribute, significant)

            if match_key is None:
                key = profile.original_name(user_attribute) or user_attribute
                attribute_percentages[key] = 0
                continue

            frequency = frequencies[match_key]
            matched_count += 1
            matched_weight += frequency

            key = profile.original_name(match_key) or match_key
            attribute_percentages[key] = to_percentage(frequency, total_frequency)

        simple_percentage = to_percentage(matched_count, len(user_attributes))
        weighted_percentage = to_percentage(matched_weight, total_frequency)
        final_percentage = weighted_percentage or simple_percentage

        logger.debug(
            f"매칭 결과: 사용자속성={len(user_attributes)}개, 일치={matched_count}개, "
            f"단순={simple_percentage}%, 가중={weighted_percentage}%, 최종={final_percentage}%"
        )

        return MatchResult(
            matching_percentage=final_percentage,
            attribute_percentages=attribute_percentages,
            attribute_frequencies=dict(frequencies),
            significant_attributes=[
                SignificantAttribute(name=name, frequency=frequency)
                for name, frequency in significant
            ],
            user_attributes=user_attributes,
            simple_percentage=simple_percentage,
            weighted_percentage=weighted_percentage
        )

    def count_attribute_frequencies(self, reviews: Sequence[Review]) -> Dict[str, int]:
        """고평점 리뷰의 작성자 속성 빈도 (소문자 키)"""
        counter: Counter = Counter()
        for review in reviews:
            if review.rating < self.high_rating_threshold:
                continue
            for attribute in review.reported_attributes:
                counter[attribute.name.lower()] += 1
        return dict(counter)

    def significant_attributes(self, frequencies: Dict[str, int]) -> List[Tuple[str, int]]:
        """빈도 임계값 초과 속성, 빈도 내림차순 (동률은 먼저 등장한 순)"""
        candidates = [
            (name, frequency)
            for name, frequency in frequencies.items()
            if frequency > self.frequency_threshold
        ]
        return sorted(candidates, key=lambda item: item[1], reverse=True)

    @staticmethod
    def _find_match(user_attribute: str, significant: List[Tuple[str, int]]) -> Optional[str]:
        for name, _ in significant:
            if name == user_attribute:
                return name

        normalized = normalize_attribute_name(user_attribute)
        for name, _ in significant:
            if normalize_attribute_name(name) == normalized:
                return name

        return None
