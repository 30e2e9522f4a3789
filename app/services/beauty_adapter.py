"""
외부 API 뷰티 데이터 어댑터
- 구버전(skin_types[]) / 신버전(beauty[].subtags[]) / 요청 본문(categories[]) 페이로드를 구분
- 어떤 형태든 BeautyProfile 로 변환
- 필드 누락, 타입 오류는 빈 값으로 처리 (예외 없음)
"""
import logging
import re
from typing import Any, Dict, List

from app.models.user import (
    BeautyCategory,
    BeautyData,
    BeautyProfile,
    BeautySubtag,
    CategorizedBeautyData,
    EmptyBeautyData,
    SkinTypesBeautyData,
)
from app.models.review import ReportedAttribute

logger = logging.getLogger(__name__)

SKIN_TYPE_CATEGORY = "skin_type"
HAIR_TYPE_CATEGORY = "hair_type"

_WHITESPACE = re.compile(r"\s+")


def normalize_attribute_name(name: str) -> str:
    """퍼지 비교용 정규화: 소문자 변환 후 모든 공백 제거

    "Oily Skin", "oily  skin", "OilySkin" 은 모두 "oilyskin" 이 된다.
    """
    return _WHITESPACE.sub("", name.lower())


def _parse_subtags(items: Any) -> List[BeautySubtag]:
    if not isinstance(items, list):
        return []
    subtags = []
    for item in items:
        if isinstance(item, dict) and isinstance(item.get("name"), str) and item["name"].strip():
            subtags.append(BeautySubtag(name=item["name"]))
    return subtags


def _parse_categories(items: Any) -> List[BeautyCategory]:
    if not isinstance(items, list):
        return []
    categories = []
    for item in items:
        if not isinstance(item, dict):
            continue
        name = item.get("name") if isinstance(item.get("name"), str) else ""
        categories.append(BeautyCategory(name=name, subtags=_parse_subtags(item.get("subtags"))))
    return categories


def parse_beauty_payload(raw: Any) -> BeautyData:
    """원본 dict 를 형태별 BeautyData 로 분류 (beauty[] > categories[] > skin_types[])"""
    if not isinstance(raw, dict):
        return EmptyBeautyData()

    if isinstance(raw.get("beauty"), list):
        return CategorizedBeautyData(beauty=_parse_categories(raw["beauty"]))

    # BeautyProfile 을 그대로 직렬화한 형태
    if isinstance(raw.get("categories"), list):
        return CategorizedBeautyData(beauty=_parse_categories(raw["categories"]))

    if isinstance(raw.get("skin_types"), list) or isinstance(raw.get("hair_types"), list):
        return SkinTypesBeautyData(
            skin_types=_parse_subtags(raw.get("skin_types")),
            hair_types=_parse_subtags(raw.get("hair_types"))
        )

    return EmptyBeautyData()


def to_beauty_profile(data: BeautyData) -> BeautyProfile:
    if isinstance(data, CategorizedBeautyData):
        return BeautyProfile(categories=data.beauty)

    if isinstance(data, SkinTypesBeautyData):
        categories = []
        if data.skin_types:
            categories.append(BeautyCategory(name=SKIN_TYPE_CATEGORY, subtags=data.skin_types))
        if data.hair_types:
            categories.append(BeautyCategory(name=HAIR_TYPE_CATEGORY, subtags=data.hair_types))
        return BeautyProfile(categories=categories)

    return BeautyProfile()


def profile_from_payload(raw: Any) -> BeautyProfile:
    """프로필 API 응답(data)을 BeautyProfile 로 변환"""
    data = parse_beauty_payload(raw)
    logger.debug(f"뷰티 데이터 형태: {data.kind}")
    return to_beauty_profile(data)


def extract_reported_attributes(raw_review: Dict[str, Any]) -> List[ReportedAttribute]:
    """리뷰 작성자(user) 정보에서 뷰티 속성을 평탄화해서 추출"""
    if not isinstance(raw_review, dict):
        return []
    profile = profile_from_payload(raw_review.get("user"))
    return [
        ReportedAttribute(name=subtag.name, category=category.name)
        for category in profile.categories
        for subtag in category.subtags
    ]
