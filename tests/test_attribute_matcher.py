"""
AttributeMatcher 테스트
고평점 리뷰 속성 빈도 기반 매칭률 계산 검증
"""
import pytest

from app.services.attribute_matcher import AttributeMatcher, to_percentage


@pytest.fixture
def matcher():
    return AttributeMatcher()


@pytest.fixture
def oily_reviews(make_review):
    return [
        make_review(rating=5, attributes=["Oily"]),
        make_review(rating=5, attributes=["Oily"]),
        make_review(rating=3, attributes=["Dry"]),
    ]


def test_exact_match_full_score(matcher, oily_reviews, make_profile):
    profile = make_profile([("Skin Type", ["Oily"])])

    result = matcher.match(oily_reviews, profile)

    assert result.attribute_frequencies == {"oily": 2}
    assert [(a.name, a.frequency) for a in result.significant_attributes] == [("oily", 2)]
    assert result.user_attributes == ["oily"]
    assert result.simple_percentage == 100
    assert result.weighted_percentage == 100
    assert result.matching_percentage == 100
    assert result.attribute_percentages == {"Oily": 100}
    assert result.message is None


def test_no_match_scores_zero(matcher, oily_reviews, make_profile):
    profile = make_profile([("Skin Type", ["combination"])])

    result = matcher.match(oily_reviews, profile)

    assert result.matching_percentage == 0
    assert result.attribute_percentages == {"combination": 0}


def test_unmatched_attribute_keeps_declared_case(matcher, oily_reviews, make_profile):
    profile = make_profile([("Skin Type", ["Oily"]), ("Skin Tone", ["Fair"])])

    result = matcher.match(oily_reviews, profile)

    assert result.attribute_percentages == {"Oily": 100, "Fair": 0}
    assert result.simple_percentage == 50
    # 가중 일치율이 0 이 아니면 가중 일치율 사용
    assert result.matching_percentage == 100


def test_low_rated_reviews_are_ignored(matcher, make_review, make_profile):
    reviews = [
        make_review(rating=3.9, attributes=["Dry"]),
        make_review(rating=2, attributes=["Dry"]),
        make_review(rating=4, attributes=["Normal"]),
        make_review(rating=4, attributes=["normal"]),
    ]
    profile = make_profile([("Skin Type", ["Dry"])])

    result = matcher.match(reviews, profile)

    assert result.attribute_frequencies == {"normal": 2}
    assert result.matching_percentage == 0


def test_weighted_percentage_preferred_over_simple(matcher, make_review, make_profile):
    reviews = [
        make_review(attributes=["Oily", "Medium"]),
        make_review(attributes=["Oily", "Medium"]),
        make_review(attributes=["Oily"]),
    ]
    profile = make_profile([("Skin Type", ["Oily"]), ("Skin Tone", ["Fair"])])

    result = matcher.match(reviews, profile)

    assert [a.name for a in result.significant_attributes] == ["oily", "medium"]
    assert result.simple_percentage == 50
    assert result.weighted_percentage == 60
    assert result.matching_percentage == 60
    assert result.attribute_percentages == {"Oily": 60, "Fair": 0}


def test_significant_attributes_sorted_by_frequency(matcher, make_review, make_profile):
    reviews = [
        make_review(attributes=["Acne", "Dull"]),
        make_review(attributes=["Acne", "Dull"]),
        make_review(attributes=["Dull", "Pores"]),
    ]
    profile = make_profile([("Concern", ["Acne"])])

    result = matcher.match(reviews, profile)

    assert [(a.name, a.frequency) for a in result.significant_attributes] == [("dull", 3), ("acne", 2)]
    # 빈도 1 인 pores 는 노이즈로 제외
    assert "pores" in result.attribute_frequencies
    assert "pores" not in [a.name for a in result.significant_attributes]


def test_fuzzy_match_ignores_whitespace(matcher, make_review, make_profile):
    reviews = [
        make_review(attributes=["Oily Skin"]),
        make_review(attributes=["oily skin"]),
    ]
    profile = make_profile([("Skin Type", ["OilySkin"])])

    result = matcher.match(reviews, profile)

    assert result.matching_percentage == 100
    # 원래 표기를 찾지 못하면 소문자 매칭 키로 보고된다
    assert result.attribute_percentages == {"oily skin": 100}


def test_all_single_occurrences_score_zero(matcher, make_review, make_profile):
    reviews = [
        make_review(attributes=["Oily"]),
        make_review(attributes=["Dry"]),
        make_review(attributes=["Combination"]),
    ]
    profile = make_profile([("Skin Type", ["Oily", "Dry", "Combination"])])

    result = matcher.match(reviews, profile)

    assert result.significant_attributes == []
    assert result.weighted_percentage == 0
    assert result.simple_percentage == 0
    assert result.matching_percentage == 0


def test_duplicate_user_attributes_are_kept(matcher, make_review, make_profile):
    reviews = [
        make_review(attributes=["Oily", "Medium"]),
        make_review(attributes=["Oily", "Medium"]),
    ]
    profile = make_profile([
        ("Skin Type", ["Oily"]),
        ("Face", ["Oily"]),
        ("Forehead", ["Oily"]),
    ])

    result = matcher.match(reviews, profile)

    assert result.user_attributes == ["oily", "oily", "oily"]
    # 중복 가중치 합이 전체 빈도를 넘어도 100 으로 제한
    assert result.weighted_percentage == 100
    assert result.matching_percentage == 100
    assert result.attribute_percentages == {"Oily": 50}


def test_empty_reviews(matcher, make_profile):
    result = matcher.match([], make_profile([("Skin Type", ["Oily"])]))

    assert result.matching_percentage == 0
    assert result.attribute_percentages == {}
    assert result.message == "no reviews"


@pytest.mark.parametrize("profile_categories", [None, [], [("Skin Type", [])]])
def test_empty_profile(matcher, oily_reviews, make_profile, profile_categories):
    profile = None if profile_categories is None else make_profile(profile_categories)

    result = matcher.match(oily_reviews, profile)

    assert result.matching_percentage == 0
    assert result.message == "no beauty profile"


def test_match_is_idempotent(matcher, oily_reviews, make_profile):
    profile = make_profile([("Skin Type", ["Oily", "Dry"]), ("Skin Tone", ["Medium"])])

    first = matcher.match(oily_reviews, profile)
    second = matcher.match(oily_reviews, profile)

    assert first == second


def test_percentage_always_in_range(matcher, make_review, make_profile):
    reviews = [make_review(attributes=["A", "B", "C"]) for _ in range(5)]
    profiles = [
        make_profile([("x", ["A"])]),
        make_profile([("x", ["A", "B", "C", "D"])]),
        make_profile([("x", ["a"]), ("y", ["A"]), ("z", ["b", "c"])]),
        make_profile([("x", ["Z"])]),
    ]

    for profile in profiles:
        result = matcher.match(reviews, profile)
        assert isinstance(result.matching_percentage, int)
        assert 0 <= result.matching_percentage <= 100


def test_custom_thresholds(make_review, make_profile):
    matcher = AttributeMatcher(high_rating_threshold=3, frequency_threshold=0)
    reviews = [make_review(rating=3, attributes=["Dry"])]

    result = matcher.match(reviews, make_profile([("Skin Type", ["Dry"])]))

    assert result.matching_percentage == 100


def test_to_percentage_rounding():
    assert to_percentage(1, 8) == 13
    assert to_percentage(1, 3) == 33
    assert to_percentage(2, 3) == 67
    assert to_percentage(5, 0) == 0
    assert to_percentage(3, 2) == 100
