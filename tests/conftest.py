"""
테스트 설정 파일
pytest 실행 전 환경변수를 설정합니다.
"""
import os
import pytest


def pytest_configure():
    """pytest 설정 초기화"""
    # 환경변수가 설정되지 않았다면 기본값 설정
    test_env_vars = {
        'ENV_FILE_PATH': '.env.test-not-present',
        'ENVIRONMENT': 'development',
        'DEBUG': 'true',
        'LOG_LEVEL': 'INFO',
        'REVIEWS_API_URL': 'https://reviews.test/reviews',
        'CATALOG_API_URL': 'https://catalog.test/v3/products',
        'PROFILE_API_URL': 'https://users.test/users',
        'UPSTREAM_TIMEOUT': '2.0',
        'REVIEWS_PAGE_LIMIT': '6',
        'OPENAI_API_KEY': 'test-openai-key',
        'OPENAI_API_URL': 'https://llm.test/v1/chat/completions',
        'OPENAI_MODEL': 'gpt-4o-mini',
        'OPENAI_MAX_TOKENS': '150'
    }

    for key, value in test_env_vars.items():
        if not os.getenv(key):
            os.environ[key] = value

    print(f"✅ 테스트 환경변수 설정 완료 (ENVIRONMENT: {os.getenv('ENVIRONMENT')})")


@pytest.fixture
def make_review():
    """Review 생성 헬퍼 - 속성명 리스트만 넘기면 된다"""
    from app.models.review import Review, ReportedAttribute

    counter = {"id": 0}

    def _make(rating=5, attributes=(), category="skin_type", star_ratings=None, comment="good"):
        counter["id"] += 1
        return Review(
            id=counter["id"],
            rating=rating,
            comment=comment,
            date="2024-01-01T00:00:00",
            reported_attributes=[
                ReportedAttribute(name=name, category=category) for name in attributes
            ],
            star_ratings=star_ratings or {}
        )

    return _make


@pytest.fixture
def make_profile():
    """{카테고리명: [서브태그...]} 형태로 BeautyProfile 생성"""
    from app.models.user import BeautyProfile, BeautyCategory, BeautySubtag

    def _make(categories):
        return BeautyProfile(categories=[
            BeautyCategory(name=name, subtags=[BeautySubtag(name=tag) for tag in tags])
            for name, tags in categories
        ])

    return _make
