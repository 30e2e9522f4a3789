# app/core/config.py
from pydantic_settings import BaseSettings
from typing import Dict, Any
import os


class Settings(BaseSettings):
    # 서버 설정 (고정값)
    APP_NAME: str = "Review Matcher API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 5001

    # 환경 설정 (환경변수에서만 가져옴)
    ENVIRONMENT: str

    # 로깅 설정
    LOG_LEVEL: str
    LOG_FORMAT: str = "%(asctime)s [%(processName)s:%(process)d] [%(levelname)s] %(name)s: %(message)s"

    # 외부 리뷰/상품 API 연동 설정
    REVIEWS_API_URL: str = "https://api.soco.id/reviews"
    CATALOG_API_URL: str = "https://catalog-api1.sociolla.com/v3/products"
    PROFILE_API_URL: str = "https://api.soco.id/users"
    UPSTREAM_TIMEOUT: float = 10.0
    REVIEWS_PAGE_LIMIT: int = 6
    REVIEWS_SORT: str = "most_relevant"
    PRODUCTS_PAGE_SKIP: int = 20
    PRODUCTS_PAGE_LIMIT: int = 20
    PRODUCTS_SORT: str = "-updated_at"

    # OpenAI 요약 설정
    OPENAI_API_KEY: str = ""
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_MAX_TOKENS: int = 150
    OPENAI_TIMEOUT: float = 30.0
    SUMMARY_SYSTEM_PROMPT: str = (
        "merangkum ulasan produk. Berikan ringkasan yang terstruktur dengan kelebihan dan kekurangan."
    )

    # 매칭 알고리즘 설정 (고정값 - 비즈니스 로직)
    HIGH_RATING_THRESHOLD: float = 4.0
    SIGNIFICANT_FREQUENCY_THRESHOLD: int = 1
    RATING_SCALE_MAX: float = 5.0
    RATINGS_FALLBACK_DEFAULT: int = 70

    # 별점 필드 매핑 (고정값 - 외부 API 필드명)
    STAR_RATING_FIELDS: Dict[str, str] = {
        "overall": "average_rating",
        "durability": "star_durability",
        "effectiveness": "star_effectiveness",
        "efficiency": "star_eficiency",
        "long_wear": "star_long_wear",
        "packaging": "star_packaging",
        "pigmentation": "star_pigmentation",
        "scent": "star_scent",
        "texture": "star_texture",
        "value_for_money": "star_value_for_money",
    }

    def get_matching_config(self) -> Dict[str, Any]:
        """현재 매칭 설정 정보 반환"""
        return {
            "high_rating_threshold": self.HIGH_RATING_THRESHOLD,
            "significant_frequency_threshold": self.SIGNIFICANT_FREQUENCY_THRESHOLD,
            "rating_scale_max": self.RATING_SCALE_MAX,
            "ratings_fallback_default": self.RATINGS_FALLBACK_DEFAULT,
            "environment": self.ENVIRONMENT
        }

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_llm_configured(self) -> bool:
        return bool(self.OPENAI_API_KEY)

    class Config:
        env_file = os.getenv("ENV_FILE_PATH", ".env.development")
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


try:
    settings = Settings()
    print(f"✅ 설정 로드 완료 (환경: {settings.ENVIRONMENT})")

    if not settings.is_llm_configured:
        print("⚠️  OPENAI_API_KEY 미설정 - 리뷰 요약 API는 실패 응답을 반환합니다")

except Exception as e:
    print(f"❌ 설정 로드 실패: {e}")
    print("🔧 환경변수 파일(.env.development)을 확인하세요")
    raise
