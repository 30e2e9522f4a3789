import logging
from typing import Sequence

from app.clients.openai_client import OpenAIClient, LLMClientError
from app.models.review import Review
from app.core.config import settings

logger = logging.getLogger(__name__)

NO_SUMMARY = "No summary available."
SUMMARY_PROMPT_PREFIX = "Summarize these product reviews:\n\n"


class ReviewSummaryError(Exception):
    """리뷰 요약 생성 실패"""
    pass


class ReviewSummaryService:
    """리뷰 본문을 LLM 으로 요약 (장점/단점 구조)"""

    def __init__(self, llm_client: OpenAIClient):
        self.llm_client = llm_client

    def build_prompt(self, reviews: Sequence[Review]) -> str:
        return SUMMARY_PROMPT_PREFIX + "\n".join(review.comment for review in reviews)

    async def summarize(self, reviews: Sequence[Review]) -> str:
        if not reviews:
            logger.warning("요약할 리뷰 없음")
            return NO_SUMMARY

        if not settings.is_llm_configured:
            raise ReviewSummaryError("OPENAI_API_KEY 가 설정되지 않았습니다")

        try:
            summary = await self.llm_client.chat_completion(
                settings.SUMMARY_SYSTEM_PROMPT,
                self.build_prompt(reviews)
            )
        except LLMClientError as e:
            raise ReviewSummaryError(f"리뷰 요약 실패: {e}") from e

        logger.info(f"🧾 리뷰 {len(reviews)}개 요약 완료")
        return summary or NO_SUMMARY
