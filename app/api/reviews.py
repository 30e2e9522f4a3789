from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from typing import Dict, Any, Union
from datetime import datetime
import logging
import time

from app.models.matching import MatchingRequest, MatchResult, RatingsMatchResult
from app.services.review_service import ReviewService
from app.services.summary_service import ReviewSummaryService, ReviewSummaryError
from app.core.dependencies import get_review_service, get_summary_service
from app.core.config import settings

router = APIRouter(prefix="/api/reviews", tags=["reviews"])
logger = logging.getLogger(__name__)

SUMMARY_FAILURE_MESSAGE = "Failed to generate review summary."


@router.post("/matching-percentage",
             response_model=Union[MatchResult, RatingsMatchResult],
             summary="뷰티 프로필 기반 매칭률 계산",
             description="""
             **메인 매칭 API** - 고평점 리뷰 작성자들의 뷰티 속성과 사용자 뷰티 프로필을 비교합니다.

             ## 계산 프로세스:
             1. **리뷰 조회**: 상품 리뷰와 사용자 프로필을 동시에 조회
             2. **고평점 필터**: 평점 4 이상 리뷰만 사용
             3. **속성 빈도 집계**: 2회 이상 등장한 속성만 유의미한 속성으로 간주
             4. **매칭**: 정확 일치 -> 공백 제거 후 일치
             5. **최종 매칭률**: 빈도 가중 일치율 (0 이면 단순 일치율)

             `beauty_profile`, `user_id` 가 모두 없으면 평균 별점 기반으로 계산합니다.
             `beauty_profile` 은 `categories[]`, `beauty[]`, `skin_types[]` 형태를 모두 받습니다.

             ## 입력 예시:
             ```json
             {
                 "product_id": 84473,
                 "beauty_profile": {
                     "categories": [
                         {"name": "Skin Type", "subtags": [{"name": "Oily"}]},
                         {"name": "Skin Tone", "subtags": [{"name": "Medium"}]}
                     ]
                 }
             }
             ```
             """)
async def get_matching_percentage(
    request: MatchingRequest,
    review_service: ReviewService = Depends(get_review_service)
):
    start_time = time.time()

    try:
        logger.info(f"🎯 매칭률 요청: 상품={request.product_id}, 프로필소스={request.has_profile_source}")
        result = await review_service.calculate_matching(request)

        processing_time = (time.time() - start_time) * 1000
        logger.info(f"✅ 매칭률 계산 완료: {result.matching_percentage}% ({result.mode}), {processing_time:.2f}ms")
        return result

    except Exception as e:
        logger.error(f"❌ 매칭률 계산 실패: {e}")
        raise HTTPException(status_code=500, detail=f"매칭률 계산에 실패했습니다: {str(e)}") from e


@router.get("/summary",
            summary="리뷰 요약",
            description="상품 리뷰 본문을 LLM 으로 요약합니다 (장점/단점 구조).")
async def get_review_summary(
    product_id: str,
    review_service: ReviewService = Depends(get_review_service),
    summary_service: ReviewSummaryService = Depends(get_summary_service)
):
    try:
        reviews = await review_service.get_reviews(product_id)
        summary = await summary_service.summarize(reviews)
        return {
            "success": True,
            "message": "Review summary",
            "data": {
                "summary": summary,
                "timestamp": datetime.now().isoformat()
            }
        }
    except ReviewSummaryError as e:
        logger.error(f"❌ 리뷰 요약 실패 (상품 {product_id}): {e}")
        return JSONResponse(status_code=500, content={"review_summary": SUMMARY_FAILURE_MESSAGE})
    except Exception as e:
        logger.error(f"❌ 리뷰 요약 중 예기치 못한 오류 (상품 {product_id}): {e}")
        return JSONResponse(status_code=500, content={"review_summary": SUMMARY_FAILURE_MESSAGE})


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """리뷰 매칭 서비스 헬스체크"""
    return {
        "service": "review-matching-api",
        "status": "healthy",
        "version": settings.VERSION,
        "features": {
            "attribute_matching": True,
            "ratings_fallback": True,
            "review_summary": settings.is_llm_configured
        },
        "matching_config": settings.get_matching_config()
    }
