from fastapi import APIRouter, Depends, HTTPException
from typing import Dict, Any
from datetime import datetime
import logging

from app.services.review_service import ReviewService
from app.core.dependencies import get_review_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("",
            summary="상품 목록 조회",
            description="외부 카탈로그 API 에서 최근 수정된 상품 목록을 조회합니다. 외부 API 실패 시 빈 목록을 반환합니다.")
async def list_products(
    review_service: ReviewService = Depends(get_review_service)
) -> Dict[str, Any]:
    try:
        products = await review_service.get_products()
        return {
            "success": True,
            "message": "Product list",
            "data": {
                "products": [product.model_dump() for product in products],
                "timestamp": datetime.now().isoformat()
            }
        }
    except Exception as e:
        logger.error(f"❌ 상품 목록 조회 실패: {e}")
        raise HTTPException(status_code=500, detail=f"상품 목록 조회에 실패했습니다: {str(e)}") from e


@router.get("/{product_id}/reviews",
            summary="상품 리뷰 조회",
            description="""
            외부 리뷰 API 에서 상품 리뷰를 조회해 정규화된 형태로 반환합니다.

            - 작성자 이름이 없으면 `Anonymous`
            - 별점이 없으면 `0`
            - 본문이 없으면 `No comment provided`
            - 작성자 뷰티 속성은 `reported_attributes` 로 평탄화
            """)
async def list_product_reviews(
    product_id: str,
    review_service: ReviewService = Depends(get_review_service)
) -> Dict[str, Any]:
    try:
        reviews = await review_service.get_reviews(product_id)
        return {
            "success": True,
            "message": "Product reviews",
            "data": {
                "reviews": [review.model_dump() for review in reviews],
                "timestamp": datetime.now().isoformat()
            }
        }
    except Exception as e:
        logger.error(f"❌ 상품 {product_id} 리뷰 조회 실패: {e}")
        raise HTTPException(status_code=500, detail=f"리뷰 조회에 실패했습니다: {str(e)}") from e
