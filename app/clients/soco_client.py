import httpx
import json
import logging
from typing import Optional, Dict, Any, List, Union

from app.core.config import settings


logger = logging.getLogger(__name__)


class SocoClient:
    """외부 리뷰/상품/사용자 API HTTP 클라이언트

    역할:
    - 상품별 리뷰 조회
    - 상품 카탈로그 조회
    - 사용자 뷰티 프로필 조회

    Note: 모든 조회는 실패 시 빈 결과를 반환한다 (네트워크 오류, 2xx 이외 응답,
    타임아웃, JSON 파싱 실패 포함). 상위 로직은 빈 데이터로 계속 진행한다.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.reviews_url = settings.REVIEWS_API_URL
        self.catalog_url = settings.CATALOG_API_URL
        self.profile_url = settings.PROFILE_API_URL.rstrip("/")
        self.timeout = settings.UPSTREAM_TIMEOUT
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            headers={
                'Accept': 'application/json',
                'User-Agent': 'Review-Matcher/1.0'
            }
        )
        logger.info(f"외부 API 클라이언트 초기화: reviews={self.reviews_url}, timeout={self.timeout}s")

    async def fetch_reviews(self, product_id: Union[int, str]) -> List[Dict[str, Any]]:
        """상품 리뷰 원본 목록 조회

        Args:
            product_id: 상품 ID

        Returns:
            List[Dict]: 리뷰 원본 (실패 시 빈 리스트)
        """
        params = {
            "filter": json.dumps({
                "is_published": True,
                "elastic_search": True,
                "product_id": product_id,
                "is_highlight": True
            }),
            "skip": 0,
            "limit": settings.REVIEWS_PAGE_LIMIT,
            "sort": settings.REVIEWS_SORT
        }
        data = await self._get_data(self.reviews_url, params, "리뷰")
        return data if isinstance(data, list) else []

    async def fetch_products(self) -> List[Dict[str, Any]]:
        """최근 수정된 상품 목록 조회"""
        params = {
            "skip": settings.PRODUCTS_PAGE_SKIP,
            "limit": settings.PRODUCTS_PAGE_LIMIT,
            "sort": settings.PRODUCTS_SORT
        }
        data = await self._get_data(self.catalog_url, params, "상품")
        return data if isinstance(data, list) else []

    async def fetch_beauty_profile(self, user_id: Union[int, str]) -> Dict[str, Any]:
        """사용자 프로필 조회 (뷰티 데이터 포함)"""
        data = await self._get_data(f"{self.profile_url}/{user_id}", None, "사용자 프로필")
        return data if isinstance(data, dict) else {}

    async def _get_data(self, url: str, params: Optional[Dict[str, Any]], label: str) -> Any:
        """GET 요청 후 응답의 data 필드 반환 (실패 시 None)"""
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"{label} 조회 타임아웃 ({self.timeout}s): {e}")
            return None
        except httpx.HTTPStatusError as e:
            logger.error(f"{label} 조회 실패: HTTP {e.response.status_code}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"{label} 조회 실패: {e}")
            return None

        if not isinstance(payload, dict):
            logger.warning(f"{label} 응답 형식 오류: {type(payload).__name__}")
            return None

        return payload.get("data")

    async def close(self):
        """클라이언트 종료"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


# 전역 클라이언트 인스턴스
_soco_client: Optional[SocoClient] = None


async def get_soco_client() -> SocoClient:
    """외부 API 클라이언트 의존성 주입"""
    global _soco_client
    if _soco_client is None:
        _soco_client = SocoClient()
    return _soco_client


async def close_soco_client():
    """외부 API 클라이언트 종료"""
    global _soco_client
    if _soco_client:
        await _soco_client.close()
        _soco_client = None
