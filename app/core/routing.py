import logging
from collections import Counter
from typing import List, Tuple

from fastapi import FastAPI
from fastapi.routing import APIRoute

logger = logging.getLogger(__name__)


def find_duplicate_routes(app: FastAPI) -> List[Tuple[str, str]]:
    """같은 (method, path) 로 두 번 이상 등록된 라우트 목록"""
    registrations = Counter(
        (method, route.path)
        for route in app.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    )
    return sorted(key for key, count in registrations.items() if count > 1)


def ensure_unique_routes(app: FastAPI) -> None:
    """중복 라우트 등록 시 뒤쪽 핸들러가 가려지므로 시작 단계에서 실패 처리"""
    duplicates = find_duplicate_routes(app)
    if duplicates:
        described = ", ".join(f"{method} {path}" for method, path in duplicates)
        logger.error(f"❌ 중복 라우트 등록: {described}")
        raise RuntimeError(f"Duplicate route registrations: {described}")
    logger.debug(f"라우트 중복 검사 통과: {len(app.routes)}개")
