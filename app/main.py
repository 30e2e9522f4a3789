from fastapi import FastAPI
from app.api import products, reviews
from app.clients.soco_client import close_soco_client
from app.clients.openai_client import close_openai_client
import logging
import sys
from app.core.config import settings
from app.core.routing import ensure_unique_routes

def setup_logging():
    """로깅 설정 - 루트 로거 + uvicorn 로거를 같은 핸들러로 통일"""

    # 1. 환경변수에서 로그 레벨 가져오기
    log_level_str = settings.LOG_LEVEL.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    # 2. 로그 포매터 설정
    formatter = logging.Formatter(
        fmt=settings.LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # 3. 콘솔 핸들러 설정
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # 4. 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # 5. Uvicorn 로거들 설정
    uvicorn_loggers = [
        "uvicorn",
        "uvicorn.error",
        "uvicorn.access"
    ]

    for logger_name in uvicorn_loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(log_level)
        logger.handlers.clear()
        logger.addHandler(console_handler)
        logger.propagate = False  # 중복 로그 방지

    # 6. 앱 로거: 하위 모듈(app.api, app.services ...)은 "app" 에서 레벨을 상속
    app_logger = logging.getLogger("app")
    app_logger.setLevel(log_level)
    app_logger.propagate = True

    print(f"✅ 로깅 설정 완료: {log_level_str} 레벨")


setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Review Matcher API",
    description="Review proxy, LLM review summary and beauty profile matching",
    version=settings.VERSION
)

app.include_router(products.router)
app.include_router(reviews.router)

@app.get("/")
async def root():
    return {
        "message": "Review Matcher API is running!",
        "docs": "/docs",
        "health": "/api/reviews/health"
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "review-matcher",
        "version": settings.VERSION
    }

@app.on_event("shutdown")
async def shutdown_event():
    """애플리케이션 종료 시 HTTP 클라이언트 정리"""
    await close_soco_client()
    await close_openai_client()
    logger.info("외부 API 클라이언트 종료")

ensure_unique_routes(app)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
