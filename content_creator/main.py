"""
AI Content Creator - Main Application
FastAPI 메인 앱
"""

# 환경변수 로드 (가장 먼저 실행)
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
import logging
import time

from content_creator.core.config import get_settings
from content_creator.api.responses import cors_headers, error_response

settings = get_settings()

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def collaborator_status() -> dict:
    """외부 협력 서비스 설정 상태 (네트워크 호출 없음)"""
    current = get_settings()
    return {
        "llm": "configured" if current.llm_configured else "not_configured",
        "identity": "configured" if current.supabase_configured else "not_configured",
        "row_store": "configured" if current.supabase_configured else "not_configured",
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    Startup:
    - 설정 상태 확인 (누락되어도 앱은 시작)
    """
    # ============ STARTUP ============
    logger.info(f"🚀 Starting {settings.APP_NAME}...")

    status = collaborator_status()
    if status["llm"] == "configured":
        logger.info(f"✅ LLM configured: {settings.OPENAI_MODEL}")
    else:
        logger.warning("⚠️ OPENAI_API_KEY not set (content generation will fail)")

    if status["row_store"] == "configured":
        logger.info("✅ Supabase configured (identity + persistence enabled)")
    else:
        logger.warning("⚠️ Supabase not configured (anonymous generation only, stats disabled)")

    yield

    # ============ SHUTDOWN ============
    logger.info(f"👋 {settings.APP_NAME} stopped")


# FastAPI 앱 생성
app = FastAPI(
    title=settings.APP_NAME,
    description="AI 마케팅 콘텐츠 생성 백엔드",
    version=settings.APP_VERSION,
    lifespan=lifespan
)


# 요청 로깅 미들웨어
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """요청/응답 로깅"""
    start_time = time.time()

    logger.info(f"📥 {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    logger.info(
        f"📤 {request.method} {request.url.path} | "
        f"Status: {response.status_code} | "
        f"Time: {process_time:.3f}s"
    )

    return response


# 에러 핸들러
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """전역 에러 핸들러"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return error_response("INTERNAL_SERVER_ERROR", str(exc), cors_headers(request.method))


# ============================================
# API 라우터 등록
# ============================================
from content_creator.api import content, stats

app.include_router(content.router, tags=["Content Generation"])
app.include_router(stats.router, tags=["User Stats"])


# 루트 엔드포인트
@app.get("/", tags=["System"])
async def root():
    """
    루트 엔드포인트

    Returns:
        시스템 정보
    """
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", tags=["System"])
async def health():
    """
    헬스체크

    Returns:
        협력 서비스별 설정 상태
    """
    services = collaborator_status()
    degraded = any(state != "configured" for state in services.values())

    return {
        "status": "degraded" if degraded else "healthy",
        "services": services,
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on {settings.APP_HOST}:{settings.APP_PORT}")

    uvicorn.run(
        "content_creator.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.APP_RELOAD,
        log_level="info"
    )
