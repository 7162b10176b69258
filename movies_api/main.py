# ------------------------------------------------------------
# main.py — FastAPI 앱 생성/미들웨어/라우터 등록 진입점
# ------------------------------------------------------------

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import config
from .cors import CorsPolicyGate, OriginGateMiddleware
from .db import Base, engine, SessionLocal
from .errors import register_error_handlers
from .logging_setup import setup_logging
from .routers import movies
from .seed import load_seed_movies, seed_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """시작 시 로깅 구성 → 테이블 생성 → 초기 영화 목록 적재."""
    setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)

    # 메모리 DB이므로 매 시작마다 빈 테이블에서 출발
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_store(db, load_seed_movies(config.MOVIES_SEED_FILE))
    finally:
        db.close()

    logger.info(f"Movies API started (allowed origins: {', '.join(config.ALLOWED_ORIGINS)})")
    yield
    logger.info("Movies API shutting down")


# - openapi/docs는 프레임워크 기본값 유지
# - FastAPI는 X-Powered-By 헤더를 붙이지 않음 (uvicorn server 헤더는 __main__에서 끔)
app = FastAPI(title="Movies API", lifespan=lifespan)

# -------------------------------
# 오리진 게이트 (라우트별 CORS)
# -------------------------------
app.add_middleware(
    OriginGateMiddleware,
    gate=CorsPolicyGate(config.ALLOWED_ORIGINS),
    routes=movies.ORIGIN_GATED_ROUTES,
)

register_error_handlers(app)

app.include_router(movies.router)
