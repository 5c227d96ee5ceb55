import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import models  # noqa: F401 — 테이블 메타데이터 등록용
from app.config import get_settings
from app.errors import register_exception_handlers
from app.routers.auth import router as auth_router
from app.routers.comments import router as comments_router
from app.routers.geocode import router as geocode_router
from app.routers.health import router as health_router
from app.routers.points import router as points_router
from app.routers.profile import router as profile_router
from app.utils.logger import setup_logger

logger = logging.getLogger(__name__)


def _run_alembic_upgrade() -> None:
    """앱 기동 시 DB 마이그레이션 자동 적용 (usuarios, puntos_reciclaje, comentarios)."""
    from alembic import command
    from alembic.config import Config

    root = Path(__file__).resolve().parent.parent
    cfg = Config(str(root / "alembic.ini"))
    cfg.attributes["configure_logger"] = False
    command.upgrade(cfg, "head")


setup_logger()
settings = get_settings()

# 애플리케이션 팩토리 패턴을 사용할 수도 있지만
# 초기 세팅 단계에서는 단순한 전역 인스턴스로 구성
app = FastAPI(
    title="EcoMap API",
    description="재활용 수거 지점 크라우드소싱 지도 EcoMap의 백엔드 API",
    version="0.1.0",
)


@app.on_event("startup")
def _startup_migrate() -> None:
    """기동 시 Alembic upgrade head 실행. RUN_MIGRATIONS=false 면 건너뜀."""
    if not settings.run_migrations:
        return
    try:
        _run_alembic_upgrade()
        logger.info("Database migrations applied")
    except Exception:
        # DB 미기동 등 실패 시에도 앱은 기동 (/db-check 로 확인 가능)
        logger.exception("Database migration failed; continuing without it")


register_exception_handlers(app)

# ✅ 라우터 등록은 app 생성 후에!
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(points_router)
app.include_router(comments_router)
app.include_router(profile_router)
app.include_router(geocode_router)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=4000, reload=True)
