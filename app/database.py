import logging
from datetime import datetime
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from app.config import get_settings

logger = logging.getLogger(__name__)

# SQLAlchemy 엔진 생성
# - future=True: 최신 SQLAlchemy 스타일 사용
# - pool_pre_ping: 끊어진 커넥션을 사용 전에 걸러냄
engine: Engine = create_engine(
    get_settings().database_url,
    echo=False,
    future=True,
    pool_pre_ping=True,
)


# 세션 팩토리 생성
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI 의존성 주입(Dependency Injection)에서 사용할 DB 세션 제공 함수

    Usage 예시:

    @router.get("/puntos")
    def list_points(db: Session = Depends(get_db)):
        ...
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def fetch_server_time(db: Session) -> datetime:
    """DB 연결 확인용. 서버 현재 시각을 조회 (실패 시 예외 그대로 전파)."""
    return db.execute(text("SELECT CURRENT_TIMESTAMP")).scalar_one()
