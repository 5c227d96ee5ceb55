# 헬스체크 / DB 연결 확인

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import fetch_server_time, get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/")
async def root() -> dict:
    return {
        "message": "EcoMap API is running",
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health",
    }


@router.get("/health")
async def health_check() -> dict:
    return {"status": "ok"}


@router.get("/db-check")
def db_check(db: Session = Depends(get_db)):
    """DB에 SELECT CURRENT_TIMESTAMP 실행. 실패 시 500 (상세 내용은 로그에만)."""
    try:
        now = fetch_server_time(db)
    except SQLAlchemyError:
        logger.exception("Database connectivity check failed")
        return JSONResponse(status_code=500, content={"error": "Database connection failed"})
    return {"status": "ok", "time": str(now)}
