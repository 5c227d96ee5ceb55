# 로깅 설정: 기동 시 한 번 호출

import logging

from app.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logger() -> None:
    """루트 로거 설정. 레벨은 LOG_LEVEL 환경 변수(기본 INFO)."""
    level = getattr(logging, get_settings().log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # SQL 로그는 echo 설정으로만 켜고 기본은 조용히
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
