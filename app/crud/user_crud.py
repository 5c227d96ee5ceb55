# 사용자 CRUD (회원가입/로그인)

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import ConflictError, UnauthorizedError
from app.models.user import User
from app.services.auth_service import hash_password, verify_password

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def register_user(db: Session, name: str, email: str, password: str) -> User:
    """
    회원가입. 비밀번호는 bcrypt 해시로만 저장.

    - 이미 있는 이메일 → ConflictError (동시 가입으로 인한 UNIQUE 위반도 동일 처리)

    ⚠️ 이 함수는 commit 하지 않음. 호출자(라우터)가 트랜잭션을 제어.
    """
    if get_user_by_email(db, email) is not None:
        raise ConflictError("Email already registered")

    user = User(name=name, email=email, password_hash=hash_password(password))
    db.add(user)
    try:
        db.flush()
    except IntegrityError:
        # rollback은 호출자(라우터) 또는 세션 종료 시 수행
        raise ConflictError("Email already registered")
    db.refresh(user)  # server_default(creado_en) 로드
    logger.info("Registered user id=%s", user.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """이메일/비밀번호 확인. 불일치 시 UnauthorizedError (어느 쪽이 틀렸는지는 구분하지 않음)."""
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login for %s", email)
        raise UnauthorizedError("Invalid email or password")
    return user
