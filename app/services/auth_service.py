# 인증 서비스: 비밀번호 해시, JWT 발급/검증, Bearer 토큰 의존성

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.errors import ForbiddenError, UnauthorizedError
from app.schemas.auth import TokenClaims

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)

# auto_error=False: 헤더가 없을 때 FastAPI 기본 403 대신 직접 401을 돌려주기 위함
bearer_scheme = HTTPBearer(auto_error=False)

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # 저장된 값이 bcrypt 해시 형식이 아닌 경우
        return False

def create_access_token(user_id: int, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """{userId, email} 클레임 + 만료(exp) 포함 HS256 토큰 발급. 기본 만료는 설정값(60분)."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "userId": user_id,
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

def decode_access_token(token: str) -> TokenClaims:
    """서명·만료 검증 후 클레임 반환. 실패 시 ForbiddenError."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise ForbiddenError("Invalid or expired token")

    user_id = payload.get("userId")
    email = payload.get("email")
    if not isinstance(user_id, int) or not isinstance(email, str):
        raise ForbiddenError("Invalid or expired token")
    return TokenClaims(user_id=user_id, email=email)

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """
    인증 필요 라우트용 의존성.

    - Authorization: Bearer <token> 없음 → 401
    - 서명 불일치/만료 → 403
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Access denied. Token required.")
    return decode_access_token(credentials.credentials)
