# 회원가입/로그인 API

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.crud.user_crud import authenticate_user, register_user
from app.database import get_db
from app.errors import EcoMapError
from app.schemas.auth import LoginBody, LoginResponse, RegisterBody, RegisterResponse, UserPublic
from app.services.auth_service import create_access_token

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
def post_register(body: RegisterBody, db: Session = Depends(get_db)) -> RegisterResponse:
    """회원가입. 이메일 중복 시 409. 응답에 비밀번호(해시 포함)는 없음."""
    try:
        user = register_user(db, body.name, body.email, body.password)
        db.commit()  # ✅ 트랜잭션 소유권: 라우터
    except EcoMapError:
        db.rollback()
        raise
    return RegisterResponse(
        message="User registered successfully",
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def post_login(body: LoginBody, db: Session = Depends(get_db)) -> LoginResponse:
    """로그인. 성공 시 1시간 만료 Bearer 토큰 발급."""
    user = authenticate_user(db, body.email, body.password)
    token = create_access_token(user.id, user.email)
    return LoginResponse(
        message="Login successful",
        token=token,
        user=UserPublic.model_validate(user),
    )
